"""
Tests for the Rapport configuration layer
"""

import os
import shutil
import subprocess
import sys
import tempfile
from pathlib import Path

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.test import SimpleTestCase, override_settings

from rapport import builder, conf
from rapport.printing import ReportService
from rapport.printing.engine import DjangoTemplateEngine


conf.setup()

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class SetupTestCase(SimpleTestCase):
    """Test cases for the standalone Django bootstrap"""

    def test_setup_configures_django(self):
        """Test that setup leaves Django configured"""
        self.assertTrue(settings.configured)

    def test_setup_is_idempotent(self):
        """Test that a second setup call does nothing"""
        self.assertFalse(conf.setup())

    def test_host_can_configure_after_import(self):
        """Test that importing rapport does not configure Django"""
        script = (
            "import rapport\n"
            "from django.conf import settings\n"
            "assert not settings.configured\n"
            "settings.configure(USE_I18N=False, RAPPORT_AUTOESCAPE=True)\n"
            "report = rapport.add_page(rapport.new(), '{{ v }}', {'v': '<b>'})\n"
            "print(rapport.generate_html(report).count('&lt;b&gt;'))\n"
        )
        env = os.environ.copy()
        env.pop('DJANGO_SETTINGS_MODULE', None)
        env['PYTHONPATH'] = os.pathsep.join(
            filter(None, [str(PROJECT_ROOT), env.get('PYTHONPATH')])
        )

        result = subprocess.run(
            [sys.executable, '-c', script],
            cwd=PROJECT_ROOT,
            env=env,
            capture_output=True,
            text=True,
        )

        self.assertEqual(result.returncode, 0, result.stderr)
        self.assertEqual(result.stdout.strip(), '1')


class SettingsTestCase(SimpleTestCase):
    """Test cases for RAPPORT_* settings"""

    def test_defaults(self):
        """Test default values when no settings are given"""
        self.assertTrue(conf.get_strict_variables())
        self.assertFalse(conf.get_autoescape())
        self.assertIsNone(conf.get_assets_dir())

    @override_settings(RAPPORT_STRICT_VARIABLES=False, RAPPORT_AUTOESCAPE=True)
    def test_engine_reads_settings(self):
        """Test that the engine picks up overridden settings"""
        engine = DjangoTemplateEngine()

        self.assertFalse(engine.strict_variables)
        self.assertTrue(engine.autoescape)
        self.assertEqual(engine.render('{{ missing }}{{ v }}', {'v': '&'}), '&amp;')

    def test_explicit_arguments_win(self):
        """Test that constructor arguments override settings"""
        with self.settings(RAPPORT_STRICT_VARIABLES=False):
            engine = DjangoTemplateEngine(strict_variables=True)

        self.assertTrue(engine.strict_variables)

    def test_assets_dir(self):
        """Test loading assets from RAPPORT_ASSETS_DIR"""
        tmp_dir = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, tmp_dir)
        for name in ('normalize.css', 'paper.css'):
            Path(tmp_dir, name).write_text('', encoding='utf-8')
        Path(tmp_dir, 'base.html').write_text('<title>{{ title }}</title>', encoding='utf-8')

        with self.settings(RAPPORT_ASSETS_DIR=tmp_dir):
            self.assertEqual(conf.get_assets_dir(), Path(tmp_dir))
            service = ReportService()

        self.assertEqual(service.generate_html(builder.new()), '<title>Report</title>')

    @override_settings(RAPPORT_ASSETS_DIR='/nonexistent/rapport/assets')
    def test_invalid_assets_dir_raises(self):
        """Test that a missing asset directory is reported"""
        with self.assertRaises(ImproperlyConfigured):
            conf.get_assets_dir()

    def test_default_service_follows_overridden_settings(self):
        """Test that overriding RAPPORT_* settings resets the default service"""
        self.addCleanup(builder.reset_service)
        report = builder.add_page(builder.new(), '<p>{{ v }}</p>', {'v': '<b>'})

        self.assertIn('<p><b></p>', builder.generate_html(report))
        service = builder.get_service()

        with self.settings(RAPPORT_AUTOESCAPE=True):
            self.assertIsNot(builder.get_service(), service)
            self.assertIn('<p>&lt;b&gt;</p>', builder.generate_html(report))

        self.assertIn('<p><b></p>', builder.generate_html(report))

    def test_unrelated_settings_keep_default_service(self):
        """Test that other settings do not reset the default service"""
        self.addCleanup(builder.reset_service)
        service = builder.get_service()

        with self.settings(USE_TZ=False):
            self.assertIs(builder.get_service(), service)
