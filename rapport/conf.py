"""
Configuration layer for Rapport.

Rapport renders templates with the Django template language. This module:
- Bootstraps Django when the library is used outside a Django project
- Reads RAPPORT_* settings with module-level defaults

Inside a host Django project the host's settings are used as-is, so the
RAPPORT_* values can be set in the project's settings module.

setup() runs on first use (the first settings read or template engine), not
on import, so a host may still call settings.configure() after importing
rapport.
"""

import logging
import os
from pathlib import Path
from typing import Optional

import django
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured


logger = logging.getLogger(__name__)


# Defaults
DEFAULT_STRICT_VARIABLES = True
DEFAULT_AUTOESCAPE = False
SETTINGS_PREFIX = "RAPPORT"

# Minimal settings for standalone use (no database, no apps, no i18n)
STANDALONE_SETTINGS = {
    'INSTALLED_APPS': [],
    'DATABASES': {},
    'USE_I18N': False,
    'USE_TZ': True,
}


def setup() -> bool:
    """
    Configure Django for standalone template rendering.

    Does nothing when settings are already configured or when
    DJANGO_SETTINGS_MODULE points to a host project.

    Returns:
        True if this call configured Django, False otherwise
    """
    if settings.configured or os.environ.get('DJANGO_SETTINGS_MODULE'):
        return False

    settings.configure(**STANDALONE_SETTINGS)
    django.setup()
    logger.debug("Configured Django settings for standalone rendering")
    return True


def _get_setting(name: str, default):
    """Read a RAPPORT_* setting, falling back to the given default."""
    setup()
    return getattr(settings, f"{SETTINGS_PREFIX}_{name}", default)


def get_strict_variables() -> bool:
    """
    Check if unresolved template variables should raise.

    Returns:
        Value of RAPPORT_STRICT_VARIABLES (default True)
    """
    return bool(_get_setting('STRICT_VARIABLES', DEFAULT_STRICT_VARIABLES))


def get_autoescape() -> bool:
    """
    Check if substituted values should be HTML-escaped.

    Returns:
        Value of RAPPORT_AUTOESCAPE (default False)
    """
    return bool(_get_setting('AUTOESCAPE', DEFAULT_AUTOESCAPE))


def get_assets_dir() -> Optional[Path]:
    """
    Get the configured static asset directory.

    Returns:
        Path from RAPPORT_ASSETS_DIR, or None to use the packaged assets

    Raises:
        ImproperlyConfigured: If the configured path is not a directory
    """
    assets_dir = _get_setting('ASSETS_DIR', None)
    if not assets_dir:
        return None

    path = Path(assets_dir)
    if not path.is_dir():
        raise ImproperlyConfigured(
            f"RAPPORT_ASSETS_DIR '{assets_dir}' is not a directory"
        )
    return path
