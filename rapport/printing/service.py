"""
Report HTML Service

Central service for assembling reports into printable HTML documents.
"""

from pathlib import Path
from typing import Optional, Union
import logging

from ..conf import get_assets_dir
from .assets import DEFAULT_ASSETS, StaticAssets, load_assets
from .dto import Page, Report
from .engine import DjangoTemplateEngine
from .interfaces import ITemplateEngine
from .paper import padding_css, paper_settings_css


logger = logging.getLogger(__name__)


class ReportService:
    """
    Core service for the report HTML pipeline.

    Responsibilities:
    1. Render each page template with its fields inside a padded sheet
    2. Concatenate the pages in document order
    3. Render the base document with title, paper settings, stylesheets,
       pages and the report template

    Usage:
        service = ReportService()
        html = service.generate_html(report)
    """

    def __init__(
        self,
        engine: Optional[ITemplateEngine] = None,
        assets: Optional[StaticAssets] = None
    ):
        """
        Initialize the service.

        Args:
            engine: Template engine. If None, uses the Django template engine.
            assets: Stylesheets and base template. If None, uses
                RAPPORT_ASSETS_DIR or the packaged assets.
        """
        self.engine = engine or DjangoTemplateEngine()
        self.assets = assets or self._get_default_assets()

    def render_page(self, page: Page, padding: int) -> str:
        """
        Render a single page to an HTML fragment.

        The page template is wrapped in a sheet container first, and the
        wrapped text is rendered with the page fields.

        Args:
            page: Page to render
            padding: Report padding in millimeters

        Returns:
            HTML fragment for the page
        """
        return self.engine.render(wrap_page(page.template, padding), page.fields)

    def generate_html(self, report: Report) -> str:
        """
        Generate the HTML document for a report.

        Args:
            report: Report to generate

        Returns:
            Complete HTML document

        Raises:
            TemplateSyntaxError: If a page or the base template is malformed
            UndefinedVariable: If a template variable cannot be resolved
        """
        try:
            logger.debug(
                f"Generating HTML for report '{report.title}' "
                f"({report.page_count} pages)"
            )

            # Step 1: Paper settings class string
            paper_settings = paper_settings_css(report)

            # Step 2: Render pages in document order
            pages = ''.join(
                self.render_page(page, report.padding) for page in report.pages
            )

            # Step 3: Render base document
            assigns = {
                'title': report.title,
                'paper_settings': paper_settings,
                'normalize_css': self.assets.normalize_css,
                'paper_css': self.assets.paper_css,
                'pages': pages,
                'report_template': report.template,
            }
            html = self.engine.render(self.assets.base_template, assigns)

            logger.info(
                f"Successfully generated HTML report: {report.title} "
                f"({report.page_count} pages, {len(html)} characters)"
            )

            return html

        except Exception as e:
            logger.error(
                f"Failed to generate HTML for report {report.title}: {e}",
                exc_info=True
            )
            raise

    def _get_default_assets(self) -> StaticAssets:
        """
        Get the default static assets.

        Returns:
            Assets from RAPPORT_ASSETS_DIR if set, else the packaged assets
        """
        assets_dir = get_assets_dir()
        if assets_dir is None:
            return DEFAULT_ASSETS
        return load_assets(assets_dir)


def wrap_page(template: str, padding: int) -> str:
    """
    Wrap a page template in a sheet container with a padding class.

    Args:
        template: Page template text
        padding: Padding in millimeters

    Returns:
        Wrapped template text
    """
    return (
        f'<div class="sheet {padding_css(padding)}">\n'
        f'  {template}\n'
        f'</div>\n'
    )


def save_to_file(html: str, path: Union[str, Path]) -> Path:
    """
    Write a generated document to disk.

    Args:
        html: Generated HTML document
        path: Output file path

    Returns:
        Path of the written file

    Raises:
        OSError: If the file cannot be written
    """
    path = Path(path)
    path.write_text(html, encoding='utf-8')
    logger.info(f"Saved HTML report to: {path} ({len(html)} characters)")
    return path
