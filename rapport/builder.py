"""
Report builder.

Functions for creating a report, adding pages, changing its paper settings
and generating its HTML. Every function returns a new Report and leaves the
report it was given untouched:

    report = rapport.new()
    report = rapport.set_title(report, 'Invoice')
    report = rapport.add_page(report, '<p>{{ name }}</p>', {'name': 'Acme'})
    html = rapport.generate_html(report)
"""

from collections.abc import Iterable, Mapping
from dataclasses import replace
from typing import Optional
import logging

from django.core.signals import setting_changed
from django.dispatch import receiver

from .conf import SETTINGS_PREFIX
from .exceptions import InvalidArgument
from .printing.dto import Page, Report
from .printing.service import ReportService
from .printing.sources import resolve_template


logger = logging.getLogger(__name__)


def _check_report(report) -> None:
    if not isinstance(report, Report):
        raise InvalidArgument("Invalid report")


def new(template="") -> Report:
    """
    Create a new report.

    Args:
        template: Optional report template, as template text or a file path

    Returns:
        Report titled 'Report' with A4 portrait paper, 10 mm padding and
        no pages
    """
    return Report(template=resolve_template(template))


def add_page(report: Report, page_template, fields: Mapping) -> Report:
    """
    Add a page to a report.

    Args:
        report: Report to add the page to
        page_template: Page template, as template text or a file path
        fields: Values assigned to the page template

    Returns:
        Report with the page added after all existing pages
    """
    _check_report(report)
    if not isinstance(fields, Mapping):
        raise InvalidArgument("Invalid fields")

    page = Page(template=resolve_template(page_template), fields=fields)
    logger.debug(f"Adding page {report.page_count + 1} to report '{report.title}'")
    return replace(report, pages=report.pages + (page,))


def add_pages(report: Report, page_template, fields_list: Iterable) -> Report:
    """
    Add one page per fields mapping, all using the same page template.

    Args:
        report: Report to add the pages to
        page_template: Page template, as template text or a file path
        fields_list: Iterable of field mappings, one per page

    Returns:
        Report with the pages added in iteration order
    """
    _check_report(report)
    for fields in fields_list:
        report = add_page(report, page_template, fields)
    return report


def set_title(report: Report, title: str) -> Report:
    """Set the title of the generated HTML document."""
    _check_report(report)
    return replace(report, title=title)


def set_paper_size(report: Report, paper_size) -> Report:
    """
    Set the paper size.

    Allowed paper sizes are A4, A3, A5, half_letter, letter, legal,
    junior_legal and ledger, given as PaperSize members or their names.
    """
    _check_report(report)
    return replace(report, paper_size=paper_size)


def set_rotation(report: Report, rotation) -> Report:
    """Set the rotation, portrait or landscape."""
    _check_report(report)
    return replace(report, rotation=rotation)


def set_padding(report: Report, padding: int) -> Report:
    """Set the page padding in millimeters: 10, 15, 20 or 25."""
    _check_report(report)
    return replace(report, padding=padding)


# Default service, created on first use
_service: Optional[ReportService] = None


def get_service() -> ReportService:
    """Get the default report service"""
    global _service
    if _service is None:
        _service = ReportService()
    return _service


def generate_html(report: Report, service: Optional[ReportService] = None) -> str:
    """
    Generate the HTML document for a report.

    Args:
        report: Report to generate
        service: Optional service to render with (defaults to the shared one)

    Returns:
        Complete HTML document
    """
    _check_report(report)
    return (service or get_service()).generate_html(report)


def reset_service() -> None:
    """Drop the default service so the next call picks up changed settings"""
    global _service
    _service = None


@receiver(setting_changed)
def reset_service_on_setting_change(*, setting, **kwargs):
    """Drop the default service when a RAPPORT_* setting is overridden"""
    if setting.startswith(f"{SETTINGS_PREFIX}_"):
        logger.debug(f"Setting {setting} changed, resetting default report service")
        reset_service()
