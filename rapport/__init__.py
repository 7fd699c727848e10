"""
Rapport

Builds printable HTML reports from a report template and page templates
rendered with the Django template language, laid out for print with
paper.css.

Outside a Django project, Django is configured for standalone rendering on
first use (see rapport.conf). A host that calls settings.configure() itself
must do so before generating its first report.
"""

from .builder import (
    new,
    add_page,
    add_pages,
    set_title,
    set_paper_size,
    set_rotation,
    set_padding,
    generate_html,
)
from .exceptions import RapportError, InvalidArgument, TemplateError, UndefinedVariable
from .printing import (
    ReportService,
    save_to_file,
    Page,
    Report,
    PaperSize,
    Rotation,
    PADDINGS,
)

__version__ = '0.1.0'

__all__ = [
    'new',
    'add_page',
    'add_pages',
    'set_title',
    'set_paper_size',
    'set_rotation',
    'set_padding',
    'generate_html',
    'save_to_file',
    'ReportService',
    'Page',
    'Report',
    'PaperSize',
    'Rotation',
    'PADDINGS',
    'RapportError',
    'InvalidArgument',
    'TemplateError',
    'UndefinedVariable',
]
