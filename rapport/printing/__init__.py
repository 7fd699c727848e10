"""
Printing Framework

Assembles printable HTML documents from a report template and a sequence of
page templates, using the Django template language and paper.css for print
layout.
"""

from .service import ReportService, save_to_file
from .dto import Page, Report
from .paper import PaperSize, Rotation, PADDINGS
from .interfaces import ITemplateEngine

__all__ = [
    'ReportService',
    'save_to_file',
    'Page',
    'Report',
    'PaperSize',
    'Rotation',
    'PADDINGS',
    'ITemplateEngine',
]
