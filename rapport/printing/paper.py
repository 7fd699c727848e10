"""
Paper settings for print layout.

Paper size and rotation names match the body classes understood by
paper.css (e.g. <body class="A4 landscape">).
"""

from enum import Enum


class PaperSize(str, Enum):
    """Supported paper sizes"""
    A4 = 'A4'
    A3 = 'A3'
    A5 = 'A5'
    HALF_LETTER = 'half_letter'
    LETTER = 'letter'
    LEGAL = 'legal'
    JUNIOR_LEGAL = 'junior_legal'
    LEDGER = 'ledger'


class Rotation(str, Enum):
    """Supported page rotations"""
    PORTRAIT = 'portrait'
    LANDSCAPE = 'landscape'


# Allowed page paddings in millimeters
PADDINGS = (10, 15, 20, 25)


def paper_settings_css(report) -> str:
    """
    Build the paper settings class string for a report.
    
    Portrait is the paper.css default and adds no class.
    
    Args:
        report: Report to read paper size and rotation from
        
    Returns:
        Class string, e.g. 'A4' or 'letter landscape'
    """
    paper_size = PaperSize(report.paper_size).value
    if Rotation(report.rotation) is Rotation.PORTRAIT:
        return paper_size
    return f"{paper_size} {Rotation.LANDSCAPE.value}"


def padding_css(padding: int) -> str:
    """Padding class for a page container, e.g. 'padding-10mm'"""
    return f"padding-{padding}mm"
