"""
Rapport exceptions.

Argument validation errors are raised by the report builder before any new
report value is produced. Template errors come from the Django template
engine and are propagated unchanged.
"""

from django.template import TemplateSyntaxError


# Malformed template text raises Django's own syntax error
TemplateError = TemplateSyntaxError


class RapportError(Exception):
    """Base exception for all Rapport errors."""
    pass


class InvalidArgument(RapportError, ValueError):
    """
    Raised when a report operation receives a value outside its allowed set.
    
    Example:
        set_paper_size(report, 'B5') raises InvalidArgument("Invalid paper size").
    """
    pass


class UndefinedVariable(TemplateError):
    """Raised when a template refers to a variable missing from its assigns"""
    pass
