"""
Django Template Engine Implementation

Adapter for rendering template strings with a standalone Django template
engine (no template loaders, no project settings required).
"""

from typing import Any, Mapping, Optional
import logging

from django.template import Context, Engine
from django.template.base import VariableDoesNotExist

from ..conf import get_autoescape, get_strict_variables, setup
from ..exceptions import UndefinedVariable
from .interfaces import ITemplateEngine


logger = logging.getLogger(__name__)


class UndefinedVariableMarker(str):
    """
    Value for Engine.string_if_invalid that raises instead of rendering.
    
    Django formats string_if_invalid with the variable name when it contains
    '%s'; the formatting step is where the error is raised.
    """
    
    def __contains__(self, item):
        return item == '%s' or super().__contains__(item)
    
    def __mod__(self, variable):
        raise UndefinedVariable(f"Undefined template variable '{variable}'")


class DjangoTemplateEngine(ITemplateEngine):
    """
    Template engine using the Django template language.
    
    Supports:
    - Variable interpolation with dotted lookups ({{ customer.name }})
    - Built-in tags and filters ({% for %}, {% if %}, |date, |floatformat)
    - Strict variables: unresolved {{ variables }} raise UndefinedVariable
    """
    
    def __init__(
        self,
        strict_variables: Optional[bool] = None,
        autoescape: Optional[bool] = None
    ):
        """
        Initialize the engine.
        
        Args:
            strict_variables: Raise on unresolved variables. If None, reads
                RAPPORT_STRICT_VARIABLES.
            autoescape: HTML-escape substituted values. If None, reads
                RAPPORT_AUTOESCAPE.
        """
        setup()
        
        if strict_variables is None:
            strict_variables = get_strict_variables()
        if autoescape is None:
            autoescape = get_autoescape()
        
        self.strict_variables = strict_variables
        self.autoescape = autoescape
        self.engine = Engine(
            autoescape=autoescape,
            string_if_invalid=UndefinedVariableMarker('%s') if strict_variables else '',
        )
    
    def render(self, template: str, assigns: Mapping[str, Any]) -> str:
        """
        Render a template string with the Django template language.
        
        Args:
            template: Template text
            assigns: Template context values
            
        Returns:
            Rendered text
            
        Raises:
            TemplateSyntaxError: If the template text is malformed
            UndefinedVariable: If strict and a variable cannot be resolved,
                or if a filter argument cannot be resolved
        """
        compiled = self.engine.from_string(template)
        context = Context(dict(assigns), autoescape=self.autoescape)
        try:
            return compiled.render(context)
        except VariableDoesNotExist as e:
            raise UndefinedVariable(str(e)) from e
