"""
Interfaces for the Printing Framework

Defines the template engine seam used by the report service, so that the
Django template language can be swapped for another engine in tests or
host applications.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping


class ITemplateEngine(ABC):
    """
    Interface for template engines.
    
    Implementations evaluate a template string against a mapping of assigns.
    """
    
    @abstractmethod
    def render(self, template: str, assigns: Mapping[str, Any]) -> str:
        """
        Render a template string.
        
        Args:
            template: Template text with named placeholders
            assigns: Values for the placeholders, keyed by name
            
        Returns:
            Rendered text
            
        Raises:
            TemplateError: If the template is malformed or a placeholder
                cannot be resolved
        """
        pass
