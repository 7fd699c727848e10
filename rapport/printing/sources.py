"""
Template source resolution.

Templates can be given either as inline template text or as the path of a
file holding the template.
"""

import logging
import os
from typing import Union


logger = logging.getLogger(__name__)


def resolve_template(template: Union[str, os.PathLike]) -> str:
    """
    Resolve a template argument to template text.
    
    If the argument names an existing path, the file is read on every call.
    Anything else is returned unchanged as inline template text.
    
    Args:
        template: Inline template text or path to a template file
        
    Returns:
        Template text
        
    Raises:
        OSError: If the path exists but cannot be read
    """
    if os.path.exists(template):
        logger.debug(f"Loading template from file: {template}")
        with open(template, 'r', encoding='utf-8') as f:
            return f.read()
    
    return os.fspath(template)
