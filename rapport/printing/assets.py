"""
Static assets for generated documents.

The stylesheets and the base document template are read once and kept for
the life of the process.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union


STATIC_DIR = Path(__file__).resolve().parent / 'static'

NORMALIZE_CSS_FILE = 'normalize.css'
PAPER_CSS_FILE = 'paper.css'
BASE_TEMPLATE_FILE = 'base.html'


@dataclass(frozen=True)
class StaticAssets:
    """Stylesheets and base template embedded into every document"""
    
    normalize_css: str
    paper_css: str
    base_template: str


def load_assets(directory: Optional[Union[str, Path]] = None) -> StaticAssets:
    """
    Load static assets from a directory.
    
    Args:
        directory: Directory containing normalize.css, paper.css and
            base.html. Defaults to the packaged assets.
            
    Returns:
        StaticAssets with the file contents
        
    Raises:
        OSError: If one of the files cannot be read
    """
    directory = Path(directory) if directory else STATIC_DIR
    
    def read(name: str) -> str:
        return (directory / name).read_text(encoding='utf-8')
    
    return StaticAssets(
        normalize_css=read(NORMALIZE_CSS_FILE),
        paper_css=read(PAPER_CSS_FILE),
        base_template=read(BASE_TEMPLATE_FILE),
    )


# Packaged assets, loaded at import
DEFAULT_ASSETS = load_assets()
