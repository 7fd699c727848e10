"""
Data Transfer Objects for the Printing Framework
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Tuple

from ..exceptions import InvalidArgument
from .paper import PADDINGS, PaperSize, Rotation


def _to_choice(value, choices, message: str):
    """Convert value to a member of choices or raise InvalidArgument"""
    try:
        return choices(value)
    except ValueError:
        raise InvalidArgument(message) from None


@dataclass(frozen=True)
class Page:
    """
    A single page of a report.
    
    Holds the resolved page template and the fields assigned to it. The
    fields are copied into a read-only mapping on creation.
    """
    
    template: str
    fields: Mapping[str, Any] = field(default_factory=dict)
    
    def __post_init__(self):
        object.__setattr__(self, 'fields', MappingProxyType(dict(self.fields)))


@dataclass(frozen=True)
class Report:
    """
    A printable report.
    
    Reports are values: builder operations return an updated copy and never
    change the report they were given. Pages are kept in document order.
    
    Paper size, rotation, padding and title are checked on every
    construction, including dataclasses.replace().
    
    Raises:
        InvalidArgument: If a value is outside its allowed set
    """
    
    template: str = ""
    title: str = "Report"
    paper_size: PaperSize = PaperSize.A4
    rotation: Rotation = Rotation.PORTRAIT
    padding: int = 10
    pages: Tuple[Page, ...] = ()
    
    def __post_init__(self):
        if not isinstance(self.title, str):
            raise InvalidArgument("Invalid title")
        
        object.__setattr__(
            self, 'paper_size',
            _to_choice(self.paper_size, PaperSize, "Invalid paper size")
        )
        object.__setattr__(
            self, 'rotation',
            _to_choice(self.rotation, Rotation, "Invalid rotation")
        )
        
        # bool is an int subclass
        padding = self.padding
        if isinstance(padding, bool) or not isinstance(padding, int) or padding not in PADDINGS:
            raise InvalidArgument("Invalid padding")
        
        object.__setattr__(self, 'pages', tuple(self.pages))
    
    @property
    def page_count(self) -> int:
        """Number of pages in the report"""
        return len(self.pages)
