"""

Data structures produced by the pagination pipeline.

Renderers (PDF, JSON, debug listing) consume only these types, so they
never need to re-run any classification or wrapping heuristics.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional

from .geometry import PageGeometry

###############################################################################
# Styles
###############################################################################


class FontWeight(Enum):
    NORMAL = "normal"
    BOLD = "bold"


@dataclass(slots=True, frozen=True)
class TextStyle:
    """Font state applied to a placed piece of text."""

    font_weight: FontWeight = FontWeight.NORMAL
    font_size_pt: float = 11.0

    @property
    def bold(self) -> bool:
        return self.font_weight is FontWeight.BOLD


HEADING_STYLE = TextStyle(FontWeight.BOLD, 14.0)
SUBHEADING_STYLE = TextStyle(FontWeight.BOLD, 12.0)
FOOTER_STYLE = TextStyle(FontWeight.NORMAL, 9.0)
TITLE_STYLE = TextStyle(FontWeight.BOLD, 16.0)


###############################################################################
# Placement output
###############################################################################


@dataclass(slots=True, frozen=True)
class PlacementCommand:
    """

    One piece of text drawn at an absolute page position.

    ``x``/``y`` are millimetres from the top-left page corner; ``y`` is the
    text baseline.

    """

    page: int
    x: float
    y: float
    text: str
    font_weight: FontWeight = FontWeight.NORMAL
    font_size_pt: float = 11.0

    @property
    def style(self) -> TextStyle:
        return TextStyle(self.font_weight, self.font_size_pt)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "page": self.page,
            "x": round(self.x, 3),
            "y": round(self.y, 3),
            "text": self.text,
            "font_weight": self.font_weight.value,
            "font_size_pt": self.font_size_pt,
        }


@dataclass(slots=True)
class LayoutPage:
    """Commands placed on a single page (1-based ``number``)."""

    number: int
    commands: List[PlacementCommand] = field(default_factory=list)

    def add(self, command: PlacementCommand) -> None:
        self.commands.append(command)

    def texts(self) -> List[str]:
        return [command.text for command in self.commands]


@dataclass(slots=True)
class PaginatedDocument:
    """Finalized pagination result handed to renderers."""

    pages: List[LayoutPage]
    geometry: PageGeometry
    title: Optional[str] = None

    @property
    def total_pages(self) -> int:
        return len(self.pages)

    def iter_commands(self) -> Iterator[PlacementCommand]:
        for page in self.pages:
            yield from page.commands

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "total_pages": self.total_pages,
            "geometry": {
                "page_width_mm": self.geometry.page_width_mm,
                "page_height_mm": self.geometry.page_height_mm,
                "margin_mm": self.geometry.margin_mm,
                "default_font_size_pt": self.geometry.default_font_size_pt,
                "line_height_mm": self.geometry.line_height_mm,
            },
            "pages": [
                {"number": page.number, "commands": [c.to_dict() for c in page.commands]}
                for page in self.pages
            ],
        }
