"""
Layout engine for textpager.

Turns plain text into fixed-size pages of placement commands.
"""

from .geometry import PageGeometry, average_char_width_mm, mm_to_points, points_to_mm
from .layout_primitives import (
    FontWeight,
    LayoutPage,
    PaginatedDocument,
    PlacementCommand,
    TextStyle,
)
from .line_breaker import LineBreaker, WrappedLine, WrappedText, wrap
from .block_classifier import BlockKind, TextBlock, classify, classify_lines
from .pagination_manager import FlowRules, LayoutCursor, PaginationManager, layout
from .page_compositor import DEFAULT_TITLE, finalize, footer_text
from .normalizer import normalize_markdown
from .layout_engine import LayoutEngine, paginate

__all__ = [
    "PageGeometry",
    "average_char_width_mm",
    "mm_to_points",
    "points_to_mm",
    "FontWeight",
    "LayoutPage",
    "PaginatedDocument",
    "PlacementCommand",
    "TextStyle",
    "LineBreaker",
    "WrappedLine",
    "WrappedText",
    "wrap",
    "BlockKind",
    "TextBlock",
    "classify",
    "classify_lines",
    "FlowRules",
    "LayoutCursor",
    "PaginationManager",
    "layout",
    "DEFAULT_TITLE",
    "finalize",
    "footer_text",
    "normalize_markdown",
    "LayoutEngine",
    "paginate",
]
