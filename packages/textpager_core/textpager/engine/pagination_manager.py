"""
Pagination manager for classified text blocks.

Walks blocks in order with an explicit layout cursor, applies per-kind
spacing and font rules, and breaks pages when the cursor passes the
bottom of the content area.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .block_classifier import BlockKind, TextBlock
from .geometry import AVG_CHAR_EM, PageGeometry, average_char_width_mm
from .layout_primitives import (
    HEADING_STYLE,
    SUBHEADING_STYLE,
    FontWeight,
    LayoutPage,
    PlacementCommand,
    TextStyle,
)
from .line_breaker import LineBreaker

logger = logging.getLogger(__name__)

BULLET_GLYPH = "•"


@dataclass(slots=True, frozen=True)
class FlowRules:
    """Vertical spacing (mm) applied around each block kind."""

    blank_line_mm: float = 5.0
    heading_before_mm: float = 10.0
    heading_after_mm: float = 8.0
    subheading_before_mm: float = 5.0
    subheading_after_mm: float = 6.0
    bullet_indent_mm: float = 5.0
    bullet_after_mm: float = 2.0
    paragraph_after_mm: float = 2.0
    avg_char_em: float = AVG_CHAR_EM


@dataclass(slots=True)
class LayoutCursor:
    """Position and font state of one pagination run."""

    page_index: int
    y: float
    style: TextStyle


class PaginationManager:
    """
    Lays out text blocks onto fixed-size pages.

    The manager holds configuration only; every call to :meth:`layout`
    owns a fresh cursor and page list.
    """

    def __init__(self, geometry: Optional[PageGeometry] = None, rules: Optional[FlowRules] = None):
        """
        Initialize pagination manager.

        Args:
            geometry: Page geometry (A4 with 20mm margins by default)
            rules: Spacing rules
        """
        self.geometry = geometry or PageGeometry()
        self.rules = rules or FlowRules()
        self.body_style = TextStyle(FontWeight.NORMAL, self.geometry.default_font_size_pt)
        self.body_char_width_mm = average_char_width_mm(
            self.body_style.font_size_pt, self.rules.avg_char_em
        )
        self.line_breaker = LineBreaker(self.body_char_width_mm)
        logger.debug(
            f"Pagination manager initialized: {self.geometry.page_width_mm}x"
            f"{self.geometry.page_height_mm}mm, margin {self.geometry.margin_mm}mm"
        )

    def layout(self, blocks: Iterable[TextBlock]) -> List[LayoutPage]:
        """
        Place blocks in a single forward pass.

        Args:
            blocks: Classified blocks in document order

        Returns:
            Pages with placement commands; always at least one page
        """
        pages = [LayoutPage(number=1)]
        cursor = LayoutCursor(page_index=1, y=self.geometry.margin_mm, style=self.body_style)
        block_count = 0

        for block in blocks:
            block_count += 1
            if block.kind is BlockKind.BLANK:
                cursor.y += self.rules.blank_line_mm
            elif block.kind is BlockKind.HEADING:
                self._place_heading(block.text, HEADING_STYLE, self.rules.heading_before_mm,
                                    self.rules.heading_after_mm, cursor, pages)
            elif block.kind is BlockKind.SUBHEADING:
                self._place_heading(block.text, SUBHEADING_STYLE, self.rules.subheading_before_mm,
                                    self.rules.subheading_after_mm, cursor, pages)
            elif block.kind is BlockKind.BULLET:
                self._place_bullet(block.text, cursor, pages)
            else:
                self._place_paragraph(block.text, cursor, pages)

        logger.debug(f"Laid out {block_count} blocks on {len(pages)} pages")
        return pages

    def _place_heading(self, text: str, style: TextStyle, before_mm: float, after_mm: float,
                       cursor: LayoutCursor, pages: List[LayoutPage]) -> None:
        # Space before is dropped at the top of a page.
        if cursor.y > self.geometry.content_top_mm:
            cursor.y += before_mm
        self._ensure_room(cursor, pages)
        cursor.style = style
        self._emit(text, self.geometry.margin_mm, cursor, pages)
        cursor.y += after_mm
        cursor.style = self.body_style

    def _place_bullet(self, text: str, cursor: LayoutCursor, pages: List[LayoutPage]) -> None:
        indent = self.rules.bullet_indent_mm
        lines = self.line_breaker.break_text(text, self.geometry.content_width_mm - indent)
        for line in lines:
            self._ensure_room(cursor, pages)
            if line.is_first_of_block:
                self._emit(BULLET_GLYPH, self.geometry.margin_mm, cursor, pages)
            self._emit(line.text, self.geometry.margin_mm + indent, cursor, pages)
            cursor.y += self.geometry.line_height_mm
        if lines:
            cursor.y += self.rules.bullet_after_mm

    def _place_paragraph(self, text: str, cursor: LayoutCursor, pages: List[LayoutPage]) -> None:
        lines = self.line_breaker.break_text(text, self.geometry.content_width_mm)
        for line in lines:
            self._ensure_room(cursor, pages)
            self._emit(line.text, self.geometry.margin_mm, cursor, pages)
            cursor.y += self.geometry.line_height_mm
        if lines:
            cursor.y += self.rules.paragraph_after_mm

    def _ensure_room(self, cursor: LayoutCursor, pages: List[LayoutPage]) -> None:
        """Break the page when the next line would start below the content area."""
        if cursor.y > self.geometry.content_bottom_mm:
            self._page_break(cursor, pages)

    def _page_break(self, cursor: LayoutCursor, pages: List[LayoutPage]) -> None:
        logger.debug(f"Page break after page {cursor.page_index} at y={cursor.y:.2f}mm")
        cursor.page_index += 1
        cursor.y = self.geometry.margin_mm
        pages.append(LayoutPage(number=cursor.page_index))

    @staticmethod
    def _emit(text: str, x: float, cursor: LayoutCursor, pages: List[LayoutPage]) -> None:
        pages[-1].add(PlacementCommand(
            page=cursor.page_index,
            x=x,
            y=cursor.y,
            text=text,
            font_weight=cursor.style.font_weight,
            font_size_pt=cursor.style.font_size_pt,
        ))


def layout(blocks: Iterable[TextBlock], geometry: Optional[PageGeometry] = None,
           rules: Optional[FlowRules] = None) -> List[LayoutPage]:
    """Lay out ``blocks`` with a one-off :class:`PaginationManager`."""
    return PaginationManager(geometry, rules).layout(blocks)
