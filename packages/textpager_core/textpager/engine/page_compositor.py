"""Page compositor: footers and first-page title.

Runs after pagination, once the final page count is known. Footers and
the title sit outside the content band, so this pass never adds pages.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .geometry import PageGeometry
from .layout_primitives import FOOTER_STYLE, TITLE_STYLE, LayoutPage, PlacementCommand, TextStyle

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Contract Risk Assessment"
FOOTER_FORMAT = "Page {page} of {total}"

# Footer anchor: offset left of the right margin.
FOOTER_RIGHT_OFFSET_MM = 20.0


def _command(page: int, x: float, y: float, text: str, style: TextStyle) -> PlacementCommand:
    return PlacementCommand(
        page=page,
        x=x,
        y=y,
        text=text,
        font_weight=style.font_weight,
        font_size_pt=style.font_size_pt,
    )


def footer_text(page_number: int, total_pages: int) -> str:
    return FOOTER_FORMAT.format(page=page_number, total=total_pages)


def finalize(pages: Sequence[LayoutPage], geometry: Optional[PageGeometry] = None,
             title: Optional[str] = DEFAULT_TITLE) -> List[LayoutPage]:
    """
    Stamp footers on every page and the title on page 1.

    Args:
        pages: Pages produced by the pagination manager
        geometry: Geometry the pages were laid out with
        title: Document title for page 1; ``None`` or empty skips it

    Returns:
        New page objects; ``pages`` is left untouched
    """
    geometry = geometry or PageGeometry()
    total_pages = len(pages)
    footer_x = geometry.page_width_mm - geometry.margin_mm - FOOTER_RIGHT_OFFSET_MM
    # Footer and title baselines sit halfway into the bottom and top margins.
    footer_y = geometry.page_height_mm - geometry.margin_mm / 2
    title_y = geometry.margin_mm / 2

    finalized: List[LayoutPage] = []
    for page in pages:
        commands = list(page.commands)
        if page.number == 1 and title:
            commands.insert(0, _command(1, geometry.margin_mm, title_y,
                                        title, TITLE_STYLE))
        commands.append(_command(page.number, footer_x, footer_y,
                                 footer_text(page.number, total_pages), FOOTER_STYLE))
        finalized.append(LayoutPage(number=page.number, commands=commands))

    logger.debug(f"Composited {total_pages} pages (title={'yes' if title else 'no'})")
    return finalized
