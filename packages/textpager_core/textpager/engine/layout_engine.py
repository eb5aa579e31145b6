"""
LayoutEngine - text to paginated placement commands.

Pipeline:
    text -> (normalize_markdown) -> classify_lines -> PaginationManager
         -> finalize (footers, title) -> PaginatedDocument
"""

from __future__ import annotations

import logging
from typing import Optional

from .block_classifier import classify_lines
from .geometry import PageGeometry
from .layout_primitives import PaginatedDocument
from .normalizer import normalize_markdown
from .page_compositor import DEFAULT_TITLE, finalize
from .pagination_manager import FlowRules, PaginationManager

logger = logging.getLogger(__name__)


class LayoutEngine:
    """Reusable pagination pipeline for one geometry and rule set."""

    def __init__(
        self,
        geometry: Optional[PageGeometry] = None,
        rules: Optional[FlowRules] = None,
        *,
        title: Optional[str] = DEFAULT_TITLE,
        normalize: bool = False,
    ) -> None:
        """
        Args:
            geometry: Page geometry; validated here
            rules: Spacing rules
            title: Title stamped on page 1 (``None`` to omit)
            normalize: Run the markdown normalizer before classification

        Raises:
            GeometryError: If the geometry leaves no content area
        """
        self.geometry = (geometry or PageGeometry()).validate()
        self.rules = rules or FlowRules()
        self.title = title
        self.normalize = normalize
        self.pagination = PaginationManager(self.geometry, self.rules)

    def paginate(self, text: str) -> PaginatedDocument:
        source = text or ""
        if self.normalize:
            source = normalize_markdown(source)

        pages = self.pagination.layout(classify_lines(source))
        pages = finalize(pages, self.geometry, self.title)

        document = PaginatedDocument(pages=pages, geometry=self.geometry, title=self.title)
        logger.info(f"Paginated {len(source)} characters into {document.total_pages} page(s)")
        return document


def paginate(
    text: str,
    geometry: Optional[PageGeometry] = None,
    *,
    title: Optional[str] = DEFAULT_TITLE,
    rules: Optional[FlowRules] = None,
    normalize: bool = False,
) -> PaginatedDocument:
    """Paginate ``text`` in one call. See :class:`LayoutEngine`."""
    engine = LayoutEngine(geometry, rules, title=title, normalize=normalize)
    return engine.paginate(text)
