"""

Simple high-level API for textpager.

Usage example:
>>> from textpager import paginate, export_document
>>>
>>> document = paginate("### Summary\\n\\n- Liability is uncapped")
>>> document.total_pages
1
>>>
>>> # PDF, falling back to assessment.fallback.txt if the PDF cannot be written
>>> export_document(text, "assessment.pdf")

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from .engine.geometry import PageGeometry
from .engine.layout_engine import paginate
from .engine.page_compositor import DEFAULT_TITLE
from .engine.pagination_manager import FlowRules
from .exceptions import RenderingError
from .renderers.pdf_renderer import PdfRenderer
from .renderers.text_exporter import TextExporter

logger = logging.getLogger(__name__)

__all__ = [
    "render_to_pdf",
    "export_document",
    "fallback_path_for",
]


def fallback_path_for(output_path: Union[str, Path]) -> Path:
    """Plain-text sibling of ``output_path``, distinct from any ``.txt`` source next to it."""
    return Path(output_path).with_suffix(".fallback.txt")


def render_to_pdf(
    text: str,
    output_path: Union[str, Path],
    geometry: Optional[PageGeometry] = None,
    *,
    title: Optional[str] = DEFAULT_TITLE,
    rules: Optional[FlowRules] = None,
    normalize: bool = False,
) -> Path:
    """
    Paginate ``text`` and write it as a PDF.

    Raises:
        GeometryError: If the geometry leaves no content area
        RenderingError: If the PDF cannot be written
    """
    document = paginate(text, geometry, title=title, rules=rules, normalize=normalize)
    return PdfRenderer(output_path).render(document)


def export_document(
    text: str,
    output_path: Union[str, Path],
    geometry: Optional[PageGeometry] = None,
    *,
    title: Optional[str] = DEFAULT_TITLE,
    rules: Optional[FlowRules] = None,
    normalize: bool = False,
    fallback_to_text: bool = True,
) -> Path:
    """
    Write ``text`` as a paginated PDF, or as plain text if that fails.

    Args:
        text: Document text
        output_path: Requested PDF path
        geometry: Page geometry
        title: Title stamped on page 1
        rules: Spacing rules
        normalize: Run the markdown normalizer first
        fallback_to_text: Write ``<stem>.fallback.txt`` when PDF rendering fails

    Returns:
        Path of the file actually written
    """
    try:
        return render_to_pdf(text, output_path, geometry, title=title, rules=rules, normalize=normalize)
    except RenderingError as exc:
        if not fallback_to_text:
            raise
        fallback_path = fallback_path_for(output_path)
        logger.warning(f"PDF generation failed ({exc.message}); exporting plain text to {fallback_path}")
        return TextExporter(fallback_path).export(text)
