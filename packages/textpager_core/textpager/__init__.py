"""
textpager - plain text pagination for paged output.

Takes text extracted from a rendered markdown document and lays it out on
fixed-size pages: headings, numbered subheadings, bullets and paragraphs,
greedy line wrapping, page breaks, "Page i of N" footers and a first-page
title. The result is a list of placement commands that a renderer (the
bundled ReportLab one, or any other) turns into a document.

Quick Start:
    from textpager import paginate, render_to_pdf

    document = paginate(text)
    print(document.total_pages)

    render_to_pdf(text, "assessment.pdf")
"""

from .version import __version__, __version_info__

from .exceptions import (
    TextPagerError,
    GeometryError,
    RenderingError,
)

from .engine import (
    BlockKind,
    FlowRules,
    FontWeight,
    LayoutEngine,
    LayoutPage,
    PageGeometry,
    PaginatedDocument,
    PlacementCommand,
    TextBlock,
    classify,
    finalize,
    layout,
    normalize_markdown,
    paginate,
    wrap,
)
from .api import export_document, render_to_pdf

__all__ = [
    "__version__",
    "__version_info__",
    "TextPagerError",
    "GeometryError",
    "RenderingError",
    "BlockKind",
    "FlowRules",
    "FontWeight",
    "LayoutEngine",
    "LayoutPage",
    "PageGeometry",
    "PaginatedDocument",
    "PlacementCommand",
    "TextBlock",
    "classify",
    "finalize",
    "layout",
    "normalize_markdown",
    "paginate",
    "wrap",
    "export_document",
    "render_to_pdf",
]
