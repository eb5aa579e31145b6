"""

PdfRenderer - placement commands to PDF
---------------------------------------
Draws a PaginatedDocument with ReportLab. Layout coordinates are
millimetres from the top-left corner; ReportLab works in points from the
bottom-left, so every command is flipped on the way out.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from reportlab.pdfgen.canvas import Canvas

from ..engine.geometry import mm_to_points
from ..engine.layout_primitives import LayoutPage, PaginatedDocument, PlacementCommand
from ..exceptions import RenderingError

logger = logging.getLogger(__name__)

FONT_REGULAR = "Helvetica"
FONT_BOLD = "Helvetica-Bold"


def font_name_for(command: PlacementCommand) -> str:
    return FONT_BOLD if command.style.bold else FONT_REGULAR


class PdfRenderer:
    """Render a paginated document onto a ReportLab canvas."""

    def __init__(self, output_path: Union[str, Path]):
        """
        Args:
            output_path: Path of the PDF file to produce
        """
        self.output_path = Path(output_path)

    def render(self, document: PaginatedDocument) -> Path:
        """
        Write every page of ``document`` to the output PDF.

        Args:
            document: Finalized pagination result

        Returns:
            Path to the generated PDF

        Raises:
            RenderingError: If the document is empty or the PDF cannot be written
        """
        if not document.pages:
            raise RenderingError("Cannot render a document without pages", str(self.output_path))

        width_pt, height_pt = document.geometry.page_size_points
        try:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
            canvas = Canvas(str(self.output_path), pagesize=(width_pt, height_pt))
            if document.title:
                canvas.setTitle(document.title)
            for page in document.pages:
                self.draw_page(canvas, page, height_pt)
                canvas.showPage()
            canvas.save()
        except Exception as exc:
            raise RenderingError(
                f"Failed to write PDF: {exc}",
                str(self.output_path),
                cause=exc,
                details={'total_pages': document.total_pages},
            ) from exc

        logger.info(f"Rendered {document.total_pages} page(s) to {self.output_path}")
        return self.output_path

    def draw_page(self, canvas: Canvas, page: LayoutPage, page_height_pt: float) -> None:
        """Draw all commands of a single page on the current canvas page."""
        for command in page.commands:
            canvas.setFont(font_name_for(command), command.font_size_pt)
            canvas.drawString(
                mm_to_points(command.x),
                page_height_pt - mm_to_points(command.y),
                command.text,
            )
