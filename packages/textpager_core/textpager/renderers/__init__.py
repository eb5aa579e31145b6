"""Output backends for paginated documents."""

from .pdf_renderer import PdfRenderer
from .text_exporter import TextExporter

__all__ = ["PdfRenderer", "TextExporter"]
