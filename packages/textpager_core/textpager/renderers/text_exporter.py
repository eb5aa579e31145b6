"""Plain-text export, used when a paged output cannot be produced."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from ..exceptions import RenderingError

logger = logging.getLogger(__name__)


class TextExporter:
    """Write the source text unpaginated as UTF-8."""

    def __init__(self, output_path: Union[str, Path]):
        self.output_path = Path(output_path)

    def export(self, text: str) -> Path:
        try:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
            self.output_path.write_text(text or "", encoding="utf-8")
        except OSError as exc:
            raise RenderingError(f"Failed to write text: {exc}", str(self.output_path), cause=exc) from exc
        logger.info(f"Exported plain text to {self.output_path}")
        return self.output_path
