"""Greedy line breaking based on an average character width estimate."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List

from ..exceptions import GeometryError

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class WrappedLine:
    text: str
    is_first_of_block: bool = False


def _estimated_width(text: str, avg_char_width_mm: float) -> float:
    return len(text) * avg_char_width_mm


def _iter_lines(text: str, max_width_mm: float, avg_char_width_mm: float) -> Iterator[str]:
    current_line = ""
    for word in text.split():
        candidate = f"{current_line} {word}" if current_line else word
        if _estimated_width(candidate, avg_char_width_mm) <= max_width_mm:
            current_line = candidate
            continue

        if current_line:
            yield current_line
        # A word wider than the line still goes out whole, on its own line.
        if _estimated_width(word, avg_char_width_mm) > max_width_mm:
            logger.debug(
                "Word of %d chars exceeds line width %.2fmm, emitting overflow line",
                len(word), max_width_mm,
            )
            yield word
            current_line = ""
        else:
            current_line = word

    if current_line:
        yield current_line


class WrappedText:
    """Lazy, restartable sequence of wrapped lines.

    Each iteration re-runs the greedy break over the source text, so the
    object can be consumed any number of times.
    """

    __slots__ = ("text", "max_width_mm", "avg_char_width_mm")

    def __init__(self, text: str, max_width_mm: float, avg_char_width_mm: float) -> None:
        self.text = text or ""
        self.max_width_mm = max_width_mm
        self.avg_char_width_mm = avg_char_width_mm

    def __iter__(self) -> Iterator[str]:
        return _iter_lines(self.text, self.max_width_mm, self.avg_char_width_mm)

    def __repr__(self) -> str:
        return (
            f"WrappedText({self.text[:30]!r}, max_width_mm={self.max_width_mm}, "
            f"avg_char_width_mm={self.avg_char_width_mm})"
        )


def wrap(text: str, max_width_mm: float, avg_char_width_mm: float) -> WrappedText:
    """
    Split text into lines whose estimated width fits ``max_width_mm``.

    Breaks happen only at whitespace. Empty or whitespace-only text yields
    no lines at all.

    Args:
        text: Text run to wrap
        max_width_mm: Available line width
        avg_char_width_mm: Estimated width of a single character

    Returns:
        Iterable of line strings

    Raises:
        GeometryError: If the character width is not positive
    """
    if avg_char_width_mm <= 0:
        raise GeometryError(f"Average character width must be positive, got {avg_char_width_mm}")
    return WrappedText(text, max_width_mm, avg_char_width_mm)


class LineBreaker:
    """Simple greedy line breaker for one character width."""

    def __init__(self, avg_char_width_mm: float) -> None:
        if avg_char_width_mm <= 0:
            raise GeometryError(f"Average character width must be positive, got {avg_char_width_mm}")
        self.avg_char_width_mm = avg_char_width_mm

    def break_text(self, text: str, max_width: float) -> List[WrappedLine]:
        return [
            WrappedLine(text=line, is_first_of_block=(index == 0))
            for index, line in enumerate(wrap(text, max_width, self.avg_char_width_mm))
        ]
