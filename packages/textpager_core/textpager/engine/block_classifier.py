"""
Line classification for plain text extracted from rendered markdown.

Each input line maps to exactly one block kind using prefix heuristics;
there is no markdown parsing beyond that.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

# "###title", "#### title", a markdown "# title" / "## title" heading, or a bare run of "#".
_HEADING_RE = re.compile(r"^(?:#{3,}|#{1,2}(?=\s|$))\s*")
_SUBHEADING_RE = re.compile(r"^\d+\.\s")
_BULLET_RE = re.compile(r"^[•*\-]\s+")
_NEWLINE_RE = re.compile(r"\r\n|\r|\n")


class BlockKind(Enum):
    HEADING = "heading"
    SUBHEADING = "subheading"
    BULLET = "bullet"
    PARAGRAPH = "paragraph"
    BLANK = "blank"


@dataclass(slots=True, frozen=True)
class TextBlock:
    """One classified input line."""

    kind: BlockKind
    text: str = ""


def classify(line: str) -> TextBlock:
    """
    Classify a single line; first matching rule wins.

    Args:
        line: One input line, without its newline

    Returns:
        TextBlock with the marker stripped where the kind has one
    """
    stripped = (line or "").strip()
    if not stripped:
        return TextBlock(BlockKind.BLANK)

    match = _HEADING_RE.match(stripped)
    if match:
        return TextBlock(BlockKind.HEADING, stripped[match.end():])

    if _SUBHEADING_RE.match(stripped):
        return TextBlock(BlockKind.SUBHEADING, stripped)

    match = _BULLET_RE.match(stripped)
    if match:
        return TextBlock(BlockKind.BULLET, stripped[match.end():])

    return TextBlock(BlockKind.PARAGRAPH, stripped)


def classify_lines(text: str) -> Iterator[TextBlock]:
    """Classify every line of ``text`` in order."""
    if not text:
        return
    for line in _NEWLINE_RE.split(text):
        yield classify(line)
