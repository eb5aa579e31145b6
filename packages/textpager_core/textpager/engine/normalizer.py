"""Optional markdown clean-up applied before classification.

Assessment text often mixes markdown headings, dash rules used as section
separators, and indented bullet glyphs. This pass rewrites those into the
shapes the block classifier recognises. It deliberately does not try to
find code fences between dash rules: that heuristic cannot be told apart
from table separators.
"""

from __future__ import annotations

import logging
import re
from typing import List

from .block_classifier import BlockKind, classify

logger = logging.getLogger(__name__)

_MARKDOWN_HEADING_RE = re.compile(r"^#+\s+(.+)$")
_DASH_RULE_RE = re.compile(r"^(?:-{3,}|─{3,})$")
_INDENTED_BULLET_RE = re.compile(r"^\s+•\s+(.*)$")
_NEWLINE_RE = re.compile(r"\r\n|\r|\n")

_TITLE_KINDS = (BlockKind.PARAGRAPH, BlockKind.SUBHEADING, BlockKind.HEADING)


def _as_heading(title: str) -> str:
    return f"### {title}"


def normalize_markdown(text: str) -> str:
    """
    Canonicalise headings, dash rules and indented bullets.

    - ``# Title`` / ``## Title`` / ``#### Title`` become ``### Title``
    - a dash rule directly followed by a text line promotes that line to
      a heading; any other dash rule becomes a blank line
    - indented ``•`` bullets become top-level ``* `` bullets

    Args:
        text: Raw text

    Returns:
        Normalised text with the same number of logical blocks or fewer
    """
    if not text:
        return ""

    lines = _NEWLINE_RE.split(text)
    out: List[str] = []
    promoted = 0
    index = 0
    while index < len(lines):
        line = lines[index]
        stripped = line.strip()

        if _DASH_RULE_RE.match(stripped):
            following = lines[index + 1].strip() if index + 1 < len(lines) else ""
            if following and not _DASH_RULE_RE.match(following):
                block = classify(following)
                if block.kind in _TITLE_KINDS:
                    out.append(_as_heading(block.text))
                    promoted += 1
                    index += 2
                    continue
            out.append("")
            index += 1
            continue

        match = _MARKDOWN_HEADING_RE.match(stripped)
        if match:
            out.append(_as_heading(match.group(1).strip()))
        else:
            match = _INDENTED_BULLET_RE.match(line)
            out.append(f"* {match.group(1)}" if match else line)
        index += 1

    if promoted:
        logger.debug(f"Promoted {promoted} dash-rule section titles to headings")
    return "\n".join(out)
