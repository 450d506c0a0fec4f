"""Rebuild visual text lines from positioned PDF fragments.

Widths are estimated with a fixed character width rather than font metrics.
Some parsers count the spaces this module inserts to tell table columns
apart, so the constants below must not drift.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .models import PositionedToken

logger = logging.getLogger(__name__)

# Tokens within this many units of the previous token share its line.
LINE_TOLERANCE = 5
# Minimum gap between the estimated end of one token and the start of the
# next before a space is inserted.
GAP_THRESHOLD = 10
# Estimated advance of a single character.
CHAR_WIDTH = 5

PAGE_MARKER_PREFIX = "__PARSER__ ==="


def page_marker(page_number: int) -> str:
    return f"{PAGE_MARKER_PREFIX} Page {page_number} ==="


def is_page_marker(line: str) -> bool:
    return line.startswith(PAGE_MARKER_PREFIX)


def group_tokens(tokens: Iterable[PositionedToken]) -> List[List[PositionedToken]]:
    """Group tokens into lines, top of the page first, each line left to right."""
    ordered = sorted(tokens, key=lambda t: (-t.y, t.x))
    lines: List[List[PositionedToken]] = []
    current: List[PositionedToken] = []
    last_y: Optional[float] = None
    for tok in ordered:
        if last_y is not None and abs(tok.y - last_y) > LINE_TOLERANCE:
            lines.append(sorted(current, key=lambda t: t.x))
            current = []
        current.append(tok)
        last_y = tok.y
    if current:
        lines.append(sorted(current, key=lambda t: t.x))
    return lines


def render_line(tokens: List[PositionedToken]) -> str:
    parts: List[str] = []
    last_right: Optional[float] = None
    for tok in tokens:
        if last_right is not None and tok.x - last_right >= GAP_THRESHOLD:
            parts.append(" ")
        parts.append(tok.text)
        last_right = tok.x + len(tok.text) * CHAR_WIDTH
    return "".join(parts).strip()


def page_lines(tokens: Iterable[PositionedToken]) -> List[str]:
    return [render_line(line) for line in group_tokens(tokens)]


def reconstruct_lines(pages: Iterable[Iterable[PositionedToken]]) -> List[str]:
    """Flatten pages into one line sequence.

    Every page is introduced by a marker line (see :func:`page_marker`) so
    parsers can reset their table state and drop page footers.
    """
    lines: List[str] = []
    total_chars = 0
    page_count = 0
    for page_number, tokens in enumerate(pages, start=1):
        rendered = page_lines(tokens)
        logger.debug("Page %d: %d lines", page_number, len(rendered))
        lines.append(page_marker(page_number))
        lines.extend(rendered)
        total_chars += sum(len(line) for line in rendered)
        page_count = page_number
    logger.debug("Reconstructed %d pages (%d characters)", page_count, total_chars)
    return lines
