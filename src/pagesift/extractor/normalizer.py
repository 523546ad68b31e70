"""
Text normalization applied to every candidate's output.

Two passes: whitespace collapsing, then a line filter that drops short and
boilerplate lines. ``normalize_text`` is idempotent.
"""

from __future__ import annotations

import re
from typing import List

# Any whitespace except the newline that separates lines
_HORIZONTAL_WHITESPACE = re.compile(r"[^\S\n]+")
_EXCESS_NEWLINES = re.compile(r"\n{3,}")

MIN_LINE_CHARS = 3

BOILERPLATE_LINE_PATTERNS: tuple[str, ...] = (
    r"subscribe",
    r"sign up",
    r"cookie",
    r"accept all",
    r"advert",
    r"sponsor",
    r"newsletter",
    r"\bshare\b",
    r"related articles",
    r"^comments?$",
    r"read more",
    r"continue reading",
    r"terms of service",
    r"privacy policy",
)

_BOILERPLATE_LINE = re.compile("|".join(BOILERPLATE_LINE_PATTERNS), re.IGNORECASE)


def count_words(text: str) -> int:
    """Whitespace-token count."""
    return len(text.split())


def collapse_whitespace(text: str) -> str:
    """Collapse horizontal whitespace within lines and blank-line runs to one blank line."""
    lines = [_HORIZONTAL_WHITESPACE.sub(" ", line).strip() for line in text.split("\n")]
    collapsed = _EXCESS_NEWLINES.sub("\n\n", "\n".join(lines))
    return collapsed.strip("\n")


def is_boilerplate_line(line: str) -> bool:
    return _BOILERPLATE_LINE.search(line) is not None


def filter_lines(text: str) -> str:
    """Drop short and boilerplate lines and consecutive duplicates."""
    kept: List[str] = []
    for line in text.split("\n"):
        stripped = line.strip()
        if len(stripped) < MIN_LINE_CHARS:
            continue
        if is_boilerplate_line(stripped):
            continue
        if kept and kept[-1] == stripped:
            continue
        kept.append(stripped)
    return _EXCESS_NEWLINES.sub("\n\n", "\n".join(kept))


def normalize_text(text: str) -> str:
    """Collapse whitespace, then filter lines.

    Only horizontal whitespace is collapsed. Newlines survive the first pass so
    the line filter still sees one line per paragraph, and the result keeps
    that paragraph structure instead of being flattened to a single line.
    """
    return filter_lines(collapse_whitespace(text))
