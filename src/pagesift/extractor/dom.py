"""
Parsing and text conversion helpers shared by the extraction strategies.
"""

from __future__ import annotations

import re
from typing import List, Union

import html2text
from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from .noise import is_noise_element

DEFAULT_PARSER = "html.parser"

# html2text escapes markdown-looking text in every non-code section
_ESCAPED_BACKSLASH = re.compile(r"\\\\(?=[\\`*_{}\[\]()#+\-.!])")
_ESCAPED_ORDINAL = re.compile(r"^(\s*\d+)\\(\.)(?=\s)", re.MULTILINE)
_ESCAPED_BULLET = re.compile(r"^(\s*)\\([+-])(?=\s|-)", re.MULTILINE)


def parse_html(html: str, parser: str = DEFAULT_PARSER) -> BeautifulSoup:
    return BeautifulSoup(html, parser)


def html_to_text(html: str) -> str:
    """Convert an HTML fragment to plain text, one paragraph per line."""
    if not html or not html.strip():
        return ""

    # HTML2Text keeps parse state on the instance, so one per call
    converter = html2text.HTML2Text()
    converter.ignore_links = True
    converter.ignore_images = True
    converter.ignore_emphasis = True
    converter.body_width = 0
    converter.unicode_snob = True
    return _unescape_markdown(converter.handle(html))


def _unescape_markdown(text: str) -> str:
    text = _ESCAPED_ORDINAL.sub(r"\1\2", text)
    text = _ESCAPED_BULLET.sub(r"\1\2", text)
    return _ESCAPED_BACKSLASH.sub(r"\\", text)


def walk_text(root: Union[BeautifulSoup, Tag]) -> str:
    """Collect the text under ``root``, skipping boilerplate subtrees.

    Descendants whose tag, id or class marks them as noise are skipped with
    everything below them. Text nodes are joined with single spaces in
    document order. ``root`` itself is never tested.
    """
    parts: List[str] = []
    stack = list(reversed(list(root.children)))
    while stack:
        node = stack.pop()
        if isinstance(node, Tag):
            if is_noise_element(node):
                continue
            stack.extend(reversed(list(node.children)))
        elif isinstance(node, NavigableString) and not isinstance(node, PreformattedString):
            parts.append(str(node))
    return " ".join(parts)
