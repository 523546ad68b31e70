"""
HTML preprocessing that removes whole noisy blocks before extraction runs.

Matched elements are dropped from the parsed tree together with everything
they contain and replaced by a single space, then the tree is serialized.
Working on the tree rather than on tag patterns means nested containers that
share a tag name are removed whole instead of being mis-paired.
"""

from __future__ import annotations

import re

import structlog
from bs4 import Tag

from .dom import DEFAULT_PARSER, parse_html

logger = structlog.get_logger(__name__)

BLOCK_TAGS: tuple[str, ...] = ("script", "style", "noscript", "svg", "canvas", "iframe")

CONTAINER_TAGS: tuple[str, ...] = ("div", "section", "aside", "article")

BOILERPLATE_KEYWORDS: tuple[str, ...] = (
    "ads",
    "advert",
    "sponsor",
    "promo",
    "related",
    "cookie",
    "banner",
    "modal",
    "subscribe",
    "newsletter",
    "share",
    "social",
    "sidebar",
    "comments",
    "breadcrumb",
    "pagination",
)

_BOILERPLATE_ATTRIBUTE = re.compile("|".join(map(re.escape, BOILERPLATE_KEYWORDS)), re.IGNORECASE)


def is_boilerplate_container(element: Tag) -> bool:
    """True when the element's ``id`` or ``class`` value contains a boilerplate keyword."""
    for attribute in ("id", "class"):
        value = element.get(attribute)
        if not value:
            continue
        if not isinstance(value, str):
            value = " ".join(value)
        if _BOILERPLATE_ATTRIBUTE.search(value):
            return True
    return False


def _drop(element: Tag) -> bool:
    """Replace ``element`` with a single space. False if an ancestor was already dropped."""
    if element.decomposed:
        return False
    element.replace_with(" ")
    element.decompose()
    return True


class HTMLPreprocessor:
    """Strips script-like blocks and boilerplate containers from raw HTML."""

    def __init__(self, parser: str = DEFAULT_PARSER) -> None:
        self.parser = parser

    def process(self, html: str) -> str:
        if not html or not html.strip():
            return html

        soup = parse_html(html, self.parser)

        removed_blocks = 0
        for element in soup.find_all(BLOCK_TAGS):
            if _drop(element):
                removed_blocks += 1

        removed_containers = 0
        for element in soup.find_all(CONTAINER_TAGS):
            if element.decomposed or not is_boilerplate_container(element):
                continue
            if _drop(element):
                removed_containers += 1

        logger.debug(
            "Preprocessed HTML",
            removed_blocks=removed_blocks,
            removed_containers=removed_containers,
        )
        return str(soup)


def preprocess_html(html: str, parser: str = DEFAULT_PARSER) -> str:
    """
    Convenience function for one-off preprocessing.

    Args:
        html: Raw HTML content
        parser: BeautifulSoup tree builder name

    Returns:
        HTML with noisy blocks replaced by a single space
    """
    return HTMLPreprocessor(parser).process(html)
