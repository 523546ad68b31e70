"""
Structured content processors for headings, links, images and code.

Each processor works on an already parsed document and returns an ordered,
deduplicated list of model objects.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple, Union

from bs4 import BeautifulSoup, Tag

from ..utils.urls import resolve_url
from .models import CodeBlock, Heading, Image, Link
from .noise import class_tokens

Document = Union[BeautifulSoup, Tag]


def _attribute(element: Tag, name: str) -> str:
    value = element.get(name)
    if value is None:
        return ""
    if not isinstance(value, str):
        value = " ".join(value)
    return value


class HeadingProcessor:
    """Collects ``h1``..``h6`` texts grouped by level."""

    def process(self, soup: Document) -> List[Heading]:
        headings: List[Heading] = []
        for level in range(1, 7):
            for element in soup.find_all(f"h{level}"):
                text = element.get_text().strip()
                if text:
                    headings.append(Heading(level=level, text=text))
        return headings


class LinkProcessor:
    """
    Collects outbound links, preferring those inside the main content area.

    Scopes are tried in order and the first with at least ``MIN_SCOPED_LINKS``
    usable links is kept; otherwise every anchor on the page is used.
    """

    LINK_SCOPES: Tuple[str, ...] = (
        "article",
        "main",
        "[role=main]",
        "[itemprop=articleBody]",
        ".entry-content",
        ".post-content",
        ".article-content",
        "#content",
        "#main",
    )

    MIN_SCOPED_LINKS = 3

    SKIPPED_PREFIXES: Tuple[str, ...] = ("#", "javascript:", "mailto:")

    def process(self, soup: Document, base_url: str) -> List[Link]:
        for scope in self.LINK_SCOPES:
            links = self._collect(soup.select(f"{scope} a[href]"), base_url)
            if len(links) >= self.MIN_SCOPED_LINKS:
                return links
        return self._collect(soup.select("a[href]"), base_url)

    def _collect(self, anchors: List[Tag], base_url: str) -> List[Link]:
        links: List[Link] = []
        seen = set()
        for anchor in anchors:
            href = _attribute(anchor, "href").strip()
            if not href or href.lower().startswith(self.SKIPPED_PREFIXES):
                continue
            url = resolve_url(base_url, href)
            if url in seen:
                continue
            seen.add(url)
            links.append(Link(url=url, text=anchor.get_text().strip()))
        return links


class ImageProcessor:
    """Collects ``img[src]`` as absolute URLs, first occurrence wins."""

    def process(self, soup: Document, base_url: str) -> List[Image]:
        images: List[Image] = []
        seen = set()
        for element in soup.select("img[src]"):
            # an empty src refers to the page itself
            absolute = resolve_url(base_url, _attribute(element, "src"))
            if absolute in seen:
                continue
            seen.add(absolute)
            images.append(
                Image(
                    src=absolute,
                    alt=_attribute(element, "alt").strip(),
                    title=_attribute(element, "title").strip(),
                )
            )
        return images


class CodeProcessor:
    """Collects code blocks with the language declared in their markup."""

    MIN_CODE_CHARS = 10

    LANGUAGE_PREFIXES: Tuple[str, ...] = ("language-", "lang-")

    def process(self, soup: Document) -> List[CodeBlock]:
        blocks: List[CodeBlock] = []
        seen: Dict[Tuple[Optional[str], str], None] = {}
        for element in soup.select("pre code, pre, code"):
            code = element.get_text()
            if len(code.strip()) < self.MIN_CODE_CHARS:
                continue
            language = self.detect_language(element)
            key = (language, code)
            if key in seen:
                continue
            seen[key] = None
            blocks.append(CodeBlock(language=language, code=code))
        return blocks

    def detect_language(self, element: Tag) -> Optional[str]:
        """Language from a ``language-``/``lang-`` class token, else ``data-lang``."""
        for token in class_tokens(element):
            for prefix in self.LANGUAGE_PREFIXES:
                if token.startswith(prefix):
                    return token[len(prefix) :]
        data_lang = _attribute(element, "data-lang").strip()
        return data_lang or None
