"""
Meta tag and Open Graph parsers.

Every method reads exactly one field so a failure in one leaves the others
untouched. Missing or blank values come back as the field's default, except the
publication time, which is returned raw whenever the tag carries a ``content``.
"""

from __future__ import annotations

from typing import Optional, Union

from bs4 import BeautifulSoup, Tag

from ..utils.urls import resolve_url

Document = Union[BeautifulSoup, Tag]

DEFAULT_TITLE = "No Title"


def _content(soup: Document, selector: str) -> Optional[str]:
    """Trimmed ``content`` of the first element matching ``selector``, or None when blank."""
    element = soup.select_one(selector)
    if element is None:
        return None
    value = element.get("content")
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


class MetaTagParser:
    """Parser for standard ``<head>`` metadata."""

    @staticmethod
    def title(soup: Document) -> str:
        for name in ("title", "h1"):
            element = soup.find(name)
            if element is not None:
                text = element.get_text().strip()
                if text:
                    return text
        return DEFAULT_TITLE

    @staticmethod
    def description(soup: Document) -> str:
        return _content(soup, 'meta[name="description"]') or ""

    @staticmethod
    def keywords(soup: Document) -> str:
        return _content(soup, 'meta[name="keywords"]') or ""

    @staticmethod
    def canonical_url(soup: Document, base_url: str) -> Optional[str]:
        element = soup.select_one('link[rel~="canonical"][href]')
        if element is None:
            return None
        href = element.get("href")
        if not isinstance(href, str) or not href.strip():
            return None
        return resolve_url(base_url, href)

    @staticmethod
    def author(soup: Document) -> Optional[str]:
        return _content(soup, 'meta[name="author"]') or _content(soup, 'meta[property="article:author"]')

    @staticmethod
    def published_time(soup: Document) -> Optional[str]:
        element = soup.select_one('meta[property="article:published_time"]')
        if element is None:
            return None
        value = element.get("content")
        return value if isinstance(value, str) else None

    @staticmethod
    def declared_language(soup: Document) -> Optional[str]:
        """Language declared by ``<html lang>`` or the content-language header meta."""
        html = soup.find("html")
        if html is not None:
            lang = html.get("lang")
            if isinstance(lang, str) and lang.strip():
                return lang.strip()
        return _content(soup, 'meta[http-equiv="content-language" i]')


class OpenGraphParser:
    """Parser for OpenGraph metadata."""

    @staticmethod
    def site_name(soup: Document) -> Optional[str]:
        return _content(soup, 'meta[property="og:site_name"]')

    @staticmethod
    def title(soup: Document) -> Optional[str]:
        return _content(soup, 'meta[property="og:title"]')

    @staticmethod
    def description(soup: Document) -> Optional[str]:
        return _content(soup, 'meta[property="og:description"]')

    @staticmethod
    def image(soup: Document, base_url: str) -> Optional[str]:
        image = _content(soup, 'meta[property="og:image"]')
        if image is None:
            return None
        return resolve_url(base_url, image)
