"""
Boilerplate classification for element identifiers and tag names.
"""

from __future__ import annotations

from typing import Iterable

from bs4 import Tag

# No bare "ad": it would match "header", "leader", "download" and so on.
NOISE_KEYWORDS: tuple[str, ...] = (
    "ads",
    "advert",
    "adsense",
    "adunit",
    "ad-slot",
    "ad_container",
    "adbox",
    "sponsor",
    "promo",
    "cookie",
    "consent",
    "banner",
    "modal",
    "subscribe",
    "newsletter",
    "share",
    "social",
    "sidebar",
    "comments",
    "related",
    "breadcrumb",
    "pagination",
    "nav",
    "footer",
    "header",
    "hero",
    "toolbar",
)

AD_MARKERS: tuple[str, ...] = ("-ad", "ad-", "_ad", "ad_")

NOISE_TAGS = frozenset(
    {
        "script",
        "style",
        "noscript",
        "svg",
        "canvas",
        "iframe",
        "form",
        "header",
        "footer",
        "nav",
        "aside",
    }
)


def is_noise_identifier(identifier: str) -> bool:
    """True when an ``id`` or single ``class`` token looks like page furniture."""
    ident = identifier.lower()
    if any(keyword in ident for keyword in NOISE_KEYWORDS):
        return True
    return any(marker in ident for marker in AD_MARKERS)


def class_tokens(element: Tag) -> Iterable[str]:
    classes = element.get("class")
    if not classes:
        return ()
    if isinstance(classes, str):
        return classes.split()
    return classes


def is_noise_element(element: Tag) -> bool:
    """True when the element's tag, id or any class token marks it as boilerplate."""
    if element.name in NOISE_TAGS:
        return True
    element_id = element.get("id")
    if isinstance(element_id, str) and is_noise_identifier(element_id):
        return True
    return any(is_noise_identifier(token) for token in class_tokens(element))
