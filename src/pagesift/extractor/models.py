"""
Data models for extraction results.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .normalizer import count_words


@dataclass(slots=True, frozen=True)
class Candidate:
    """Body text proposed by one extraction strategy."""

    strategy: str
    text: str
    word_count: int

    @classmethod
    def from_text(cls, strategy: str, text: str) -> Candidate:
        return cls(strategy=strategy, text=text, word_count=count_words(text))


@dataclass(slots=True, frozen=True)
class Heading:
    level: int
    text: str


@dataclass(slots=True, frozen=True)
class Link:
    url: str
    text: str


@dataclass(slots=True, frozen=True)
class Image:
    src: str
    alt: str = ""
    title: str = ""


@dataclass(slots=True, frozen=True)
class CodeBlock:
    language: Optional[str]
    code: str
    start_char: Optional[int] = None
    end_char: Optional[int] = None


@dataclass(frozen=True)
class ExtractedDocument:
    """Clean, scored, structured representation of one HTML page.

    Fields are frozen once assembled. ``warnings`` is the only part a caller
    may extend, with advisory tags from the display layer.
    """

    url: str
    title: str
    raw_html: str
    clean_text: str
    meta_description: str = ""
    meta_keywords: str = ""
    language: str = "unknown"
    canonical_url: Optional[str] = None
    site_name: Optional[str] = None
    author: Optional[str] = None
    published_at: Optional[str] = None
    og_title: Optional[str] = None
    og_description: Optional[str] = None
    og_image: Optional[str] = None
    headings: Tuple[Heading, ...] = ()
    links: Tuple[Link, ...] = ()
    images: Tuple[Image, ...] = ()
    code_blocks: Tuple[CodeBlock, ...] = ()
    word_count: int = 0
    reading_time_minutes: int = 1
    extraction_score: float = 0.0
    warnings: List[str] = field(default_factory=list)
    domain: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the result."""
        for name in ("headings", "links", "images", "code_blocks"):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        if not (0.0 <= self.extraction_score <= 1.0):
            raise ValueError("extraction_score must be between 0.0 and 1.0")
        if not self.title:
            raise ValueError("title must not be empty")
        if not self.language:
            raise ValueError("language must not be empty")

    def add_warning(self, tag: str) -> None:
        """Append an advisory tag unless it is already present."""
        if tag not in self.warnings:
            self.warnings.append(tag)

    def to_dict(self, *, include_raw_html: bool = True) -> Dict[str, Any]:
        data = asdict(self)
        if not include_raw_html:
            data.pop("raw_html")
        return data
