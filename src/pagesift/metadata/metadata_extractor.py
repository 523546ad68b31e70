"""
Metadata extraction coordinator.

Runs every field parser over the original (not preprocessed) document.
Each step is best-effort: a failure is logged, counted and replaced by the
field's default without affecting the other steps.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional, TypeVar

import structlog
from bs4 import BeautifulSoup

from ..config.config import ExtractionSettings
from ..extractor.content_processors import CodeProcessor, HeadingProcessor, ImageProcessor, LinkProcessor
from ..extractor.dom import parse_html
from ..extractor.language_detector import UNKNOWN_LANGUAGE, LanguageDetector
from ..extractor.models import CodeBlock, Heading, Image, Link
from ..observability.metrics import record_metadata_error
from .structured_data_parser import DEFAULT_TITLE, MetaTagParser, OpenGraphParser

logger = structlog.get_logger(__name__)

T = TypeVar("T")


@dataclass
class PageMetadata:
    """Everything known about a page apart from its body text."""

    title: str = DEFAULT_TITLE
    meta_description: str = ""
    meta_keywords: str = ""
    language: str = UNKNOWN_LANGUAGE
    canonical_url: Optional[str] = None
    site_name: Optional[str] = None
    author: Optional[str] = None
    published_at: Optional[str] = None
    og_title: Optional[str] = None
    og_description: Optional[str] = None
    og_image: Optional[str] = None
    headings: List[Heading] = field(default_factory=list)
    links: List[Link] = field(default_factory=list)
    images: List[Image] = field(default_factory=list)
    code_blocks: List[CodeBlock] = field(default_factory=list)


class MetadataExtractor:
    """Extracts page metadata and structured content from raw HTML."""

    def __init__(self, settings: Optional[ExtractionSettings] = None, *, record_metrics: bool = True) -> None:
        self.settings = settings or ExtractionSettings()
        self.record_metrics = record_metrics
        self.language_detector = LanguageDetector(seed=self.settings.language_seed)
        self.heading_processor = HeadingProcessor()
        self.link_processor = LinkProcessor()
        self.image_processor = ImageProcessor()
        self.code_processor = CodeProcessor()

    def _safe(self, field_name: str, step: Callable[[], T], default: T) -> T:
        try:
            return step()
        except Exception as e:
            logger.warning(
                "Metadata step failed, using default",
                field=field_name,
                error=str(e),
                error_type=type(e).__name__,
            )
            if self.record_metrics:
                record_metadata_error(field_name)
            return default

    def extract(self, raw_html: str, base_url: str) -> PageMetadata:
        """
        Extract all metadata fields from the original document.

        Args:
            raw_html: Unprocessed HTML of the page
            base_url: Absolute URL used to resolve relative references

        Returns:
            PageMetadata with every field populated or defaulted
        """
        soup = parse_html(raw_html, self.settings.html_parser)

        return PageMetadata(
            title=self._safe("title", lambda: MetaTagParser.title(soup), DEFAULT_TITLE),
            meta_description=self._safe("meta_description", lambda: MetaTagParser.description(soup), ""),
            meta_keywords=self._safe("meta_keywords", lambda: MetaTagParser.keywords(soup), ""),
            language=self._safe("language", lambda: self.detect_language(soup, raw_html), UNKNOWN_LANGUAGE),
            canonical_url=self._safe("canonical_url", lambda: MetaTagParser.canonical_url(soup, base_url), None),
            site_name=self._safe("site_name", lambda: OpenGraphParser.site_name(soup), None),
            author=self._safe("author", lambda: MetaTagParser.author(soup), None),
            published_at=self._safe("published_at", lambda: MetaTagParser.published_time(soup), None),
            og_title=self._safe("og_title", lambda: OpenGraphParser.title(soup), None),
            og_description=self._safe("og_description", lambda: OpenGraphParser.description(soup), None),
            og_image=self._safe("og_image", lambda: OpenGraphParser.image(soup, base_url), None),
            headings=self._safe("headings", lambda: self.heading_processor.process(soup), []),
            links=self._safe("links", lambda: self.link_processor.process(soup, base_url), []),
            images=self._safe("images", lambda: self.image_processor.process(soup, base_url), []),
            code_blocks=self._safe("code_blocks", lambda: self.code_processor.process(soup), []),
        )

    def detect_language(self, soup: BeautifulSoup, raw_html: str) -> str:
        declared = MetaTagParser.declared_language(soup)
        if declared:
            return declared
        if not self.settings.detect_language:
            return UNKNOWN_LANGUAGE
        return self.language_detector.detect(raw_html) or UNKNOWN_LANGUAGE
