"""
Pipeline orchestration for pagesift.

raw HTML -> preprocessor -> strategies -> selector -> normalizer -> assembler,
with metadata read from the original HTML alongside.
"""

from __future__ import annotations

import asyncio
import time
from functools import lru_cache
from typing import Optional

import structlog
from structlog.contextvars import bound_contextvars

from .assembler import assemble_document
from .config.config import ExtractionSettings, settings
from .extractor.manager import ExtractorManager
from .extractor.models import ExtractedDocument
from .extractor.preprocessor import HTMLPreprocessor
from .metadata.metadata_extractor import MetadataExtractor
from .observability.metrics import record_extraction

logger = structlog.get_logger(__name__)


class DocumentPipeline:
    """
    Turns raw HTML into a scored ExtractedDocument.

    Holds no per-call state, so one instance may serve concurrent callers.
    """

    def __init__(self, settings: Optional[ExtractionSettings] = None, *, record_metrics: bool = True) -> None:
        self.settings = settings or ExtractionSettings()
        self.record_metrics = record_metrics
        self.preprocessor = HTMLPreprocessor(self.settings.html_parser)
        self.extractor_manager = ExtractorManager(self.settings)
        self.metadata_extractor = MetadataExtractor(self.settings, record_metrics=record_metrics)

    def _preprocess(self, html: str) -> str:
        try:
            return self.preprocessor.process(html)
        except Exception as e:
            logger.warning("Preprocessing failed, using raw HTML", error=str(e), error_type=type(e).__name__)
            return html

    def extract(self, html: str, base_url: str) -> ExtractedDocument:
        """
        Extract a clean, scored document from one HTML page.

        Args:
            html: Decoded HTML of the page
            base_url: Absolute URL of the page, used to resolve relative links

        Returns:
            ExtractedDocument with empty warnings
        """
        start_time = time.perf_counter()
        with bound_contextvars(url=base_url):
            preprocessed = self._preprocess(html)
            selection = self.extractor_manager.extract_text(preprocessed, base_url)
            metadata = self.metadata_extractor.extract(html, base_url)
            document = assemble_document(base_url, html, selection.text, metadata)

            duration = time.perf_counter() - start_time
            if self.record_metrics:
                record_extraction(selection.strategy, duration, document.extraction_score)

            logger.info(
                "Extraction completed",
                title=document.title,
                strategy=selection.strategy,
                word_count=document.word_count,
                score=document.extraction_score,
                duration=duration,
            )
        return document

    async def aextract(self, html: str, base_url: str) -> ExtractedDocument:
        """Run ``extract`` in a worker thread so the event loop stays free."""
        return await asyncio.to_thread(self.extract, html, base_url)


@lru_cache(maxsize=1)
def default_pipeline() -> DocumentPipeline:
    """Pipeline built from the global settings, created on first use."""
    return DocumentPipeline(settings.extraction, record_metrics=settings.monitoring.metrics_enabled)


def extract(html: str, base_url: str) -> ExtractedDocument:
    """Extract a document with the default pipeline."""
    return default_pipeline().extract(html, base_url)


async def aextract(html: str, base_url: str) -> ExtractedDocument:
    """Async variant of ``extract``."""
    return await default_pipeline().aextract(html, base_url)
