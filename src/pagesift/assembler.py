"""
Builds the final ExtractedDocument from the clean text and page metadata.
"""

from __future__ import annotations

import math

from .extractor.models import ExtractedDocument
from .extractor.normalizer import count_words
from .metadata.metadata_extractor import PageMetadata
from .quality.scorer import calculate_extraction_score
from .utils.urls import host_of

WORDS_PER_MINUTE = 200


def reading_time_minutes(word_count: int) -> int:
    return max(1, math.ceil(word_count / WORDS_PER_MINUTE))


def assemble_document(url: str, raw_html: str, clean_text: str, metadata: PageMetadata) -> ExtractedDocument:
    """
    Join the extracted text with its metadata and score it.

    Args:
        url: Base URL the page was extracted for
        raw_html: The original HTML
        clean_text: Final normalized body text
        metadata: Metadata read from the original HTML

    Returns:
        A new ExtractedDocument with no warnings
    """
    word_count = count_words(clean_text)
    score = calculate_extraction_score(
        word_count=word_count,
        has_published_date=metadata.published_at is not None,
        code_block_count=len(metadata.code_blocks),
        heading_count=len(metadata.headings),
    )

    return ExtractedDocument(
        url=url,
        title=metadata.title,
        raw_html=raw_html,
        clean_text=clean_text,
        meta_description=metadata.meta_description,
        meta_keywords=metadata.meta_keywords,
        language=metadata.language,
        canonical_url=metadata.canonical_url,
        site_name=metadata.site_name,
        author=metadata.author,
        published_at=metadata.published_at,
        og_title=metadata.og_title,
        og_description=metadata.og_description,
        og_image=metadata.og_image,
        headings=tuple(metadata.headings),
        links=tuple(metadata.links),
        images=tuple(metadata.images),
        code_blocks=tuple(metadata.code_blocks),
        word_count=word_count,
        reading_time_minutes=reading_time_minutes(word_count),
        extraction_score=score,
        warnings=[],
        domain=host_of(url),
    )
