"""
Page metadata extraction: titles, meta tags, Open Graph, language and
structured content (headings, links, images, code blocks).
"""

from .metadata_extractor import MetadataExtractor, PageMetadata
from .structured_data_parser import DEFAULT_TITLE, MetaTagParser, OpenGraphParser

__all__ = ["DEFAULT_TITLE", "MetaTagParser", "MetadataExtractor", "OpenGraphParser", "PageMetadata"]
