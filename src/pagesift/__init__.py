"""
pagesift - clean, scored, structured documents from raw HTML.

Quick start::

    import pagesift

    document = pagesift.extract(html, "https://example.com/post")
    print(document.title, document.word_count, document.extraction_score)
"""

__version__ = "0.1.0"

from .exceptions import ConfigurationError, InvalidBaseURLError, PagesiftError
from .extractor.models import Candidate, CodeBlock, ExtractedDocument, Heading, Image, Link
from .formatter import DisplayDocument, annotate, render_json, render_text
from .pipeline import DocumentPipeline, aextract, extract

__all__ = [
    "__version__",
    "Candidate",
    "CodeBlock",
    "ConfigurationError",
    "DisplayDocument",
    "DocumentPipeline",
    "ExtractedDocument",
    "Heading",
    "Image",
    "InvalidBaseURLError",
    "Link",
    "PagesiftError",
    "aextract",
    "annotate",
    "extract",
    "render_json",
    "render_text",
]
