"""
pagesift body-text extraction.

Four strategies compete for the page's main text:
1. Structural: an explicit ``#content``/``main``/``article`` container
2. Readability: readability-lxml content-density scoring
3. Heuristic: the wordiest match among common article selectors
4. Fallback: noise-filtered walk over ``<body>``

Also provides the HTML preprocessor, the text normalizer and the
processors for headings, links, images and code blocks.
"""

from .content_processors import CodeProcessor, HeadingProcessor, ImageProcessor, LinkProcessor
from .fallback_extractor import FallbackExtractor
from .heuristic_extractor import HeuristicExtractor
from .language_detector import LanguageDetector
from .manager import ExtractorManager
from .models import Candidate, CodeBlock, ExtractedDocument, Heading, Image, Link
from .normalizer import count_words, normalize_text
from .preprocessor import HTMLPreprocessor, preprocess_html
from .protocols import Extractor
from .readability_extractor import ReadabilityExtractor
from .selector import choose_candidate
from .structural_extractor import StructuralExtractor

__all__ = [
    "Candidate",
    "CodeBlock",
    "CodeProcessor",
    "ExtractedDocument",
    "Extractor",
    "ExtractorManager",
    "FallbackExtractor",
    "HTMLPreprocessor",
    "Heading",
    "HeadingProcessor",
    "HeuristicExtractor",
    "Image",
    "ImageProcessor",
    "LanguageDetector",
    "Link",
    "LinkProcessor",
    "ReadabilityExtractor",
    "StructuralExtractor",
    "choose_candidate",
    "count_words",
    "normalize_text",
    "preprocess_html",
]
