"""Text normalization, section parsing and keyword extraction.

This module provides:
- normalize_text: canonical cleaning of extracted text
- SectionParser: heuristic resume section detection
- KeywordExtractor: bounded keyword sets from category patterns and generic terms
- DocumentProcessor: the ingestion stages chained into a ProcessedDocument
"""

from .keywords import KEYWORD_CATEGORIES, KeywordExtractor, categorize, filter_category
from .normalizer import count_words, normalize_text
from .sections import SectionParser
from .service import DocumentProcessor

__all__ = [
    "DocumentProcessor",
    "KeywordExtractor",
    "SectionParser",
    "KEYWORD_CATEGORIES",
    "categorize",
    "filter_category",
    "count_words",
    "normalize_text",
]
