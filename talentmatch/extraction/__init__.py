"""Text extraction from uploaded resume and job documents.

This module provides:
- TextExtractor: PDF/Word byte stream to plain text
- DocumentSource / LocalDocumentStore: fetch document bytes by opaque key
- Media type helpers and extraction exceptions
"""

from .exceptions import ExtractionError, ExtractionFailedError, UnsupportedMediaTypeError
from .extractor import TextExtractor
from .media_types import (
    DOC,
    DOCX,
    PDF,
    SUPPORTED_MEDIA_TYPES,
    canonical_media_type,
    media_type_for_filename,
)
from .store import DocumentSource, LocalDocumentStore, StoredDocument

__all__ = [
    "TextExtractor",
    "DocumentSource",
    "LocalDocumentStore",
    "StoredDocument",
    "ExtractionError",
    "ExtractionFailedError",
    "UnsupportedMediaTypeError",
    "PDF",
    "DOC",
    "DOCX",
    "SUPPORTED_MEDIA_TYPES",
    "canonical_media_type",
    "media_type_for_filename",
]
