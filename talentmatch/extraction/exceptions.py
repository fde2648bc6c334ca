"""Exceptions raised while turning uploaded documents into text."""

from typing import Optional


class ExtractionError(Exception):
    """Base exception for all text extraction errors.

    Extraction errors are fatal to the single extraction call and are
    surfaced to the caller unchanged.
    """

    def __init__(self, message: str, media_type: Optional[str] = None) -> None:
        super().__init__(message)
        self.media_type = media_type


class UnsupportedMediaTypeError(ExtractionError):
    """Extraction requested for a media type with no extraction routine."""

    pass


class ExtractionFailedError(ExtractionError):
    """Extraction was attempted and failed with no viable fallback.

    Examples:
    - Corrupt DOCX archive
    - Binary content mislabeled as PDF (contains NUL bytes)
    - Document larger than the configured size limit
    """

    pass
