"""Text extraction from PDF and Word documents.

Each supported media type has its own extraction routine. PDF extraction has
one escape hatch: sample uploads are sometimes plain text saved with a .pdf
name, so when PDF parsing fails the bytes are accepted as UTF-8 text provided
the decoded text is non-empty and free of NUL bytes. Anything else that fails
raises ExtractionFailedError.
"""

import io
import logging
from typing import Callable, Dict, Optional

from docx import Document
from pdfminer.high_level import extract_text as pdf_extract_text

from talentmatch.config.models import ExtractionConfig
from talentmatch.logging import get_logger

from . import media_types
from .exceptions import ExtractionFailedError, UnsupportedMediaTypeError

logger = get_logger(__name__, component="extraction")


class TextExtractor:
    """Converts raw document bytes plus a declared media type into plain text."""

    def __init__(
        self,
        config: Optional[ExtractionConfig] = None,
        logger_instance: Optional[logging.Logger] = None,
    ):
        self.config = config or ExtractionConfig()
        self.logger = logger_instance or logger
        self._routines: Dict[str, Callable[[bytes], str]] = {
            media_types.PDF: self._extract_pdf,
            media_types.DOC: self._extract_word,
            media_types.DOCX: self._extract_word,
        }

    def extract(self, content: bytes, media_type: str) -> str:
        """Extract plain text from a document.

        Args:
            content: Raw document bytes
            media_type: Declared media type (e.g. "application/pdf")

        Returns:
            Extracted text, not yet normalized

        Raises:
            UnsupportedMediaTypeError: If media_type has no extraction routine
            ExtractionFailedError: If extraction fails with no viable fallback
        """
        canonical = media_types.canonical_media_type(media_type)
        routine = self._routines.get(canonical)
        if routine is None:
            raise UnsupportedMediaTypeError(
                f"Unsupported file type for text extraction: {media_type or '<none>'}",
                media_type=media_type,
            )

        if len(content) > self.config.max_file_size_bytes:
            raise ExtractionFailedError(
                f"Document is {len(content)} bytes, limit is "
                f"{self.config.max_file_size_bytes} bytes",
                media_type=canonical,
            )

        text = routine(content)

        self.logger.debug(
            "Extracted document text",
            extra={
                "event": "extraction.document.extracted",
                "media_type": canonical,
                "byte_count": len(content),
                "char_count": len(text),
            },
        )
        return text

    def _extract_pdf(self, content: bytes) -> str:
        try:
            if self.config.validate_signatures:
                reason = media_types.signature_error(content, media_types.PDF)
                if reason:
                    raise ValueError(reason)
            return pdf_extract_text(io.BytesIO(content))
        except Exception as e:
            fallback = self._plain_text_fallback(content)
            if fallback is None:
                raise ExtractionFailedError(
                    f"PDF extraction failed: {e}", media_type=media_types.PDF
                ) from e

            self.logger.warning(
                f"PDF parsing failed, treating content as plain text: {e}",
                extra={
                    "event": "extraction.pdf.plain_text_fallback",
                    "error_type": type(e).__name__,
                },
            )
            return fallback

    def _extract_word(self, content: bytes) -> str:
        if self.config.validate_signatures:
            # python-docx only reads the OOXML format, so legacy .doc uploads
            # must already be DOCX bytes behind an old media type
            reason = media_types.signature_error(content, media_types.DOCX)
            if reason:
                raise ExtractionFailedError(
                    f"DOC extraction failed: {reason}", media_type=media_types.DOCX
                )

        try:
            document = Document(io.BytesIO(content))
        except Exception as e:
            raise ExtractionFailedError(
                f"DOC extraction failed: {e}", media_type=media_types.DOCX
            ) from e

        lines = [paragraph.text for paragraph in document.paragraphs]
        for table in document.tables:
            for row in table.rows:
                lines.append(" ".join(cell.text for cell in row.cells))
        return "\n".join(lines)

    @staticmethod
    def _plain_text_fallback(content: bytes) -> Optional[str]:
        """Decode bytes as UTF-8 text if they plausibly are text.

        Returns:
            Decoded text, or None if it is empty or contains NUL bytes
        """
        text = content.decode("utf-8", errors="replace")
        if not text.strip() or "\x00" in text:
            return None
        return text
