"""Unit tests for document text extraction and the local document store."""

from unittest.mock import patch

import pytest

from talentmatch.config.models import ExtractionConfig
from talentmatch.extraction import (
    DOC,
    DOCX,
    PDF,
    ExtractionFailedError,
    LocalDocumentStore,
    TextExtractor,
    UnsupportedMediaTypeError,
    canonical_media_type,
    media_type_for_filename,
)
from talentmatch.extraction.media_types import OLE2_SIGNATURE, signature_error
from tests.helpers import build_docx


class TestPDFExtraction:
    """Tests for PDF extraction."""

    @patch("talentmatch.extraction.extractor.pdf_extract_text")
    def test_extracts_pdf_text(self, mock_extract):
        """Test parsed PDF text is returned."""
        mock_extract.return_value = "Jane Smith\nPython developer"

        text = TextExtractor().extract(b"%PDF-1.7 binary body", PDF)

        assert text == "Jane Smith\nPython developer"
        mock_extract.assert_called_once()

    def test_plain_text_saved_as_pdf_falls_back(self):
        """Test plain text with a PDF media type is accepted as text."""
        content = b"Jane Smith\nSkills: Python, AWS"

        text = TextExtractor().extract(content, PDF)

        assert text == "Jane Smith\nSkills: Python, AWS"

    @patch("talentmatch.extraction.extractor.pdf_extract_text")
    def test_parser_failure_falls_back_to_text(self, mock_extract):
        """Test a parser error on text-like content uses the fallback."""
        mock_extract.side_effect = ValueError("broken xref table")

        text = TextExtractor().extract(b"%PDF-1.4 Jane Smith resume", PDF)

        assert text == "%PDF-1.4 Jane Smith resume"

    def test_binary_garbage_fails(self):
        """Test undecodable content with NUL bytes raises ExtractionFailedError."""
        with pytest.raises(ExtractionFailedError, match="PDF extraction failed"):
            TextExtractor().extract(b"\x00\x01\x02\x03garbage", PDF)

    def test_empty_content_fails(self):
        """Test empty PDF content has no fallback."""
        with pytest.raises(ExtractionFailedError):
            TextExtractor().extract(b"", PDF)


class TestWordExtraction:
    """Tests for DOCX/DOC extraction."""

    def test_extracts_docx_paragraphs(self):
        """Test paragraphs of a real DOCX file are joined with newlines."""
        content = build_docx(["Jane Smith", "Skills: Python, AWS"])

        text = TextExtractor().extract(content, DOCX)

        assert "Jane Smith\nSkills: Python, AWS" in text

    def test_docx_bytes_with_legacy_media_type(self):
        """Test DOCX bytes declared as application/msword are still read."""
        content = build_docx(["Experience", "Acme Corp"])

        text = TextExtractor().extract(content, DOC)

        assert "Acme Corp" in text

    def test_legacy_ole2_document_fails(self):
        """Test real legacy .doc bytes cannot be parsed."""
        content = OLE2_SIGNATURE + b"\x00" * 64

        with pytest.raises(ExtractionFailedError, match="DOC extraction failed"):
            TextExtractor().extract(content, DOC)

    def test_invalid_docx_fails(self):
        """Test non-ZIP content declared as DOCX fails."""
        with pytest.raises(ExtractionFailedError, match="DOC extraction failed"):
            TextExtractor().extract(b"this is not a zip archive", DOCX)


class TestExtractorGuards:
    """Tests for media type and size checks."""

    def test_unsupported_media_type(self):
        """Test an unknown media type raises UnsupportedMediaTypeError."""
        with pytest.raises(UnsupportedMediaTypeError) as exc_info:
            TextExtractor().extract(b"\x89PNG", "image/png")

        assert exc_info.value.media_type == "image/png"

    def test_missing_media_type(self):
        """Test a missing media type is unsupported."""
        with pytest.raises(UnsupportedMediaTypeError):
            TextExtractor().extract(b"text", "")

    def test_media_type_parameters_are_ignored(self):
        """Test parameters and case in the media type do not matter."""
        assert canonical_media_type("Application/PDF; charset=binary") == PDF

    def test_oversized_document(self):
        """Test documents above the configured limit are rejected."""
        extractor = TextExtractor(ExtractionConfig(max_file_size_mb=1))
        content = b"%PDF-" + b"0" * (1024 * 1024)

        with pytest.raises(ExtractionFailedError, match="limit"):
            extractor.extract(content, PDF)

    def test_signature_checks(self):
        """Test magic byte validation per media type."""
        assert signature_error(b"%PDF-1.5", PDF) is None
        assert signature_error(b"hello", PDF) == "Invalid PDF file - missing PDF signature"
        assert signature_error(b"PK\x03\x04", DOCX) == "Invalid DOCX file - missing required content"
        assert signature_error(OLE2_SIGNATURE, DOC) is None

    def test_media_type_for_filename(self):
        """Test extension lookup is case-insensitive."""
        assert media_type_for_filename("resume.PDF") == PDF
        assert media_type_for_filename("resume.docx") == DOCX
        assert media_type_for_filename("resume.txt") is None


class TestLocalDocumentStore:
    """Tests for LocalDocumentStore."""

    def test_fetch_infers_media_type(self, tmp_path):
        """Test the media type is inferred from the file extension."""
        (tmp_path / "jane.pdf").write_bytes(b"%PDF-1.4 body")

        stored = LocalDocumentStore(tmp_path).fetch("jane.pdf")

        assert stored.content == b"%PDF-1.4 body"
        assert stored.media_type == PDF

    def test_fetch_uses_declared_media_type(self, tmp_path):
        """Test a declared media type wins over the extension."""
        (tmp_path / "upload.bin").write_bytes(b"PK")

        stored = LocalDocumentStore(tmp_path).fetch("upload.bin", media_type=DOCX)

        assert stored.media_type == DOCX

    def test_fetch_rejects_path_escape(self, tmp_path):
        """Test keys resolving outside the root are refused."""
        store = LocalDocumentStore(tmp_path / "documents")

        with pytest.raises(ExtractionFailedError, match="outside document root"):
            store.fetch("../secret.pdf")

    def test_fetch_unknown_extension(self, tmp_path):
        """Test an uninferable media type raises UnsupportedMediaTypeError."""
        with pytest.raises(UnsupportedMediaTypeError):
            LocalDocumentStore(tmp_path).fetch("notes.txt")

    def test_fetch_missing_file(self, tmp_path):
        """Test a missing file raises ExtractionFailedError."""
        with pytest.raises(ExtractionFailedError, match="Failed to read document"):
            LocalDocumentStore(tmp_path).fetch("missing.pdf")
