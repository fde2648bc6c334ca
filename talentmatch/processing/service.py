"""Document processing service: raw text or bytes to ProcessedDocument."""

import logging
from typing import Optional

from talentmatch.config.models import AppConfig
from talentmatch.domain.models import ProcessedDocument
from talentmatch.extraction.extractor import TextExtractor
from talentmatch.logging import get_logger

from .keywords import KeywordExtractor
from .normalizer import count_words, normalize_text
from .sections import SectionParser

logger = get_logger(__name__, component="processing")


class DocumentProcessor:
    """Runs the ingestion stages for one document.

    Responsibilities:
    - Extract text from uploaded bytes (PDF/Word)
    - Normalize the text
    - Count words, detect sections and extract keywords
    """

    def __init__(
        self,
        app_config: Optional[AppConfig] = None,
        extractor: Optional[TextExtractor] = None,
        keyword_extractor: Optional[KeywordExtractor] = None,
        section_parser: Optional[SectionParser] = None,
        logger_instance: Optional[logging.Logger] = None,
    ):
        config = app_config or AppConfig()
        self.extractor = extractor or TextExtractor(config.extraction)
        self.keyword_extractor = keyword_extractor or KeywordExtractor(config.keywords)
        self.section_parser = section_parser or SectionParser()
        self.logger = logger_instance or logger

    def process_file(self, content: bytes, media_type: str) -> ProcessedDocument:
        """Extract and process an uploaded document.

        Raises:
            UnsupportedMediaTypeError: If media_type is not supported
            ExtractionFailedError: If extraction fails with no fallback
        """
        raw_text = self.extractor.extract(content, media_type)
        return self.process_text(raw_text)

    def process_text(self, raw_text: str) -> ProcessedDocument:
        """Normalize text and derive word count, sections and keywords.

        Args:
            raw_text: Extracted or user-supplied text

        Returns:
            Immutable ProcessedDocument
        """
        text = normalize_text(raw_text)
        document = ProcessedDocument(
            text=text,
            word_count=count_words(text),
            sections=self.section_parser.extract_sections(text),
            keywords=self.keyword_extractor.extract_keywords(text),
        )

        if not text:
            self.logger.warning(
                "Document produced no text after normalization",
                extra={"event": "processing.document.empty"},
            )

        self.logger.info(
            "Processed document",
            extra={
                "event": "processing.document.processed",
                "word_count": document.word_count,
                "section_count": len(document.sections),
                "keyword_count": len(document.keywords),
            },
        )
        return document
