"""Unit tests for normalization, section parsing and keyword extraction."""

import pytest

from talentmatch.config.models import AppConfig, KeywordConfig
from talentmatch.processing import DocumentProcessor, KeywordExtractor, SectionParser
from talentmatch.processing.keywords import categorize, filter_category
from talentmatch.processing.normalizer import count_words, normalize_text

SAMPLE_RESUME = (
    "Jane Smith\n"
    "Contact: jane@example.com\n"
    "\n"
    "Summary\n"
    "Backend engineer building APIs.\n"
    "\n"
    "Experience\n"
    "Acme Corp 2019-2023 Python services\n"
    "\n"
    "Education\n"
    "BSc Computer Science, State University\n"
    "\n"
    "Skills\n"
    "Python, Docker, AWS"
)


class TestNormalizeText:
    """Tests for normalize_text."""

    def test_unifies_line_endings(self):
        """Test CRLF and lone CR become LF."""
        assert normalize_text("one\r\ntwo\rthree") == "one\ntwo\nthree"

    def test_strips_disallowed_characters(self):
        """Test symbols outside the allowed set are removed."""
        assert normalize_text("Python & AWS! (5 yrs) - jane@example.com") == (
            "Python AWS (5 yrs) - jane@example.com"
        )

    def test_collapses_blank_lines(self):
        """Test three or more newlines collapse to two."""
        assert normalize_text("Summary\n\n\n\n\nSkills") == "Summary\n\nSkills"

    def test_collapses_horizontal_whitespace(self):
        """Test runs of spaces and tabs collapse to one space."""
        assert normalize_text("Python  \t  AWS") == "Python AWS"

    def test_trims_outer_whitespace(self):
        """Test leading and trailing whitespace is removed."""
        assert normalize_text("  \n Python \n ") == "Python"

    def test_empty_input(self):
        """Test None and empty input normalize to an empty string."""
        assert normalize_text("") == ""
        assert normalize_text(None) == ""

    @pytest.mark.parametrize(
        "raw",
        [
            SAMPLE_RESUME,
            "Skills:\r\n\r\n\r\n* Python   & AWS  ",
            "a  *  b\n\n\n\n# c",
            "\t\tLead    Engineer • Go / Rust\r\r\r\rRemote",
            "  %%%  ",
        ],
    )
    def test_is_idempotent(self, raw):
        """Test normalizing twice gives the same result as normalizing once."""
        once = normalize_text(raw)
        assert normalize_text(once) == once

    def test_count_words(self):
        """Test word count splits on any whitespace."""
        assert count_words("Python developer\nwith  AWS") == 4
        assert count_words("") == 0


class TestSectionParser:
    """Tests for SectionParser."""

    def test_extracts_all_sections(self):
        """Test every header in a well-formed resume is found."""
        sections = SectionParser().extract_sections(SAMPLE_RESUME)

        assert set(sections) == {"contact", "summary", "experience", "education", "skills"}
        assert sections["contact"] == "Contact: jane@example.com"
        assert sections["summary"] == "Summary\nBackend engineer building APIs."
        assert sections["experience"] == "Experience\nAcme Corp 2019-2023 Python services"
        assert sections["education"] == "Education\nBSc Computer Science, State University"
        assert sections["skills"] == "Skills\nPython, Docker, AWS"

    def test_missing_sections_are_absent(self):
        """Test sections whose header does not appear are left out."""
        sections = SectionParser().extract_sections("Skills\nPython, Go")

        assert list(sections) == ["skills"]

    def test_empty_text(self):
        """Test empty text yields no sections."""
        assert SectionParser().extract_sections("") == {}

    def test_text_without_headers(self):
        """Test text with no header words yields no sections."""
        assert SectionParser().extract_sections("Python developer from Berlin") == {}


class TestKeywordExtractor:
    """Tests for KeywordExtractor."""

    def test_category_terms_come_first(self):
        """Test category matches precede generic terms."""
        keywords = KeywordExtractor().extract_keywords(
            "Senior Python developer with AWS and Docker experience"
        )

        assert keywords == ["python", "aws", "docker", "developer", "senior", "experience"]

    def test_keywords_are_lowercase_and_unique(self):
        """Test duplicates in different case collapse to one keyword."""
        keywords = KeywordExtractor().extract_keywords("Python python PYTHON Kubernetes")

        assert keywords == ["python", "kubernetes"]

    def test_stop_words_and_short_words_are_ignored(self):
        """Test stop words and words below min_word_length are dropped."""
        keywords = KeywordExtractor().extract_keywords("the and of to at an ok hi")

        assert keywords == []

    def test_output_is_capped(self):
        """Test no more than max_keywords keywords are returned."""
        text = " ".join(f"term{i:03d}" for i in range(120))

        keywords = KeywordExtractor().extract_keywords(text)

        assert len(keywords) == 50
        assert len(set(keywords)) == 50
        assert keywords[0] == "term000"

    def test_cap_is_configurable(self):
        """Test max_keywords is read from configuration."""
        extractor = KeywordExtractor(KeywordConfig(max_keywords=3))

        assert extractor.extract_keywords("alpha bravo charlie delta echo") == [
            "alpha",
            "bravo",
            "charlie",
        ]

    def test_extra_stop_words(self):
        """Test configured stop words are excluded."""
        extractor = KeywordExtractor(KeywordConfig(extra_stop_words=["Acme"]))

        assert "acme" not in extractor.extract_keywords("Acme Corp hires engineers")

    def test_empty_text(self):
        """Test empty text yields no keywords."""
        assert KeywordExtractor().extract_keywords("") == []

    def test_deterministic(self):
        """Test identical input produces identical output."""
        extractor = KeywordExtractor()
        assert extractor.extract_keywords(SAMPLE_RESUME) == extractor.extract_keywords(
            SAMPLE_RESUME
        )

    def test_categorize(self):
        """Test keywords map to their category."""
        assert categorize("python") == "programming_languages"
        assert categorize("kubernetes") == "technologies"
        assert categorize("leadership") == "soft_skills"
        assert categorize("architect") == "job_titles"
        assert categorize("berlin") is None

    def test_filter_category(self):
        """Test filtering keeps input order."""
        keywords = ["docker", "berlin", "python", "teamwork"]

        assert filter_category(keywords, ["programming_languages", "technologies"]) == [
            "docker",
            "python",
        ]


class TestDocumentProcessor:
    """Tests for DocumentProcessor.process_text."""

    def test_process_text(self):
        """Test processing derives text, word count, sections and keywords."""
        document = DocumentProcessor(AppConfig()).process_text(SAMPLE_RESUME + "\r\n\r\n\r\n")

        assert document.text == SAMPLE_RESUME
        assert document.word_count == count_words(SAMPLE_RESUME)
        assert "skills" in document.sections
        assert document.keywords[:3] == ["python", "docker", "aws"]

    def test_process_empty_text(self):
        """Test empty input produces an empty but valid document."""
        document = DocumentProcessor().process_text("")

        assert document.text == ""
        assert document.word_count == 0
        assert document.sections == {}
        assert document.keywords == []
