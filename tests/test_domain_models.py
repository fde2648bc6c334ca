"""Unit tests for domain models."""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from talentmatch.domain import (
    Confidence,
    JobDescription,
    MatchInsights,
    MatchRecord,
    ProcessedDocument,
    Resume,
    SemanticAnalysis,
)
from tests.helpers import build_analysis


class TestProcessedDocument:
    """Tests for ProcessedDocument model."""

    def test_keywords_lowercased_and_deduplicated(self):
        doc = ProcessedDocument(
            text="python developer", word_count=2, keywords=["Python", "python", "SQL", " "]
        )

        assert doc.keywords == ["python", "sql"]

    def test_known_sections_accepted(self):
        doc = ProcessedDocument(
            text="skills python", word_count=2, sections={"skills": "python"}
        )

        assert doc.sections == {"skills": "python"}

    def test_unknown_section_rejected(self):
        with pytest.raises(ValidationError, match="Unknown section names"):
            ProcessedDocument(text="x", word_count=1, sections={"hobbies": "chess"})

    def test_negative_word_count_rejected(self):
        with pytest.raises(ValidationError):
            ProcessedDocument(text="", word_count=-1)

    def test_frozen(self):
        doc = ProcessedDocument(text="python", word_count=1)

        with pytest.raises(ValidationError):
            doc.text = "changed"


class TestSemanticAnalysis:
    """Tests for coercion of provider replies."""

    def test_accepts_camel_case_score(self):
        analysis = SemanticAnalysis.model_validate({"matchScore": 72})

        assert analysis.match_score == 72
        assert analysis.strengths == []
        assert analysis.assessment == ""

    def test_accepts_field_name(self):
        assert SemanticAnalysis(match_score=40).match_score == 40

    @pytest.mark.parametrize("raw,expected", [(120, 100), (-5, 0), (72.5, 73), ("64", 64)])
    def test_score_clamped_and_rounded(self, raw, expected):
        assert SemanticAnalysis.model_validate({"matchScore": raw}).match_score == expected

    @pytest.mark.parametrize("raw", ["high", None, True, [80]])
    def test_non_numeric_score_rejected(self, raw):
        with pytest.raises(ValidationError):
            SemanticAnalysis.model_validate({"matchScore": raw})

    def test_missing_score_rejected(self):
        with pytest.raises(ValidationError):
            SemanticAnalysis.model_validate({"strengths": ["Python"]})

    def test_lists_coerced(self):
        analysis = SemanticAnalysis.model_validate(
            {
                "matchScore": 50,
                "strengths": "Strong Python background",
                "gaps": ["Kubernetes", "", None, " Terraform "],
                "assessment": None,
            }
        )

        assert analysis.strengths == ["Strong Python background"]
        assert analysis.gaps == ["Kubernetes", "Terraform"]
        assert analysis.assessment == ""

    def test_serializes_by_field_name_and_alias(self):
        analysis = SemanticAnalysis(match_score=55)

        assert analysis.model_dump()["match_score"] == 55
        assert analysis.model_dump(by_alias=True)["matchScore"] == 55


class TestMatchInsights:
    def test_confidence_stored_as_value(self):
        insights = MatchInsights(confidence=Confidence.HIGH)

        assert insights.confidence == "high"

    def test_default_confidence(self):
        assert MatchInsights().confidence == "medium"


class TestMatchRecord:
    """Tests for MatchRecord model."""

    def test_naive_created_at_becomes_utc(self):
        record = MatchRecord(
            id="m1",
            resume_id="r1",
            job_id="j1",
            score=60,
            details=build_analysis(60),
            created_at=datetime(2024, 5, 1, 9, 0, 0),
        )

        assert record.created_at.tzinfo == timezone.utc

    def test_created_at_converted_to_utc(self):
        plus_two = timezone(timedelta(hours=2))
        record = MatchRecord(
            id="m1",
            resume_id="r1",
            job_id="j1",
            score=60,
            details=build_analysis(60),
            created_at=datetime(2024, 5, 1, 11, 0, 0, tzinfo=plus_two),
        )

        assert record.created_at.hour == 9

    def test_score_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            MatchRecord(id="m1", resume_id="r1", job_id="j1", score=101, details=build_analysis(60))

    def test_empty_ids_rejected(self):
        with pytest.raises(ValidationError):
            MatchRecord(id="m1", resume_id="", job_id="j1", score=50, details=build_analysis(50))

    def test_immutable(self):
        record = MatchRecord(
            id="m1", resume_id="r1", job_id="j1", score=50, details=build_analysis(50)
        )

        with pytest.raises(ValidationError):
            record.score = 90

    def test_json_round_trip_keeps_details(self):
        record = MatchRecord(
            id="m1",
            resume_id="r1",
            job_id="j1",
            score=65,
            details=build_analysis(65, top_strengths=["Python"], critical_gaps=["Go"]),
        )

        restored = MatchRecord.model_validate_json(record.model_dump_json())

        assert restored == record


class TestEntities:
    def test_resume_is_processed(self):
        resume = Resume(id="r1")
        assert resume.is_processed is False

        resume = Resume(id="r1", processed=ProcessedDocument(text="python", word_count=1))
        assert resume.is_processed is True

    def test_resume_with_empty_processed_text_is_unprocessed(self):
        resume = Resume(id="r1", processed=ProcessedDocument(text="", word_count=0))

        assert resume.is_processed is False

    def test_job_text_prefers_processed(self):
        job = JobDescription(
            id="j1",
            description="Senior Python Engineer!",
            processed=ProcessedDocument(text="senior python engineer", word_count=3),
        )

        assert job.text == "senior python engineer"

    def test_job_text_falls_back_to_description(self):
        job = JobDescription(id="j1", description="Senior Python Engineer")

        assert job.text == "Senior Python Engineer"
