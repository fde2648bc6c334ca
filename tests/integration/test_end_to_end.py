"""End-to-end matching workflow against a file-backed database.

Exercises ingestion, processing, Gemini analysis over a mocked HTTP session,
persistence across engine restarts and insight aggregation in one pass.
"""

import json
from unittest.mock import Mock

import pytest

from talentmatch.config.models import AppConfig, SemanticConfig
from talentmatch.domain.models import JobDescription, Resume
from talentmatch.extraction import DOCX, LocalDocumentStore
from talentmatch.insights.aggregator import NETWORK_STEP
from talentmatch.persistence import (
    JobDescriptionRepository,
    ResumeRepository,
    close_database,
    get_session,
    init_database,
)
from talentmatch.pipeline import MatchPipeline
from talentmatch.semantic import GeminiAnalyzer
from talentmatch.utils import round_half_up
from tests.helpers import build_docx

RESUME_PARAGRAPHS = [
    "Alex Rivera",
    "alex@example.com",
    "Summary",
    "Backend engineer building Python services on AWS.",
    "Experience",
    "Senior Engineer at Initech, designed Docker based deployment pipelines.",
    "Skills",
    "Python, AWS, Docker, PostgreSQL, leadership",
]


def gemini_reply(score: int) -> Mock:
    reply = json.dumps(
        {
            "matchScore": score,
            "strengths": ["Production Python experience"],
            "gaps": ["Kubernetes"],
            "assessment": "Good fit with one infrastructure gap",
        }
    )
    response = Mock()
    response.status_code = 200
    response.reason = "OK"
    response.json.return_value = {"candidates": [{"content": {"parts": [{"text": reply}]}}]}
    return response


@pytest.fixture
def database_url(tmp_path):
    """Setup test database with file storage."""
    db_url = f"sqlite:///{tmp_path / 'test_integration.db'}"
    init_database(db_url)
    yield db_url
    close_database()


@pytest.fixture
def pipeline(tmp_path, database_url):
    documents = tmp_path / "documents"
    documents.mkdir()
    (documents / "alex.docx").write_bytes(build_docx(RESUME_PARAGRAPHS))

    with get_session() as session:
        ResumeRepository(session).upsert(
            Resume(id="r-alex", name="Alex Rivera", document_key="alex.docx", media_type=DOCX)
        )
        jobs = JobDescriptionRepository(session)
        jobs.upsert(
            JobDescription(
                id="j-platform",
                title="Platform Engineer",
                company="Acme",
                description="Platform engineer with Python, AWS, Docker and Kubernetes.",
            )
        )
        jobs.upsert(
            JobDescription(
                id="j-frontend",
                title="Frontend Developer",
                company="Globex",
                description="Frontend developer skilled in React, TypeScript and CSS.",
            )
        )

    http_session = Mock()
    http_session.headers = {}
    http_session.post.side_effect = [gemini_reply(82), gemini_reply(35)]
    analyzer = GeminiAnalyzer("test-key", SemanticConfig(), session=http_session)

    return MatchPipeline(
        AppConfig(), analyzer=analyzer, document_source=LocalDocumentStore(documents)
    )


class TestEndToEndMatching:
    """Test the full resume to insights workflow."""

    def test_process_match_reload_and_summarize(self, pipeline, database_url):
        processed = pipeline.process_resume("r-alex")
        assert "experience" in processed.sections
        assert "python" in processed.keywords

        pipeline.process_job("j-platform")
        pipeline.process_job("j-frontend")

        platform = pipeline.match("r-alex", "j-platform")
        frontend = pipeline.match("r-alex", "j-frontend")

        assert platform.details.metadata.semantic_enabled is True
        assert platform.details.metadata.semantic_score == 82
        expected = round_half_up(platform.details.lexical.score * 0.4 + 82 * 0.6)
        assert platform.score == platform.details.combined_score == expected
        assert "Production Python experience" in platform.details.insights.top_strengths
        assert "Kubernetes" in platform.details.insights.critical_gaps
        assert platform.score > frontend.score

        # Restart the engine; records must survive
        close_database()
        init_database(database_url)

        stored = pipeline.matches_for_resume("r-alex")
        assert {r.id for r in stored} == {platform.id, frontend.id}
        reloaded = next(r for r in stored if r.id == platform.id)
        assert reloaded.details == platform.details
        assert reloaded.created_at == platform.created_at

        top = pipeline.top_matches_for_job("j-platform")
        assert [r.id for r in top] == [platform.id]

        insights = pipeline.resume_insights("r-alex")
        assert insights.total_matches == 2
        assert insights.average_score == round_half_up((platform.score + frontend.score) / 2)
        assert insights.best_match.job_id == "j-platform"
        assert insights.best_match.job_title == "Platform Engineer"
        assert insights.best_match.company == "Acme"
        assert "Kubernetes" in insights.improvement_areas
        assert insights.next_steps[-1] == NETWORK_STEP
