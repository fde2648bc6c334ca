"""Builders for documents, analyses and match records used across tests."""

import io
from datetime import datetime
from typing import List, Optional

from docx import Document

from talentmatch.domain.models import (
    LexicalAnalysis,
    MatchAnalysis,
    MatchInsights,
    MatchMetadata,
    MatchRecord,
    SemanticAnalysis,
)
from talentmatch.matching.records import build_record


def build_docx(paragraphs: List[str]) -> bytes:
    """Create a real DOCX file in memory."""
    document = Document()
    for paragraph in paragraphs:
        document.add_paragraph(paragraph)
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


def build_analysis(
    score: int = 60,
    top_strengths: Optional[List[str]] = None,
    critical_gaps: Optional[List[str]] = None,
) -> MatchAnalysis:
    """Minimal MatchAnalysis with the given combined score and insight terms."""
    return MatchAnalysis(
        combined_score=score,
        lexical=LexicalAnalysis(score=score),
        semantic=SemanticAnalysis(match_score=score, assessment="Reasonable fit"),
        insights=MatchInsights(
            top_strengths=top_strengths or [],
            critical_gaps=critical_gaps or [],
            assessment="Reasonable fit",
            confidence="medium",
        ),
        metadata=MatchMetadata(
            processing_time_ms=5,
            semantic_enabled=True,
            lexical_score=score,
            semantic_score=score,
        ),
    )


def build_record_for(
    resume_id: str = "resume-1",
    job_id: str = "job-1",
    score: int = 60,
    top_strengths: Optional[List[str]] = None,
    critical_gaps: Optional[List[str]] = None,
    created_at: Optional[datetime] = None,
    record_id: Optional[str] = None,
) -> MatchRecord:
    return build_record(
        resume_id,
        job_id,
        build_analysis(score, top_strengths, critical_gaps),
        record_id=record_id,
        created_at=created_at,
    )
