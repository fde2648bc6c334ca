"""Assembly of persistable match records."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

from talentmatch.domain.models import MatchAnalysis, MatchRecord
from talentmatch.utils.timestamps import utc_now


def build_record(
    resume_id: str,
    job_id: str,
    analysis: MatchAnalysis,
    record_id: Optional[str] = None,
    created_at: Optional[datetime] = None,
) -> MatchRecord:
    """Build an immutable MatchRecord from a fused analysis.

    Pure assembly: nothing is stored. The analysis is deep-copied so later
    changes to the caller's object cannot leak into the record.

    Args:
        resume_id: Opaque resume identifier
        job_id: Opaque job description identifier
        analysis: Fusion output for the pair
        record_id: Explicit record id (random hex UUID when omitted)
        created_at: Creation time (now when omitted)

    Returns:
        MatchRecord whose score equals analysis.combined_score
    """
    return MatchRecord(
        id=record_id or uuid4().hex,
        resume_id=resume_id,
        job_id=job_id,
        score=analysis.combined_score,
        details=analysis.model_copy(deep=True),
        created_at=created_at or utc_now(),
    )


def summarize_record(record: MatchRecord) -> dict:
    """Flatten a record into a small dict for logs and API listings."""
    details = record.details
    return {
        "id": record.id,
        "resume_id": record.resume_id,
        "job_id": record.job_id,
        "score": record.score,
        "lexical_score": details.metadata.lexical_score,
        "semantic_score": details.metadata.semantic_score,
        "semantic_enabled": details.metadata.semantic_enabled,
        "confidence": details.insights.confidence,
        "matched_keyword_count": len(details.lexical.matched_keywords),
        "missing_keyword_count": len(details.lexical.missing_keywords),
        "created_at": record.created_at.isoformat(),
    }
