"""Core domain models for documents, analyses, match records and insights.

This module defines the data structures used throughout the engine:
- ProcessedDocument: normalized text plus sections and keywords
- LexicalAnalysis: keyword-overlap score with matched/missing terms
- SemanticAnalysis: result returned by the external semantic provider
- MatchAnalysis: fused output of lexical and semantic analysis
- MatchRecord: immutable persisted outcome of one match
- ResumeInsights: patterns mined across a resume's match history
- Resume / JobDescription: entities read from persistence
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from talentmatch.utils.scoring import clamp_score
from talentmatch.utils.timestamps import ensure_utc, utc_now


class SectionName(str, Enum):
    """Resume sections recognized by the section parser."""

    CONTACT = "contact"
    SUMMARY = "summary"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILLS = "skills"


class Confidence(str, Enum):
    """Confidence level attached to a fused match analysis."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


def _dedupe_lower(terms: List[str]) -> List[str]:
    """Lower-case terms and drop duplicates, keeping first-seen order."""
    return list(dict.fromkeys(t.strip().lower() for t in terms if t and t.strip()))


def _string_list(v: Any) -> List[str]:
    """Coerce a loosely-typed value into a list of non-empty strings."""
    if v is None:
        return []
    if isinstance(v, str):
        v = [v]
    return [str(item).strip() for item in v if item is not None and str(item).strip()]


class ProcessedDocument(BaseModel):
    """Normalized text of an uploaded document with derived features.

    Created once at ingestion time and never modified afterwards.
    """

    text: str = Field(..., description="Normalized plain text")
    word_count: int = Field(..., ge=0, description="Whitespace-separated tokens in text")
    sections: Dict[str, str] = Field(
        default_factory=dict, description="Detected sections; absent keys were not found"
    )
    keywords: List[str] = Field(
        default_factory=list, description="Lower-cased, de-duplicated salient terms"
    )

    @field_validator("sections")
    @classmethod
    def validate_section_names(cls, v: Dict[str, str]) -> Dict[str, str]:
        allowed = {section.value for section in SectionName}
        unknown = sorted(set(v) - allowed)
        if unknown:
            raise ValueError(f"Unknown section names: {unknown}")
        return v

    @field_validator("keywords")
    @classmethod
    def normalize_keywords(cls, v: List[str]) -> List[str]:
        return _dedupe_lower(v)

    model_config = ConfigDict(frozen=True)


class LexicalAnalysis(BaseModel):
    """Keyword-overlap comparison between a resume and a job description."""

    score: int = Field(..., ge=0, le=100, description="Jaccard similarity as a percentage")
    matched_keywords: List[str] = Field(
        default_factory=list, description="Job keywords also present in the resume"
    )
    missing_keywords: List[str] = Field(
        default_factory=list, description="Job keywords absent from the resume (truncated)"
    )
    strengths: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)


class SemanticAnalysis(BaseModel):
    """Judgement returned by the external semantic analysis provider.

    Accepts the provider's camelCase ``matchScore`` key. Scores outside
    [0, 100] are clamped and fractional scores are rounded.
    """

    match_score: int = Field(..., alias="matchScore", ge=0, le=100)
    strengths: List[str] = Field(default_factory=list)
    gaps: List[str] = Field(default_factory=list)
    assessment: str = ""

    @field_validator("match_score", mode="before")
    @classmethod
    def coerce_score(cls, v: Any) -> int:
        if isinstance(v, bool):
            raise ValueError("matchScore must be a number")
        try:
            return clamp_score(float(v))
        except (TypeError, ValueError) as e:
            raise ValueError(f"matchScore must be a number, got: {v!r}") from e

    @field_validator("strengths", "gaps", mode="before")
    @classmethod
    def coerce_lists(cls, v: Any) -> List[str]:
        return _string_list(v)

    @field_validator("assessment", mode="before")
    @classmethod
    def coerce_assessment(cls, v: Any) -> str:
        return "" if v is None else str(v).strip()

    model_config = ConfigDict(populate_by_name=True)


class MatchInsights(BaseModel):
    """Merged narrative built from lexical and semantic analyses."""

    top_strengths: List[str] = Field(default_factory=list)
    critical_gaps: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    assessment: str = ""
    confidence: Confidence = Confidence.MEDIUM

    model_config = ConfigDict(use_enum_values=True, validate_default=True)


class MatchMetadata(BaseModel):
    """Bookkeeping recorded alongside a fused analysis."""

    processing_time_ms: int = Field(0, ge=0)
    semantic_enabled: bool
    lexical_score: int = Field(..., ge=0, le=100)
    semantic_score: int = Field(..., ge=0, le=100)


class MatchAnalysis(BaseModel):
    """Fusion output for one resume/job pair (not persisted on its own)."""

    combined_score: int = Field(..., ge=0, le=100)
    lexical: LexicalAnalysis
    semantic: SemanticAnalysis
    insights: MatchInsights
    metadata: MatchMetadata


class MatchRecord(BaseModel):
    """Persisted, immutable outcome of one match computation.

    Re-running a match creates a new record; existing records are never
    updated in place.
    """

    id: str = Field(..., min_length=1)
    resume_id: str = Field(..., min_length=1)
    job_id: str = Field(..., min_length=1)
    score: int = Field(..., ge=0, le=100, description="combined_score at creation time")
    details: MatchAnalysis
    created_at: datetime = Field(default_factory=utc_now)

    @field_validator("created_at")
    @classmethod
    def ensure_created_at_utc(cls, v: datetime) -> datetime:
        return ensure_utc(v)

    model_config = ConfigDict(frozen=True)


class BestMatch(BaseModel):
    """Highest-scoring match in a resume's history."""

    score: int = Field(..., ge=0, le=100)
    job_id: Optional[str] = None
    job_title: str = "Unknown"
    company: str = "Unknown"


class ResumeInsights(BaseModel):
    """Patterns mined across every match record of one resume.

    Recomputed on every request; never persisted.
    """

    resume_id: Optional[str] = None
    total_matches: int = Field(0, ge=0)
    average_score: int = Field(0, ge=0, le=100)
    best_match: Optional[BestMatch] = None
    common_strengths: List[str] = Field(default_factory=list)
    improvement_areas: List[str] = Field(default_factory=list)
    career_recommendations: List[str] = Field(default_factory=list)
    next_steps: List[str] = Field(default_factory=list)
    message: Optional[str] = Field(None, description="Set only for the empty state")


class Resume(BaseModel):
    """Resume entity as stored by the surrounding service."""

    id: str = Field(..., min_length=1)
    name: str = ""
    email: Optional[str] = None
    document_key: Optional[str] = Field(
        None, description="Opaque key of the uploaded file in the document store"
    )
    media_type: Optional[str] = None
    processed: Optional[ProcessedDocument] = None
    created_at: datetime = Field(default_factory=utc_now)

    @field_validator("created_at")
    @classmethod
    def ensure_created_at_utc(cls, v: datetime) -> datetime:
        return ensure_utc(v)

    @property
    def is_processed(self) -> bool:
        return self.processed is not None and bool(self.processed.text)


class JobDescription(BaseModel):
    """Job posting entity as stored by the surrounding service."""

    id: str = Field(..., min_length=1)
    title: str = ""
    company: str = ""
    description: str = ""
    processed: Optional[ProcessedDocument] = None
    created_at: datetime = Field(default_factory=utc_now)

    @field_validator("created_at")
    @classmethod
    def ensure_created_at_utc(cls, v: datetime) -> datetime:
        return ensure_utc(v)

    @property
    def text(self) -> str:
        """Best available text for matching: processed if present, else raw."""
        if self.processed is not None and self.processed.text:
            return self.processed.text
        return self.description
