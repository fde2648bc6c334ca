"""Domain models shared across the matching engine."""

from .models import (
    BestMatch,
    Confidence,
    JobDescription,
    LexicalAnalysis,
    MatchAnalysis,
    MatchInsights,
    MatchMetadata,
    MatchRecord,
    ProcessedDocument,
    Resume,
    ResumeInsights,
    SectionName,
    SemanticAnalysis,
)

__all__ = [
    "BestMatch",
    "Confidence",
    "JobDescription",
    "LexicalAnalysis",
    "MatchAnalysis",
    "MatchInsights",
    "MatchMetadata",
    "MatchRecord",
    "ProcessedDocument",
    "Resume",
    "ResumeInsights",
    "SectionName",
    "SemanticAnalysis",
]
