"""Matching engine: lexical scoring, score fusion and record assembly.

This module provides:
- LexicalScorer: Jaccard keyword-overlap scoring with narrative
- ScoreFusion: blend of lexical and external semantic analysis
- build_record: immutable MatchRecord assembly
- MissingPrerequisiteError: matching requested before processing
"""

from .engine import LexicalScorer, jaccard_similarity
from .exceptions import MatchingError, MissingPrerequisiteError
from .fusion import UNAVAILABLE_ASSESSMENT, ScoreFusion
from .records import build_record, summarize_record

__all__ = [
    "LexicalScorer",
    "ScoreFusion",
    "build_record",
    "summarize_record",
    "jaccard_similarity",
    "MatchingError",
    "MissingPrerequisiteError",
    "UNAVAILABLE_ASSESSMENT",
]
