"""Match orchestration: single matches, sequential batches and insights."""

from .factory import build_pipeline
from .models import BatchFailure, BatchResult, MatchPair
from .runner import MISSING_IDS_MESSAGE, MatchPipeline

__all__ = [
    "MatchPipeline",
    "build_pipeline",
    "MatchPair",
    "BatchFailure",
    "BatchResult",
    "MISSING_IDS_MESSAGE",
]
