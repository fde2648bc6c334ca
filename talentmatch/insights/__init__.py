"""Cross-match insights for a single resume."""

from .aggregator import (
    EMPTY_STATE_MESSAGE,
    EMPTY_STATE_RECOMMENDATION,
    InsightAggregator,
    index_jobs,
)

__all__ = [
    "InsightAggregator",
    "index_jobs",
    "EMPTY_STATE_MESSAGE",
    "EMPTY_STATE_RECOMMENDATION",
]
