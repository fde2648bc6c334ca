"""Data models for batch matching results."""

from dataclasses import dataclass, field
from typing import Any, List, Union

from talentmatch.domain.models import MatchRecord


@dataclass(frozen=True)
class MatchPair:
    """One resume/job combination requested in a batch."""

    resume_id: str
    job_id: str


@dataclass
class BatchFailure:
    """
    A batch item that could not be matched.

    Attributes:
        pair: The offending input; the raw item when it was not a valid pair
        error: Human-readable error message
        error_type: Exception class name (e.g. "ExtractionFailedError")
    """

    pair: Union[MatchPair, Any]
    error: str
    error_type: str = "Error"


@dataclass
class BatchResult:
    """
    Outcome of a batch match run.

    Attributes:
        successes: Stored match records, in input order
        failures: Failed pairs, in input order
    """

    successes: List[MatchRecord] = field(default_factory=list)
    failures: List[BatchFailure] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.successes) + len(self.failures)

    @property
    def had_errors(self) -> bool:
        return bool(self.failures)
