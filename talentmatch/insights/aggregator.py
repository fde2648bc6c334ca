"""Aggregation of a resume's match history into career insights.

Insights are recomputed from the stored match records on every request and
are never persisted.
"""

import logging
import math
from collections import Counter
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from talentmatch.config.models import InsightConfig
from talentmatch.domain.models import BestMatch, JobDescription, MatchRecord, ResumeInsights
from talentmatch.logging import get_logger
from talentmatch.utils.scoring import round_half_up

logger = get_logger(__name__, component="insights")

EMPTY_STATE_MESSAGE = "No matches found for this resume"
EMPTY_STATE_RECOMMENDATION = "Upload more resumes and create more job descriptions to get insights"

SENIOR_TRACK_RECOMMENDATIONS = (
    "You have strong qualifications for your target roles",
    "Consider applying to senior or specialized positions",
)
TARGETED_SKILL_RECOMMENDATIONS = (
    "Focus on developing key skills mentioned in job gaps",
    "Consider gaining experience in emerging technologies",
)
FOUNDATIONAL_RECOMMENDATIONS = (
    "Significant skill development needed for target roles",
    "Consider entry-level positions or career transition programs",
)

RESUME_REFRESH_STEPS = (
    "Consider updating resume format and content",
    "Gain practical experience through projects or internships",
)
NETWORK_STEP = "Network within companies that frequently match your profile"


class InsightAggregator:
    """Mines recurring strengths and gaps across match records."""

    def __init__(
        self,
        config: Optional[InsightConfig] = None,
        logger_instance: Optional[logging.Logger] = None,
    ):
        self.config = config or InsightConfig()
        self.logger = logger_instance or logger

    def aggregate(
        self,
        records: Sequence[MatchRecord],
        jobs: Optional[Mapping[str, JobDescription]] = None,
        resume_id: Optional[str] = None,
    ) -> ResumeInsights:
        """Build ResumeInsights from every match record of one resume.

        Args:
            records: Match records of the resume, in any order
            jobs: Job descriptions by id, used to name the best match
            resume_id: Resume the records belong to

        Returns:
            ResumeInsights; the empty-state payload when records is empty
        """
        if not records:
            self.logger.info(
                "No match records to aggregate",
                extra={"event": "insights.aggregate.empty", "resume_id": resume_id},
            )
            return ResumeInsights(
                resume_id=resume_id,
                message=EMPTY_STATE_MESSAGE,
                career_recommendations=[EMPTY_STATE_RECOMMENDATION],
            )

        average_score = round_half_up(sum(r.score for r in records) / len(records))
        best = self.best_match(records, jobs or {})

        threshold = self.common_threshold(len(records))
        improvement_areas = self.common_terms(
            (r.details.insights.critical_gaps for r in records), threshold
        )
        common_strengths = self.common_terms(
            (r.details.insights.top_strengths for r in records), threshold
        )

        insights = ResumeInsights(
            resume_id=resume_id,
            total_matches=len(records),
            average_score=average_score,
            best_match=best,
            common_strengths=common_strengths,
            improvement_areas=improvement_areas,
            career_recommendations=self.career_recommendations(average_score),
            next_steps=self.next_steps(average_score, improvement_areas),
        )

        self.logger.info(
            "Resume insights aggregated",
            extra={
                "event": "insights.aggregate.completed",
                "resume_id": resume_id,
                "total_matches": insights.total_matches,
                "average_score": average_score,
                "common_threshold": threshold,
            },
        )
        return insights

    def common_threshold(self, record_count: int) -> int:
        """Minimum number of records a term must appear in to be common."""
        return math.ceil(round(self.config.common_term_ratio * record_count, 9))

    def common_terms(self, term_lists: Iterable[List[str]], threshold: int) -> List[str]:
        """Terms present in at least ``threshold`` records, most frequent first.

        A term counts once per record. Equal counts keep first-seen order.
        """
        counts: Counter = Counter()
        for terms in term_lists:
            counts.update(dict.fromkeys(terms))

        # Counter preserves insertion order and sorted() is stable
        ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
        return [term for term, count in ranked if count >= threshold][: self.config.max_common_terms]

    def best_match(
        self, records: Sequence[MatchRecord], jobs: Mapping[str, JobDescription]
    ) -> BestMatch:
        top = max(records, key=lambda r: (r.score, r.created_at))
        job = jobs.get(top.job_id)
        return BestMatch(
            score=top.score,
            job_id=top.job_id,
            job_title=(job.title if job and job.title else "Unknown"),
            company=(job.company if job and job.company else "Unknown"),
        )

    def career_recommendations(self, average_score: int) -> List[str]:
        if average_score >= self.config.senior_track_threshold:
            return list(SENIOR_TRACK_RECOMMENDATIONS)
        if average_score >= self.config.targeted_skill_threshold:
            return list(TARGETED_SKILL_RECOMMENDATIONS)
        return list(FOUNDATIONAL_RECOMMENDATIONS)

    def next_steps(self, average_score: int, improvement_areas: List[str]) -> List[str]:
        steps: List[str] = []
        if improvement_areas:
            steps.append(f"Prioritize learning: {', '.join(improvement_areas[:3])}")
        if average_score < self.config.resume_refresh_threshold:
            steps.extend(RESUME_REFRESH_STEPS)
        steps.append(
            f"Apply to positions with {self.config.priority_match_threshold}%+ match scores first"
        )
        steps.append(NETWORK_STEP)
        return steps


def index_jobs(jobs: Iterable[JobDescription]) -> Dict[str, JobDescription]:
    """Key job descriptions by id for best-match lookups."""
    return {job.id: job for job in jobs}
