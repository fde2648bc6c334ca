"""Lexical scorer: keyword-set overlap between a resume and a job description.

The score is the Jaccard index of the two keyword sets as a rounded
percentage. Matched and missing keywords are taken from the job's keyword
list so they always follow the job's keyword order.
"""

import logging
from typing import Iterable, List, Optional

from talentmatch.config.models import ScoringConfig
from talentmatch.domain.models import LexicalAnalysis
from talentmatch.logging import get_logger
from talentmatch.processing.keywords import (
    JOB_TITLES,
    SOFT_SKILLS,
    TECHNICAL_CATEGORIES,
    KeywordExtractor,
    filter_category,
)
from talentmatch.processing.normalizer import normalize_text
from talentmatch.utils.scoring import clamp_score

logger = get_logger(__name__, component="matching")


def jaccard_similarity(left: Iterable[str], right: Iterable[str]) -> float:
    """Jaccard index |A ∩ B| / |A ∪ B| in [0, 1]; 0.0 when both sets are empty."""
    left_set, right_set = set(left), set(right)
    union = left_set | right_set
    if not union:
        return 0.0
    return len(left_set & right_set) / len(union)


class LexicalScorer:
    """Scores resumes against job descriptions by keyword overlap.

    Responsibilities:
    - Extract keyword sets from both texts
    - Compute the Jaccard score
    - Report matched and missing job keywords
    - Template strengths and recommendations from those keywords
    """

    def __init__(
        self,
        keyword_extractor: Optional[KeywordExtractor] = None,
        scoring_config: Optional[ScoringConfig] = None,
        logger_instance: Optional[logging.Logger] = None,
    ):
        self.keyword_extractor = keyword_extractor or KeywordExtractor()
        self.config = scoring_config or ScoringConfig()
        self.logger = logger_instance or logger

    def score(self, resume_text: str, job_text: str) -> LexicalAnalysis:
        """Compare resume text with job description text.

        Both texts are normalized first; normalizing already-normalized text
        is a no-op.

        Args:
            resume_text: Resume text
            job_text: Job description text

        Returns:
            LexicalAnalysis with score, matched/missing keywords and narrative
        """
        resume_keywords = self.keyword_extractor.extract_keywords(normalize_text(resume_text))
        job_keywords = self.keyword_extractor.extract_keywords(normalize_text(job_text))
        return self.compare(resume_keywords, job_keywords)

    def compare(self, resume_keywords: Iterable[str], job_keywords: Iterable[str]) -> LexicalAnalysis:
        """Score two keyword collections.

        Args:
            resume_keywords: Keywords extracted from the resume
            job_keywords: Keywords extracted from the job description, in order

        Returns:
            LexicalAnalysis
        """
        resume_set = set(_unique_lower(resume_keywords))
        job_ordered = _unique_lower(job_keywords)

        matched = [k for k in job_ordered if k in resume_set]
        missing = [k for k in job_ordered if k not in resume_set]
        similarity = jaccard_similarity(resume_set, job_ordered)
        score = clamp_score(similarity * 100)

        analysis = LexicalAnalysis(
            score=score,
            matched_keywords=matched,
            missing_keywords=missing[: self.config.max_missing_keywords],
            strengths=self._build_strengths(matched),
            recommendations=self._build_recommendations(missing),
        )

        self.logger.debug(
            "Lexical score computed",
            extra={
                "event": "matching.lexical.scored",
                "score": score,
                "resume_keyword_count": len(resume_set),
                "job_keyword_count": len(job_ordered),
                "matched_count": len(matched),
                "missing_count": len(missing),
            },
        )
        return analysis

    def _build_strengths(self, matched: List[str]) -> List[str]:
        strengths = []

        if matched:
            strengths.append(f"Strong keyword match with {len(matched)} relevant terms")

        technical = filter_category(matched, TECHNICAL_CATEGORIES)
        if technical:
            strengths.append(f"Technical skills alignment: {', '.join(technical)}")

        soft = filter_category(matched, [SOFT_SKILLS])
        if soft:
            strengths.append(f"Soft skills alignment: {', '.join(soft)}")

        titles = filter_category(matched, [JOB_TITLES])
        if titles:
            strengths.append(f"Role alignment: {', '.join(titles)}")

        return strengths[: self.config.max_narrative_items]

    def _build_recommendations(self, missing: List[str]) -> List[str]:
        recommendations = []

        if missing:
            recommendations.append(
                f"Consider highlighting experience with: {', '.join(missing[:5])}"
            )

        technical = filter_category(missing, TECHNICAL_CATEGORIES)
        if technical:
            recommendations.append(f"Technical skills to develop: {', '.join(technical[:3])}")

        soft = filter_category(missing, [SOFT_SKILLS])
        if soft:
            recommendations.append(f"Soft skills to demonstrate: {', '.join(soft[:3])}")

        titles = filter_category(missing, [JOB_TITLES])
        if titles:
            recommendations.append(
                f"Describe your experience in terms of the role: {', '.join(titles[:3])}"
            )

        return recommendations[: self.config.max_narrative_items]


def _unique_lower(keywords: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(k.strip().lower() for k in keywords if k and k.strip()))
