"""Score fusion: blends the lexical score with the external semantic score.

When the semantic provider is disabled, times out or fails in any way, the
match degrades to lexical-only: the semantic score mirrors the lexical
score, the assessment says analysis was unavailable, and the combined score
equals the lexical score. Provider failures are logged here and never
propagate further.
"""

import logging
import time
from typing import List, Optional

from talentmatch.config.models import ScoringConfig
from talentmatch.domain.models import (
    Confidence,
    LexicalAnalysis,
    MatchAnalysis,
    MatchInsights,
    MatchMetadata,
    SemanticAnalysis,
)
from talentmatch.logging import get_logger
from talentmatch.semantic.base import SemanticAnalyzer
from talentmatch.utils.scoring import clamp_score

logger = get_logger(__name__, component="fusion")

UNAVAILABLE_ASSESSMENT = "AI analysis unavailable, using basic matching only"
DEFAULT_ASSESSMENT = "Analysis completed using available methods"


class ScoreFusion:
    """Combines lexical and semantic analyses into one MatchAnalysis."""

    def __init__(
        self,
        analyzer: Optional[SemanticAnalyzer] = None,
        scoring_config: Optional[ScoringConfig] = None,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """Initialize ScoreFusion.

        Args:
            analyzer: Semantic provider; None means semantic analysis is disabled
            scoring_config: Weights, thresholds and list caps
            logger_instance: Optional logger instance
        """
        self.analyzer = analyzer
        self.config = scoring_config or ScoringConfig()
        self.logger = logger_instance or logger

    def evaluate(
        self,
        lexical: LexicalAnalysis,
        resume_text: str,
        job_text: str,
        started_at: Optional[float] = None,
    ) -> MatchAnalysis:
        """Request semantic analysis and fuse it with the lexical result.

        Args:
            lexical: Output of LexicalScorer for the same pair
            resume_text: Resume text sent to the provider
            job_text: Job description text sent to the provider
            started_at: time.perf_counter() value when the match began;
                defaults to the start of this call

        Returns:
            MatchAnalysis (never raises for provider failures)
        """
        started_at = time.perf_counter() if started_at is None else started_at
        semantic = self.request_semantic(resume_text, job_text)
        elapsed_ms = int((time.perf_counter() - started_at) * 1000)
        return self.fuse(lexical, semantic, processing_time_ms=elapsed_ms)

    def request_semantic(self, resume_text: str, job_text: str) -> Optional[SemanticAnalysis]:
        """Call the provider, mapping every failure to None (unavailable)."""
        if self.analyzer is None:
            self.logger.debug(
                "Semantic analysis disabled",
                extra={"event": "fusion.semantic.disabled"},
            )
            return None

        try:
            return self.analyzer.analyze(resume_text, job_text)
        except Exception as e:
            self.logger.warning(
                f"Semantic analysis failed, falling back to lexical analysis only: {e}",
                extra={
                    "event": "fusion.semantic.unavailable",
                    "provider": getattr(self.analyzer, "name", type(self.analyzer).__name__),
                    "error_type": type(e).__name__,
                },
            )
            return None

    def fuse(
        self,
        lexical: LexicalAnalysis,
        semantic: Optional[SemanticAnalysis],
        processing_time_ms: int = 0,
    ) -> MatchAnalysis:
        """Fuse a lexical analysis with a semantic analysis.

        Args:
            lexical: Lexical analysis
            semantic: Semantic analysis, or None when unavailable
            processing_time_ms: Elapsed time recorded in metadata

        Returns:
            MatchAnalysis with combined score, merged insights and metadata
        """
        semantic_enabled = semantic is not None
        if not semantic_enabled:
            semantic = SemanticAnalysis(
                match_score=lexical.score,
                strengths=[],
                gaps=[],
                assessment=UNAVAILABLE_ASSESSMENT,
            )

        combined_score = self.combined_score(lexical.score, semantic.match_score, semantic_enabled)
        limit = self.config.max_narrative_items

        insights = MatchInsights(
            top_strengths=_first(semantic.strengths + lexical.strengths, limit),
            critical_gaps=_first(semantic.gaps + lexical.missing_keywords, limit),
            recommendations=_first(
                lexical.recommendations + [f"Consider developing: {gap}" for gap in semantic.gaps],
                limit,
            ),
            assessment=semantic.assessment or DEFAULT_ASSESSMENT,
            confidence=self.confidence(semantic.match_score, semantic_enabled),
        )

        analysis = MatchAnalysis(
            combined_score=combined_score,
            lexical=lexical,
            semantic=semantic,
            insights=insights,
            metadata=MatchMetadata(
                processing_time_ms=max(0, processing_time_ms),
                semantic_enabled=semantic_enabled,
                lexical_score=lexical.score,
                semantic_score=semantic.match_score,
            ),
        )

        self.logger.info(
            "Match analysis fused",
            extra={
                "event": "fusion.analysis.fused",
                "combined_score": combined_score,
                "lexical_score": lexical.score,
                "semantic_score": semantic.match_score,
                "semantic_enabled": semantic_enabled,
                "confidence": insights.confidence,
            },
        )
        return analysis

    def combined_score(self, lexical_score: int, semantic_score: int, semantic_enabled: bool) -> int:
        """Weighted blend of both scores, or the lexical score when disabled."""
        if not semantic_enabled:
            return lexical_score
        return clamp_score(
            lexical_score * self.config.lexical_weight
            + semantic_score * self.config.semantic_weight
        )

    def confidence(self, semantic_score: int, semantic_enabled: bool) -> Confidence:
        """Confidence band derived from the semantic score.

        A disabled provider always yields MEDIUM.
        """
        if not semantic_enabled:
            return Confidence.MEDIUM
        if semantic_score >= self.config.high_confidence_threshold:
            return Confidence.HIGH
        if semantic_score >= self.config.medium_confidence_threshold:
            return Confidence.MEDIUM
        return Confidence.LOW


def _first(items: List[str], limit: int) -> List[str]:
    return list(items[:limit])
