"""Match orchestration over the persistence layer.

MatchPipeline ties the stages together: documents are processed into
ProcessedDocuments at ingestion time, and a match loads both entities, runs
lexical scoring and score fusion, then stores an immutable MatchRecord.
"""

import time
import uuid
from typing import Any, Iterable, List, Optional

from talentmatch.config.models import AppConfig
from talentmatch.domain.models import MatchRecord, ProcessedDocument, ResumeInsights
from talentmatch.extraction.exceptions import ExtractionFailedError
from talentmatch.extraction.store import DocumentSource
from talentmatch.insights.aggregator import InsightAggregator, index_jobs
from talentmatch.logging import get_logger
from talentmatch.logging.context import log_context
from talentmatch.matching.engine import LexicalScorer
from talentmatch.matching.exceptions import MissingPrerequisiteError
from talentmatch.matching.fusion import ScoreFusion
from talentmatch.matching.records import build_record, summarize_record
from talentmatch.persistence.database import get_session
from talentmatch.persistence.exceptions import RecordNotFoundError
from talentmatch.persistence.repositories import (
    JobDescriptionRepository,
    MatchRepository,
    ResumeRepository,
)
from talentmatch.processing.keywords import KeywordExtractor
from talentmatch.processing.service import DocumentProcessor
from talentmatch.semantic.base import SemanticAnalyzer
from talentmatch.semantic.exceptions import SemanticConfigurationError

from .models import BatchFailure, BatchResult, MatchPair

logger = get_logger(__name__, component="pipeline")

MISSING_IDS_MESSAGE = "Resume ID and Job ID are required"


class MatchPipeline:
    """Orchestrates processing, matching, batch runs and insights."""

    def __init__(
        self,
        app_config: Optional[AppConfig] = None,
        analyzer: Optional[SemanticAnalyzer] = None,
        document_source: Optional[DocumentSource] = None,
    ):
        """
        Initialize the pipeline.

        Args:
            app_config: Application configuration
            analyzer: Semantic provider; None runs lexical-only matching
            document_source: Byte source for uploaded resume files
        """
        self.config = app_config or AppConfig()
        self.analyzer = analyzer
        self.document_source = document_source

        keyword_extractor = KeywordExtractor(self.config.keywords)
        self.processor = DocumentProcessor(self.config, keyword_extractor=keyword_extractor)
        self.scorer = LexicalScorer(keyword_extractor, self.config.scoring)
        self.fusion = ScoreFusion(analyzer, self.config.scoring)
        self.aggregator = InsightAggregator(self.config.insights)

    def process_resume(self, resume_id: str) -> ProcessedDocument:
        """Fetch, extract and process a resume's uploaded file, then store the result.

        Raises:
            RecordNotFoundError: If the resume does not exist
            ExtractionFailedError: If there is no document to fetch or extraction fails
            UnsupportedMediaTypeError: If the document type is not supported
        """
        with log_context(resume_id=resume_id):
            with get_session() as session:
                repo = ResumeRepository(session)
                resume = repo.get_by_id(resume_id)
                if resume is None:
                    raise RecordNotFoundError(f"Resume with id {resume_id} not found")

                if self.document_source is None or not resume.document_key:
                    raise ExtractionFailedError(
                        f"No document available for resume {resume_id}",
                        media_type=resume.media_type,
                    )

                stored = self.document_source.fetch(resume.document_key, resume.media_type)
                processed = self.processor.process_file(stored.content, stored.media_type)
                repo.update_processed(resume_id, processed)

            logger.info(
                "Resume processed",
                extra={
                    "event": "pipeline.resume.processed",
                    "word_count": processed.word_count,
                    "keyword_count": len(processed.keywords),
                },
            )
            return processed

    def process_job(self, job_id: str) -> ProcessedDocument:
        """Process a job description's stored text and store the result.

        Raises:
            RecordNotFoundError: If the job description does not exist
        """
        with log_context(job_id=job_id):
            with get_session() as session:
                repo = JobDescriptionRepository(session)
                job = repo.get_by_id(job_id)
                if job is None:
                    raise RecordNotFoundError(f"Job description with id {job_id} not found")

                processed = self.processor.process_text(job.description)
                repo.update_processed(job_id, processed)

            logger.info(
                "Job description processed",
                extra={
                    "event": "pipeline.job.processed",
                    "word_count": processed.word_count,
                    "keyword_count": len(processed.keywords),
                },
            )
            return processed

    def match(self, resume_id: str, job_id: str) -> MatchRecord:
        """Match one resume against one job description and store the record.

        Provider failures never surface here; they degrade the match to
        lexical-only inside ScoreFusion.

        Raises:
            RecordNotFoundError: If either entity does not exist
            MissingPrerequisiteError: If the resume has no processed text
            ExtractionFailedError: If on-demand extraction fails
        """
        started_at = time.perf_counter()

        with log_context(resume_id=resume_id, job_id=job_id):
            with get_session() as session:
                resume = ResumeRepository(session).get_by_id(resume_id)
                if resume is None:
                    raise RecordNotFoundError(f"Resume with id {resume_id} not found")
                job = JobDescriptionRepository(session).get_by_id(job_id)
                if job is None:
                    raise RecordNotFoundError(f"Job description with id {job_id} not found")

            if resume.is_processed:
                resume_text = resume.processed.text
            elif self.config.matching.extract_on_demand and self.document_source is not None:
                logger.info(
                    "Resume not processed yet, extracting on demand",
                    extra={"event": "pipeline.resume.extract_on_demand"},
                )
                resume_text = self.process_resume(resume_id).text
            else:
                raise MissingPrerequisiteError(
                    "Resume text not available. Please ensure the resume has been processed.",
                    resume_id=resume_id,
                )

            lexical = self.scorer.score(resume_text, job.text)
            analysis = self.fusion.evaluate(lexical, resume_text, job.text, started_at=started_at)
            record = build_record(resume_id, job_id, analysis)

            with get_session() as session:
                stored = MatchRepository(session).save(record)

            logger.info(
                "Match stored",
                extra={
                    "event": "pipeline.match.stored",
                    **summarize_record(stored),
                    "processing_time_ms": analysis.metadata.processing_time_ms,
                },
            )
            return stored

    def run_batch(self, pairs: Iterable[Any]) -> BatchResult:
        """
        Match many pairs, strictly one at a time.

        A failing pair is recorded and the loop moves on; this method never
        raises for item-level failures.

        Args:
            pairs: MatchPair instances or (resume_id, job_id) tuples; any other
                item is recorded as a TypeError failure

        Returns:
            BatchResult with successes and failures in input order
        """
        batch_id = str(uuid.uuid4())
        result = BatchResult()

        with log_context(batch_id=batch_id):
            items = list(pairs)
            logger.info(
                f"Starting batch of {len(items)} pairs",
                extra={"event": "pipeline.batch.started", "pair_count": len(items)},
            )

            for item in items:
                try:
                    pair = _as_pair(item)
                except TypeError as e:
                    logger.error(
                        f"Batch item rejected: {e}",
                        extra={"event": "pipeline.batch.item_invalid", "error_type": "TypeError"},
                    )
                    result.failures.append(
                        BatchFailure(pair=item, error=str(e), error_type="TypeError")
                    )
                    continue

                if not pair.resume_id or not pair.job_id:
                    result.failures.append(
                        BatchFailure(pair=pair, error=MISSING_IDS_MESSAGE, error_type="ValueError")
                    )
                    continue

                try:
                    result.successes.append(self.match(pair.resume_id, pair.job_id))
                except Exception as e:
                    logger.error(
                        f"Batch item failed: {e}",
                        extra={
                            "event": "pipeline.batch.item_failed",
                            "resume_id": pair.resume_id,
                            "job_id": pair.job_id,
                            "error_type": type(e).__name__,
                        },
                    )
                    result.failures.append(
                        BatchFailure(pair=pair, error=str(e), error_type=type(e).__name__)
                    )

            logger.info(
                "Batch completed",
                extra={
                    "event": "pipeline.batch.completed",
                    "success_count": len(result.successes),
                    "failure_count": len(result.failures),
                },
            )

        return result

    def top_matches_for_job(self, job_id: str, limit: Optional[int] = None) -> List[MatchRecord]:
        """Highest-scoring match records of a job."""
        with get_session() as session:
            return MatchRepository(session).list_by_job(
                job_id, limit=limit or self.config.matching.top_matches_limit
            )

    def matches_for_resume(self, resume_id: str) -> List[MatchRecord]:
        """Every match record of a resume, newest first."""
        with get_session() as session:
            return MatchRepository(session).list_by_resume(resume_id)

    def delete_match(self, match_id: str) -> None:
        """Delete a match record.

        Raises:
            RecordNotFoundError: If no record has this id
        """
        with get_session() as session:
            MatchRepository(session).delete(match_id)

        logger.info(
            "Match deleted",
            extra={"event": "pipeline.match.deleted", "match_id": match_id},
        )

    def resume_insights(self, resume_id: str) -> ResumeInsights:
        """Aggregate insights across every match record of a resume."""
        with log_context(resume_id=resume_id):
            with get_session() as session:
                records = MatchRepository(session).list_by_resume(resume_id)
                jobs = JobDescriptionRepository(session).get_many(r.job_id for r in records)

            return self.aggregator.aggregate(records, jobs=index_jobs(jobs), resume_id=resume_id)

    def check_provider(self) -> str:
        """Send a trivial prompt to the semantic provider.

        Unlike matching, failures propagate unchanged.

        Raises:
            SemanticConfigurationError: If semantic analysis is disabled
            SemanticProviderError: On any provider failure
        """
        if self.analyzer is None:
            raise SemanticConfigurationError("Semantic analysis is disabled")
        return self.analyzer.test_connection()


def _as_pair(item: Any) -> MatchPair:
    """Coerce a batch item into a MatchPair.

    Raises:
        TypeError: If the item is neither a MatchPair nor a two-element tuple or list
    """
    if isinstance(item, MatchPair):
        return item
    if not isinstance(item, (tuple, list)) or len(item) != 2:
        raise TypeError(
            f"Batch item must be a MatchPair or a (resume_id, job_id) pair, got {item!r}"
        )
    resume_id, job_id = item
    return MatchPair(resume_id=resume_id or "", job_id=job_id or "")
