"""Data access layer (repositories) for persistence operations.

Repositories encapsulate database operations for match records, resumes and
job descriptions, and return domain models rather than ORM models.
"""

import logging
from typing import Iterable, List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from talentmatch.domain.models import JobDescription, MatchRecord, ProcessedDocument, Resume

from .exceptions import DataIntegrityError, PersistenceError, RecordNotFoundError
from .schema import JobDescriptionModel, MatchRecordModel, ResumeModel

logger = logging.getLogger(__name__)


class MatchRepository:
    """Repository for match records.

    Records are immutable: there is save and delete but no update. Re-running
    a match stores a new record.
    """

    def __init__(self, session: Session):
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def save(self, record: MatchRecord) -> MatchRecord:
        """Insert a new match record.

        Args:
            record: MatchRecord to persist

        Returns:
            The stored MatchRecord

        Raises:
            DataIntegrityError: If a record with the same id already exists
            PersistenceError: If database error occurs
        """
        try:
            model = MatchRecordModel.from_domain(record)
            self.session.add(model)
            self.session.flush()
            return model.to_domain()

        except IntegrityError as e:
            logger.error(f"Integrity error saving match {record.id}: {e}", exc_info=True)
            raise DataIntegrityError(f"Failed to save match due to constraint violation: {e}") from e
        except SQLAlchemyError as e:
            logger.error(f"Error saving match {record.id}: {e}", exc_info=True)
            raise PersistenceError(f"Failed to save match: {e}") from e

    def get_by_id(self, match_id: str) -> Optional[MatchRecord]:
        """Retrieve a match record by id, or None if it does not exist.

        Raises:
            PersistenceError: If database error occurs
        """
        try:
            model = self.session.get(MatchRecordModel, match_id)
            return model.to_domain() if model is not None else None

        except SQLAlchemyError as e:
            logger.error(f"Error retrieving match {match_id}: {e}", exc_info=True)
            raise PersistenceError(f"Failed to retrieve match: {e}") from e

    def list_by_resume(self, resume_id: str) -> List[MatchRecord]:
        """All match records of a resume, newest first.

        Raises:
            PersistenceError: If database error occurs
        """
        try:
            stmt = (
                select(MatchRecordModel)
                .where(MatchRecordModel.resume_id == resume_id)
                .order_by(MatchRecordModel.created_at.desc())
            )
            models = self.session.execute(stmt).scalars().all()
            return [model.to_domain() for model in models]

        except SQLAlchemyError as e:
            logger.error(f"Error retrieving matches for resume {resume_id}: {e}", exc_info=True)
            raise PersistenceError(f"Failed to retrieve matches: {e}") from e

    def list_by_job(self, job_id: str, limit: int = 10) -> List[MatchRecord]:
        """Best match records of a job, highest score first.

        Equal scores are ordered newest first.

        Args:
            job_id: Job description identifier
            limit: Maximum number of records to return

        Raises:
            PersistenceError: If database error occurs
        """
        try:
            stmt = (
                select(MatchRecordModel)
                .where(MatchRecordModel.job_id == job_id)
                .order_by(MatchRecordModel.score.desc(), MatchRecordModel.created_at.desc())
                .limit(limit)
            )
            models = self.session.execute(stmt).scalars().all()
            return [model.to_domain() for model in models]

        except SQLAlchemyError as e:
            logger.error(f"Error retrieving matches for job {job_id}: {e}", exc_info=True)
            raise PersistenceError(f"Failed to retrieve matches: {e}") from e

    def list_matches(
        self,
        resume_id: Optional[str] = None,
        job_id: Optional[str] = None,
        min_score: Optional[int] = None,
        max_score: Optional[int] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[MatchRecord]:
        """Filtered, paginated listing of match records, newest first.

        Every filter is optional; score bounds are inclusive.

        Raises:
            PersistenceError: If database error occurs
        """
        try:
            stmt = select(MatchRecordModel)
            if resume_id is not None:
                stmt = stmt.where(MatchRecordModel.resume_id == resume_id)
            if job_id is not None:
                stmt = stmt.where(MatchRecordModel.job_id == job_id)
            if min_score is not None:
                stmt = stmt.where(MatchRecordModel.score >= min_score)
            if max_score is not None:
                stmt = stmt.where(MatchRecordModel.score <= max_score)

            stmt = stmt.order_by(MatchRecordModel.created_at.desc()).limit(limit).offset(offset)
            models = self.session.execute(stmt).scalars().all()
            return [model.to_domain() for model in models]

        except SQLAlchemyError as e:
            logger.error(f"Error listing matches: {e}", exc_info=True)
            raise PersistenceError(f"Failed to list matches: {e}") from e

    def delete(self, match_id: str) -> None:
        """Delete a match record.

        Raises:
            RecordNotFoundError: If no record has this id
            PersistenceError: If database error occurs
        """
        try:
            stmt = delete(MatchRecordModel).where(MatchRecordModel.id == match_id)
            result = self.session.execute(stmt)
            self.session.flush()

            if result.rowcount == 0:
                raise RecordNotFoundError(f"Match with id {match_id} not found")

            logger.debug(f"Deleted match {match_id}")

        except RecordNotFoundError:
            raise
        except SQLAlchemyError as e:
            logger.error(f"Error deleting match {match_id}: {e}", exc_info=True)
            raise PersistenceError(f"Failed to delete match: {e}") from e


class ResumeRepository:
    """Repository for resume entities."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, resume_id: str) -> Optional[Resume]:
        """Retrieve a resume by id, or None if it does not exist.

        Raises:
            PersistenceError: If database error occurs
        """
        try:
            model = self.session.get(ResumeModel, resume_id)
            return model.to_domain() if model is not None else None

        except SQLAlchemyError as e:
            logger.error(f"Error retrieving resume {resume_id}: {e}", exc_info=True)
            raise PersistenceError(f"Failed to retrieve resume: {e}") from e

    def upsert(self, resume: Resume) -> Resume:
        """Insert a new resume or replace the stored fields of an existing one.

        Raises:
            DataIntegrityError: On constraint violation
            PersistenceError: If database error occurs
        """
        try:
            existing = self.session.get(ResumeModel, resume.id)

            if existing:
                incoming = ResumeModel.from_domain(resume)
                existing.name = incoming.name
                existing.email = incoming.email
                existing.document_key = incoming.document_key
                existing.media_type = incoming.media_type
                existing.processed = incoming.processed
                self.session.flush()
                return existing.to_domain()

            model = ResumeModel.from_domain(resume)
            self.session.add(model)
            self.session.flush()
            return model.to_domain()

        except IntegrityError as e:
            logger.error(f"Integrity error upserting resume {resume.id}: {e}", exc_info=True)
            raise DataIntegrityError(
                f"Failed to upsert resume due to constraint violation: {e}"
            ) from e
        except SQLAlchemyError as e:
            logger.error(f"Error upserting resume {resume.id}: {e}", exc_info=True)
            raise PersistenceError(f"Failed to upsert resume: {e}") from e

    def update_processed(self, resume_id: str, processed: ProcessedDocument) -> None:
        """Store the processed form of a resume.

        Raises:
            RecordNotFoundError: If resume_id doesn't exist
            PersistenceError: If database error occurs
        """
        try:
            stmt = (
                update(ResumeModel)
                .where(ResumeModel.id == resume_id)
                .values(processed=processed.model_dump_json())
            )
            result = self.session.execute(stmt)
            self.session.flush()

            if result.rowcount == 0:
                raise RecordNotFoundError(f"Resume with id {resume_id} not found")

        except RecordNotFoundError:
            raise
        except SQLAlchemyError as e:
            logger.error(f"Error storing processed resume {resume_id}: {e}", exc_info=True)
            raise PersistenceError(f"Failed to update processed resume: {e}") from e


class JobDescriptionRepository:
    """Repository for job description entities."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, job_id: str) -> Optional[JobDescription]:
        """Retrieve a job description by id, or None if it does not exist.

        Raises:
            PersistenceError: If database error occurs
        """
        try:
            model = self.session.get(JobDescriptionModel, job_id)
            return model.to_domain() if model is not None else None

        except SQLAlchemyError as e:
            logger.error(f"Error retrieving job description {job_id}: {e}", exc_info=True)
            raise PersistenceError(f"Failed to retrieve job description: {e}") from e

    def get_many(self, job_ids: Iterable[str]) -> List[JobDescription]:
        """Retrieve every existing job description among ``job_ids``.

        Unknown ids are skipped silently.

        Raises:
            PersistenceError: If database error occurs
        """
        ids = list(dict.fromkeys(job_ids))
        if not ids:
            return []

        try:
            stmt = select(JobDescriptionModel).where(JobDescriptionModel.id.in_(ids))
            models = self.session.execute(stmt).scalars().all()
            return [model.to_domain() for model in models]

        except SQLAlchemyError as e:
            logger.error(f"Error retrieving job descriptions: {e}", exc_info=True)
            raise PersistenceError(f"Failed to retrieve job descriptions: {e}") from e

    def upsert(self, job: JobDescription) -> JobDescription:
        """Insert a new job description or replace the stored fields of an existing one.

        Raises:
            DataIntegrityError: On constraint violation
            PersistenceError: If database error occurs
        """
        try:
            existing = self.session.get(JobDescriptionModel, job.id)

            if existing:
                incoming = JobDescriptionModel.from_domain(job)
                existing.title = incoming.title
                existing.company = incoming.company
                existing.description = incoming.description
                existing.processed = incoming.processed
                self.session.flush()
                return existing.to_domain()

            model = JobDescriptionModel.from_domain(job)
            self.session.add(model)
            self.session.flush()
            return model.to_domain()

        except IntegrityError as e:
            logger.error(f"Integrity error upserting job description {job.id}: {e}", exc_info=True)
            raise DataIntegrityError(
                f"Failed to upsert job description due to constraint violation: {e}"
            ) from e
        except SQLAlchemyError as e:
            logger.error(f"Error upserting job description {job.id}: {e}", exc_info=True)
            raise PersistenceError(f"Failed to upsert job description: {e}") from e

    def update_processed(self, job_id: str, processed: ProcessedDocument) -> None:
        """Store the processed form of a job description.

        Raises:
            RecordNotFoundError: If job_id doesn't exist
            PersistenceError: If database error occurs
        """
        try:
            stmt = (
                update(JobDescriptionModel)
                .where(JobDescriptionModel.id == job_id)
                .values(processed=processed.model_dump_json())
            )
            result = self.session.execute(stmt)
            self.session.flush()

            if result.rowcount == 0:
                raise RecordNotFoundError(f"Job description with id {job_id} not found")

        except RecordNotFoundError:
            raise
        except SQLAlchemyError as e:
            logger.error(f"Error storing processed job description {job_id}: {e}", exc_info=True)
            raise PersistenceError(f"Failed to update processed job description: {e}") from e
