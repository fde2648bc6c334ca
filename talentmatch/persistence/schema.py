"""Database schema definition and ORM models.

Three tables back the engine: ``resumes`` and ``job_descriptions`` hold the
entities together with their serialized ProcessedDocument, and ``matches``
holds immutable match records with the full analysis serialized as JSON text.
Timestamps are stored as ISO 8601 strings.
"""

import logging
from typing import Optional

from sqlalchemy import Column, Index, Integer, String, Text, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base

from talentmatch.domain.models import (
    JobDescription,
    MatchAnalysis,
    MatchRecord,
    ProcessedDocument,
    Resume,
)
from talentmatch.utils.timestamps import format_timestamp, parse_timestamp

logger = logging.getLogger(__name__)

Base = declarative_base()


class ResumeModel(Base):
    """ORM model for the resumes table."""

    __tablename__ = "resumes"

    id = Column(String(64), primary_key=True, nullable=False)
    name = Column(String(255), nullable=False, default="")
    email = Column(String(255), nullable=True)

    # Location of the uploaded file in the document store
    document_key = Column(Text, nullable=True)
    media_type = Column(String(128), nullable=True)

    # ProcessedDocument as JSON; NULL until the resume has been processed
    processed = Column(Text, nullable=True)

    created_at = Column(String(50), nullable=False)

    __table_args__ = (Index("idx_resumes_created_at", "created_at"),)

    def to_domain(self) -> Resume:
        return Resume(
            id=self.id,
            name=self.name or "",
            email=self.email,
            document_key=self.document_key,
            media_type=self.media_type,
            processed=_load_processed(self.processed),
            created_at=parse_timestamp(self.created_at),
        )

    @classmethod
    def from_domain(cls, resume: Resume) -> "ResumeModel":
        return cls(
            id=resume.id,
            name=resume.name,
            email=resume.email,
            document_key=resume.document_key,
            media_type=resume.media_type,
            processed=_dump_processed(resume.processed),
            created_at=format_timestamp(resume.created_at),
        )


class JobDescriptionModel(Base):
    """ORM model for the job_descriptions table."""

    __tablename__ = "job_descriptions"

    id = Column(String(64), primary_key=True, nullable=False)
    title = Column(Text, nullable=False, default="")
    company = Column(String(255), nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    processed = Column(Text, nullable=True)
    created_at = Column(String(50), nullable=False)

    __table_args__ = (Index("idx_job_descriptions_company", "company"),)

    def to_domain(self) -> JobDescription:
        return JobDescription(
            id=self.id,
            title=self.title or "",
            company=self.company or "",
            description=self.description or "",
            processed=_load_processed(self.processed),
            created_at=parse_timestamp(self.created_at),
        )

    @classmethod
    def from_domain(cls, job: JobDescription) -> "JobDescriptionModel":
        return cls(
            id=job.id,
            title=job.title,
            company=job.company,
            description=job.description,
            processed=_dump_processed(job.processed),
            created_at=format_timestamp(job.created_at),
        )


class MatchRecordModel(Base):
    """ORM model for the matches table.

    Rows are inserted and deleted but never updated.
    """

    __tablename__ = "matches"

    id = Column(String(64), primary_key=True, nullable=False)
    resume_id = Column(String(64), nullable=False)
    job_id = Column(String(64), nullable=False)

    # Combined score, duplicated out of details for filtering and ordering
    score = Column(Integer, nullable=False)

    # MatchAnalysis as JSON
    details = Column(Text, nullable=False)

    created_at = Column(String(50), nullable=False)

    __table_args__ = (
        Index("idx_matches_resume", "resume_id", "created_at"),
        Index("idx_matches_job_score", "job_id", "score"),
    )

    def to_domain(self) -> MatchRecord:
        return MatchRecord(
            id=self.id,
            resume_id=self.resume_id,
            job_id=self.job_id,
            score=self.score,
            details=MatchAnalysis.model_validate_json(self.details),
            created_at=parse_timestamp(self.created_at),
        )

    @classmethod
    def from_domain(cls, record: MatchRecord) -> "MatchRecordModel":
        return cls(
            id=record.id,
            resume_id=record.resume_id,
            job_id=record.job_id,
            score=record.score,
            details=record.details.model_dump_json(),
            created_at=format_timestamp(record.created_at),
        )


def _dump_processed(processed: Optional[ProcessedDocument]) -> Optional[str]:
    if processed is None:
        return None
    return processed.model_dump_json()


def _load_processed(raw: Optional[str]) -> Optional[ProcessedDocument]:
    if not raw:
        return None
    return ProcessedDocument.model_validate_json(raw)


def create_schema(engine: Engine) -> None:
    """Create all tables and indexes if they don't exist (idempotent).

    Args:
        engine: SQLAlchemy engine instance
    """
    logger.info("Creating database schema if not exists")

    try:
        Base.metadata.create_all(engine, checkfirst=True)
        tables = inspect(engine).get_table_names()
        logger.info(f"Database schema ready. Tables: {', '.join(tables)}")
    except Exception as e:
        logger.error(f"Failed to create database schema: {e}", exc_info=True)
        raise
