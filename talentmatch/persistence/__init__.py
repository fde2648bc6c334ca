"""Persistence layer for match records, resumes and job descriptions.

Public API:
    # Database initialization and session management
    - init_database(database_url: str) -> None
    - get_session() -> ContextManager[Session]
    - close_database() -> None
    - get_engine() -> Engine

    # Repository classes
    - MatchRepository: save/list/delete immutable match records
    - ResumeRepository: resume entities and their processed text
    - JobDescriptionRepository: job description entities

    # Exceptions
    - PersistenceError: Base exception for all persistence errors
    - DatabaseConnectionError: Database connection/initialization failures
    - RecordNotFoundError: Required record not found
    - DataIntegrityError: Constraint violations

Example usage:
    >>> from talentmatch.persistence import init_database, get_session, MatchRepository
    >>>
    >>> init_database("sqlite:///./data/talentmatch.db")
    >>>
    >>> with get_session() as session:
    ...     records = MatchRepository(session).list_by_resume("resume-1")
"""

from .database import close_database, get_engine, get_session, init_database
from .exceptions import (
    DatabaseConnectionError,
    DataIntegrityError,
    PersistenceError,
    RecordNotFoundError,
)
from .repositories import JobDescriptionRepository, MatchRepository, ResumeRepository

__all__ = [
    "init_database",
    "get_session",
    "close_database",
    "get_engine",
    "MatchRepository",
    "ResumeRepository",
    "JobDescriptionRepository",
    "PersistenceError",
    "DatabaseConnectionError",
    "RecordNotFoundError",
    "DataIntegrityError",
]
