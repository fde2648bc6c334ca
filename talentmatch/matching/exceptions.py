"""Exceptions raised by the matching stages."""


class MatchingError(Exception):
    """Base exception for matching failures surfaced to callers."""

    pass


class MissingPrerequisiteError(MatchingError):
    """Matching requested before the resume's text was extracted and processed.

    A client error: the caller must process the resume first. Never retried
    automatically.
    """

    def __init__(self, message: str, resume_id: str = None) -> None:
        super().__init__(message)
        self.resume_id = resume_id
