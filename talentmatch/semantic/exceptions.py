"""Exceptions raised by semantic analysis providers."""

from typing import Optional


class SemanticProviderError(Exception):
    """Base exception for all semantic provider failures.

    During matching any of these means "semantic analysis unavailable":
    ScoreFusion catches them and falls back to the lexical score. Only the
    provider connection test lets them propagate.
    """

    pass


class SemanticConfigurationError(SemanticProviderError):
    """Provider is misconfigured (missing API key, unknown provider, ...)."""

    pass


class SemanticInputError(SemanticProviderError):
    """Resume or job text is too short to be worth analysing."""

    pass


class SemanticHTTPError(SemanticProviderError):
    """Provider answered with an HTTP 4xx or 5xx status."""

    def __init__(self, message: str, status_code: int, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class SemanticTimeoutError(SemanticProviderError):
    """Provider did not answer within the configured timeout."""

    pass


class SemanticResponseError(SemanticProviderError):
    """Provider answered but the reply could not be parsed or validated."""

    pass
