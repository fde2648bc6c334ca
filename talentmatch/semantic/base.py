"""Abstract interface for semantic analysis providers."""

from abc import ABC, abstractmethod

from talentmatch.domain.models import SemanticAnalysis


class SemanticAnalyzer(ABC):
    """Capability that judges how well a resume fits a job description.

    Implementations may call a hosted model, a local model or return canned
    results in tests. Any failure is signalled by raising
    SemanticProviderError (or any other exception); callers on the matching
    path treat every exception as "unavailable".
    """

    #: Short provider name recorded in logs
    name: str = "semantic"

    @abstractmethod
    def analyze(self, resume_text: str, job_text: str) -> SemanticAnalysis:
        """Analyze a resume against a job description.

        Args:
            resume_text: Normalized resume text
            job_text: Job description text

        Returns:
            SemanticAnalysis with a 0-100 score, strengths, gaps and assessment

        Raises:
            SemanticProviderError: On any provider failure
        """

    @abstractmethod
    def test_connection(self) -> str:
        """Make a minimal round trip to the provider.

        Returns:
            Provider reply text

        Raises:
            SemanticProviderError: On any failure; never swallowed
        """
