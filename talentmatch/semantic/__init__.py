"""External semantic analysis providers.

This module provides:
- SemanticAnalyzer: abstract capability used by score fusion
- GeminiAnalyzer: Gemini REST implementation
- get_analyzer: factory honoring the semantic configuration
- Provider exceptions
"""

from .base import SemanticAnalyzer
from .exceptions import (
    SemanticConfigurationError,
    SemanticHTTPError,
    SemanticInputError,
    SemanticProviderError,
    SemanticResponseError,
    SemanticTimeoutError,
)
from .factory import get_analyzer
from .gemini import GeminiAnalyzer

__all__ = [
    "SemanticAnalyzer",
    "GeminiAnalyzer",
    "get_analyzer",
    "SemanticProviderError",
    "SemanticConfigurationError",
    "SemanticInputError",
    "SemanticHTTPError",
    "SemanticTimeoutError",
    "SemanticResponseError",
]
