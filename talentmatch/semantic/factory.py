"""Factory for semantic analyzers."""

from typing import Optional

from talentmatch.config.environment import EnvironmentConfig
from talentmatch.config.models import SemanticConfig, SemanticProvider

from .base import SemanticAnalyzer
from .exceptions import SemanticConfigurationError
from .gemini import GeminiAnalyzer

ANALYZER_REGISTRY = {
    SemanticProvider.GEMINI.value: GeminiAnalyzer,
}


def get_analyzer(
    semantic_config: SemanticConfig, env_config: EnvironmentConfig
) -> Optional[SemanticAnalyzer]:
    """Create the analyzer for the configured provider.

    Args:
        semantic_config: Provider settings
        env_config: Environment configuration holding the API key

    Returns:
        SemanticAnalyzer instance, or None when semantic analysis is disabled

    Raises:
        SemanticConfigurationError: If the provider is unknown or the key is missing
    """
    if not semantic_config.enabled:
        return None

    provider = semantic_config.provider
    analyzer_cls = ANALYZER_REGISTRY.get(provider)
    if analyzer_cls is None:
        supported = ", ".join(sorted(ANALYZER_REGISTRY))
        raise SemanticConfigurationError(
            f"Unsupported semantic provider: {provider}. Supported providers: {supported}"
        )

    return analyzer_cls(api_key=env_config.gemini_api_key, config=semantic_config)
