"""Non-fatal configuration checks."""

import warnings
from typing import Any, Dict, List


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """Inspect a raw configuration mapping for settings worth flagging.

    Args:
        config_dict: Raw configuration dictionary (before validation)

    Returns:
        List of warning messages
    """
    messages = []

    semantic = config_dict.get("semantic", {})
    if isinstance(semantic, dict):
        if semantic.get("enabled") is False:
            messages.append(
                "Semantic analysis is disabled; combined scores equal lexical scores"
            )
        timeout = semantic.get("request_timeout")
        if isinstance(timeout, int) and 5 <= timeout < 10:
            messages.append(
                f"Short semantic.request_timeout ({timeout}s) may cause frequent fallbacks"
            )

    keywords = config_dict.get("keywords", {})
    if isinstance(keywords, dict):
        max_keywords = keywords.get("max_keywords")
        if isinstance(max_keywords, int) and max_keywords < 20:
            messages.append(
                f"Low keywords.max_keywords ({max_keywords}) makes lexical scores coarse"
            )

        stop_words = keywords.get("extra_stop_words", [])
        if isinstance(stop_words, list):
            normalized = [w.strip().lower() for w in stop_words if isinstance(w, str)]
            duplicates = sorted({w for w in normalized if normalized.count(w) > 1})
            if duplicates:
                messages.append(
                    f"Duplicate entries in keywords.extra_stop_words: {', '.join(duplicates)}"
                )

    return messages


def emit_warnings(warning_messages: List[str]) -> None:
    """Emit warning messages using Python's warnings module."""
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
