"""Canonical text cleaning applied before any parsing or matching.

normalize_text() is pure and idempotent. Characters are stripped before
whitespace is collapsed so that removing a symbol can never leave behind a
run of spaces for a second pass to collapse.
"""

import re

_LINE_ENDINGS = re.compile(r"\r\n?")
_DISALLOWED_CHARS = re.compile(r"[^\w\s.,;:()\-@]")
_EXCESS_NEWLINES = re.compile(r"\n{3,}")
_HORIZONTAL_RUNS = re.compile(r"[^\S\n]{2,}")
_WORDS = re.compile(r"\S+")


def normalize_text(raw_text: str) -> str:
    """Clean raw extracted text into the canonical form used downstream.

    Steps:
    1. Unify CRLF and lone CR line endings to LF
    2. Drop characters outside word characters, whitespace and . , ; : ( ) - @
    3. Collapse 3+ consecutive newlines to exactly 2
    4. Collapse runs of 2+ spaces/tabs to a single space
    5. Trim leading and trailing whitespace

    Args:
        raw_text: Text as returned by extraction (may be None or empty)

    Returns:
        Normalized text

    Example:
        >>> normalize_text("Skills:\\r\\n\\r\\n\\r\\n* Python   & AWS  ")
        'Skills:\\n\\n Python AWS'
    """
    if not raw_text:
        return ""

    text = _LINE_ENDINGS.sub("\n", raw_text)
    text = _DISALLOWED_CHARS.sub("", text)
    text = _EXCESS_NEWLINES.sub("\n\n", text)
    text = _HORIZONTAL_RUNS.sub(" ", text)
    return text.strip()


def count_words(text: str) -> int:
    """Count whitespace-separated tokens."""
    return len(_WORDS.findall(text or ""))
