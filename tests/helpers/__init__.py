"""Test helper utilities for the matching engine tests."""

from .analyzers import FailingAnalyzer, StubAnalyzer
from .builders import build_analysis, build_docx, build_record_for

__all__ = ["StubAnalyzer", "FailingAnalyzer", "build_analysis", "build_docx", "build_record_for"]
