"""Configuration schema models using Pydantic."""

import math
from enum import Enum
from typing import List

from pydantic import BaseModel, Field, field_validator, model_validator


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


class SemanticProvider(str, Enum):
    """Supported semantic analysis providers."""

    GEMINI = "gemini"


class ExtractionConfig(BaseModel):
    """Document text extraction settings."""

    validate_signatures: bool = Field(
        True, description="Check PDF/DOCX/DOC magic bytes before parsing"
    )
    max_file_size_mb: int = Field(10, ge=1, le=50, description="Largest accepted document")

    @property
    def max_file_size_bytes(self) -> int:
        return self.max_file_size_mb * 1024 * 1024


class KeywordConfig(BaseModel):
    """Keyword extraction limits."""

    max_keywords: int = Field(50, ge=1, le=50, description="Cap on keywords per document")
    min_word_length: int = Field(3, ge=1, le=10, description="Shortest generic term kept")
    extra_stop_words: List[str] = Field(
        default_factory=list, description="Stop words added to the built-in set"
    )

    @field_validator("extra_stop_words")
    @classmethod
    def normalize_stop_words(cls, v: List[str]) -> List[str]:
        """Lower-case and strip stop words, dropping empty entries."""
        return [word.strip().lower() for word in v if word.strip()]


class ScoringConfig(BaseModel):
    """Lexical scoring and score fusion settings."""

    lexical_weight: float = Field(0.4, ge=0.0, le=1.0)
    semantic_weight: float = Field(0.6, ge=0.0, le=1.0)
    max_missing_keywords: int = Field(10, ge=1, le=10)
    max_narrative_items: int = Field(5, ge=1, le=5)
    high_confidence_threshold: int = Field(70, ge=0, le=100)
    medium_confidence_threshold: int = Field(50, ge=0, le=100)

    @model_validator(mode="after")
    def validate_weights_and_thresholds(self):
        """Weights must sum to one and thresholds must be ordered."""
        if not math.isclose(self.lexical_weight + self.semantic_weight, 1.0, abs_tol=1e-9):
            raise ValueError(
                "lexical_weight and semantic_weight must sum to 1.0, got "
                f"{self.lexical_weight} + {self.semantic_weight}"
            )
        if self.medium_confidence_threshold >= self.high_confidence_threshold:
            raise ValueError(
                "medium_confidence_threshold must be lower than high_confidence_threshold"
            )
        return self


class SemanticConfig(BaseModel):
    """External semantic analysis provider settings."""

    enabled: bool = Field(True, description="Call the provider during matching")
    provider: SemanticProvider = Field(SemanticProvider.GEMINI)
    model: str = Field("gemini-1.5-flash", min_length=1)
    base_url: str = Field(
        "https://generativelanguage.googleapis.com/v1beta",
        min_length=1,
        description="Provider REST API root",
    )
    request_timeout: int = Field(30, ge=5, le=300, description="Seconds per provider call")
    min_text_length: int = Field(
        10, ge=0, description="Shortest resume/job text sent to the provider"
    )

    @field_validator("model", "base_url")
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            raise ValueError("Field cannot be empty or whitespace-only")
        return stripped.rstrip("/")

    model_config = {"use_enum_values": True, "validate_default": True}


class InsightConfig(BaseModel):
    """Thresholds for cross-match insight aggregation."""

    common_term_ratio: float = Field(0.3, gt=0.0, le=1.0)
    max_common_terms: int = Field(5, ge=1, le=20)
    senior_track_threshold: int = Field(75, ge=0, le=100)
    targeted_skill_threshold: int = Field(50, ge=0, le=100)
    resume_refresh_threshold: int = Field(60, ge=0, le=100)
    priority_match_threshold: int = Field(70, ge=0, le=100)

    @model_validator(mode="after")
    def validate_bands(self):
        if self.targeted_skill_threshold >= self.senior_track_threshold:
            raise ValueError(
                "targeted_skill_threshold must be lower than senior_track_threshold"
            )
        return self


class MatchingConfig(BaseModel):
    """Match orchestration settings."""

    extract_on_demand: bool = Field(
        False, description="Extract unprocessed resumes instead of failing the match"
    )
    top_matches_limit: int = Field(10, ge=1, le=100)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True, "validate_default": True}


class AppConfig(BaseModel):
    """Root configuration object for the matching engine."""

    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    keywords: KeywordConfig = Field(default_factory=KeywordConfig)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    semantic: SemanticConfig = Field(default_factory=SemanticConfig)
    insights: InsightConfig = Field(default_factory=InsightConfig)
    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
