"""Custom exceptions for configuration management."""

from typing import List, Optional

from pydantic import ValidationError


class ConfigurationError(Exception):
    """Raised when configuration cannot be loaded or validated.

    The rendered message lists every individual error and suggestion, so
    a single ``str(exc)`` is enough for a startup failure report.
    """

    def __init__(
        self,
        message: str,
        errors: Optional[List[str]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.message = message
        self.errors = errors or []
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    @classmethod
    def from_validation_error(
        cls, error: ValidationError, suggestions: Optional[List[str]] = None
    ) -> "ConfigurationError":
        """Translate pydantic errors into "section -> field: message" lines."""
        errors = []
        for item in error.errors():
            field_path = " -> ".join(str(loc) for loc in item["loc"])
            if item["type"] == "missing":
                errors.append(f"Missing required field: {field_path}")
            elif field_path:
                errors.append(f"{field_path}: {item['msg']}")
            else:
                errors.append(item["msg"])
        return cls("Configuration validation failed", errors=errors, suggestions=suggestions)

    def _format_message(self) -> str:
        lines = [self.message]
        if self.errors:
            lines.append("\nValidation Errors:")
            lines.extend(f"  {i}. {error}" for i, error in enumerate(self.errors, 1))
        if self.suggestions:
            lines.append("\nSuggestions:")
            lines.extend(f"  - {suggestion}" for suggestion in self.suggestions)
        return "\n".join(lines)
