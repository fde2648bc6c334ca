"""Semantic analyzer backed by the Gemini generateContent REST API."""

import json
import logging
import re
from typing import Any, Dict, Optional

import requests
from pydantic import ValidationError

from talentmatch.config.models import SemanticConfig
from talentmatch.domain.models import SemanticAnalysis
from talentmatch.logging import get_logger

from .base import SemanticAnalyzer
from .exceptions import (
    SemanticConfigurationError,
    SemanticHTTPError,
    SemanticInputError,
    SemanticProviderError,
    SemanticResponseError,
    SemanticTimeoutError,
)
from .prompts import CONNECTION_TEST_PROMPT, build_match_prompt

logger = get_logger(__name__, component="semantic")

_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")


class GeminiAnalyzer(SemanticAnalyzer):
    """Calls Gemini to judge resume/job fit.

    Attributes:
        config: Provider settings (model, base URL, timeout)
        api_key: Gemini API key
    """

    name = "gemini"

    def __init__(
        self,
        api_key: Optional[str],
        config: Optional[SemanticConfig] = None,
        session: Optional[requests.Session] = None,
        logger_instance: Optional[logging.Logger] = None,
    ) -> None:
        """Initialize the analyzer.

        Args:
            api_key: Gemini API key
            config: Provider settings (defaults to SemanticConfig())
            session: Optional requests session (injected in tests)
            logger_instance: Optional logger

        Raises:
            SemanticConfigurationError: If api_key is empty
        """
        if not api_key or not api_key.strip():
            raise SemanticConfigurationError("GEMINI_API_KEY environment variable is not set")

        self.api_key = api_key.strip()
        self.config = config or SemanticConfig()
        self.logger = logger_instance or logger
        self._session = session or requests.Session()
        self._session.headers.update(
            {"Content-Type": "application/json", "x-goog-api-key": self.api_key}
        )

    @property
    def endpoint(self) -> str:
        return f"{self.config.base_url}/models/{self.config.model}:generateContent"

    def analyze(self, resume_text: str, job_text: str) -> SemanticAnalysis:
        """Ask Gemini for a match score, strengths, gaps and an assessment.

        Raises:
            SemanticInputError: If either text is shorter than min_text_length
            SemanticProviderError: On HTTP, timeout or response parsing failures
        """
        min_length = self.config.min_text_length
        if not resume_text or len(resume_text) < min_length:
            raise SemanticInputError("Resume text is too short or empty")
        if not job_text or len(job_text) < min_length:
            raise SemanticInputError("Job description is too short or empty")

        self.logger.debug(
            "Requesting semantic analysis",
            extra={
                "event": "semantic.analysis.requested",
                "provider": self.name,
                "model": self.config.model,
                "resume_chars": len(resume_text),
                "job_chars": len(job_text),
            },
        )

        reply = self._generate(
            build_match_prompt(resume_text, job_text),
            generation_config={"temperature": 0.2, "responseMimeType": "application/json"},
        )
        analysis = self._parse_analysis(reply)

        self.logger.info(
            "Semantic analysis completed",
            extra={
                "event": "semantic.analysis.completed",
                "provider": self.name,
                "match_score": analysis.match_score,
            },
        )
        return analysis

    def test_connection(self) -> str:
        """Send a trivial prompt; every failure propagates to the caller."""
        return self._generate(CONNECTION_TEST_PROMPT).strip()

    def _generate(self, prompt: str, generation_config: Optional[Dict[str, Any]] = None) -> str:
        """POST a prompt and return the text of the first candidate.

        Raises:
            SemanticHTTPError: On 4xx or 5xx status
            SemanticTimeoutError: On request timeout
            SemanticResponseError: On invalid JSON or an empty candidate list
            SemanticProviderError: On connection failures
        """
        payload: Dict[str, Any] = {"contents": [{"parts": [{"text": prompt}]}]}
        if generation_config:
            payload["generationConfig"] = generation_config

        try:
            response = self._session.post(
                self.endpoint, json=payload, timeout=self.config.request_timeout
            )
        except requests.exceptions.Timeout as e:
            raise SemanticTimeoutError(
                f"Gemini request timed out after {self.config.request_timeout}s"
            ) from e
        except requests.exceptions.RequestException as e:
            raise SemanticProviderError(f"Gemini request failed: {e}") from e

        if response.status_code >= 400:
            raise SemanticHTTPError(
                f"HTTP {response.status_code}: {response.reason}",
                status_code=response.status_code,
                url=self.endpoint,
            )

        try:
            body = response.json()
        except ValueError as e:
            raise SemanticResponseError(f"Failed to parse Gemini response body: {e}") from e

        try:
            parts = body["candidates"][0]["content"]["parts"]
            return "".join(part.get("text", "") for part in parts)
        except (KeyError, IndexError, TypeError) as e:
            block_reason = None
            if isinstance(body, dict):
                block_reason = (body.get("promptFeedback") or {}).get("blockReason")
            detail = f" (blocked: {block_reason})" if block_reason else ""
            raise SemanticResponseError(f"Gemini response had no candidate text{detail}") from e

    def _parse_analysis(self, reply: str) -> SemanticAnalysis:
        """Pull the JSON object out of a model reply and validate it.

        Raises:
            SemanticResponseError: If no JSON object is present or it is invalid
        """
        match = _JSON_OBJECT.search(reply or "")
        if not match:
            raise SemanticResponseError("No JSON object found in Gemini reply")

        try:
            data = json.loads(match.group(0))
        except json.JSONDecodeError as e:
            raise SemanticResponseError(f"JSON parsing failed: {e}") from e

        if not isinstance(data, dict):
            raise SemanticResponseError("Gemini reply JSON is not an object")

        try:
            return SemanticAnalysis.model_validate(data)
        except ValidationError as e:
            raise SemanticResponseError(f"Gemini reply failed validation: {e}") from e
