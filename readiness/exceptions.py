"""Custom exceptions for the readiness analyzer.

These are raised inside the pipeline and absorbed at its public boundary:
callers of ``analyze_page``, ``extract_content``, ``score`` and
``generate_recommendations`` always get a complete result.
"""

from typing import Any


class ReadinessError(Exception):
    """Base exception for the readiness analyzer."""

    def __init__(
        self,
        message: str,
        code: str = "error",
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
            }
        }


class ExtractionError(ReadinessError):
    """HTML could not be parsed into a content model."""

    def __init__(self, message: str, url: str | None = None):
        details = {"url": url} if url else {}
        super().__init__(message=message, code="parse_failure", details=details)


class WeightProfileError(ReadinessError):
    """A dynamic weight profile is unusable."""

    def __init__(self, message: str, profile: str | None = None, total: float | None = None):
        details: dict[str, Any] = {}
        if profile:
            details["profile"] = profile
        if total is not None:
            details["total"] = total
        super().__init__(message=message, code="invalid_weight_profile", details=details)


class PersonalizationError(ReadinessError):
    """Content-aware rewriting of a recommendation failed."""

    def __init__(self, message: str, metric: str | None = None):
        details = {"metric": metric} if metric else {}
        super().__init__(message=message, code="personalization_failed", details=details)
