"""
Custom Exception Hierarchy

Typed failures of the Gemini analysis path. None of these ever reach the
caller of the orchestrator: they are converted into a failed attempt and
trigger the deterministic fallback.
"""
from typing import Optional, Dict, Any


class HealthAnalysisError(Exception):
    """Base exception for all health analysis errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logs and API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details
        }


class ConfigurationError(HealthAnalysisError):
    """The Gemini credential is missing or still the placeholder value."""

    def __init__(
        self,
        message: str,
        setting: str = "GEMINI_API_KEY",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="CONFIGURATION_ERROR",
            details={"setting": setting, **(details or {})}
        )
        self.setting = setting


class TransportError(HealthAnalysisError):
    """Network failure, timeout or SDK error while calling Gemini."""

    def __init__(
        self,
        message: str,
        timed_out: bool = False,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="TRANSPORT_ERROR",
            details={"timed_out": timed_out, **(details or {})}
        )
        self.timed_out = timed_out


class ResponseSchemaError(HealthAnalysisError):
    """Gemini answered, but not with the declared JSON shape."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="SCHEMA_ERROR",
            details={"field": field, **(details or {})}
        )
        self.field = field
