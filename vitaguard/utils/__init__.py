"""
Utilities Package - Logging and Exception Handling
"""
from .logging import get_logger, setup_logging
from .exceptions import (
    HealthAnalysisError,
    ConfigurationError,
    TransportError,
    ResponseSchemaError,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "HealthAnalysisError",
    "ConfigurationError",
    "TransportError",
    "ResponseSchemaError",
]
