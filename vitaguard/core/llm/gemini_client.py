"""
Gemini API Client

Thin wrapper around Google Gemini (via LangChain) for one-shot, non-streaming
text generation with a bounded timeout and no retries.

Unlike a best-effort chat client this one never returns placeholder text: an
unconfigured credential raises ConfigurationError before any network activity,
and every SDK / network failure surfaces as TransportError so the caller can
fall back to the local engine.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from enum import Enum
import asyncio
from datetime import datetime

from langchain_google_genai import ChatGoogleGenerativeAI

from vitaguard.config import PLACEHOLDER_API_KEY, get_settings
from vitaguard.utils import ConfigurationError, TransportError, get_logger

logger = get_logger(__name__)


class GeminiModel(str, Enum):
    """Gemini models the analysis prompt has been exercised against."""
    FLASH_1_5 = "gemini-1.5-flash"
    FLASH_2_0 = "gemini-2.0-flash"


def _settings_value(name: str) -> Any:
    return getattr(get_settings(), name)


@dataclass
class GeminiConfig:
    """Configuration for Gemini client. Defaults come from Settings."""
    api_key: Optional[str] = field(default_factory=lambda: _settings_value("gemini_api_key"))
    model: str = field(default_factory=lambda: _settings_value("gemini_model"))
    temperature: float = field(default_factory=lambda: _settings_value("gemini_temperature"))
    max_output_tokens: int = field(default_factory=lambda: _settings_value("gemini_max_output_tokens"))
    request_timeout_seconds: float = field(default_factory=lambda: _settings_value("gemini_timeout_seconds"))

    # Ask Gemini for a bare JSON body instead of prose or fenced markdown
    response_mime_type: str = "application/json"

    @property
    def model_name(self) -> str:
        """Resolve model name whether ``model`` is a GeminiModel or a plain string."""
        return self.model.value if hasattr(self.model, "value") else str(self.model)

    @property
    def has_credential(self) -> bool:
        """False for a missing, blank or placeholder API key."""
        key = (self.api_key or "").strip()
        return bool(key) and key != PLACEHOLDER_API_KEY


@dataclass
class GeminiResponse:
    """Structured response from Gemini."""
    text: str
    model: str
    prompt_tokens: int = 0
    completion_tokens: int = 0
    latency_ms: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "model": self.model,
            "prompt_tokens": self.prompt_tokens,
            "completion_tokens": self.completion_tokens,
            "latency_ms": round(self.latency_ms, 2),
        }


def _extract_text(message: Any) -> str:
    content = message.content if hasattr(message, "content") else message
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, dict):
                parts.append(str(part.get("text", "")))
            else:
                parts.append(str(part))
        return "".join(parts)
    return str(content)


def _usage(message: Any) -> tuple:
    usage = getattr(message, "usage_metadata", None) or {}
    return usage.get("input_tokens", 0), usage.get("output_tokens", 0)


class GeminiClient:
    """
    Client for Google Gemini API.

    Construct once per process and pass it to whatever needs it; the client
    keeps only request counters, never per-request state.
    """

    def __init__(self, config: Optional[GeminiConfig] = None):
        """
        Initialize Gemini client.

        Args:
            config: Optional configuration, uses Settings-derived defaults if not provided
        """
        self.config = config or GeminiConfig()
        self._llm: Optional[ChatGoogleGenerativeAI] = None
        self._init_error: Optional[str] = None
        self._request_count = 0
        self._last_request_time: Optional[datetime] = None

        self._initialize()

    def _initialize(self) -> None:
        if not self.config.has_credential:
            logger.warning("Gemini API key not configured - analyses will use the local engine")
            return

        try:
            self._llm = ChatGoogleGenerativeAI(
                model=self.config.model_name,
                temperature=self.config.temperature,
                max_output_tokens=self.config.max_output_tokens,
                timeout=self.config.request_timeout_seconds,
                max_retries=0,
                google_api_key=self.config.api_key,
                response_mime_type=self.config.response_mime_type,
            )
            logger.info(f"Gemini client initialized with model: {self.config.model_name}")
        except Exception as e:
            self._init_error = str(e)
            logger.error(f"Failed to initialize Gemini client: {e}")

    @property
    def is_configured(self) -> bool:
        """A usable credential is present (says nothing about reachability)."""
        return self.config.has_credential

    @property
    def is_available(self) -> bool:
        return self._llm is not None

    def _require_llm(self) -> ChatGoogleGenerativeAI:
        if not self.is_configured:
            raise ConfigurationError("Gemini API key is missing or still the placeholder value")
        if self._llm is None:
            raise ConfigurationError(
                "Gemini client could not be initialized",
                details={"reason": self._init_error},
            )
        return self._llm

    def _record(self, message: Any, started: datetime) -> GeminiResponse:
        self._request_count += 1
        self._last_request_time = datetime.now()
        prompt_tokens, completion_tokens = _usage(message)
        return GeminiResponse(
            text=_extract_text(message),
            model=self.config.model_name,
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            latency_ms=(self._last_request_time - started).total_seconds() * 1000,
        )

    def generate(self, prompt: str) -> GeminiResponse:
        """
        Send one prompt and wait for the full response.

        Raises:
            ConfigurationError: no usable credential; no request was made
            TransportError: the request failed or timed out
        """
        llm = self._require_llm()
        started = datetime.now()
        try:
            message = llm.invoke(prompt)
        except Exception as e:
            logger.error(f"Gemini generation failed: {e}")
            raise TransportError(f"Gemini request failed: {e}") from e
        return self._record(message, started)

    async def generate_async(self, prompt: str) -> GeminiResponse:
        """
        Async variant using LangChain's ``ainvoke``.

        Yields the event loop during the HTTP round-trip; the configured
        timeout is enforced with ``asyncio.wait_for``.
        """
        llm = self._require_llm()
        started = datetime.now()
        try:
            message = await asyncio.wait_for(
                llm.ainvoke(prompt),
                timeout=self.config.request_timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            logger.error(f"Gemini request timed out after {self.config.request_timeout_seconds}s")
            raise TransportError(
                f"Gemini request timed out after {self.config.request_timeout_seconds}s",
                timed_out=True,
            ) from e
        except Exception as e:
            logger.error(f"Async Gemini generation failed: {e}")
            raise TransportError(f"Gemini request failed: {e}") from e
        return self._record(message, started)

    def get_stats(self) -> Dict[str, Any]:
        """Get client statistics."""
        return {
            "is_configured": self.is_configured,
            "is_available": self.is_available,
            "model": self.config.model_name,
            "request_count": self._request_count,
            "last_request": self._last_request_time.isoformat() if self._last_request_time else None
        }
