# Typed dataclasses shared across the generation modules.

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from docgen.exceptions import ConfigurationError


@dataclass(frozen=True)
class ChatMessage:
    """Single clarifying-chat turn: assistant or user."""
    role: str
    content: str


@dataclass(frozen=True)
class GenerationParams:
    """Sampling parameters sent with every inference call."""
    max_new_tokens: int = 1000
    temperature: float = 0.3
    top_p: float = 0.8
    repetition_penalty: Optional[float] = 1.1
    return_full_text: bool = False
    do_sample: bool = False

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "max_new_tokens": self.max_new_tokens,
            "temperature": self.temperature,
            "top_p": self.top_p,
            "return_full_text": self.return_full_text,
            "do_sample": self.do_sample,
        }
        if self.repetition_penalty is not None:
            payload["repetition_penalty"] = self.repetition_penalty
        return payload


@dataclass(frozen=True)
class GenerationResult:
    """Final output of DocumentationGenerator."""
    documentation: str
    follow_up_questions: List[str] = field(default_factory=list)
    # set only when generation degraded: {"message": ..., "type": ...}
    error: Optional[Dict[str, str]] = None


@dataclass(frozen=True)
class InferenceConfig:
    """Endpoint, credentials and model id for the inference client.

    Built once at startup and handed to the client, so tests can construct
    their own or skip it entirely with a stub client.
    """
    api_key: str
    model: str = "mistralai/Mixtral-8x7B-Instruct-v0.1"
    api_url: str = "https://api-inference.huggingface.co/models"
    timeout: Optional[float] = None

    @classmethod
    def from_settings(cls, settings) -> "InferenceConfig":
        if not settings.HUGGING_FACE_API_KEY:
            raise ConfigurationError("Missing HUGGING_FACE_API_KEY environment variable")
        return cls(
            api_key=settings.HUGGING_FACE_API_KEY,
            model=settings.HF_MODEL,
            api_url=settings.HF_API_URL,
            timeout=settings.REQUEST_TIMEOUT,
        )

    @property
    def endpoint(self) -> str:
        return f"{self.api_url.rstrip('/')}/{self.model}"
