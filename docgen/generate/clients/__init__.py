# Model clients. Every client exposes generate(prompt, params) -> (text, meta).

from docgen.exceptions import ConfigurationError

from ..types import InferenceConfig
from .echo_dev_client import EchoDevClient
from .huggingface_client import HuggingFaceClient


def build_model_client(settings):
    """Pick the inference backend named by INFERENCE_BACKEND.

    Raises ConfigurationError when the chosen backend lacks its credentials.
    """
    backend = (settings.INFERENCE_BACKEND or "huggingface").lower()
    if backend == "huggingface":
        return HuggingFaceClient(InferenceConfig.from_settings(settings))
    if backend == "ollama":
        from .ollama_client import OllamaClient
        return OllamaClient(model=settings.OLLAMA_MODEL, host=settings.OLLAMA_HOST, timeout=settings.REQUEST_TIMEOUT)
    if backend == "openai":
        if not settings.OPENAI_API_KEY:
            raise ConfigurationError("Missing OPENAI_API_KEY environment variable")
        from .openai_client import OpenAIClient
        return OpenAIClient(model=settings.OPENAI_MODEL, api_key=settings.OPENAI_API_KEY, timeout=settings.REQUEST_TIMEOUT)
    if backend == "echo":
        return EchoDevClient()
    raise ConfigurationError(f"Unknown INFERENCE_BACKEND: {settings.INFERENCE_BACKEND!r}")


__all__ = ["build_model_client", "EchoDevClient", "HuggingFaceClient"]
