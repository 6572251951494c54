# Generator package

# Makes generate/ importable and exposes key interfaces.

from .generator import DocumentationGenerator
from .sections import GettingStartedComposer, SectionGenerator
from .types import ChatMessage, GenerationParams, GenerationResult, InferenceConfig
from .clients import EchoDevClient, build_model_client

__all__ = [
    "DocumentationGenerator",
    "GettingStartedComposer",
    "SectionGenerator",
    "ChatMessage",
    "GenerationParams",
    "GenerationResult",
    "InferenceConfig",
    "EchoDevClient",
    "build_model_client",
]
