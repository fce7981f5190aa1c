"""Generative-content providers."""
from prompt_relay.providers.base import GenerationResult, GenerativeProvider, ModelHandle

__all__ = ["GenerationResult", "GenerativeProvider", "ModelHandle"]
