"""Provider capability the relay depends on."""
from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class ModelHandle:
    """Reference to a named model of a provider."""
    name: str


class GenerationResult(ABC):
    @abstractmethod
    def text(self) -> str:
        """Return the generated text, raising if the result carries none."""


class GenerativeProvider(ABC):
    @abstractmethod
    def create_model(self, name: str) -> ModelHandle:
        """Obtain a handle for the model called ``name``."""

    @abstractmethod
    def generate(self, model: ModelHandle, prompt: str) -> GenerationResult:
        """Submit ``prompt`` to ``model`` and return the raw result."""
