"""Gemini provider over the Generative Language REST API."""
from __future__ import annotations
import logging
from typing import Any

import httpx

from prompt_relay.common.config import DEFAULT_BASE_URL, Settings
from prompt_relay.providers.base import GenerationResult, GenerativeProvider, ModelHandle

LOGGER = logging.getLogger("prompt_relay.providers.gemini")

BAD_FINISH_REASONS = frozenset({"SAFETY", "RECITATION", "LANGUAGE", "BLOCKLIST", "PROHIBITED_CONTENT", "SPII"})


class ProviderResponseError(RuntimeError):
    """Gemini answered, but the answer holds no usable text."""


class GeminiResult(GenerationResult):
    def __init__(self, payload: dict[str, Any]) -> None:
        self.payload = payload

    def text(self) -> str:
        """
        Extract text the way the Gemini SDKs do.

        Raises:
            ProviderResponseError: if the prompt was blocked, no candidate came back,
                or the first candidate stopped for a safety-like reason.
        """
        candidates = self.payload.get("candidates") or []
        if not candidates:
            feedback = self.payload.get("promptFeedback") or {}
            reason = feedback.get("blockReason")
            if reason:
                raise ProviderResponseError(f"Prompt blocked: {reason}")
            raise ProviderResponseError("Response contained no candidates")

        if len(candidates) > 1:
            LOGGER.warning("Got %d candidates; using the first", len(candidates))
        first = candidates[0]
        finish = first.get("finishReason")
        if finish in BAD_FINISH_REASONS:
            raise ProviderResponseError(f"Candidate finished with reason {finish}")

        parts = (first.get("content") or {}).get("parts") or []
        return "".join(p["text"] for p in parts if isinstance(p, dict) and isinstance(p.get("text"), str))


class GeminiProvider(GenerativeProvider):
    """
    Minimal ``generateContent`` client.

    Args:
        api_key: Gemini API key.
        base_url: API root, without the version segment.
        timeout_s: HTTP timeout per request.
        client: Optional pre-built ``httpx.Client`` (tests pass one with a mock transport).
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout_s: float = 60.0,
        client: httpx.Client | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.Client(timeout=timeout_s)

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiProvider":
        return cls(api_key=settings.api_key, base_url=settings.base_url, timeout_s=settings.timeout_s)

    def create_model(self, name: str) -> ModelHandle:
        name = name.strip()
        if name.startswith("models/"):
            name = name[len("models/"):]
        if not name:
            raise ValueError("Model name must be non-empty")
        return ModelHandle(name=name)

    def generate(self, model: ModelHandle, prompt: str) -> GeminiResult:
        url = f"{self.base_url}/v1beta/models/{model.name}:generateContent"
        headers = {"x-goog-api-key": self.api_key}
        payload = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}

        r = self._client.post(url, headers=headers, json=payload)
        r.raise_for_status()
        return GeminiResult(r.json())

    def close(self) -> None:
        self._client.close()
