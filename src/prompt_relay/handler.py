"""The ``generateResponse`` callable: prompt in, generated text out."""
from __future__ import annotations
import logging
from datetime import datetime, timezone
from typing import Any

from prompt_relay.common.config import DEFAULT_MODEL
from prompt_relay.common.errors import CallableError, FunctionsErrorCode
from prompt_relay.common.schema import RelayResponse
from prompt_relay.providers.base import GenerativeProvider

LOGGER = logging.getLogger("prompt_relay.handler")


def iso_timestamp(now: datetime | None = None) -> str:
    """UTC time as ISO-8601 with full microsecond precision and a ``Z`` suffix."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="microseconds").replace("+00:00", "Z")


def generate_response(data: Any, provider: GenerativeProvider, model_name: str = DEFAULT_MODEL) -> RelayResponse:
    """
    Relay ``data["prompt"]`` to the provider.

    Args:
        data: Invocation payload; only ``prompt`` is read.
        provider: Generative-content provider.
        model_name: Model to request a handle for.

    Raises:
        CallableError: ``invalid-argument`` when the prompt is missing or empty,
            ``internal`` when anything on the provider side fails.
    """
    prompt = data.get("prompt") if isinstance(data, dict) else None
    if not prompt or not isinstance(prompt, str):
        raise CallableError(FunctionsErrorCode.INVALID_ARGUMENT, "Prompt is required")

    try:
        model = provider.create_model(model_name)
        result = provider.generate(model, prompt)
        text = result.text()
        if not isinstance(text, str):
            raise TypeError(f"Provider returned {type(text).__name__} instead of text")
        return RelayResponse(response=text, timestamp=iso_timestamp())
    except Exception as e:
        LOGGER.error("Error generating response: %s", e, exc_info=True)
        raise CallableError(FunctionsErrorCode.INTERNAL, "Failed to generate response") from e
