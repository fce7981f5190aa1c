from __future__ import annotations

import logging
from datetime import datetime, timezone

import pytest

from prompt_relay.common.errors import CallableError, FunctionsErrorCode
from prompt_relay.handler import generate_response, iso_timestamp

from fakes import FakeProvider


def _parse(ts: str) -> datetime:
    return datetime.fromisoformat(ts.replace("Z", "+00:00"))


@pytest.mark.parametrize("data", [{}, {"prompt": ""}, {"prompt": None}, {"prompt": 0}, {"prompt": ["Hello"]}, None, "Hello"])
def test_missing_prompt_is_invalid_argument(data: object) -> None:
    provider = FakeProvider()
    with pytest.raises(CallableError) as ei:
        generate_response(data, provider)
    assert ei.value.code is FunctionsErrorCode.INVALID_ARGUMENT
    assert ei.value.message == "Prompt is required"
    assert provider.calls == 0


def test_success_relays_text_with_timestamp() -> None:
    provider = FakeProvider(reply="Hi there!")
    start = datetime.now(timezone.utc)

    out = generate_response({"prompt": "Hello"}, provider, "gemini-2.0-flash")

    assert out.response == "Hi there!"
    assert _parse(out.timestamp) >= start
    assert provider.models == ["gemini-2.0-flash"]
    assert provider.prompts == ["Hello"]


def test_extra_fields_are_ignored() -> None:
    provider = FakeProvider(reply="ok")
    out = generate_response({"prompt": "Hello", "temperature": 2}, provider)
    assert out.response == "ok"


@pytest.mark.parametrize("stage", ["create", "generate", "text"])
def test_provider_failure_is_internal_and_logged_once(stage: str, caplog: pytest.LogCaptureFixture) -> None:
    provider = FakeProvider(fail_at=stage)
    with caplog.at_level(logging.ERROR, logger="prompt_relay.handler"):
        with pytest.raises(CallableError) as ei:
            generate_response({"prompt": "Hello"}, provider)

    err = ei.value
    assert err.code is FunctionsErrorCode.INTERNAL
    assert err.message == "Failed to generate response"
    assert "secret-123" not in str(err.to_dict())
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert "quota exceeded" in errors[0].getMessage()


def test_iso_timestamp_format() -> None:
    ts = iso_timestamp(datetime(2024, 5, 1, 12, 30, 15, 123456, tzinfo=timezone.utc))
    assert ts == "2024-05-01T12:30:15.123456Z"


@pytest.mark.parametrize("reply", [None, 42, {"text": "Hi"}])
def test_non_text_result_is_internal_and_logged(reply: object, caplog: pytest.LogCaptureFixture) -> None:
    provider = FakeProvider(reply=reply)
    with caplog.at_level(logging.ERROR, logger="prompt_relay.handler"):
        with pytest.raises(CallableError) as ei:
            generate_response({"prompt": "Hello"}, provider)

    assert ei.value.code is FunctionsErrorCode.INTERNAL
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert errors[0].exc_info is not None
