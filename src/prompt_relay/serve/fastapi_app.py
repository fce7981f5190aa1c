"""FastAPI transport for the ``generateResponse`` callable.

Endpoints:
- GET /health
- POST /generateResponse  { "data": { "prompt": "..." } }
"""
from __future__ import annotations
import json
import logging

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from prompt_relay.common.config import Settings, load_settings
from prompt_relay.common.errors import CallableError, FunctionsErrorCode
from prompt_relay.common.logging_setup import setup_logging
from prompt_relay.common.schema import CallableErrorOut, CallableRequest, CallableResult, ErrorBody
from prompt_relay.handler import generate_response
from prompt_relay.providers.base import GenerativeProvider
from prompt_relay.providers.gemini import GeminiProvider

LOGGER = logging.getLogger("prompt_relay.serve.app")


def create_app(settings: Settings | None = None, provider: GenerativeProvider | None = None) -> FastAPI:
    """
    Build the relay app.

    Args:
        settings: Runtime settings; loaded from YAML/env when omitted.
        provider: Provider to relay to; a Gemini client built from ``settings`` when omitted.
    """
    settings = settings or load_settings()
    provider = provider or GeminiProvider.from_settings(settings)

    app = FastAPI(title="prompt-relay")
    app.state.settings = settings
    app.state.provider = provider

    @app.on_event("shutdown")
    def _close_provider() -> None:
        close = getattr(app.state.provider, "close", None)
        if callable(close):
            close()

    @app.exception_handler(CallableError)
    async def _callable_error(request: Request, exc: CallableError) -> JSONResponse:
        out = CallableErrorOut(error=ErrorBody(**exc.to_dict()))
        return JSONResponse(status_code=exc.http_status, content=out.model_dump())

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "model": app.state.settings.model_name}

    @app.post("/generateResponse", response_model=CallableResult)
    async def generate(request: Request) -> CallableResult:
        try:
            body = CallableRequest.model_validate(await request.json())
        except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
            LOGGER.warning("Rejected malformed callable request: %s", e)
            raise CallableError(FunctionsErrorCode.INVALID_ARGUMENT, "Bad Request") from e

        result = await run_in_threadpool(
            generate_response, body.data, app.state.provider, app.state.settings.model_name
        )
        return CallableResult(result=result)

    return app


setup_logging()
app = create_app()
