"""Pydantic models for request/response types."""
from __future__ import annotations
from typing import Any

from pydantic import BaseModel


class RelayResponse(BaseModel):
    """Successful relay result."""
    response: str
    timestamp: str


class CallableRequest(BaseModel):
    """Callable transport envelope: ``{"data": ...}``."""
    data: Any


class CallableResult(BaseModel):
    result: RelayResponse


class ErrorBody(BaseModel):
    status: str
    message: str


class CallableErrorOut(BaseModel):
    error: ErrorBody
