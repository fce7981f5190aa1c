"""Error kinds surfaced to callers of the relay."""
from __future__ import annotations
from enum import Enum
from typing import Any


class FunctionsErrorCode(str, Enum):
    INVALID_ARGUMENT = "invalid-argument"
    INTERNAL = "internal"

    @property
    def canonical_status(self) -> str:
        """Upper-snake-case name used in the wire ``error.status`` field."""
        return self.value.replace("-", "_").upper()


_HTTP_STATUS = {
    FunctionsErrorCode.INVALID_ARGUMENT: 400,
    FunctionsErrorCode.INTERNAL: 500,
}


class CallableError(Exception):
    """Error returned to the caller of a callable function.

    Only ``code`` and ``message`` ever leave the process; whatever caused the
    error stays in the server-side log.
    """

    def __init__(self, code: FunctionsErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    @property
    def http_status(self) -> int:
        return _HTTP_STATUS[self.code]

    def to_dict(self) -> dict[str, Any]:
        return {"status": self.code.canonical_status, "message": self.message}
