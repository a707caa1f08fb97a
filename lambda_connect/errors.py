"""Request failure classification.

``RequestError`` is the one failure kind that reaches the caller verbatim.
Anything else raised by a middleware is flattened to a generic 500 so
internals never cross the completion boundary.
"""

from __future__ import annotations

import json
from typing import Any

INTERNAL_SERVER_ERROR_CODE = 500
INTERNAL_SERVER_ERROR_MESSAGE = "Internal server error"
CORE_FIELDS = ("name", "code", "message")


class RequestError(Exception):
    """Deliberate, caller-facing failure with a numeric code."""

    name = "RequestError"

    def __init__(self, code: int, message: str, details: Any = None) -> None:
        super().__init__(code, message)
        self.code = code
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def __repr__(self) -> str:
        return f"RequestError(code={self.code!r}, message={self.message!r}, details={self.details!r})"

    def to_dict(self) -> dict[str, Any]:
        """Wire shape: ``name``, ``code``, ``message`` and ``details`` when set.

        Public attributes added by subclasses are included as well.
        """
        payload: dict[str, Any] = {"name": self.name}
        for key, value in vars(self).items():
            if key.startswith("_") or value is None:
                continue
            payload[key] = value
        return payload

    def to_json(self) -> str:
        """Compact JSON text of :meth:`to_dict`.

        Fields JSON cannot encode (non-str keys, circular references) are sent
        as their ``str()``, and dropped if that still fails.
        """
        payload = self.to_dict()
        core = {key: payload[key] for key in CORE_FIELDS if key in payload}
        stringified = {key: value if key in CORE_FIELDS else str(value) for key, value in payload.items()}
        for candidate in (payload, stringified, core):
            try:
                return _dumps(candidate)
            except (TypeError, ValueError):
                continue
        return _dumps({key: str(value) for key, value in core.items()})


def _dumps(payload: dict[str, Any]) -> str:
    return json.dumps(payload, separators=(",", ":"), default=str)


def internal_server_error() -> RequestError:
    return RequestError(INTERNAL_SERVER_ERROR_CODE, INTERNAL_SERVER_ERROR_MESSAGE)


def is_expected(error: object) -> bool:
    """Return True when *error* is a ``RequestError``."""
    match error:
        case RequestError():
            return True
        case _:
            return False


def classify(error: object) -> RequestError:
    """Pass ``RequestError`` through; normalize anything else to a 500."""
    match error:
        case RequestError():
            return error
        case _:
            return internal_server_error()
