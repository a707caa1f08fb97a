"""Port interfaces consumed by the pipeline and the handler adapter."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class StructuredLogger(Protocol):
    """Three-severity structured logger.

    ``fields`` is a mapping of values attached to the record; ``message`` is
    the short event tag (``"Request"``, ``"MiddlewareBefore"``, ...).
    """

    def debug(self, fields: dict[str, Any], message: str) -> None:
        """Record a diagnostic event."""

    def info(self, fields: dict[str, Any], message: str) -> None:
        """Record a lifecycle event."""

    def warn(self, error_or_fields: BaseException | dict[str, Any], message: str) -> None:
        """Record an unexpected condition, keeping the exception when given one."""


@runtime_checkable
class CompletionContext(Protocol):
    """Single-invocation result channel provided by the host."""

    def succeed(self, payload: Any) -> None:
        """Report the final payload."""

    def fail(self, error: str) -> None:
        """Report the serialized failure."""
