from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from lambda_connect.completion import RecordingCompletionContext


@dataclass
class RecordingLogger:
    """StructuredLogger fake keeping ``(level, fields, message)`` tuples."""

    calls: list[tuple[str, Any, str]] = field(default_factory=list)

    def debug(self, fields: dict[str, Any], message: str) -> None:
        self.calls.append(("debug", fields, message))

    def info(self, fields: dict[str, Any], message: str) -> None:
        self.calls.append(("info", fields, message))

    def warn(self, error_or_fields: Any, message: str) -> None:
        self.calls.append(("warn", error_or_fields, message))

    def messages(self, level: str | None = None) -> list[str]:
        return [message for lvl, _, message in self.calls if level is None or lvl == level]

    def fields_for(self, message: str) -> list[Any]:
        return [fields for _, fields, msg in self.calls if msg == message]


@pytest.fixture
def log() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def completion() -> RecordingCompletionContext:
    return RecordingCompletionContext()
