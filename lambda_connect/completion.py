"""In-memory completion context for local runs and tests."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from lambda_connect.errors import RequestError
from lambda_connect.outcome import Failure, Outcome, Success


@dataclass
class RecordingCompletionContext:
    """Records every ``succeed`` / ``fail`` call for later inspection."""

    succeeded: list[Any] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)

    def succeed(self, payload: Any) -> None:
        self.succeeded.append(payload)

    def fail(self, error: str) -> None:
        self.failed.append(error)

    @property
    def settled(self) -> bool:
        return bool(self.succeeded or self.failed)

    @property
    def outcome(self) -> Outcome | None:
        """First recorded signal as an outcome, with the failure payload parsed back."""
        if self.succeeded:
            return Success(self.succeeded[0])
        if self.failed:
            return Failure(_parse_error(self.failed[0]))
        return None

    def reset(self) -> None:
        self.succeeded.clear()
        self.failed.clear()


def _parse_error(serialized: str) -> RequestError:
    data = json.loads(serialized)
    return RequestError(data.get("code"), data.get("message"), data.get("details"))
