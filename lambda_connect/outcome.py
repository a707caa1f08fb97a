"""Terminal result of one pipeline run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeAlias

from lambda_connect.errors import RequestError


@dataclass(frozen=True, slots=True)
class Success:
    """Every step completed; ``value`` is the last step's output."""

    value: Any


@dataclass(frozen=True, slots=True)
class Failure:
    """A step raised; ``error`` is already classified."""

    error: RequestError


Outcome: TypeAlias = Success | Failure
