"""Sequential middleware pipeline.

Each registered middleware receives ``(context, payload)`` and returns the
payload for the next one.  The run stops at the first raised exception,
which is classified into a :class:`~lambda_connect.errors.RequestError`::

    pipeline = Pipeline(middleware_context=deps)
    pipeline.use(parse_body).use(authorize).use(render)
    outcome = await pipeline.run(request)

Calling ``use()`` while a run is in flight is not supported.  A run works
on a snapshot of the steps taken when it starts, so late registrations only
affect later runs.
"""

from __future__ import annotations

from typing import Any

from lambda_connect.errors import classify, is_expected
from lambda_connect.log import default_logger
from lambda_connect.middleware import Middleware, WrappedStep, wrap_middleware
from lambda_connect.outcome import Failure, Outcome, Success
from lambda_connect.ports import StructuredLogger


class Pipeline:
    """Ordered, append-only chain of wrapped middleware."""

    __slots__ = ("_steps", "log", "middleware_context")

    def __init__(
        self,
        *,
        middleware_context: Any = None,
        log: StructuredLogger | None = None,
    ) -> None:
        self.middleware_context = middleware_context
        self.log: StructuredLogger = log if log is not None else default_logger()
        self._steps: list[WrappedStep] = []

    def use(self, middleware: Middleware) -> Pipeline:
        """Append *middleware* and return the pipeline for chaining."""
        if not callable(middleware):
            raise TypeError(f"middleware must be callable, got {type(middleware).__name__}")
        self._steps.append(wrap_middleware(self.log, middleware))
        return self

    @property
    def steps(self) -> tuple[WrappedStep, ...]:
        return tuple(self._steps)

    async def run(self, request: Any) -> Outcome:
        """Thread *request* through every step and return the outcome."""
        steps = tuple(self._steps)
        context = self.middleware_context
        payload = request
        self.log.info({"request": request}, "Request")
        try:
            for step in steps:
                payload = await step(context, payload)
        except Exception as exc:
            if not is_expected(exc):
                self.log.warn(exc, "Unexpected error")
            error = classify(exc)
            self.log.info({"error": error.to_dict()}, "Fail")
            return Failure(error)

        self.log.info({"response": payload}, "Succeed")
        return Success(payload)

    def __len__(self) -> int:
        return len(self._steps)

    def __repr__(self) -> str:
        names = [step.__name__ for step in self._steps]
        return f"Pipeline({' → '.join(names)})"
