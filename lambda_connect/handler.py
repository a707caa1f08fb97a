"""Handler adapter for single-invocation hosts.

The host calls ``await handler(request, completion_context)``; exactly one
of ``completion_context.succeed`` / ``completion_context.fail`` is called and
the call itself always returns normally.
"""

from __future__ import annotations

from typing import Any

from loguru import logger

from lambda_connect.errors import RequestError, internal_server_error
from lambda_connect.middleware import Middleware
from lambda_connect.outcome import Failure, Outcome, Success
from lambda_connect.pipeline import Pipeline
from lambda_connect.ports import CompletionContext, StructuredLogger


class Handler:
    """Callable bound to one :class:`Pipeline`, configured through ``use()``."""

    __slots__ = ("_pipeline",)

    def __init__(self, pipeline: Pipeline) -> None:
        self._pipeline = pipeline

    @property
    def pipeline(self) -> Pipeline:
        return self._pipeline

    def use(self, middleware: Middleware) -> Handler:
        """Register *middleware* on the underlying pipeline; return this handler."""
        self._pipeline.use(middleware)
        return self

    async def __call__(self, request: Any, completion_context: CompletionContext) -> None:
        try:
            outcome: Outcome = await self._pipeline.run(request)
        except Exception as exc:
            # Failures outside the steps (e.g. a raising logger) still end in fail().
            logger.opt(exception=exc).warning("Pipeline machinery failed")
            outcome = Failure(internal_server_error())

        serialized = _serialize(outcome.error) if isinstance(outcome, Failure) else None
        try:
            match outcome:
                case Success(value=value):
                    completion_context.succeed(value)
                case Failure():
                    completion_context.fail(serialized)
        except Exception as exc:
            logger.opt(exception=exc).warning("Completion callback raised")

    def __repr__(self) -> str:
        return f"Handler({self._pipeline!r})"


def get_handler(
    *,
    middleware_context: Any = None,
    log: StructuredLogger | None = None,
) -> Handler:
    """Build a handler around a fresh pipeline."""
    return Handler(Pipeline(middleware_context=middleware_context, log=log))


def _serialize(error: RequestError) -> str:
    """Wire form of *error*, or the generic 500 when its ``to_json`` raises."""
    try:
        return error.to_json()
    except Exception as exc:
        logger.opt(exception=exc).warning("Failure serialization raised")
        return internal_server_error().to_json()
