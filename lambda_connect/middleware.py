"""Step wrapper: logs each middleware's input and output.

A middleware is any callable taking ``(context, payload)`` and returning the
next payload, either directly or as an awaitable.  The wrapper does not catch
anything; failures propagate to the pipeline, which is the only place errors
get classified.
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Awaitable, Callable
from typing import Any, TypeAlias

from lambda_connect.ports import StructuredLogger

ANONYMOUS = "anonymous"

Middleware: TypeAlias = Callable[[Any, Any], Any | Awaitable[Any]]
WrappedStep: TypeAlias = Callable[[Any, Any], Awaitable[Any]]


def middleware_name(middleware: Any) -> str:
    """Declared name of *middleware*, or ``"anonymous"`` for lambdas and nameless callables."""
    if isinstance(middleware, functools.partial):
        return middleware_name(middleware.func)
    name = getattr(middleware, "__name__", None)
    if name is None and not inspect.isroutine(middleware):
        name = type(middleware).__name__
    if not name or name == "<lambda>":
        return ANONYMOUS
    return name


def wrap_middleware(log: StructuredLogger, middleware: Middleware) -> WrappedStep:
    """Wrap *middleware* with ``MiddlewareBefore`` / ``MiddlewareAfter`` debug events."""
    name = middleware_name(middleware)

    async def step(context: Any, payload: Any) -> Any:
        log.debug({"middleware": name, "input": payload, "context": context}, "MiddlewareBefore")
        output = middleware(context, payload)
        if inspect.isawaitable(output):
            output = await output
        log.debug({"middleware": name, "output": output, "context": context}, "MiddlewareAfter")
        return output

    step.__name__ = name
    step.__qualname__ = f"wrap_middleware.<{name}>"
    step.middleware = middleware  # type: ignore[attr-defined]
    return step
