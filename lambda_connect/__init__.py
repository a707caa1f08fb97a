"""Middleware pipelines for single-invocation (serverless) handlers."""

__version__ = "0.1.0"

from lambda_connect.completion import RecordingCompletionContext
from lambda_connect.errors import RequestError, classify, is_expected
from lambda_connect.handler import Handler, get_handler
from lambda_connect.outcome import Failure, Outcome, Success
from lambda_connect.pipeline import Pipeline
from lambda_connect.ports import CompletionContext, StructuredLogger

__all__ = [
    "CompletionContext",
    "Failure",
    "Handler",
    "Outcome",
    "Pipeline",
    "RecordingCompletionContext",
    "RequestError",
    "StructuredLogger",
    "Success",
    "__version__",
    "classify",
    "get_handler",
    "is_expected",
]
