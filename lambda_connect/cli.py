"""Command line entry point for invoking a handler locally."""

from __future__ import annotations

import asyncio
import importlib
import json
import sys
from pathlib import Path
from typing import Any

import typer
from dotenv import load_dotenv
from rich.console import Console

from lambda_connect import __version__
from lambda_connect.completion import RecordingCompletionContext
from lambda_connect.config import load_settings
from lambda_connect.handler import Handler
from lambda_connect.log import configure_logging

app = typer.Typer(
    name="lambda-connect",
    help="Run lambda-connect middleware pipelines locally.",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    if value:
        console.print(f"lambda-connect v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(None, "--version", "-v", callback=version_callback, is_eager=True),
) -> None:
    """lambda-connect - middleware pipelines for single-invocation handlers."""
    # Precedence: existing env vars > .env file (override=False)
    load_dotenv(Path.cwd() / ".env", override=False)


def load_handler(target: str) -> Handler:
    """Import ``package.module:attribute`` and check it is a :class:`Handler`."""
    module_name, sep, attribute = target.partition(":")
    if not sep or not module_name or not attribute:
        raise typer.BadParameter(f"expected MODULE:ATTRIBUTE, got {target!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise typer.BadParameter(f"cannot import {module_name!r}: {e}") from e
    handler = getattr(module, attribute, None)
    if not isinstance(handler, Handler):
        raise typer.BadParameter(f"{target!r} is not a lambda-connect Handler")
    return handler


def read_event(source: str | None) -> Any:
    if source is None:
        return {}
    try:
        raw = sys.stdin.read() if source == "-" else Path(source).expanduser().read_text()
    except OSError as e:
        raise typer.BadParameter(f"cannot read event {source!r}: {e}") from e
    if not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise typer.BadParameter(f"event is not valid JSON: {e}") from e


@app.command()
def invoke(
    target: str = typer.Argument(..., help="Handler to run, as MODULE:ATTRIBUTE"),
    event: str | None = typer.Option(None, "--event", "-e", help="JSON request file, or - for stdin"),
    log_level: str | None = typer.Option(None, "--log-level", "-l", help="Log level override"),
    pretty_logs: bool = typer.Option(False, "--pretty-logs", help="Human-readable logs instead of JSON"),
) -> None:
    """Invoke a handler once with a JSON request and print the result."""
    settings = load_settings(
        log_level=log_level.upper() if log_level else None,
        log_serialize=False if pretty_logs else None,
    )
    configure_logging(settings)

    if str(Path.cwd()) not in sys.path:
        sys.path.insert(0, str(Path.cwd()))
    handler = load_handler(target)
    request = read_event(event)

    completion = RecordingCompletionContext()
    asyncio.run(handler(request, completion))

    if not completion.settled:
        err_console.print("[red]Handler returned without calling succeed or fail.[/red]")
        raise typer.Exit(1)

    if completion.failed:
        err_console.print(completion.failed[0], markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(1)
    console.print_json(json.dumps(completion.succeeded[0], default=str))
