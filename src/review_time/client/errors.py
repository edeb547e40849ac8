"""Typed exceptions and error handling decorator."""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, TypeVar

from rich.console import Console

F = TypeVar("F", bound=Callable[..., Any])

err_console = Console(stderr=True)
log = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Failed to load data. Please try again later."


class ReviewTimeError(Exception):
    """Base exception for review-time."""

    exit_code: int = 1
    user_message: str | None = None


class RequestFailed(ReviewTimeError):
    """The API answered with a non-success status, or could not be reached."""

    exit_code = 2
    user_message = LOAD_FAILED_MESSAGE

    def __init__(self, detail: str, status_code: int | None = None) -> None:
        self.detail = detail
        self.status_code = status_code
        super().__init__(f"API call failed: {detail}")


class MalformedResponse(ReviewTimeError):
    """The API answered with a body that is not the expected JSON shape."""

    exit_code = 3
    user_message = LOAD_FAILED_MESSAGE


class ConfigurationError(ReviewTimeError):
    """Invalid or unreadable configuration."""

    exit_code = 4


class AnalysisFailed(ReviewTimeError):
    """Any other failure while fetching, analysing or rendering a sample."""

    exit_code = 5
    user_message = LOAD_FAILED_MESSAGE


def error_handler(func: F) -> F:
    """Decorator that catches ReviewTimeError and prints user-friendly messages.

    Diagnostic detail goes to the log; the user sees the error's fixed
    ``user_message`` when it has one.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except ReviewTimeError as exc:
            log.error("%s: %s", type(exc).__name__, exc, exc_info=log.isEnabledFor(logging.DEBUG))
            err_console.print(f"[bold red]Error:[/] {exc.user_message or exc}")
            raise SystemExit(exc.exit_code)
        except ValueError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(1)

    return wrapper  # type: ignore[return-value]
