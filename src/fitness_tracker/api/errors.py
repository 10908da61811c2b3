"""Error mapping for the HTTP layer.

Failed reads are logged and answered with an empty or default payload.
Failed writes are logged and surfaced as a blocking ``WriteFailedError``.
Neither is retried.
"""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TypeVar

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from fitness_tracker.domain.errors import (
    AuthUnavailableError,
    FitnessTrackerError,
    NotFoundError,
    SessionStateError,
    ValidationError,
    WriteFailedError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

_STATUS_CODES: dict[type[FitnessTrackerError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    AuthUnavailableError: status.HTTP_502_BAD_GATEWAY,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    SessionStateError: status.HTTP_409_CONFLICT,
    WriteFailedError: status.HTTP_502_BAD_GATEWAY,
}


def read_or_default(
    read: Callable[[], T], default: T, message: str, **extra: object
) -> T:
    """Run a read, returning default when the backend fails."""
    try:
        return read()
    except FitnessTrackerError:
        raise
    except Exception:
        logger.exception(message, extra=extra)
        return default


@contextmanager
def guard_write(message: str, **extra: object) -> Iterator[None]:
    """Turn backend failures inside the block into a WriteFailedError."""
    try:
        yield
    except FitnessTrackerError:
        raise
    except Exception as exc:
        logger.exception(message, extra=extra)
        raise WriteFailedError(f"{message}. Please try again.") from exc


def register_error_handlers(app: FastAPI, environment: str) -> None:
    """Map application errors to JSON responses."""

    @app.exception_handler(FitnessTrackerError)
    async def handle_app_error(
        request: Request, exc: FitnessTrackerError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=_status_code(exc),
            content={"detail": _format_detail(exc, environment)},
        )


def _status_code(exc: FitnessTrackerError) -> int:
    for error_type, code in _STATUS_CODES.items():
        if isinstance(exc, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _format_detail(exc: FitnessTrackerError, environment: str) -> str:
    """Return the user-facing message, with the cause attached when local."""
    detail = str(exc)
    cause = exc.__cause__
    if environment == "local" and cause is not None:
        debug = f"{type(cause).__name__}: {cause}".strip()
        return f"{detail} (debug: {debug})"
    return detail
