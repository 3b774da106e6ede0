import functools
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Awaitable, Callable, ParamSpec, TypeVar

from pydantic import ValidationError

from .base import AppError, InternalError, InvalidInputError, UnknownError
from .validation_classifier import classify_validation_error

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


# -----------------------
# Normalizer
# -----------------------

def _safe_message(error: BaseException) -> str:
    try:
        return str(error).strip()
    except Exception:
        # a broken __str__ must not break normalization
        return ""


def _safe_repr(value: object) -> str:
    try:
        return repr(value)[:500]
    except Exception:
        return f"<unrepresentable {type(value).__name__}>"


def handle_error(error: object) -> AppError:
    """
    Convert any caught failure value into an AppError.

    - AppError: returned unchanged.
    - pydantic ValidationError: INVALID_INPUT (400) listing the failing fields in meta.
    - any other exception with a message: logged with its traceback, wrapped as
      INTERNAL_ERROR (500) keeping the original message.
    - anything else (a messageless exception, a non-exception value): UNKNOWN_ERROR (500)
      with a fixed message. The raw value is only logged.

    Never raises.
    """
    if isinstance(error, AppError):
        return error

    if isinstance(error, ValidationError):
        message, fields = classify_validation_error(error)
        logger.info("mapper.validation_error", extra={"fields": [f["field"] for f in fields]})
        return InvalidInputError(message, meta={"errors": fields})

    if isinstance(error, BaseException):
        message = _safe_message(error)
        if message:
            logger.error(
                "[Unhandled Error] %s: %s",
                type(error).__name__,
                message,
                exc_info=(type(error), error, error.__traceback__),
                extra={"exception_type": type(error).__name__},
            )
            return InternalError(message, meta={"exception_type": type(error).__name__})

    # No usable message: keep the raw value in the logs only.
    logger.error(
        "[Unknown Error] %s",
        _safe_repr(error),
        extra={"value_type": type(error).__name__},
    )
    return UnknownError()


# -----------------------
# Async context manager + decorator
# -----------------------

@asynccontextmanager
async def error_boundary(operation: str | None = None) -> AsyncIterator[None]:
    """
    Usage:
        async with error_boundary("employees.create"):
            ... code that may raise anything ...

    Any exception leaving the block is normalized and re-raised as an AppError.
    Side effects performed inside the block before the failure are not undone.
    """
    try:
        yield
    except Exception as exc:
        normalized = handle_error(exc)
        if normalized is exc:
            logger.debug(
                "boundary.app_error",
                extra={"operation": operation, "code": normalized.code, "status": normalized.status},
            )
            raise
        raise normalized from exc


def with_error_handling(fn: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
    """
    Decorate an async function (or method) so that every failure it raises is an AppError.
    Failures are propagated, not swallowed.
    """

    @functools.wraps(fn)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        async with error_boundary(fn.__qualname__):
            return await fn(*args, **kwargs)

    return wrapper


__all__ = ["handle_error", "error_boundary", "with_error_handling"]
