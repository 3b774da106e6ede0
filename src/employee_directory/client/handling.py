"""
Caller-side error handling.

`with_client_error_handling` is the calling-side counterpart of
`exceptions.mapper.with_error_handling`: whatever the wrapped call raises (transport
errors, decoding errors, bugs) is normalized and re-raised, so caller code only ever
has to catch `AppError`. Works for plain and async functions.
"""
import functools
import inspect
import logging
from typing import Any, Callable, TypeVar

from employee_directory.exceptions.mapper import handle_error

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def _normalized(exc: Exception, operation: str) -> Exception:
    error = handle_error(exc)
    if error is not exc:
        logger.info("client.call_failed", extra={"operation": operation, "code": error.code, "status": error.status})
    return error


def with_client_error_handling(fn: F) -> F:
    operation = fn.__qualname__

    if inspect.iscoroutinefunction(fn):

        @functools.wraps(fn)
        async def async_wrapper(*args, **kwargs):
            try:
                return await fn(*args, **kwargs)
            except Exception as exc:
                error = _normalized(exc, operation)
                if error is exc:
                    raise
                raise error from exc

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except Exception as exc:
            error = _normalized(exc, operation)
            if error is exc:
                raise
            raise error from exc

    return wrapper  # type: ignore[return-value]
