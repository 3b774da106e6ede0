"""
Logging filters and request-id helpers.

The request id lives in a `contextvars.ContextVar`, so it follows the request across
awaits and asyncio tasks. `RequestIdFilter` copies it onto every LogRecord (or "-" when
unset) so format strings referencing `%(request_id)s` never fail.
"""

import contextvars
import logging
from logging import LogRecord

_request_id_ctx: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id", default=None
)


def set_request_id(request_id: str | None) -> contextvars.Token:
    """
    Set the request id for the current context.

    Returns:
        token: pass it to reset_request_id() to restore the previous value.
    """
    return _request_id_ctx.set(request_id)


def reset_request_id(token: contextvars.Token) -> None:
    _request_id_ctx.reset(token)


def get_request_id() -> str | None:
    return _request_id_ctx.get()


class RequestIdFilter(logging.Filter):
    """
    Guarantees every LogRecord has a `request_id` attribute.

    Priority: an explicit `extra={"request_id": ...}`, then the context var, then "-".
    Never drops a record.
    """

    def filter(self, record: LogRecord) -> bool:
        record.request_id = (
            getattr(record, "request_id", None) or get_request_id() or "-"
        )
        return True


class RedactFilter(logging.Filter):
    """Masks extras whose key looks sensitive."""

    SENSITIVE = {"password", "secret", "token", "access_token", "refresh_token", "authorization", "api_key"}
    MASK = "***REDACTED***"

    def filter(self, record: LogRecord) -> bool:
        for key in list(record.__dict__.keys()):
            if key.lower() in self.SENSITIVE:
                record.__dict__[key] = self.MASK
        return True
