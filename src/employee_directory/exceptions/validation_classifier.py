"""
Turn pydantic / FastAPI validation errors into something safe to show to a client.

Pydantic's own messages are verbose and include the rejected input. We only keep the
field locations and the short per-field message so the normalizer can build an
INVALID_INPUT error without leaking raw payloads.
"""
import logging
from typing import Any, Iterable, Mapping

from pydantic import ValidationError

logger = logging.getLogger(__name__)

# Location prefixes FastAPI adds in front of the field name.
_REQUEST_LOCATIONS = {"body", "query", "path", "header", "cookie"}


def _loc_to_field(loc: Iterable[Any]) -> str:
    # ('body', 'employeeId') -> 'employeeId'; ('path', 'id') -> 'id'
    parts = [str(p) for p in loc if p not in _REQUEST_LOCATIONS]
    return ".".join(parts) or "input"


def extract_field_errors(raw_errors: Iterable[Mapping[str, Any]]) -> list[dict[str, str]]:
    """
    Return [{"field": ..., "message": ...}, ...] for every reported error.

    Accepts the list returned by `ValidationError.errors()` or
    `RequestValidationError.errors()`; both share the same item shape.
    """
    return [
        {"field": _loc_to_field(err.get("loc", ())), "message": str(err.get("msg", "invalid"))}
        for err in raw_errors
    ]


def summarize_field_errors(errors: list[dict[str, str]]) -> str:
    if not errors:
        return "Invalid input"
    fields = ", ".join(sorted({e["field"] for e in errors}))
    return f"Invalid input for field(s): {fields}"


def classify_validation_error(exc: ValidationError) -> tuple[str, list[dict[str, str]]]:
    """
    Classify a pydantic ValidationError.

    Returns:
        A tuple of (client-safe message, list of field errors).
    """
    errors = extract_field_errors(exc.errors(include_url=False, include_input=False))
    logger.debug("validation.classified", extra={"title": exc.title, "error_count": len(errors)})
    return summarize_field_errors(errors), errors
