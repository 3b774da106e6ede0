"""
Structured application errors.

Every failure that leaves a service-layer operation is an `AppError`: a stable
machine-readable `code`, a human-friendly `message`, an HTTP-like `status` and an
optional free-form `meta` mapping. The set of codes is open (any component may add
one) but the shape is fixed.
"""

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class ErrorCode(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    DUPLICATE_EMPLOYEE_ID = "DUPLICATE_EMPLOYEE_ID"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    # transport-level codes (HTTP layer / client)
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    HTTP_ERROR = "HTTP_ERROR"
    BAD_RESPONSE = "BAD_RESPONSE"


UNEXPECTED_ERROR_MESSAGE = "Unexpected error"


class AppError(Exception):
    """
    Base exception for every structured error raised by the application.

    - code: canonical short code (e.g. 'NOT_FOUND') used by clients
    - message: human-friendly message (safe to show to clients); defaults to the code
    - status: HTTP-like status. When omitted it is looked up from the code in
      ERROR_CODE_TO_STATUS (e.g. NOT_FOUND -> 404); codes missing from the table default to 400
    - meta: optional mapping for logs/diagnostics only, never sent over the action boundary

    Instances are immutable once constructed.
    """

    # Map canonical code -> default status. Codes missing here default to 400.
    ERROR_CODE_TO_STATUS = {
        ErrorCode.INVALID_INPUT.value: 400,
        ErrorCode.DUPLICATE_EMPLOYEE_ID.value: 400,
        ErrorCode.NOT_FOUND.value: 404,
        ErrorCode.METHOD_NOT_ALLOWED.value: 405,
        ErrorCode.INTERNAL_ERROR.value: 500,
        ErrorCode.UNKNOWN_ERROR.value: 500,
        ErrorCode.BAD_RESPONSE.value: 502,
    }
    DEFAULT_STATUS = 400

    def __init__(
        self,
        code: str | ErrorCode,
        message: str | None = None,
        status: int | None = None,
        meta: Mapping[str, Any] | None = None,
    ):
        code = code.value if isinstance(code, ErrorCode) else str(code)
        message = message if message is not None else code
        super().__init__(message)
        self._code = code
        self._message = message
        self._status = status if status is not None else self.ERROR_CODE_TO_STATUS.get(code, self.DEFAULT_STATUS)
        self._meta = MappingProxyType(dict(meta)) if meta else None

    @property
    def code(self) -> str:
        return self._code

    @property
    def message(self) -> str:
        return self._message

    @property
    def status(self) -> int:
        return self._status

    @property
    def meta(self) -> Mapping[str, Any] | None:
        return self._meta

    def __str__(self) -> str:
        return f"{self._message} (code: {self._code}; status: {self._status})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self._code!r}, message={self._message!r}, status={self._status!r})"

    def to_payload(self) -> dict[str, str]:
        """
        The projection that crosses the action boundary: code and message only.
        Status and meta are deliberately left out.
        """
        return {"code": self._code, "message": self._message}

    def to_dict(self) -> dict[str, Any]:
        """Full shape, for logs."""
        data: dict[str, Any] = {"code": self._code, "message": self._message, "status": self._status}
        if self._meta:
            data["meta"] = dict(self._meta)
        return data


# Subclasses pin the canonical code so callers only choose the message / meta.

class InvalidInputError(AppError):
    def __init__(self, message: str = "Invalid input", *, meta: Mapping[str, Any] | None = None):
        super().__init__(ErrorCode.INVALID_INPUT, message, 400, meta)


class DuplicateEmployeeIdError(AppError):
    def __init__(self, message: str = "Employee ID already exists", *, meta: Mapping[str, Any] | None = None):
        super().__init__(ErrorCode.DUPLICATE_EMPLOYEE_ID, message, 400, meta)


class NotFoundError(AppError):
    def __init__(self, message: str = "Not found", *, meta: Mapping[str, Any] | None = None):
        super().__init__(ErrorCode.NOT_FOUND, message, 404, meta)


class InternalError(AppError):
    def __init__(self, message: str, *, meta: Mapping[str, Any] | None = None):
        super().__init__(ErrorCode.INTERNAL_ERROR, message, 500, meta)


class UnknownError(AppError):
    def __init__(self, message: str = UNEXPECTED_ERROR_MESSAGE, *, meta: Mapping[str, Any] | None = None):
        super().__init__(ErrorCode.UNKNOWN_ERROR, message, 500, meta)


__all__ = [
    "ErrorCode",
    "UNEXPECTED_ERROR_MESSAGE",
    "AppError",
    "InvalidInputError",
    "DuplicateEmployeeIdError",
    "NotFoundError",
    "InternalError",
    "UnknownError",
]
