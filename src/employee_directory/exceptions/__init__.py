# employee_directory/
# │
# ├── exceptions/
# │   ├── __init__.py
# │   ├── base.py                    # AppError + canonical codes (INVALID_INPUT, NOT_FOUND, ...)
# │   ├── validation_classifier.py   # pydantic validation errors -> client-safe field list
# │   └── mapper.py                  # handle_error() normalizer, error_boundary, with_error_handling

from .base import (
    AppError,
    DuplicateEmployeeIdError,
    ErrorCode,
    InternalError,
    InvalidInputError,
    NotFoundError,
    UnknownError,
)
from .mapper import error_boundary, handle_error, with_error_handling

__all__ = [
    "AppError",
    "DuplicateEmployeeIdError",
    "ErrorCode",
    "InternalError",
    "InvalidInputError",
    "NotFoundError",
    "UnknownError",
    "error_boundary",
    "handle_error",
    "with_error_handling",
]
