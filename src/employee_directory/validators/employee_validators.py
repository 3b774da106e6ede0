"""
Validation helpers used by the employee repository before it touches its collection.

They raise AppError subclasses directly, so the repository's create() reads as a list
of rules followed by the write.
"""
from typing import Iterable

from employee_directory.exceptions.base import DuplicateEmployeeIdError, InvalidInputError
from employee_directory.models.employee import Employee


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def require_name(name: str | None) -> str:
    """
    Return the trimmed name, or raise INVALID_INPUT when it is missing, empty or only
    whitespace. Stricter than a plain emptiness check: "   " is rejected too, and the
    stored name never carries surrounding whitespace.
    """
    if is_blank(name):
        raise InvalidInputError("Employee name required", meta={"fields": ["name"]})
    return name.strip()


def ensure_unique_employee_id(employee_id: str, existing: Iterable[Employee]) -> None:
    """
    Raise DUPLICATE_EMPLOYEE_ID if any existing record uses the same external code.
    Comparison is an exact string match.
    """
    if any(e.employee_id == employee_id for e in existing):
        raise DuplicateEmployeeIdError("Employee ID already exists", meta={"employee_id": employee_id})


def resolve_department(department: str | None, default: str) -> str:
    """Missing or empty department falls back to the configured default."""
    if is_blank(department):
        return default
    return department.strip()
