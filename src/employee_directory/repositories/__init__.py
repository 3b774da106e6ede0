"""
Repository layer.

The repository owns the canonical in-memory collection and enforces its invariants.
Instances are created explicitly and injected (FastAPI app state, test fixtures);
there is no module-level store.

Usage:
    from employee_directory.repositories import EmployeeRepository
"""

from .base_repository import InMemoryRepository
from .employee_repository import DEFAULT_DEPARTMENT, EmployeeRepository

__all__ = [
    "InMemoryRepository",
    "EmployeeRepository",
    "DEFAULT_DEPARTMENT",
]
