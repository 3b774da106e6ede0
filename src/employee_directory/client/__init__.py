"""
Calling side of the employee service.

Usage:
    from employee_directory.client import EmployeeApiClient, EmployeeStore
"""

from .api_client import EmployeeApiClient
from .handling import with_client_error_handling
from .store import EmployeeStore

__all__ = ["EmployeeApiClient", "EmployeeStore", "with_client_error_handling"]
