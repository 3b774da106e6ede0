"""
Centralized access to the domain models.

Usage:
    from employee_directory.models import Employee
"""

from .employee import Employee

__all__ = ["Employee"]
