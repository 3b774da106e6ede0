from .employee_actions import EmployeeActions
from .handler import to_failure, with_action_handler

__all__ = ["EmployeeActions", "to_failure", "with_action_handler"]
