from .action import ActionError, ActionFailure, ActionResponse, ActionSuccess
from .employee import CreateEmployeeInput, DeleteEmployeeInput, GetEmployeeInput

__all__ = [
    "ActionError",
    "ActionFailure",
    "ActionResponse",
    "ActionSuccess",
    "CreateEmployeeInput",
    "DeleteEmployeeInput",
    "GetEmployeeInput",
]
