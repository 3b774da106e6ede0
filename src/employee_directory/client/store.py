"""
Caller-side copy of the employee list.

The server owns the canonical collection; this store only mirrors what the caller has
seen so far and is refreshed from action responses.
"""
import logging

from employee_directory.models.employee import Employee
from employee_directory.schemas.action import ActionError, ActionFailure, ActionResponse

logger = logging.getLogger(__name__)


class EmployeeStore:
    def __init__(self, employees: list[Employee] | None = None):
        self._employees: list[Employee] = list(employees or [])

    @property
    def employees(self) -> tuple[Employee, ...]:
        return tuple(self._employees)

    def __len__(self) -> int:
        return len(self._employees)

    def set_employees(self, employees: list[Employee]) -> None:
        self._employees = list(employees)

    def add_employee(self, employee: Employee) -> None:
        """Append unless an employee with the same id is already present."""
        if any(e.id == employee.id for e in self._employees):
            logger.debug("store.add.skipped", extra={"id": employee.id})
            return
        self._employees.append(employee)

    def remove_employee(self, id: int) -> None:
        self._employees = [e for e in self._employees if e.id != id]

    def apply(self, response: ActionResponse[list[Employee]]) -> ActionError | None:
        """
        Load the list carried by a successful response.

        On failure the store is left as is and the error is handed back for display.
        """
        if isinstance(response, ActionFailure):
            return response.error
        self.set_employees(response.data)
        return None
