import logging

from employee_directory.exceptions.mapper import with_error_handling
from employee_directory.models.employee import Employee
from employee_directory.schemas.employee import CreateEmployeeInput
from employee_directory.validators.employee_validators import (
    ensure_unique_employee_id,
    require_name,
    resolve_department,
)

from .base_repository import InMemoryRepository

logger = logging.getLogger(__name__)

DEFAULT_DEPARTMENT = "general"


class EmployeeRepository(InMemoryRepository[Employee]):
    """
    Repository that owns the canonical employee collection.

    Inherits listing, lookup and deletion from InMemoryRepository and adds the
    creation rules: a non-empty name, a unique external employee code and a default
    department.
    """

    entity_name = "Employee"

    def __init__(self, default_department: str = DEFAULT_DEPARTMENT) -> None:
        super().__init__()
        self.default_department = default_department

    @with_error_handling
    async def create(self, data: CreateEmployeeInput) -> Employee:
        """
        Create and store a new employee.

        Raises:
            InvalidInputError: name missing or empty.
            DuplicateEmployeeIdError: another record already uses `data.employee_id`.
        """
        logger.debug(
            "repo.create.start",
            extra={"model": self.entity_name, "provided_keys": sorted(data.model_fields_set)},
        )

        name = require_name(data.name)
        ensure_unique_employee_id(data.employee_id, self._records)

        employee = Employee(
            id=self._next_id(),
            employee_id=data.employee_id,
            name=name,
            department=resolve_department(data.department, self.default_department),
        )
        self._append(employee)

        logger.info(
            "repo.create.success",
            extra={"model": self.entity_name, "id": employee.id, "total": len(self._records)},
        )
        return employee
