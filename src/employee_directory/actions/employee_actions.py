import logging
from typing import Any, Mapping, TypeVar

from pydantic import BaseModel

from employee_directory.models.employee import Employee
from employee_directory.repositories.employee_repository import EmployeeRepository
from employee_directory.schemas.employee import (
    CreateEmployeeInput,
    DeleteEmployeeInput,
    GetEmployeeInput,
)

from .handler import with_action_handler

logger = logging.getLogger(__name__)

InputT = TypeVar("InputT", bound=BaseModel)


def _coerce(schema: type[InputT], data: InputT | Mapping[str, Any]) -> InputT:
    # Plain mappings are validated here, so a bad payload becomes INVALID_INPUT.
    if isinstance(data, schema):
        return data
    if isinstance(data, BaseModel):
        data = data.model_dump()
    return schema.model_validate(data)


class EmployeeActions:
    """
    Boundary operations over an injected EmployeeRepository.

    Every method resolves to an ActionResponse and never raises.
    """

    def __init__(self, repository: EmployeeRepository):
        self.repository = repository

    @with_action_handler
    async def create_employee(self, data: CreateEmployeeInput | Mapping[str, Any]) -> Employee:
        return await self.repository.create(_coerce(CreateEmployeeInput, data))

    @with_action_handler
    async def get_employees(self) -> list[Employee]:
        return await self.repository.list_all()

    @with_action_handler
    async def get_employee_by_id(self, data: GetEmployeeInput | Mapping[str, Any]) -> Employee:
        lookup = _coerce(GetEmployeeInput, data)
        return await self.repository.get_by_id(lookup.id)

    @with_action_handler
    async def delete_employee(self, data: DeleteEmployeeInput | Mapping[str, Any]) -> None:
        lookup = _coerce(DeleteEmployeeInput, data)
        await self.repository.delete_by_id(lookup.id)
        logger.debug("action.delete_employee.done", extra={"id": lookup.id})
