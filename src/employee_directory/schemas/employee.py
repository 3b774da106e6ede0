"""
Input schemas for the employee boundary operations.

Wire names are camelCase (`employeeId`); Python code uses snake_case. Both are accepted
on input. `name` is optional at the schema level on purpose: an empty or missing name
is rejected by the repository with INVALID_INPUT, like every other creation rule.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _InputModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateEmployeeInput(_InputModel):
    employee_id: str
    name: str | None = None
    department: str | None = None


class GetEmployeeInput(_InputModel):
    # lax mode: "3" is accepted and coerced to 3
    id: int


class DeleteEmployeeInput(GetEmployeeInput):
    pass


__all__ = ["CreateEmployeeInput", "GetEmployeeInput", "DeleteEmployeeInput"]
