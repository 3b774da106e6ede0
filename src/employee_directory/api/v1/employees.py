"""
Employee routes.

Each route delegates to one EmployeeActions operation and returns its ActionResponse
as-is, with HTTP 200: callers branch on the body's `ok`, not on the status code.
"""
from fastapi import APIRouter, Depends

from employee_directory.actions.employee_actions import EmployeeActions
from employee_directory.core.dependencies import get_employee_actions
from employee_directory.models.employee import Employee
from employee_directory.schemas.action import ActionResponse
from employee_directory.schemas.employee import CreateEmployeeInput, DeleteEmployeeInput, GetEmployeeInput

router = APIRouter(prefix="/employees", tags=["employees"])


@router.post("", response_model=ActionResponse[Employee])
async def create_employee(
    payload: CreateEmployeeInput,
    actions: EmployeeActions = Depends(get_employee_actions),
):
    return await actions.create_employee(payload)


@router.get("", response_model=ActionResponse[list[Employee]])
async def list_employees(actions: EmployeeActions = Depends(get_employee_actions)):
    return await actions.get_employees()


@router.get("/{id}", response_model=ActionResponse[Employee])
async def get_employee(id: int, actions: EmployeeActions = Depends(get_employee_actions)):
    return await actions.get_employee_by_id(GetEmployeeInput(id=id))


@router.delete("/{id}", response_model=ActionResponse[None])
async def delete_employee(id: int, actions: EmployeeActions = Depends(get_employee_actions)):
    return await actions.delete_employee(DeleteEmployeeInput(id=id))
