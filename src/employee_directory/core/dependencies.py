from fastapi import Request

from employee_directory.actions.employee_actions import EmployeeActions
from employee_directory.repositories.employee_repository import EmployeeRepository


def get_employee_repository(request: Request) -> EmployeeRepository:
    # One repository per application instance, created in create_app()
    return request.app.state.employee_repository


def get_employee_actions(request: Request) -> EmployeeActions:
    return EmployeeActions(get_employee_repository(request))
