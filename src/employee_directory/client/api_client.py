"""
Async HTTP client for the employee API.

    async with EmployeeApiClient("http://localhost:8000") as client:
        response = await client.create_employee({"employeeId": "E1", "name": "Ann"})
        if response.ok:
            print(response.data.id)

Action methods return the parsed ActionResponse, exactly as the server produced it.
Anything that goes wrong on the way (connection refused, timeouts, a body that is not an
action response) is raised as an AppError by `with_client_error_handling`.
"""
from typing import Any, Mapping

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from employee_directory.exceptions.base import AppError, ErrorCode
from employee_directory.models.employee import Employee
from employee_directory.schemas.action import ActionResponse
from employee_directory.schemas.employee import CreateEmployeeInput, DeleteEmployeeInput, GetEmployeeInput

from .handling import with_client_error_handling

_EMPLOYEE_RESPONSE = TypeAdapter(ActionResponse[Employee])
_EMPLOYEE_LIST_RESPONSE = TypeAdapter(ActionResponse[list[Employee]])
_EMPTY_RESPONSE = TypeAdapter(ActionResponse[None])


def _parse(response: httpx.Response, adapter: TypeAdapter) -> Any:
    """Decode an action response body; anything else is a BAD_RESPONSE."""
    try:
        return adapter.validate_python(response.json())
    except (ValueError, ValidationError) as exc:
        # json decoding errors are ValueErrors; checked together with schema mismatches
        raise AppError(
            ErrorCode.BAD_RESPONSE,
            "Unexpected response from employee service",
            meta={"status_code": response.status_code, "url": str(response.request.url)},
        ) from exc


def _lookup_id(data: GetEmployeeInput | Mapping[str, Any]) -> int:
    if isinstance(data, BaseModel):
        return GetEmployeeInput.model_validate(data.model_dump()).id
    return GetEmployeeInput.model_validate(data).id


class EmployeeApiClient:
    def __init__(
        self,
        base_url: str,
        *,
        api_prefix: str = "/api/v1",
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 10.0,
    ):
        self._http = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)
        self._prefix = api_prefix.rstrip("/")

    async def __aenter__(self) -> "EmployeeApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    @with_client_error_handling
    async def create_employee(self, data: CreateEmployeeInput | Mapping[str, Any]) -> ActionResponse[Employee]:
        if isinstance(data, BaseModel):
            payload = data.model_dump(mode="json", by_alias=True, exclude_none=True)
        else:
            payload = dict(data)
        response = await self._http.post(f"{self._prefix}/employees", json=payload)
        return _parse(response, _EMPLOYEE_RESPONSE)

    @with_client_error_handling
    async def get_employees(self) -> ActionResponse[list[Employee]]:
        response = await self._http.get(f"{self._prefix}/employees")
        return _parse(response, _EMPLOYEE_LIST_RESPONSE)

    @with_client_error_handling
    async def get_employee(self, data: GetEmployeeInput | Mapping[str, Any]) -> ActionResponse[Employee]:
        response = await self._http.get(f"{self._prefix}/employees/{_lookup_id(data)}")
        return _parse(response, _EMPLOYEE_RESPONSE)

    @with_client_error_handling
    async def delete_employee(self, data: DeleteEmployeeInput | Mapping[str, Any]) -> ActionResponse[None]:
        response = await self._http.delete(f"{self._prefix}/employees/{_lookup_id(data)}")
        return _parse(response, _EMPTY_RESPONSE)

    @with_client_error_handling
    async def health(self) -> dict[str, Any]:
        """Plain (non-action) call: HTTP errors surface as AppErrors."""
        response = await self._http.get("/health")
        response.raise_for_status()
        return response.json()
