from fastapi.testclient import TestClient

from employee_directory.main import create_app
from employee_directory.repositories.employee_repository import EmployeeRepository


def test_each_app_gets_its_own_repository(test_settings):
    first = create_app(settings=test_settings)
    second = create_app(settings=test_settings)

    assert isinstance(first.state.employee_repository, EmployeeRepository)
    assert first.state.employee_repository is not second.state.employee_repository


def test_injected_empty_repository_is_used(test_settings):
    repo = EmployeeRepository()

    app = create_app(settings=test_settings, repository=repo)

    assert app.state.employee_repository is repo


def test_default_department_comes_from_settings(test_settings):
    settings = test_settings.model_copy(update={"DEFAULT_DEPARTMENT": "unassigned"})

    with TestClient(create_app(settings=settings)) as client:
        resp = client.post("/api/v1/employees", json={"employeeId": "E1", "name": "Ann"})

    assert resp.json()["data"]["department"] == "unassigned"


def test_custom_api_prefix(test_settings):
    settings = test_settings.model_copy(update={"API_V1_PREFIX": "/v2"})

    with TestClient(create_app(settings=settings)) as client:
        assert client.get("/v2/employees").json() == {"ok": True, "data": []}
        assert client.get("/api/v1/employees").status_code == 404
