import pytest
from pydantic import ValidationError

from employee_directory.exceptions.base import AppError, DuplicateEmployeeIdError, InvalidInputError, NotFoundError
from employee_directory.models.employee import Employee
from employee_directory.repositories.employee_repository import EmployeeRepository
from employee_directory.schemas.employee import CreateEmployeeInput


@pytest.mark.asyncio
class TestEmployeeRepositoryCreate:

    async def test_create_success(self, employee_repository, sample_employee_data):
        """
        Behavior:
                - Call EmployeeRepository.create(...) with valid data.
                - Assert the returned record has the expected fields and id 1.

        Importance:
                - Confirms the happy path: validation, id assignment, append and return.

        Fixtures:
                - employee_repository: fresh, empty repository.
                - sample_employee_data: wire-named payload.
        """
        # Act
        employee = await employee_repository.create(CreateEmployeeInput.model_validate(sample_employee_data))

        # Assert
        assert isinstance(employee, Employee)
        assert employee.id == 1
        assert employee.employee_id == "E100"
        assert employee.name == "Ann Lee"
        assert employee.department == "HR"
        assert await employee_repository.list_all() == [employee]

    async def test_create_defaults_department(self, employee_repository):
        employee = await employee_repository.create(CreateEmployeeInput(employee_id="E1", name="Bo"))
        assert employee.department == "general"

    async def test_create_blank_department_uses_default(self, employee_repository):
        employee = await employee_repository.create(CreateEmployeeInput(employee_id="E1", name="Bo", department="  "))
        assert employee.department == "general"

    async def test_custom_default_department(self):
        repo = EmployeeRepository(default_department="unassigned")
        employee = await repo.create(CreateEmployeeInput(employee_id="E1", name="Bo"))
        assert employee.department == "unassigned"

    async def test_create_trims_name(self, employee_repository):
        employee = await employee_repository.create(CreateEmployeeInput(employee_id="E1", name="  Bo  "))
        assert employee.name == "Bo"

    @pytest.mark.parametrize("name", [None, "", "   "])
    async def test_create_without_name_raises_invalid_input(self, employee_repository, name):
        """
        Behavior:
                - Missing, empty and whitespace-only names are rejected.

        Importance:
                - No record may exist without a name; the store must stay unchanged.
        """
        with pytest.raises(InvalidInputError) as exc_info:
            await employee_repository.create(CreateEmployeeInput(employee_id="E1", name=name))

        assert exc_info.value.code == "INVALID_INPUT"
        assert exc_info.value.status == 400
        assert exc_info.value.message == "Employee name required"
        assert len(employee_repository) == 0

    async def test_duplicate_employee_id_is_rejected(self, employee_repository, created_employee):
        """
        Behavior:
                - A second create with the same external code raises DUPLICATE_EMPLOYEE_ID.

        Postconditions:
                - Only the first record remains.
        """
        with pytest.raises(DuplicateEmployeeIdError) as exc_info:
            await employee_repository.create(CreateEmployeeInput(employee_id=created_employee.employee_id, name="Other"))

        assert exc_info.value.code == "DUPLICATE_EMPLOYEE_ID"
        assert exc_info.value.status == 400
        assert exc_info.value.message == "Employee ID already exists"
        assert await employee_repository.list_all() == [created_employee]

    async def test_employee_id_match_is_exact(self, employee_repository, created_employee):
        other = await employee_repository.create(CreateEmployeeInput(employee_id="e100", name="Lower"))
        assert other.id == created_employee.id + 1

    async def test_name_check_runs_before_duplicate_check(self, employee_repository, created_employee):
        with pytest.raises(InvalidInputError):
            await employee_repository.create(CreateEmployeeInput(employee_id=created_employee.employee_id, name=""))


@pytest.mark.asyncio
class TestEmployeeRepositoryIds:

    async def test_ids_increase_in_creation_order(self, multiple_employees):
        assert [e.id for e in multiple_employees] == [1, 2, 3]

    async def test_ids_are_not_reused_after_delete(self, employee_repository, multiple_employees, create_employee):
        """
        Behavior:
                - Delete the last record, then create a new one.
                - The new id is greater than every id ever issued.

        Importance:
                - Deriving ids from the collection size would hand out 3 again here and
                  make two different records share an id over time.
        """
        await employee_repository.delete_by_id(3)
        await employee_repository.delete_by_id(1)

        newcomer = await create_employee(employee_id="E-new")

        assert newcomer.id == 4
        ids = [e.id for e in await employee_repository.list_all()]
        assert len(ids) == len(set(ids))

    async def test_clear_keeps_counter(self, employee_repository, multiple_employees, create_employee):
        employee_repository.clear()
        assert employee_repository.count() == 0

        newcomer = await create_employee()
        assert newcomer.id == 4


@pytest.mark.asyncio
class TestEmployeeRepositoryRead:

    async def test_list_all_empty(self, employee_repository):
        assert await employee_repository.list_all() == []

    async def test_list_all_preserves_insertion_order(self, employee_repository, multiple_employees):
        assert await employee_repository.list_all() == multiple_employees

    async def test_list_all_returns_a_copy(self, employee_repository, multiple_employees):
        listed = await employee_repository.list_all()
        listed.clear()
        assert len(await employee_repository.list_all()) == 3

    async def test_get_by_id_returns_the_record(self, employee_repository, multiple_employees):
        assert await employee_repository.get_by_id(2) == multiple_employees[1]

    async def test_get_by_id_missing_raises_not_found(self, employee_repository, multiple_employees):
        with pytest.raises(NotFoundError) as exc_info:
            await employee_repository.get_by_id(99)

        assert exc_info.value.status == 404
        assert exc_info.value.message == "Employee not found"
        assert exc_info.value.meta["id"] == 99

    async def test_records_are_immutable(self, created_employee):
        with pytest.raises(ValidationError):
            created_employee.name = "Changed"


@pytest.mark.asyncio
class TestEmployeeRepositoryDelete:

    async def test_delete_removes_exactly_one(self, employee_repository, multiple_employees):
        result = await employee_repository.delete_by_id(2)

        assert result is None
        assert [e.id for e in await employee_repository.list_all()] == [1, 3]

    async def test_delete_missing_raises_not_found(self, employee_repository, multiple_employees):
        with pytest.raises(NotFoundError):
            await employee_repository.delete_by_id(42)
        assert len(employee_repository) == 3

    async def test_delete_twice(self, employee_repository, created_employee):
        await employee_repository.delete_by_id(created_employee.id)
        with pytest.raises(AppError) as exc_info:
            await employee_repository.delete_by_id(created_employee.id)
        assert exc_info.value.code == "NOT_FOUND"
