from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Employee(BaseModel):
    """
    An employee record owned by the repository.

    Represents one person in the directory: the repository-assigned numeric id,
    the external employee code, a display name and a department.
    Records are frozen; there is no update operation.
    """

    # camelCase on the wire ("employeeId"), snake_case in Python.
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    # Repository-assigned identifier, unique and stable for the record's lifetime
    id: int = Field(ge=1)

    # External employee code, unique across records (exact string match)
    employee_id: str

    # Display name (never empty at creation)
    name: str = Field(min_length=1)

    department: str

    def __repr__(self) -> str:
        return f"<Employee(id={self.id!r}, employee_id={self.employee_id!r}, name={self.name!r})>"
