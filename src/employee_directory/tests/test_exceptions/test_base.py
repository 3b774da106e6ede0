import pytest

from employee_directory.exceptions.base import (
    AppError,
    DuplicateEmployeeIdError,
    ErrorCode,
    InternalError,
    InvalidInputError,
    NotFoundError,
    UnknownError,
)


class TestAppErrorConstruction:

    def test_defaults_message_to_code_and_status_from_table(self):
        """
        Behavior:
                - Build an AppError with only a known code.

        Importance:
                - message falls back to the code, status to the code's table entry,
                  so minimal call sites still produce a complete error.
        """
        err = AppError(ErrorCode.NOT_FOUND)

        assert err.code == "NOT_FOUND"
        assert err.message == "NOT_FOUND"
        assert err.status == 404
        assert err.meta is None

    @pytest.mark.parametrize(
        "code, status",
        [
            ("INVALID_INPUT", 400),
            ("DUPLICATE_EMPLOYEE_ID", 400),
            ("NOT_FOUND", 404),
            ("METHOD_NOT_ALLOWED", 405),
            ("INTERNAL_ERROR", 500),
            ("UNKNOWN_ERROR", 500),
            ("BAD_RESPONSE", 502),
        ],
    )
    def test_default_status_is_looked_up_from_the_code(self, code, status):
        assert AppError(code, "message").status == status

    def test_unknown_code_defaults_to_400(self):
        """
        Behavior:
                - A code that is not in the status table gets status 400.

        Importance:
                - The code set is open: components may add codes without registering them.
        """
        err = AppError("QUOTA_EXCEEDED", "Too many employees")

        assert err.code == "QUOTA_EXCEEDED"
        assert err.message == "Too many employees"
        assert err.status == 400

    def test_explicit_status_wins(self):
        err = AppError("TEAPOT", "short and stout", 418)
        assert err.status == 418

    @pytest.mark.parametrize(
        "error, code, status, message",
        [
            (InvalidInputError(), "INVALID_INPUT", 400, "Invalid input"),
            (DuplicateEmployeeIdError(), "DUPLICATE_EMPLOYEE_ID", 400, "Employee ID already exists"),
            (NotFoundError("Employee not found"), "NOT_FOUND", 404, "Employee not found"),
            (InternalError("boom"), "INTERNAL_ERROR", 500, "boom"),
            (UnknownError(), "UNKNOWN_ERROR", 500, "Unexpected error"),
        ],
    )
    def test_subclasses_pin_code_and_status(self, error, code, status, message):
        assert isinstance(error, AppError)
        assert (error.code, error.status, error.message) == (code, status, message)


class TestAppErrorImmutability:

    def test_properties_are_read_only(self):
        """
        Behavior:
                - Assigning to code/message/status raises AttributeError.

        Importance:
                - Errors are shared between layers (the normalizer returns the same
                  instance), so nobody may change one in flight.
        """
        err = NotFoundError()

        with pytest.raises(AttributeError):
            err.code = "OTHER"  # type: ignore[misc]
        with pytest.raises(AttributeError):
            err.status = 500  # type: ignore[misc]

    def test_meta_is_a_read_only_copy(self):
        source = {"id": 7}
        err = NotFoundError(meta=source)

        source["id"] = 8
        assert err.meta["id"] == 7
        with pytest.raises(TypeError):
            err.meta["id"] = 9  # type: ignore[index]


class TestAppErrorProjections:

    def test_to_payload_keeps_only_code_and_message(self):
        err = NotFoundError("Employee not found", meta={"id": 3})
        assert err.to_payload() == {"code": "NOT_FOUND", "message": "Employee not found"}

    def test_to_dict_includes_status_and_meta(self):
        err = NotFoundError("Employee not found", meta={"id": 3})
        assert err.to_dict() == {
            "code": "NOT_FOUND",
            "message": "Employee not found",
            "status": 404,
            "meta": {"id": 3},
        }

    def test_str_mentions_code_and_status(self):
        assert str(InternalError("boom")) == "boom (code: INTERNAL_ERROR; status: 500)"
