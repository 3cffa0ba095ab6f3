"""Typed errors carry a stable code and HTTP status."""

from app.core.errors import (
    AppError, CreateFailedError, NotFoundError, StoreFailureError, ValidationFailureError,
)


def test_error_kinds_map_to_codes_and_statuses():
    assert (NotFoundError.code, NotFoundError.status_code) == ("NOT_FOUND", 404)
    assert (StoreFailureError.code, StoreFailureError.status_code) == ("STORE_FAILURE", 500)
    assert (ValidationFailureError.code, ValidationFailureError.status_code) == ("VALIDATION_FAILURE", 422)


def test_create_failed_is_a_store_failure():
    err = CreateFailedError("Failed to create customer")
    assert isinstance(err, StoreFailureError)
    assert isinstance(err, AppError)
    assert err.to_response() == {
        "error": {"code": "CREATE_FAILED", "message": "Failed to create customer"},
    }


def test_details_only_included_when_present():
    err = ValidationFailureError("Invalid request data", details=[{"field": "body.email"}])
    assert err.to_response()["error"]["details"] == [{"field": "body.email"}]
