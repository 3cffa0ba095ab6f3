"""Typed failures raised by the service layer.

Every store failure is converted into one of these kinds and re-raised;
the HTTP layer renders them through ``app.core.error_handlers``.
"""
from typing import Any, Dict, List, Optional


class AppError(Exception):
    """Base class for errors with a stable code and HTTP status."""

    code: str = "APP_ERROR"
    status_code: int = 500

    def __init__(self, message: str, *, details: Optional[List[Dict[str, Any]]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_response(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            body["details"] = self.details
        return {"error": body}


class NotFoundError(AppError):
    """The requested identifier has no matching row."""

    code = "NOT_FOUND"
    status_code = 404


class StoreFailureError(AppError):
    """The record store failed for a reason other than a missing row."""

    code = "STORE_FAILURE"
    status_code = 500


class CreateFailedError(StoreFailureError):
    code = "CREATE_FAILED"


class ValidationFailureError(AppError):
    """Malformed input, rejected before any store call."""

    code = "VALIDATION_FAILURE"
    status_code = 422
