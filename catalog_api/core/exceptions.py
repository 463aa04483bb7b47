from typing import Dict, List, Optional


class CatalogError(Exception):
    """Base class for errors rendered as a ``{"success": false, ...}`` envelope."""

    status_code = 500
    message = "An unexpected error occurred"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_response(self) -> dict:
        return {"success": False, "message": self.message}


class NotFoundError(CatalogError):
    status_code = 404
    message = "Resource not found"


class InsufficientInventoryError(CatalogError):
    status_code = 400
    message = "Insufficient inventory"


class ValidationFailedError(CatalogError):
    """Input that passed schema validation but was rejected against storage."""

    status_code = 422
    message = "The given data was invalid."

    def __init__(self, errors: Dict[str, List[str]]):
        super().__init__()
        self.errors = errors

    def to_response(self) -> dict:
        response = super().to_response()
        response["errors"] = self.errors
        return response


class OperationFailedError(CatalogError):
    status_code = 500
    message = "Operation failed"

    def __init__(self, message: Optional[str] = None, error: Optional[str] = None):
        super().__init__(message)
        self.error = error

    def to_response(self) -> dict:
        response = super().to_response()
        if self.error:
            response["error"] = self.error
        return response
