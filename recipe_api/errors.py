from __future__ import annotations


class RecipeAPIError(Exception):
    """Base for failures surfaced to API callers as ``{success: false, ...}``."""

    status_code: int = 500
    default_error: str = "Internal Server Error"

    def __init__(self, message: str, error: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.error = error or self.default_error

    def to_dict(self) -> dict:
        return {"success": False, "error": self.error, "message": self.message}


class InvalidInput(RecipeAPIError):
    status_code = 400
    default_error = "Invalid input"


class NotFound(RecipeAPIError):
    status_code = 404
    default_error = "Not found"


class InternalFailure(RecipeAPIError):
    status_code = 500
    default_error = "Internal Server Error"
