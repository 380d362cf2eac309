"""
Application errors translated to HTTP responses by the error handlers.
"""
from typing import Optional


class AppError(Exception):
    """
    Base application error carrying an HTTP status code.

    ``distinct_status_code`` is used instead of ``status_code`` when the
    ``distinct_error_statuses`` setting is enabled.
    """
    status_code: int = 500
    distinct_status_code: Optional[int] = None

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def resolve_status(self, distinct: bool) -> int:
        """Return the HTTP status to respond with."""
        if distinct and self.distinct_status_code is not None:
            return self.distinct_status_code
        return self.status_code


class NotFoundError(AppError):
    """Requested document does not exist."""
    status_code = 404


class QueryValidationError(AppError):
    """Request body failed schema validation."""
    distinct_status_code = 400


class DuplicateQueryNameError(AppError):
    """Another named query already uses the requested name."""
    distinct_status_code = 409
