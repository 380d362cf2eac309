"""
Core module - Application errors and error handling.
"""
from named_queries.core.exceptions import (
    AppError,
    NotFoundError,
    QueryValidationError,
    DuplicateQueryNameError,
)
from named_queries.core.error_handlers import register_error_handlers

__all__ = [
    "AppError",
    "NotFoundError",
    "QueryValidationError",
    "DuplicateQueryNameError",
    "register_error_handlers",
]
