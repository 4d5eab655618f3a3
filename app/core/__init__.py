"""
==============================================================================
Core Package
==============================================================================

Core utilities and infrastructure for the application.

This package provides:
- Custom exception handling with consistent error responses
- Exception factory functions for common error scenarios
- FastAPI dependencies (see ``app.core.dependencies``)

Modules:
--------
- exceptions: AppException hierarchy and error factory functions
- dependencies: FastAPI dependency injection functions

Usage:
------
    from app.core import AppException, NotFoundError

    # Or use exception factory functions via module
    from app.core import exceptions
    raise exceptions.material_not_found("Dune")

==============================================================================
"""

from .exceptions import (
    AppException,
    DuplicateError,
    NotFoundError,
    ValidationError,
    register_exception_handlers,
)

__all__ = [
    "AppException",
    "DuplicateError",
    "NotFoundError",
    "ValidationError",
    "register_exception_handlers",
]
