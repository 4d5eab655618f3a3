"""
Application Exception Handling

AppException base class for all catalog errors with FastAPI integration.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class AppException(Exception):
    """
    Unified application exception for all error scenarios.

    Provides consistent error response format across the entire API.

    Usage:
        raise AppException("Catalog unavailable", "CATALOG_NOT_LOADED", 500)
        raise NotFoundError("Material not found", details={"title": "Dune"})

    Error Codes:
        Material:
            - VALIDATION_ERROR (422)
            - MATERIAL_EXISTS (409)
            - MATERIAL_NOT_FOUND (404)

        General:
            - CATALOG_NOT_LOADED (500)
            - INTERNAL_ERROR (500)
    """

    code = "INTERNAL_ERROR"
    status_code = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (defaults to the class code)
            status_code: HTTP status code (defaults to the class status)
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code or self.code
        self.status_code = status_code or self.status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        error_dict = {
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "timestamp": self.timestamp
            }
        }

        if self.details:
            error_dict["error"]["details"] = self.details

        return error_dict


class ValidationError(AppException):
    """Invalid material data or out-of-range progress value."""

    code = "VALIDATION_ERROR"
    status_code = 422


class DuplicateError(AppException):
    """A material with the same title is already registered."""

    code = "MATERIAL_EXISTS"
    status_code = 409


class NotFoundError(AppException):
    """No material matches the requested title."""

    code = "MATERIAL_NOT_FOUND"
    status_code = 404


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    FastAPI exception handler for AppException.

    Converts AppException to consistent JSON error response.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


# Request sections that prefix every FastAPI error location
_REQUEST_SECTIONS = {"body", "query", "path", "header", "cookie"}


def request_error_fields(errors: List[Dict[str, Any]]) -> List[str]:
    """
    Extract offending field names from FastAPI validation errors.

    Args:
        errors: Output of RequestValidationError.errors()

    Returns:
        Unique field names in error order
    """
    fields: List[str] = []
    for error in errors:
        if error.get("type", "").startswith("union_tag"):
            name = "kind"
        else:
            loc = [str(part) for part in error.get("loc") or ()]
            loc = [part for part in loc if part not in _REQUEST_SECTIONS]
            name = loc[-1] if loc else "body"
        if name not in fields:
            fields.append(name)
    return fields


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    FastAPI handler for request validation failures.

    Reports them as VALIDATION_ERROR in the AppException envelope.
    """
    fields = request_error_fields(exc.errors())
    error = validation_error(f"Invalid request data: {', '.join(fields)}", fields)
    return JSONResponse(
        status_code=error.status_code,
        content=error.to_dict()
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with FastAPI app.

    Call this in main.py after creating the FastAPI instance.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def validation_error(message: str, fields: Optional[List[str]] = None) -> ValidationError:
    """Create validation error exception."""
    details = {"fields": fields} if fields else {}
    return ValidationError(message, details=details)


def missing_required_fields(fields: List[str]) -> ValidationError:
    """Create exception for absent title, author or kind."""
    return validation_error(
        "Title, author and kind are required",
        fields
    )


def invalid_link(link: str) -> ValidationError:
    """Create invalid reference link exception."""
    return ValidationError(
        "Invalid reference link",
        details={"link": link}
    )


def invalid_progress(pages_read: int, page_count: int) -> ValidationError:
    """Create out-of-range pages read exception."""
    return ValidationError(
        f"Invalid number of pages read: {pages_read} (expected 0-{page_count})",
        details={"pages_read": pages_read, "page_count": page_count}
    )


def not_a_book(title: str) -> ValidationError:
    """Create exception for progress updates on non-book materials."""
    return ValidationError(
        f"Material '{title}' does not track page progress",
        details={"title": title}
    )


def material_exists(title: str) -> DuplicateError:
    """Create material already exists exception."""
    return DuplicateError(
        f"Material with title '{title}' already exists",
        details={"title": title}
    )


def material_not_found(title: Optional[str] = None) -> NotFoundError:
    """Create material not found exception."""
    details = {"title": title} if title else {}
    return NotFoundError("Material not found", details=details)


def catalog_not_loaded() -> AppException:
    """Create catalog not loaded exception."""
    return AppException(
        "Reading catalog not loaded",
        "CATALOG_NOT_LOADED",
        500
    )
