"""REST API error response models.

Every failure is rendered in the same envelope as a success, with
``success=false`` and ``data=null``.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors.

    Used in validation errors to indicate which field failed and why.
    """

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "status",
                "message": "Must be one of ['PENDING', 'CONFIRMED', 'COMPLETED', 'CANCELLED', 'NO_SHOW']",
                "code": "INVALID_STATUS",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error envelope.

    Supports:
    - Simple errors (error message and code)
    - Multi-field validation errors (error + errors array)
    - Error codes for i18n (code field can be used for translation keys)

    Examples:
        Simple error:
            {
                "success": false,
                "data": null,
                "error": "Failed to fetch cars",
                "code": "INTERNAL_ERROR"
            }

        Validation error:
            {
                "success": false,
                "data": null,
                "error": "Invalid status",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {"field": "status", "message": "Must be one of [...]", "code": "INVALID_STATUS"}
                ]
            }
    """

    success: Literal[False] = False
    data: None = None
    error: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"success": False, "data": None, "error": "Unauthorized", "code": "UNAUTHORIZED"},
                {
                    "success": False,
                    "data": None,
                    "error": "Car with identifier '42' not found",
                    "code": "NOT_FOUND",
                },
                {
                    "success": False,
                    "data": None,
                    "error": "Failed to fetch dashboard data",
                    "code": "INTERNAL_ERROR",
                },
            ]
        }
    )


# OpenAPI `responses=` fragment shared by routes
ERROR_RESPONSES: dict[int | str, dict] = {
    401: {"model": ErrorResponse, "description": "No caller identity"},
    403: {"model": ErrorResponse, "description": "Caller is not an admin"},
    404: {"model": ErrorResponse, "description": "Referenced entity not found"},
    422: {"model": ErrorResponse, "description": "Validation error"},
    500: {"model": ErrorResponse, "description": "Operation failed"},
}
