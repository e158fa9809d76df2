"""Tests for REST error response models."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from autolot.entrypoints.http.error_responses import ERROR_RESPONSES, ErrorDetail, ErrorResponse


class ErrorDetailTests:
    """Tests for ErrorDetail model."""

    def test_creates_error_detail_with_all_fields(self) -> None:
        detail = ErrorDetail(field="status", message="Must be one of [...]", code="INVALID_STATUS")

        assert detail.model_dump() == {
            "field": "status",
            "message": "Must be one of [...]",
            "code": "INVALID_STATUS",
        }

    def test_code_is_optional(self) -> None:
        detail = ErrorDetail(field="page", message="Input should be greater than or equal to 1")

        assert detail.code is None


class ErrorResponseTests:
    """Tests for ErrorResponse model."""

    def test_defaults_to_failed_envelope(self) -> None:
        response = ErrorResponse(error="Unauthorized", code="UNAUTHORIZED")

        assert response.model_dump() == {
            "success": False,
            "data": None,
            "error": "Unauthorized",
            "code": "UNAUTHORIZED",
            "errors": None,
        }

    def test_success_cannot_be_true(self) -> None:
        with pytest.raises(PydanticValidationError):
            ErrorResponse(success=True, error="nope")

    def test_error_is_required(self) -> None:
        with pytest.raises(PydanticValidationError):
            ErrorResponse()

    def test_with_field_errors(self) -> None:
        response = ErrorResponse(
            error="Invalid status",
            code="VALIDATION_ERROR",
            errors=[ErrorDetail(field="status", message="Must be one of [...]")],
        )

        payload = response.model_dump(exclude_none=True)

        assert payload == {
            "success": False,
            "error": "Invalid status",
            "code": "VALIDATION_ERROR",
            "errors": [{"field": "status", "message": "Must be one of [...]"}],
        }

    def test_schema_has_examples(self) -> None:
        schema = ErrorResponse.model_json_schema()

        assert "examples" in schema
        assert schema["examples"][0]["code"] == "UNAUTHORIZED"


def test_error_responses_cover_operation_statuses() -> None:
    assert set(ERROR_RESPONSES) == {401, 403, 404, 422, 500}
    assert all(entry["model"] is ErrorResponse for entry in ERROR_RESPONSES.values())
