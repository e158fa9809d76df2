from __future__ import annotations

import logging

import pytest

from autolot.domain.errors import (
    ForbiddenError,
    NotFoundError,
    OperationFailedError,
    StoreError,
    UnauthorizedError,
    ValidationError,
)
from autolot.entrypoints.http.boundary import operation_boundary


@pytest.mark.parametrize(
    "error",
    [
        UnauthorizedError("Unauthorized"),
        ForbiddenError("Unauthorized: Admin access required"),
        NotFoundError("Car", "1"),
        ValidationError("Invalid status"),
    ],
)
def test_domain_errors_pass_through(error: Exception) -> None:
    with pytest.raises(type(error)) as exc_info:
        with operation_boundary("Failed to fetch cars"):
            raise error

    assert exc_info.value is error


def test_store_error_becomes_operation_failure(caplog: pytest.LogCaptureFixture) -> None:
    cause = StoreError("Store operation failed", operation="search")

    with caplog.at_level(logging.ERROR), pytest.raises(OperationFailedError) as exc_info:
        with operation_boundary("Failed to fetch cars"):
            raise cause

    assert exc_info.value.message == "Failed to fetch cars"
    assert exc_info.value.__cause__ is cause
    assert caplog.records[-1].operation_error == "Failed to fetch cars"


def test_unexpected_error_becomes_operation_failure() -> None:
    with pytest.raises(OperationFailedError, match="Failed to toggle saved car"):
        with operation_boundary("Failed to toggle saved car"):
            raise KeyError("user_id")


def test_success_passes_silently() -> None:
    with operation_boundary("Failed to fetch cars"):
        value = 42

    assert value == 42
