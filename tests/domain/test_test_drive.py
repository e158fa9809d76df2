from __future__ import annotations

import pytest

from autolot.domain.errors import ValidationError
from autolot.domain.test_drive import ACTIVE_TEST_DRIVE_STATUSES, TestDriveStatus


@pytest.mark.parametrize("raw", ["PENDING", "CONFIRMED", "COMPLETED", "CANCELLED", "NO_SHOW"])
def test_parse_accepts_every_status(raw: str) -> None:
    assert TestDriveStatus.parse(raw).value == raw


@pytest.mark.parametrize("raw", ["BOGUS", "pending", "", "DONE"])
def test_parse_rejects_unknown_status(raw: str) -> None:
    with pytest.raises(ValidationError) as exc_info:
        TestDriveStatus.parse(raw)

    assert exc_info.value.message == "Invalid status"
    assert exc_info.value.errors is not None
    assert exc_info.value.errors[0]["field"] == "status"
    assert exc_info.value.errors[0]["code"] == "INVALID_STATUS"


def test_parse_reports_custom_field_name() -> None:
    with pytest.raises(ValidationError) as exc_info:
        TestDriveStatus.parse("BOGUS", field="filters.status")

    assert exc_info.value.errors is not None
    assert exc_info.value.errors[0]["field"] == "filters.status"


def test_active_statuses() -> None:
    assert ACTIVE_TEST_DRIVE_STATUSES == {
        TestDriveStatus.PENDING,
        TestDriveStatus.CONFIRMED,
        TestDriveStatus.COMPLETED,
    }
