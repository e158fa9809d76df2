from __future__ import annotations

from dataclasses import dataclass

from autolot.domain.test_drive import TestDriveBooking, TestDriveFilters, TestDriveStatus
from autolot.ports.test_drive_repository import TestDriveRepository
from autolot.use_cases.identity import IdentityResolver


@dataclass(frozen=True, slots=True)
class SearchAdminTestDrivesRequest:
    credential: str | None
    search: str | None = None
    status: str | None = None  # Raw value; parsed after the admin check


@dataclass(frozen=True, slots=True)
class SearchAdminTestDrivesResponse:
    bookings: list[TestDriveBooking]


class SearchAdminTestDrives:
    """
    Admin listing of test drive bookings.

    Search text matches car make/model or customer name/email; status is
    an exact match. Filtering and ordering are delegated to the repository.
    """

    def __init__(
        self,
        identity: IdentityResolver,
        test_drive_repository: TestDriveRepository,
    ) -> None:
        self._identity = identity
        self._repository = test_drive_repository

    def execute(self, request: SearchAdminTestDrivesRequest) -> SearchAdminTestDrivesResponse:
        """
        Raises:
            UnauthorizedError: If the caller is anonymous
            ForbiddenError: If the caller is not an admin
            ValidationError: If status is not a known booking status
        """
        self._identity.require_admin(request.credential)

        filters = TestDriveFilters(
            search=request.search or None,
            status=TestDriveStatus.parse(request.status) if request.status else None,
        )
        return SearchAdminTestDrivesResponse(bookings=self._repository.search(filters))
