from __future__ import annotations

import logging
from dataclasses import dataclass

from autolot.domain.errors import NotFoundError
from autolot.domain.test_drive import TestDriveStatus
from autolot.ports.test_drive_repository import TestDriveRepository
from autolot.ports.view_invalidator import (
    ADMIN_TEST_DRIVES_VIEW,
    RESERVATIONS_VIEW,
    ViewInvalidator,
)
from autolot.use_cases.identity import IdentityResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UpdateTestDriveStatusRequest:
    credential: str | None
    booking_id: str
    status: str


@dataclass(frozen=True, slots=True)
class UpdateTestDriveStatusResponse:
    booking_id: str
    status: TestDriveStatus


class UpdateTestDriveStatus:
    """
    Admin-only status change for a booking.

    Checks run in this order: admin, booking exists, status is valid.
    Any status may replace any other (including itself); nothing is
    written unless all checks pass.
    """

    def __init__(
        self,
        identity: IdentityResolver,
        test_drive_repository: TestDriveRepository,
        view_invalidator: ViewInvalidator,
    ) -> None:
        self._identity = identity
        self._repository = test_drive_repository
        self._views = view_invalidator

    def execute(self, request: UpdateTestDriveStatusRequest) -> UpdateTestDriveStatusResponse:
        """
        Raises:
            UnauthorizedError: If the caller is anonymous
            ForbiddenError: If the caller is not an admin
            NotFoundError: If the booking does not exist
            ValidationError: If status is not a known booking status
        """
        admin = self._identity.require_admin(request.credential)

        booking = self._repository.get_by_id(request.booking_id)
        if booking is None:
            raise NotFoundError(resource="Test drive", identifier=request.booking_id)

        status = TestDriveStatus.parse(request.status)
        self._repository.update_status(request.booking_id, status)

        logger.info(
            "Test drive status updated",
            extra={
                "booking_id": request.booking_id,
                "from_status": booking.status.value,
                "to_status": status.value,
                "admin_id": admin.id,
            },
        )

        self._views.invalidate(ADMIN_TEST_DRIVES_VIEW, RESERVATIONS_VIEW)
        return UpdateTestDriveStatusResponse(booking_id=request.booking_id, status=status)
