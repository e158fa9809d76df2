from __future__ import annotations

from dataclasses import dataclass

from autolot.domain.dashboard import DashboardStats, compute_dashboard_stats
from autolot.ports.car_catalog_repository import CarCatalogRepository
from autolot.ports.test_drive_repository import TestDriveRepository
from autolot.use_cases.identity import IdentityResolver


@dataclass(frozen=True, slots=True)
class GetDashboardDataRequest:
    credential: str | None


class GetDashboardData:
    """
    Admin dashboard statistics.

    Both collections are fetched in full; a failure in either fails the
    whole call, so no partial statistics are ever returned.
    """

    def __init__(
        self,
        identity: IdentityResolver,
        car_catalog_repository: CarCatalogRepository,
        test_drive_repository: TestDriveRepository,
    ) -> None:
        self._identity = identity
        self._cars = car_catalog_repository
        self._test_drives = test_drive_repository

    def execute(self, request: GetDashboardDataRequest) -> DashboardStats:
        self._identity.require_admin(request.credential)

        cars = self._cars.list_status_snapshots()
        bookings = self._test_drives.list_status_snapshots()
        return compute_dashboard_stats(cars, bookings)
