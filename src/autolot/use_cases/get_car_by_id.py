"""Get car by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from autolot.domain.car import Car
from autolot.domain.dealership import DealershipInfo
from autolot.domain.errors import NotFoundError
from autolot.domain.test_drive import UserTestDrive
from autolot.ports.car_catalog_repository import CarCatalogRepository
from autolot.ports.dealership_repository import DealershipRepository
from autolot.ports.saved_car_repository import SavedCarRepository
from autolot.ports.test_drive_repository import TestDriveRepository
from autolot.use_cases.identity import IdentityResolver


@dataclass(frozen=True, slots=True)
class GetCarByIdRequest:
    """Request to get a car by ID."""

    car_id: str
    credential: str | None = None


@dataclass(frozen=True, slots=True)
class GetCarByIdResponse:
    """The car (with wishlist flag) and the context for booking a test drive."""

    car: Car
    user_test_drive: UserTestDrive | None
    dealership: DealershipInfo | None


class GetCarById:
    """
    Use case for the car detail page.

    Responsibilities:
    - Raise NotFoundError if the car doesn't exist (malformed ids included)
    - Flag the car as wishlisted for the caller
    - Attach the caller's active test drive for this car and the dealership info

    Anonymous callers get wishlisted=False and no test drive, never an error.
    """

    def __init__(
        self,
        identity: IdentityResolver,
        car_catalog_repository: CarCatalogRepository,
        saved_car_repository: SavedCarRepository,
        test_drive_repository: TestDriveRepository,
        dealership_repository: DealershipRepository,
    ) -> None:
        self._identity = identity
        self._cars = car_catalog_repository
        self._saved_cars = saved_car_repository
        self._test_drives = test_drive_repository
        self._dealerships = dealership_repository

    def execute(self, request: GetCarByIdRequest) -> GetCarByIdResponse:
        """
        Raises:
            NotFoundError: If car with given ID doesn't exist
        """
        caller = self._identity.resolve_caller(request.credential)

        car = self._cars.get_by_id(request.car_id)
        if car is None:
            raise NotFoundError(resource="Car", identifier=request.car_id)

        wishlisted = False
        user_test_drive = None
        if caller is not None:
            wishlisted = self._saved_cars.is_saved(caller.id, car.id)
            user_test_drive = self._test_drives.find_active_for_user(car.id, caller.id)

        return GetCarByIdResponse(
            car=car.with_wishlisted(wishlisted),
            user_test_drive=user_test_drive,
            dealership=self._dealerships.get_dealership(),
        )
