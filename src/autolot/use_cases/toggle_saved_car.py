from __future__ import annotations

import logging
from dataclasses import dataclass

from autolot.domain.errors import NotFoundError
from autolot.ports.car_catalog_repository import CarCatalogRepository
from autolot.ports.saved_car_repository import SavedCarRepository
from autolot.ports.view_invalidator import SAVED_CARS_VIEW, ViewInvalidator, car_detail_view
from autolot.use_cases.identity import IdentityResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ToggleSavedCarRequest:
    credential: str | None
    car_id: str


@dataclass(frozen=True, slots=True)
class ToggleSavedCarResponse:
    saved: bool


class ToggleSavedCar:
    """Add the car to the caller's wishlist, or remove it if already there."""

    def __init__(
        self,
        identity: IdentityResolver,
        car_catalog_repository: CarCatalogRepository,
        saved_car_repository: SavedCarRepository,
        view_invalidator: ViewInvalidator,
    ) -> None:
        self._identity = identity
        self._cars = car_catalog_repository
        self._saved_cars = saved_car_repository
        self._views = view_invalidator

    def execute(self, request: ToggleSavedCarRequest) -> ToggleSavedCarResponse:
        """
        Raises:
            UnauthorizedError: If the caller is anonymous
            NotFoundError: If the car does not exist
        """
        user = self._identity.require_user(request.credential)

        car = self._cars.get_by_id(request.car_id)
        if car is None:
            raise NotFoundError(resource="Car", identifier=request.car_id)

        saved = self._saved_cars.toggle(user.id, car.id)
        logger.info(
            "Wishlist toggled",
            extra={"user_id": user.id, "car_id": car.id, "saved": saved},
        )

        self._views.invalidate(SAVED_CARS_VIEW, car_detail_view(car.id))
        return ToggleSavedCarResponse(saved=saved)
