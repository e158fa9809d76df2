from __future__ import annotations

from dataclasses import dataclass

from autolot.domain.car import Car
from autolot.ports.saved_car_repository import SavedCarRepository
from autolot.use_cases.identity import IdentityResolver


@dataclass(frozen=True, slots=True)
class GetSavedCarsRequest:
    credential: str | None


class GetSavedCars:
    """The caller's wishlist, most recently saved first."""

    def __init__(
        self,
        identity: IdentityResolver,
        saved_car_repository: SavedCarRepository,
    ) -> None:
        self._identity = identity
        self._saved_cars = saved_car_repository

    def execute(self, request: GetSavedCarsRequest) -> list[Car]:
        """
        Raises:
            UnauthorizedError: If the caller is anonymous
        """
        user = self._identity.require_user(request.credential)
        return [car.with_wishlisted(True) for car in self._saved_cars.list_saved_cars(user.id)]
