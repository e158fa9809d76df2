from __future__ import annotations

from autolot.domain.car import Car
from autolot.ports.saved_car_repository import SavedCarRepository


class WishlistAnnotator:
    """Marks which cars of a result set the caller has saved."""

    def __init__(self, saved_car_repository: SavedCarRepository) -> None:
        self._saved_cars = saved_car_repository

    def annotate(self, cars: list[Car], caller_id: str | None) -> list[Car]:
        """
        Return the cars in the same order with ``wishlisted`` set.

        Anonymous callers get every flag false without touching the store;
        otherwise the caller's saved ids are fetched once.
        """
        if caller_id is None:
            return [car.with_wishlisted(False) for car in cars]

        saved_ids = self._saved_cars.saved_car_ids(caller_id)
        return [car.with_wishlisted(car.id in saved_ids) for car in cars]
