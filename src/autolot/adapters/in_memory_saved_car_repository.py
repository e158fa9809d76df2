from __future__ import annotations

import itertools
import threading

from autolot.domain.car import Car
from autolot.ports.saved_car_repository import SavedCarRepository


class InMemorySavedCarRepository(SavedCarRepository):
    """
    Canonical contract implementation for tests.

    Entries are keyed by (user_id, car_id) so duplicates cannot exist; a lock
    makes toggle() atomic across threads.
    """

    def __init__(self, cars: list[Car]) -> None:
        self._cars = {car.id: car for car in cars}
        self._entries: dict[tuple[str, str], int] = {}  # (user_id, car_id) -> save sequence
        self._sequence = itertools.count()
        self._lock = threading.Lock()

    def saved_car_ids(self, user_id: str) -> set[str]:
        return {car_id for (owner, car_id) in self._entries if owner == user_id}

    def is_saved(self, user_id: str, car_id: str) -> bool:
        return (user_id, car_id) in self._entries

    def toggle(self, user_id: str, car_id: str) -> bool:
        key = (user_id, car_id)
        with self._lock:
            if key in self._entries:
                del self._entries[key]
                return False
            self._entries[key] = next(self._sequence)
            return True

    def list_saved_cars(self, user_id: str) -> list[Car]:
        saved = sorted(
            ((sequence, car_id) for (owner, car_id), sequence in self._entries.items() if owner == user_id),
            reverse=True,
        )
        return [self._cars[car_id] for _, car_id in saved if car_id in self._cars]

    def entry_count(self) -> int:
        return len(self._entries)
