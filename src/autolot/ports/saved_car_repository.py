from __future__ import annotations

from abc import ABC, abstractmethod

from autolot.domain.car import Car


class SavedCarRepository(ABC):
    """
    Port for the per-user wishlist.

    Invariant: at most one saved entry per (user_id, car_id).
    """

    @abstractmethod
    def saved_car_ids(self, user_id: str) -> set[str]:
        """All car ids the user has saved, fetched in one round trip."""
        ...

    @abstractmethod
    def is_saved(self, user_id: str, car_id: str) -> bool: ...

    @abstractmethod
    def toggle(self, user_id: str, car_id: str) -> bool:
        """
        Flip membership of car_id in the user's wishlist.

        Implementations must keep the uniqueness invariant under concurrent
        toggles for the same pair: a concurrent insert that wins the race is
        reported as saved rather than duplicated.

        Returns:
            True if the car is saved after the call, False if it was removed
        """
        ...

    @abstractmethod
    def list_saved_cars(self, user_id: str) -> list[Car]:
        """The user's saved cars, most recently saved first."""
        ...
