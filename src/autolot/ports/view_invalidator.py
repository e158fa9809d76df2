from __future__ import annotations

from abc import ABC, abstractmethod

# Frontend pages whose cached render shows data this service mutates.
ADMIN_TEST_DRIVES_VIEW = "/admin/test-drives"
RESERVATIONS_VIEW = "/reservations"
SAVED_CARS_VIEW = "/saved-cars"


def car_detail_view(car_id: str) -> str:
    return f"/car/{car_id}"


class ViewInvalidator(ABC):
    """Signals the external page cache that some views are stale."""

    @abstractmethod
    def invalidate(self, *paths: str) -> None: ...
