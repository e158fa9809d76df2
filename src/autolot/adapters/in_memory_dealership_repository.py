from __future__ import annotations

from autolot.domain.dealership import DealershipInfo
from autolot.ports.dealership_repository import DealershipRepository


class InMemoryDealershipRepository(DealershipRepository):
    """Canonical contract implementation for tests."""

    def __init__(self, dealership: DealershipInfo | None = None) -> None:
        self._dealership = dealership

    def get_dealership(self) -> DealershipInfo | None:
        return self._dealership
