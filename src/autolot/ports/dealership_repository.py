from __future__ import annotations

from abc import ABC, abstractmethod

from autolot.domain.dealership import DealershipInfo


class DealershipRepository(ABC):
    @abstractmethod
    def get_dealership(self) -> DealershipInfo | None:
        """The first dealership record with its working hours, or None."""
        ...
