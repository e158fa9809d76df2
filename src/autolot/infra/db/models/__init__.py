from autolot.infra.db.models.base import Base
from autolot.infra.db.models.car import CarRow
from autolot.infra.db.models.dealership import DealershipInfoRow, WorkingHourRow
from autolot.infra.db.models.saved_car import SavedCarRow
from autolot.infra.db.models.test_drive import TestDriveBookingRow
from autolot.infra.db.models.user import UserRow

__all__ = [
    "Base",
    "CarRow",
    "DealershipInfoRow",
    "SavedCarRow",
    "TestDriveBookingRow",
    "UserRow",
    "WorkingHourRow",
]
