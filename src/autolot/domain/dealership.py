from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class DayOfWeek(str, Enum):
    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"


@dataclass(frozen=True, slots=True)
class WorkingHour:
    id: str
    day_of_week: DayOfWeek
    open_time: str
    close_time: str
    is_open: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True, slots=True)
class DealershipInfo:
    id: str
    name: str
    address: str
    phone: str
    email: str
    working_hours: list[WorkingHour] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None
