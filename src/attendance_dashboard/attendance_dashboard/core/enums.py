from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Status stored for one employee on one date."""

    PRESENT = "present"
    HALF_DAY = "half-day"
    ABSENT = "absent"


class DayStatus(str, Enum):
    """Effective status of a calendar day in a monthly view."""

    PRESENT = "present"
    HALF_DAY = "half-day"
    ABSENT = "absent"
    NOT_JOINED = "not-joined"
    UPCOMING = "upcoming"

    @classmethod
    def from_attendance(cls, status: AttendanceStatus) -> "DayStatus":
        return cls(status.value)
