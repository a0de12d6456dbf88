from __future__ import annotations

from enum import Enum


class EventKind(str, Enum):
    """The two event kinds recorded per employee per calendar day."""

    ATTENDANCE = "attendance"
    LEAVE = "leave"


class AdmissionAction(str, Enum):
    ATTENDANCE_RECORDED = "attendance_recorded"
    LEAVE_RECORDED = "leave_recorded"


class DayStatus(str, Enum):
    """Derived presence status of one scheduled workday."""

    PRESENT = "Present"
    ABSENT = "Absent"
    STILL_INSIDE = "Still Inside or Forgot to Checkout"
    UNKNOWN = "Unknown"


class PresenceState(str, Enum):
    """Live state shown on the presence board."""

    NOT_IN_YET = "not in yet"
    IN = "in"
    OUT = "out"
