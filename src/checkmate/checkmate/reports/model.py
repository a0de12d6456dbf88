from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import format_hours_minutes
from ..core.constants import PRESENCE_RATE_UNAVAILABLE
from ..core.enums import DayStatus
from ..schedules.model import Shift


@dataclass(frozen=True)
class DailyStatus:
    """Derived status of one scheduled workday. Never stored."""

    day: date
    status: DayStatus
    shift: Optional[Shift]
    entry_time: Optional[datetime] = None
    leave_time: Optional[datetime] = None
    late_by_minutes: int = 0
    early_by_minutes: int = 0
    presence_minutes: int = 0
    error: Optional[str] = None

    @property
    def late_by(self) -> str:
        return format_hours_minutes(self.late_by_minutes)

    @property
    def early_by(self) -> str:
        return format_hours_minutes(self.early_by_minutes)

    @property
    def presence_duration(self) -> str:
        return format_hours_minutes(self.presence_minutes)

    def to_dict(self) -> dict:
        row = {
            "date": self.day.isoformat(),
            "status": self.status.value,
            "entry_time": self.entry_time.isoformat() if self.entry_time else None,
            "leave_time": self.leave_time.isoformat() if self.leave_time else None,
            "entered_late_by": self.late_by,
            "left_early_by": self.early_by,
            "presence_duration": self.presence_duration,
        }
        if self.error:
            row["error"] = self.error
        return row


@dataclass(frozen=True)
class MonthlyReport:
    start_date: date
    end_date: date
    daily_reports: tuple[DailyStatus, ...] = field(default_factory=tuple)
    cancelled: bool = False

    @property
    def total_days(self) -> int:
        return len(self.daily_reports)

    def _count(self, status: DayStatus) -> int:
        return sum(1 for d in self.daily_reports if d.status == status)

    @property
    def present_days(self) -> int:
        return self._count(DayStatus.PRESENT)

    @property
    def absent_days(self) -> int:
        return self._count(DayStatus.ABSENT)

    @property
    def unknown_days(self) -> int:
        return self._count(DayStatus.UNKNOWN)

    @property
    def total_late_minutes(self) -> int:
        return sum(d.late_by_minutes for d in self.daily_reports)

    @property
    def total_early_leave_minutes(self) -> int:
        return sum(d.early_by_minutes for d in self.daily_reports)

    @property
    def presence_rate(self) -> Optional[float]:
        """Percentage of scheduled days marked Present; None when there are none."""
        if self.total_days == 0:
            return None
        return round(self.present_days / self.total_days * 100, 2)

    @property
    def presence_rate_display(self) -> str:
        rate = self.presence_rate
        return PRESENCE_RATE_UNAVAILABLE if rate is None else f"{rate:.2f}%"

    def to_dict(self) -> dict:
        return {
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "total_days": self.total_days,
            "present_days": self.present_days,
            "absent_days": self.absent_days,
            "unknown_days": self.unknown_days,
            "total_late": format_hours_minutes(self.total_late_minutes),
            "total_early_leaves": format_hours_minutes(self.total_early_leave_minutes),
            "presence_rate": PRESENCE_RATE_UNAVAILABLE if self.presence_rate is None else self.presence_rate,
            "monthly_presence_rate": self.presence_rate_display,
            "cancelled": self.cancelled,
            "daily_reports": [d.to_dict() for d in self.daily_reports],
        }
