from __future__ import annotations

from datetime import date
from typing import Optional

from ..common.datetime_utils import day_bounds, minutes_of_day
from ..core.enums import DayStatus, EventKind
from ..employees.model import Employee
from ..events.repository import EventRepository
from ..schedules.model import Schedule
from ..schedules.policies import ReportingDayPolicy
from .model import DailyStatus


class DailyStatusResolver:
    """Computes one day's presence status from the schedule and that day's events.

    Canonical pair: earliest attendance event, latest leave event.
    """

    def __init__(self, events: EventRepository, *, day_policy: Optional[ReportingDayPolicy] = None):
        self._events = events
        self._day_policy = day_policy or ReportingDayPolicy()

    def resolve_day(self, employee: Employee, schedule: Schedule, day: date) -> Optional[DailyStatus]:
        """Return None when ``day`` is not a scheduled workday."""

        shift = self._day_policy.shift_for(schedule, day)
        if shift is None:
            return None

        start, end = day_bounds(day)
        attendances = self._events.find_for_day(EventKind.ATTENDANCE, employee.employee_id, start, end)
        leaves = self._events.find_for_day(EventKind.LEAVE, employee.employee_id, start, end)

        entry = min((e.timestamp for e in attendances), default=None)
        exit_ = max((e.timestamp for e in leaves), default=None)

        if entry and exit_:
            status = DayStatus.PRESENT
        elif entry:
            status = DayStatus.STILL_INSIDE
        else:
            # A leave without an attendance is not a valid day.
            status = DayStatus.ABSENT

        late = max(0, minutes_of_day(entry) - shift.start_minutes) if entry else 0
        early = max(0, shift.end_minutes - minutes_of_day(exit_)) if exit_ else 0
        presence = 0
        if entry and exit_:
            presence = max(0, int((exit_ - entry).total_seconds() // 60))

        return DailyStatus(
            day=day,
            status=status,
            shift=shift,
            entry_time=entry,
            leave_time=exit_,
            late_by_minutes=late,
            early_by_minutes=early,
            presence_minutes=presence,
        )
