"""Day and clock-window policies applied to a weekly Schedule.

Admission and reporting deliberately use different day rules:

* ``AdmissionWindowPolicy`` honours day ranges and week-wrapping shifts
  plus a grace buffer around the clock window.
* ``ReportingDayPolicy`` only looks at a shift's ``start_day``.

Both are kept explicit; they are not interchangeable.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import minutes_of_day, weekday_index
from ..core.constants import DEFAULT_BUFFER_MINUTES, MINUTES_PER_DAY
from .model import Schedule, Shift


@dataclass(frozen=True)
class ShiftMatch:
    within_shift: bool
    within_buffer: bool
    shift: Optional[Shift] = None

    @property
    def admissible(self) -> bool:
        return self.within_shift or self.within_buffer


def _in_circular_window(now: int, lo: int, hi: int) -> bool:
    # lo > hi means the window runs through midnight.
    if lo <= hi:
        return lo <= now <= hi
    return now >= lo or now <= hi


class AdmissionWindowPolicy:
    """Decides whether a scan time falls in a shift window or its buffer."""

    def __init__(self, buffer_minutes: int = DEFAULT_BUFFER_MINUTES):
        if buffer_minutes < 0:
            raise ValueError("buffer_minutes must not be negative")
        self._buffer = int(buffer_minutes)

    @property
    def buffer_minutes(self) -> int:
        return self._buffer

    def match(self, schedule: Schedule, now: datetime) -> ShiftMatch:
        day = weekday_index(now.date())
        minute = minutes_of_day(now)

        within_shift = False
        within_buffer = False
        shift_hit: Optional[Shift] = None
        buffer_hit: Optional[Shift] = None

        for shift in schedule.shifts:
            in_shift, in_buffer = self._evaluate(shift, day, minute)
            if in_shift:
                within_shift = True
                shift_hit = shift_hit or shift
            if in_buffer:
                within_buffer = True
                buffer_hit = buffer_hit or shift

        return ShiftMatch(
            within_shift=within_shift,
            within_buffer=within_buffer,
            shift=shift_hit or buffer_hit,
        )

    def _evaluate(self, shift: Shift, day: int, minute: int) -> tuple[bool, bool]:
        start = shift.start_minutes
        end = shift.end_minutes

        if not shift.wraps_week:
            if not (shift.start_day <= day <= shift.end_day):
                return False, False
            if start > end:
                # Inverted clock window: never inside the shift; the buffer
                # only counts where the widened bounds overlap.
                return False, start - self._buffer <= minute <= end + self._buffer
            in_shift = start <= minute <= end
            span = end - start
            if span + 2 * self._buffer >= MINUTES_PER_DAY - 1:
                return in_shift, True
            in_buffer = _in_circular_window(
                minute,
                (start - self._buffer) % MINUTES_PER_DAY,
                (end + self._buffer) % MINUTES_PER_DAY,
            )
            return in_shift, in_buffer

        # Week wrap: only the two boundary days are evaluated.
        if day == shift.start_day:
            return minute >= start, minute >= max(start - self._buffer, 0)
        if day == shift.end_day:
            return minute <= end, minute <= min(end + self._buffer, MINUTES_PER_DAY - 1)
        return False, False


class ReportingDayPolicy:
    """Picks the shift a calendar day is reported against (start_day only)."""

    def shift_for(self, schedule: Schedule, day: date) -> Optional[Shift]:
        weekday = weekday_index(day)
        for shift in schedule.shifts:
            if shift.start_day == weekday:
                return shift
        return None
