from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.datetime_utils import parse_clock


@dataclass(frozen=True)
class Shift:
    """Recurring weekly work window.

    Days are 0=Sunday .. 6=Saturday. Times are zero-padded "HH:MM" strings.
    ``start_day > end_day`` wraps across the week boundary.
    """

    start_day: int
    end_day: int
    start_time: str
    end_time: str

    @property
    def start_minutes(self) -> int:
        return parse_clock(self.start_time)

    @property
    def end_minutes(self) -> int:
        return parse_clock(self.end_time)

    @property
    def wraps_week(self) -> bool:
        return self.start_day > self.end_day

    def to_dict(self) -> dict:
        return {
            "start_day": self.start_day,
            "end_day": self.end_day,
            "start_time": self.start_time,
            "end_time": self.end_time,
        }


@dataclass(frozen=True)
class Schedule:
    schedule_id: int
    shifts: tuple[Shift, ...]
    name: Optional[str] = None
