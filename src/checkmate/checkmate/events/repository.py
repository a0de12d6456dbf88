from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from ..core.enums import EventKind
from .model import PresenceEvent


class EventRepository(Protocol):
    """Store contract for attendance/leave events.

    Implementations must enforce at most one event per
    (employee, kind, calendar day) atomically.
    """

    def find_for_day(
        self, kind: EventKind, employee_id: int, day_start: datetime, day_end: datetime
    ) -> Sequence[PresenceEvent]:
        """Events of one kind inside [day_start, day_end], oldest first."""

        raise NotImplementedError

    def exists_for_day(self, kind: EventKind, employee_id: int, day_start: datetime, day_end: datetime) -> bool:
        raise NotImplementedError

    def create(self, kind: EventKind, *, employee_id: int, rfid_tag: str, pin: int, timestamp: datetime) -> PresenceEvent:
        """Insert one event.

        Raises DuplicateEventError when the employee already has an event of
        this kind on the timestamp's calendar day.
        """

        raise NotImplementedError

    def list_between(self, kind: EventKind, start: datetime, end: datetime) -> Sequence[PresenceEvent]:
        raise NotImplementedError

    def list_recent(self, kind: EventKind, limit: int) -> Sequence[PresenceEvent]:
        raise NotImplementedError
