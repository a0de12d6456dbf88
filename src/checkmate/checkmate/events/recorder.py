from __future__ import annotations

import logging
from datetime import datetime

from ..common.datetime_utils import day_bounds
from ..core.enums import EventKind
from ..core.exceptions import DuplicateEventError
from .model import Credential, RecordOutcome
from .repository import EventRepository

logger = logging.getLogger(__name__)


class EventRecorder:
    """Creates attendance/leave events, at most one per kind per employee per day.

    A second call for the same (employee, kind, calendar day) returns the
    event already stored with ``created=False``. Events are never updated
    or deleted here.
    """

    def __init__(self, events: EventRepository):
        self._events = events

    def record(self, kind: EventKind, employee_id: int, credential: Credential, timestamp: datetime) -> RecordOutcome:
        try:
            event = self._events.create(
                kind,
                employee_id=employee_id,
                rfid_tag=credential.rfid_tag,
                pin=credential.pin,
                timestamp=timestamp,
            )
        except DuplicateEventError:
            start, end = day_bounds(timestamp.date())
            existing = self._events.find_for_day(kind, employee_id, start, end)
            if not existing:
                raise
            logger.info("%s for employee %s on %s already stored", kind.value, employee_id, timestamp.date())
            return RecordOutcome(event=existing[0], created=False)

        logger.info("recorded %s for employee %s at %s", kind.value, employee_id, timestamp.isoformat())
        return RecordOutcome(event=event, created=True)
