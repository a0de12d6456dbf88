from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Sequence

import mysql.connector

from ..core.enums import EventKind
from ..core.exceptions import DuplicateEventError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_entry
from .model import PresenceEvent
from .repository import EventRepository

_TABLES = {
    EventKind.ATTENDANCE: "attendance_events",
    EventKind.LEAVE: "leave_events",
}


def _to_event(kind: EventKind, row: Dict[str, Any]) -> PresenceEvent:
    return PresenceEvent(
        event_id=int(row["event_id"]),
        kind=kind,
        employee_id=int(row["employee_id"]),
        rfid_tag=row["rfid_tag"],
        pin=int(row["pin"]),
        timestamp=row["event_time"],
    )


class MySQLEventRepository(EventRepository):
    """Both event kinds, one table each.

    ``UNIQUE(employee_id, event_date)`` on each table is what makes
    ``create`` atomic with respect to the one-per-day invariant.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_for_day(
        self, kind: EventKind, employee_id: int, day_start: datetime, day_end: datetime
    ) -> Sequence[PresenceEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT event_id, employee_id, rfid_tag, pin, event_time
                FROM {_TABLES[kind]}
                WHERE employee_id=%s AND event_time BETWEEN %s AND %s
                ORDER BY event_time ASC
                """,
                (int(employee_id), day_start, day_end),
            )
            return [_to_event(kind, r) for r in fetchall(cur)]

    def exists_for_day(self, kind: EventKind, employee_id: int, day_start: datetime, day_end: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT 1 AS hit
                FROM {_TABLES[kind]}
                WHERE employee_id=%s AND event_time BETWEEN %s AND %s
                LIMIT 1
                """,
                (int(employee_id), day_start, day_end),
            )
            return fetchone(cur) is not None

    def create(self, kind: EventKind, *, employee_id: int, rfid_tag: str, pin: int, timestamp: datetime) -> PresenceEvent:
        # DATETIME(0) rounds fractions; event_time must stay on event_date.
        timestamp = timestamp.replace(microsecond=0)
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    f"""
                    INSERT INTO {_TABLES[kind]}(employee_id, rfid_tag, pin, event_time, event_date)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (int(employee_id), rfid_tag, int(pin), timestamp, timestamp.date()),
                )
            except mysql.connector.IntegrityError as e:
                if is_duplicate_entry(e):
                    raise DuplicateEventError(
                        f"{kind.value} already recorded for employee {employee_id} on {timestamp.date()}"
                    ) from e
                raise
            return PresenceEvent(
                event_id=int(cur.lastrowid),
                kind=kind,
                employee_id=int(employee_id),
                rfid_tag=rfid_tag,
                pin=int(pin),
                timestamp=timestamp,
            )

    def list_between(self, kind: EventKind, start: datetime, end: datetime) -> Sequence[PresenceEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT event_id, employee_id, rfid_tag, pin, event_time
                FROM {_TABLES[kind]}
                WHERE event_time BETWEEN %s AND %s
                ORDER BY event_time ASC
                """,
                (start, end),
            )
            return [_to_event(kind, r) for r in fetchall(cur)]

    def list_recent(self, kind: EventKind, limit: int) -> Sequence[PresenceEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT event_id, employee_id, rfid_tag, pin, event_time
                FROM {_TABLES[kind]}
                ORDER BY event_time DESC
                LIMIT %s
                """,
                (int(limit),),
            )
            return [_to_event(kind, r) for r in fetchall(cur)]
