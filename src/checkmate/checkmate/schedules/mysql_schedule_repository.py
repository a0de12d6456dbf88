from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_clock
from .model import Schedule, Shift
from .repository import ScheduleRepository


class MySQLScheduleRepository(ScheduleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, schedule_id: int) -> Optional[Schedule]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT schedule_id, name FROM schedules WHERE schedule_id=%s",
                (int(schedule_id),),
            )
            head = fetchone(cur)
            if not head:
                return None

            cur.execute(
                """
                SELECT start_day, end_day, start_time, end_time
                FROM schedule_shifts
                WHERE schedule_id=%s
                ORDER BY position ASC, shift_id ASC
                """,
                (int(schedule_id),),
            )
            rows = fetchall(cur)
            return Schedule(
                schedule_id=int(head["schedule_id"]),
                name=head.get("name"),
                shifts=tuple(
                    Shift(
                        start_day=int(r["start_day"]),
                        end_day=int(r["end_day"]),
                        start_time=normalize_clock(r["start_time"]),
                        end_time=normalize_clock(r["end_time"]),
                    )
                    for r in rows
                ),
            )
