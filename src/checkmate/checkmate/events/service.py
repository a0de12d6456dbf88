from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Optional

from ..common.datetime_utils import day_bounds, now_local
from ..common.validators import require_int, require_non_empty
from ..core.constants import DEFAULT_LOG_LIMIT
from ..core.enums import EventKind, PresenceState
from ..core.exceptions import NotFoundError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .model import Credential, PresenceEvent, RecordOutcome
from .recorder import EventRecorder
from .repository import EventRepository

logger = logging.getLogger(__name__)


class PresenceLogService:
    """Use cases around the raw event log.

    ``record_manual`` is the override path: it resolves the employee by tag
    alone and skips shift/admission rules, but still goes through the
    recorder so the one-per-day invariant holds.
    """

    def __init__(self, employees: EmployeeRepository, events: EventRepository, *, recorder: Optional[EventRecorder] = None):
        self._employees = employees
        self._events = events
        self._recorder = recorder or EventRecorder(events)

    def record_manual(self, kind: EventKind, rfid_tag: Any, pin: Any, *, now: Optional[datetime] = None) -> RecordOutcome:
        credential = Credential(
            rfid_tag=require_non_empty(rfid_tag, "rfid_tag"),
            pin=require_int(pin, "pin"),
        )
        employee = self._employees.get_by_tag(credential.rfid_tag)
        if not employee:
            raise NotFoundError("Employee not found")

        logger.info("manual %s for employee %s", kind.value, employee.employee_id)
        return self._recorder.record(kind, employee.employee_id, credential, now or now_local())

    def list_logs(self, kind: EventKind, *, limit: int = DEFAULT_LOG_LIMIT) -> list[dict]:
        by_id = self._employees_by_id()
        return [self._log_row(e, by_id.get(e.employee_id)) for e in self._events.list_recent(kind, limit)]

    def todays_checkins(self, *, now: Optional[datetime] = None) -> dict:
        start, end = day_bounds((now or now_local()).date())
        by_id = self._employees_by_id()
        return {
            "attendances": [
                self._log_row(e, by_id.get(e.employee_id)) for e in self._events.list_between(EventKind.ATTENDANCE, start, end)
            ],
            "leaves": [
                self._log_row(e, by_id.get(e.employee_id)) for e in self._events.list_between(EventKind.LEAVE, start, end)
            ],
        }

    def presence_board(self, *, now: Optional[datetime] = None) -> list[dict]:
        """Every employee with today's live state (not in yet / in / out)."""

        start, end = day_bounds((now or now_local()).date())
        inside = {e.employee_id for e in self._events.list_between(EventKind.ATTENDANCE, start, end)}
        left = {e.employee_id for e in self._events.list_between(EventKind.LEAVE, start, end)}

        board = []
        for employee in self._employees.list_all():
            state = PresenceState.NOT_IN_YET
            if employee.employee_id in inside:
                state = PresenceState.IN
            if employee.employee_id in left:
                state = PresenceState.OUT
            board.append(
                {
                    "id": employee.employee_id,
                    "first_name": employee.first_name,
                    "last_name": employee.last_name,
                    "department_id": employee.department_id,
                    "status": state.value,
                }
            )
        return board

    def device_roster(self) -> list[dict]:
        """Minimal employee list pushed to scan devices."""

        return [
            {
                "id": e.employee_id,
                "first_name": e.first_name,
                "last_name": e.last_name,
                "rfid_tag": e.rfid_tag,
                "pin": e.pin,
            }
            for e in self._employees.list_all()
        ]

    def _employees_by_id(self) -> dict[int, Employee]:
        return {e.employee_id: e for e in self._employees.list_all()}

    @staticmethod
    def _log_row(event: PresenceEvent, employee: Optional[Employee]) -> dict:
        row = event.to_dict()
        row["employee"] = (
            {"id": employee.employee_id, "name": employee.full_name, "department_id": employee.department_id}
            if employee
            else None
        )
        return row
