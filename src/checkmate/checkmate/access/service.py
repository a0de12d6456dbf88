from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Optional

from ..common.datetime_utils import day_bounds, now_local
from ..common.locks import KeyedLock
from ..common.validators import require_int, require_non_empty
from ..core.enums import AdmissionAction, EventKind
from ..employees.repository import EmployeeRepository
from ..events.model import Credential
from ..events.recorder import EventRecorder
from ..events.repository import EventRepository
from ..schedules.policies import AdmissionWindowPolicy
from ..schedules.repository import ScheduleRepository
from .model import REASON_BOTH_RECORDED, REASON_OUTSIDE_SHIFT, AdmissionResult

logger = logging.getLogger(__name__)


class AccessValidator:
    """Use case: a device scans a badge and asks whether to open.

    Each employee gets a strict in -> out toggle per calendar day: the first
    admitted scan records attendance, the second records leave, any later
    scan that day is denied.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        schedules: ScheduleRepository,
        events: EventRepository,
        *,
        recorder: Optional[EventRecorder] = None,
        window_policy: Optional[AdmissionWindowPolicy] = None,
        locks: Optional[KeyedLock] = None,
    ):
        self._employees = employees
        self._schedules = schedules
        self._events = events
        self._recorder = recorder or EventRecorder(events)
        self._window = window_policy or AdmissionWindowPolicy()
        self._locks = locks or KeyedLock()

    def admit(self, rfid_tag: Any, pin: Any, *, now: Optional[datetime] = None) -> AdmissionResult:
        credential = Credential(
            rfid_tag=require_non_empty(rfid_tag, "rfid_tag"),
            pin=require_int(pin, "pin"),
        )
        now = now or now_local()

        employee = self._employees.get_by_credential(credential.rfid_tag, credential.pin)
        if not employee:
            logger.warning("scan with unknown credential tag=%s", credential.rfid_tag)
            return AdmissionResult.deny()

        schedule = self._schedules.get_by_id(employee.schedule_id) if employee.schedule_id is not None else None
        if schedule is None or not self._window.match(schedule, now).admissible:
            logger.info("employee %s denied at %s: outside shift", employee.employee_id, now.isoformat())
            return AdmissionResult.deny(REASON_OUTSIDE_SHIFT)

        with self._locks.hold(employee.employee_id):
            result = self._toggle(employee.employee_id, credential, now)

        logger.info(
            "employee %s at %s: granted=%s action=%s",
            employee.employee_id,
            now.isoformat(),
            result.granted,
            result.action.value if result.action else result.reason,
        )
        return result

    def _toggle(self, employee_id: int, credential: Credential, now: datetime) -> AdmissionResult:
        start, end = day_bounds(now.date())

        if not self._events.exists_for_day(EventKind.ATTENDANCE, employee_id, start, end):
            self._recorder.record(EventKind.ATTENDANCE, employee_id, credential, now)
            return AdmissionResult.grant(AdmissionAction.ATTENDANCE_RECORDED)

        if not self._events.exists_for_day(EventKind.LEAVE, employee_id, start, end):
            self._recorder.record(EventKind.LEAVE, employee_id, credential, now)
            return AdmissionResult.grant(AdmissionAction.LEAVE_RECORDED)

        return AdmissionResult.deny(REASON_BOTH_RECORDED)
