from __future__ import annotations

import threading
from datetime import date, datetime
from typing import Any, Optional

from ..common.datetime_utils import now_local
from ..common.validators import require_int
from ..core.exceptions import NotFoundError
from ..employees.model import EmployeeProfile
from ..employees.repository import EmployeeRepository
from ..schedules.model import Schedule
from .daily import DailyStatusResolver
from .monthly import MonthlyAggregator

NO_SCHEDULED_WORK = "No scheduled work today"


class ReportService:
    """Use case: daily and trailing-month presence reports for one employee."""

    def __init__(
        self,
        employees: EmployeeRepository,
        resolver: DailyStatusResolver,
        aggregator: MonthlyAggregator,
    ):
        self._employees = employees
        self._resolver = resolver
        self._aggregator = aggregator

    def _load_profile(self, employee_id: Any) -> EmployeeProfile:
        employee_id = require_int(employee_id, "employee_id")
        profile = self._employees.get_profile(employee_id)
        if not profile:
            raise NotFoundError("Employee not found")
        return profile

    def daily_report(self, employee_id: Any, *, now: Optional[datetime] = None) -> dict:
        profile = self._load_profile(employee_id)
        today = (now or now_local()).date()

        schedule = profile.schedule or Schedule(schedule_id=0, shifts=())
        day = self._resolver.resolve_day(profile.employee, schedule, today)
        if day is None:
            return {"message": NO_SCHEDULED_WORK}

        return {
            "employee": profile.summary(),
            "schedule": day.shift.to_dict() if day.shift else None,
            "date": day.day.isoformat(),
            "entry_time": day.entry_time.isoformat() if day.entry_time else None,
            "leave_time": day.leave_time.isoformat() if day.leave_time else None,
            "entered_late_by_minutes": day.late_by,
            "left_early_by_minutes": day.early_by,
            "presence_duration": day.presence_duration,
            "status": day.status.value,
        }

    def monthly_report(
        self,
        employee_id: Any,
        *,
        reference_date: Optional[date] = None,
        cancel: Optional[threading.Event] = None,
    ) -> dict:
        profile = self._load_profile(employee_id)
        reference_date = reference_date or now_local().date()

        schedule = profile.schedule or Schedule(schedule_id=0, shifts=())
        report = self._aggregator.resolve_month(profile.employee, schedule, reference_date, cancel=cancel)

        body = {"employee": profile.summary()}
        body.update(report.to_dict())
        return body
