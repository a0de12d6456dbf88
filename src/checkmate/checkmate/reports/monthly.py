from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import date, timedelta
from typing import Optional

from ..core.constants import DEFAULT_REPORT_WINDOW_DAYS, DEFAULT_REPORT_WORKERS
from ..core.enums import DayStatus
from ..employees.model import Employee
from ..schedules.model import Schedule
from ..schedules.policies import ReportingDayPolicy
from .daily import DailyStatusResolver
from .model import DailyStatus, MonthlyReport

logger = logging.getLogger(__name__)

_CANCELLED = object()


class MonthlyAggregator:
    """Drives the daily resolver over a trailing window of calendar days.

    Day lookups run on a small thread pool; the report lists days in
    chronological order whatever the completion order. A failing day is
    kept as ``Unknown`` instead of failing the report.
    """

    def __init__(
        self,
        resolver: DailyStatusResolver,
        *,
        window_days: int = DEFAULT_REPORT_WINDOW_DAYS,
        max_workers: int = DEFAULT_REPORT_WORKERS,
        day_policy: Optional[ReportingDayPolicy] = None,
    ):
        if window_days <= 0:
            raise ValueError("window_days must be positive")
        self._resolver = resolver
        self._window_days = int(window_days)
        self._max_workers = max(1, int(max_workers))
        self._day_policy = day_policy or ReportingDayPolicy()

    def window(self, reference_date: date) -> list[date]:
        start = reference_date - timedelta(days=self._window_days - 1)
        return [start + timedelta(days=i) for i in range(self._window_days)]

    def resolve_month(
        self,
        employee: Employee,
        schedule: Schedule,
        reference_date: date,
        *,
        cancel: Optional[threading.Event] = None,
    ) -> MonthlyReport:
        days = self.window(reference_date)
        workdays = [d for d in days if self._day_policy.shift_for(schedule, d) is not None]

        def run(day: date):
            if cancel is not None and cancel.is_set():
                return _CANCELLED
            try:
                return self._resolver.resolve_day(employee, schedule, day)
            except Exception as e:
                logger.exception("day %s for employee %s could not be resolved", day, employee.employee_id)
                return DailyStatus(
                    day=day,
                    status=DayStatus.UNKNOWN,
                    shift=self._day_policy.shift_for(schedule, day),
                    error=str(e) or e.__class__.__name__,
                )

        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            results = list(pool.map(run, workdays))

        cancelled = any(r is _CANCELLED for r in results)
        daily = tuple(sorted((r for r in results if isinstance(r, DailyStatus)), key=lambda s: s.day))
        if cancelled:
            logger.info(
                "monthly report for employee %s cancelled after %d of %d days",
                employee.employee_id,
                len(daily),
                len(workdays),
            )

        return MonthlyReport(start_date=days[0], end_date=days[-1], daily_reports=daily, cancelled=cancelled)
