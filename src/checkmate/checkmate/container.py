from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .access.service import AccessValidator
from .core.constants import DEFAULT_BUFFER_MINUTES, DEFAULT_REPORT_WINDOW_DAYS, DEFAULT_REPORT_WORKERS
from .database.connection import DatabaseConnection, DBConfig
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .events.mysql_event_repository import MySQLEventRepository
from .events.recorder import EventRecorder
from .events.repository import EventRepository
from .events.service import PresenceLogService
from .reports.daily import DailyStatusResolver
from .reports.monthly import MonthlyAggregator
from .reports.service import ReportService
from .schedules.mysql_schedule_repository import MySQLScheduleRepository
from .schedules.policies import AdmissionWindowPolicy, ReportingDayPolicy
from .schedules.repository import ScheduleRepository


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository
    schedules_repo: ScheduleRepository
    events_repo: EventRepository

    event_recorder: EventRecorder
    access_validator: AccessValidator
    report_service: ReportService
    presence_log_service: PresenceLogService


def assemble_container(
    *,
    employees: EmployeeRepository,
    schedules: ScheduleRepository,
    events: EventRepository,
    conn: Optional[DatabaseConnection] = None,
    buffer_minutes: int = DEFAULT_BUFFER_MINUTES,
    report_window_days: int = DEFAULT_REPORT_WINDOW_DAYS,
    report_workers: int = DEFAULT_REPORT_WORKERS,
) -> Container:
    """Wire services over any store implementing the repository protocols."""

    day_policy = ReportingDayPolicy()
    recorder = EventRecorder(events)
    resolver = DailyStatusResolver(events, day_policy=day_policy)

    access_validator = AccessValidator(
        employees,
        schedules,
        events,
        recorder=recorder,
        window_policy=AdmissionWindowPolicy(buffer_minutes),
    )
    report_service = ReportService(
        employees,
        resolver,
        MonthlyAggregator(resolver, window_days=report_window_days, max_workers=report_workers, day_policy=day_policy),
    )
    presence_log_service = PresenceLogService(employees, events, recorder=recorder)

    return Container(
        conn=conn,
        employees_repo=employees,
        schedules_repo=schedules,
        events_repo=events,
        event_recorder=recorder,
        access_validator=access_validator,
        report_service=report_service,
        presence_log_service=presence_log_service,
    )


def build_container(*, db_config: dict, **options) -> Container:
    conn = DatabaseConnection(DBConfig.from_mapping(db_config))

    schedules_repo = MySQLScheduleRepository(conn)
    employees_repo = MySQLEmployeeRepository(conn, schedules_repo)
    events_repo = MySQLEventRepository(conn)

    return assemble_container(
        employees=employees_repo,
        schedules=schedules_repo,
        events=events_repo,
        conn=conn,
        **options,
    )
