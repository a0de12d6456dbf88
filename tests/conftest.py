from __future__ import annotations

from datetime import datetime

import pytest

from checkmate.container import assemble_container
from checkmate.main import create_app
from checkmate.schedules.model import Schedule, Shift

from fakes import InMemoryEmployees, InMemoryEvents, InMemorySchedules, make_employee

# 2026-02-02 is a Monday.
MONDAY = datetime(2026, 2, 2)


@pytest.fixture
def fixed_now() -> datetime:
    return MONDAY.replace(hour=9, minute=10)


@pytest.fixture
def monday_schedule() -> Schedule:
    return Schedule(schedule_id=1, shifts=(Shift(start_day=1, end_day=1, start_time="09:00", end_time="17:00"),))


@pytest.fixture
def employee():
    return make_employee()


@pytest.fixture
def schedules(monday_schedule):
    return InMemorySchedules({1: monday_schedule})


@pytest.fixture
def employees(employee, schedules):
    return InMemoryEmployees({employee.employee_id: employee}, schedules)


@pytest.fixture
def events():
    return InMemoryEvents()


@pytest.fixture
def container(employees, schedules, events):
    return assemble_container(employees=employees, schedules=schedules, events=events, report_workers=2)


@pytest.fixture
def client(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container)
    return app.test_client()
