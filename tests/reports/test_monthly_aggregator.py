from __future__ import annotations

import threading
from datetime import date, datetime

import pytest

from checkmate.core.enums import DayStatus, EventKind
from checkmate.reports.daily import DailyStatusResolver
from checkmate.reports.monthly import MonthlyAggregator
from checkmate.schedules.model import Schedule, Shift

REFERENCE = date(2026, 2, 2)  # Monday; window is 2026-01-04 .. 2026-02-02


def at(month: int, day: int, hour: int, minute: int = 0) -> datetime:
    return datetime(2026, month, day, hour, minute)


@pytest.fixture
def month_of_events(events):
    # Jan 5: on time, full day
    events.add(EventKind.ATTENDANCE, 1, at(1, 5, 9, 0))
    events.add(EventKind.LEAVE, 1, at(1, 5, 17, 0))
    # Jan 12: 15 minutes late, 30 minutes early
    events.add(EventKind.ATTENDANCE, 1, at(1, 12, 9, 15))
    events.add(EventKind.LEAVE, 1, at(1, 12, 16, 30))
    # Jan 19: forgot to check out
    events.add(EventKind.ATTENDANCE, 1, at(1, 19, 8, 55))
    # Tuesday Jan 20: not a workday, must be ignored
    events.add(EventKind.ATTENDANCE, 1, at(1, 20, 9, 0))
    # Jan 26 and Feb 2: absent
    return events


def aggregator(events, **kwargs) -> MonthlyAggregator:
    kwargs.setdefault("max_workers", 3)
    return MonthlyAggregator(DailyStatusResolver(events), **kwargs)


def test_monthly_summary(employee, monday_schedule, month_of_events):
    report = aggregator(month_of_events).resolve_month(employee, monday_schedule, REFERENCE)

    assert report.start_date == date(2026, 1, 4)
    assert report.end_date == REFERENCE
    assert report.total_days == 5
    assert report.present_days == 2
    assert report.absent_days == 2
    assert report.total_late_minutes == 15
    assert report.total_early_leave_minutes == 30
    assert report.presence_rate == 40.0
    assert report.presence_rate_display == "40.00%"

    body = report.to_dict()
    assert body["total_late"] == "0h 15m"
    assert body["total_early_leaves"] == "0h 30m"
    assert body["presence_rate"] == 40.0
    assert body["monthly_presence_rate"] == "40.00%"


def test_days_are_chronological_and_unscheduled_days_excluded(employee, monday_schedule, month_of_events):
    report = aggregator(month_of_events).resolve_month(employee, monday_schedule, REFERENCE)

    days = [d.day for d in report.daily_reports]
    assert days == [date(2026, 1, 5), date(2026, 1, 12), date(2026, 1, 19), date(2026, 1, 26), REFERENCE]
    assert date(2026, 1, 20) not in days
    assert [d.status for d in report.daily_reports][:3] == [DayStatus.PRESENT, DayStatus.PRESENT, DayStatus.STILL_INSIDE]


def test_no_scheduled_days_gives_sentinel_rate(employee, events):
    empty = Schedule(schedule_id=1, shifts=())

    report = aggregator(events).resolve_month(employee, empty, REFERENCE)

    assert report.total_days == 0
    assert report.presence_rate is None
    assert report.presence_rate_display == "N/A"
    assert report.to_dict()["presence_rate"] == "N/A"


def test_failing_day_is_unknown_and_does_not_abort(employee, monday_schedule, month_of_events):
    month_of_events.failing_days.add(date(2026, 1, 12))

    report = aggregator(month_of_events).resolve_month(employee, monday_schedule, REFERENCE)

    by_day = {d.day: d for d in report.daily_reports}
    assert report.total_days == 5
    assert by_day[date(2026, 1, 12)].status == DayStatus.UNKNOWN
    assert "2026-01-12" in by_day[date(2026, 1, 12)].error
    assert by_day[date(2026, 1, 5)].status == DayStatus.PRESENT
    assert report.unknown_days == 1
    assert report.present_days == 1


def test_presence_rate_is_a_percentage(employee, events):
    every_day = Schedule(
        schedule_id=1,
        shifts=tuple(Shift(start_day=d, end_day=d, start_time="09:00", end_time="17:00") for d in range(7)),
    )
    for day in range(1, 3):
        events.add(EventKind.ATTENDANCE, 1, at(2, day, 9))
        events.add(EventKind.LEAVE, 1, at(2, day, 17))

    report = aggregator(events).resolve_month(employee, every_day, REFERENCE)

    assert report.total_days == 30
    assert 0 <= report.presence_rate <= 100
    assert report.presence_rate_display == "6.67%"


def test_cancel_before_start_resolves_nothing(employee, monday_schedule, month_of_events):
    cancel = threading.Event()
    cancel.set()

    report = aggregator(month_of_events).resolve_month(employee, monday_schedule, REFERENCE, cancel=cancel)

    assert report.cancelled
    assert report.daily_reports == ()


class CancellingResolver(DailyStatusResolver):
    def __init__(self, events, cancel: threading.Event):
        super().__init__(events)
        self._cancel = cancel

    def resolve_day(self, employee, schedule, day):
        status = super().resolve_day(employee, schedule, day)
        self._cancel.set()
        return status


def test_cancel_mid_report_keeps_resolved_days(employee, monday_schedule, month_of_events):
    cancel = threading.Event()
    monthly = MonthlyAggregator(CancellingResolver(month_of_events, cancel), max_workers=1)

    report = monthly.resolve_month(employee, monday_schedule, REFERENCE, cancel=cancel)

    assert report.cancelled
    assert [d.day for d in report.daily_reports] == [date(2026, 1, 5)]


def test_window_must_be_positive(events):
    with pytest.raises(ValueError):
        MonthlyAggregator(DailyStatusResolver(events), window_days=0)
