from datetime import date, datetime

import pytest

from checkmate.schedules.model import Schedule, Shift
from checkmate.schedules.policies import AdmissionWindowPolicy, ReportingDayPolicy

# Week of 2026-02-01 (Sunday) .. 2026-02-07 (Saturday)
SUN, MON, TUE, WED, FRI, SAT = 1, 2, 3, 4, 6, 7


def at(day: int, hour: int, minute: int = 0) -> datetime:
    return datetime(2026, 2, day, hour, minute)


def schedule_of(*shifts: Shift) -> Schedule:
    return Schedule(schedule_id=1, shifts=tuple(shifts))


MONDAY_9_TO_5 = Shift(start_day=1, end_day=1, start_time="09:00", end_time="17:00")


@pytest.mark.parametrize(
    "now, within_shift, within_buffer",
    [
        (at(MON, 9, 10), True, True),
        (at(MON, 8, 30), False, True),
        (at(MON, 8, 0), False, True),
        (at(MON, 7, 0), False, False),
        (at(MON, 17, 5), False, True),
        (at(MON, 18, 0), False, True),
        (at(MON, 18, 1), False, False),
        (at(TUE, 10, 0), False, False),
    ],
)
def test_single_day_shift_window_and_buffer(now, within_shift, within_buffer):
    match = AdmissionWindowPolicy().match(schedule_of(MONDAY_9_TO_5), now)

    assert match.within_shift is within_shift
    assert match.within_buffer is within_buffer
    assert match.admissible is (within_shift or within_buffer)


def test_day_range_shift_covers_every_day_in_range():
    weekdays = Shift(start_day=1, end_day=5, start_time="09:00", end_time="17:00")
    policy = AdmissionWindowPolicy()

    assert policy.match(schedule_of(weekdays), at(WED, 12)).within_shift
    assert not policy.match(schedule_of(weekdays), at(SAT, 12)).admissible


def test_buffer_before_early_shift_wraps_past_midnight():
    early = Shift(start_day=1, end_day=1, start_time="00:30", end_time="08:00")
    policy = AdmissionWindowPolicy()

    match = policy.match(schedule_of(early), at(MON, 0, 10))
    assert match.within_buffer and not match.within_shift
    assert not policy.match(schedule_of(early), at(MON, 12, 0)).admissible


def test_week_wrap_shift_only_evaluates_boundary_days():
    weekend = Shift(start_day=5, end_day=1, start_time="22:00", end_time="06:00")
    policy = AdmissionWindowPolicy()
    schedule = schedule_of(weekend)

    assert policy.match(schedule, at(FRI, 23, 0)).within_shift
    friday_early = policy.match(schedule, at(FRI, 21, 30))
    assert friday_early.within_buffer and not friday_early.within_shift
    assert policy.match(schedule, at(MON, 5, 0)).within_shift
    monday_late = policy.match(schedule, at(MON, 6, 30))
    assert monday_late.within_buffer and not monday_late.within_shift

    # Days strictly between start_day and end_day are not evaluated.
    assert not policy.match(schedule, at(SAT, 23, 0)).admissible
    assert not policy.match(schedule, at(SUN, 3, 0)).admissible


def test_flags_are_or_ed_across_shifts_and_report_the_matching_shift():
    morning = Shift(start_day=1, end_day=1, start_time="06:00", end_time="10:00")
    evening = Shift(start_day=1, end_day=1, start_time="18:00", end_time="22:00")

    match = AdmissionWindowPolicy().match(schedule_of(morning, evening), at(MON, 19, 0))

    assert match.within_shift
    assert match.shift == evening


def test_inverted_same_day_shift_never_matches_the_exact_window():
    inverted = Shift(start_day=1, end_day=1, start_time="22:00", end_time="06:00")
    policy = AdmissionWindowPolicy()

    for hour in (23, 3, 12):
        match = policy.match(schedule_of(inverted), at(MON, hour, 0))
        assert not match.within_shift
        assert not match.admissible


def test_inverted_same_day_shift_admits_where_buffers_overlap():
    inverted = Shift(start_day=1, end_day=1, start_time="10:00", end_time="09:30")
    policy = AdmissionWindowPolicy()

    match = policy.match(schedule_of(inverted), at(MON, 9, 45))
    assert match.within_buffer and not match.within_shift
    assert not policy.match(schedule_of(inverted), at(MON, 11, 0)).admissible


def test_custom_buffer_width():
    policy = AdmissionWindowPolicy(buffer_minutes=15)

    assert policy.match(schedule_of(MONDAY_9_TO_5), at(MON, 8, 45)).within_buffer
    assert not policy.match(schedule_of(MONDAY_9_TO_5), at(MON, 8, 44)).admissible


def test_negative_buffer_is_rejected():
    with pytest.raises(ValueError):
        AdmissionWindowPolicy(buffer_minutes=-1)


def test_reporting_policy_matches_start_day_only():
    weekdays = Shift(start_day=1, end_day=5, start_time="09:00", end_time="17:00")
    policy = ReportingDayPolicy()

    assert policy.shift_for(schedule_of(weekdays), date(2026, 2, MON)) == weekdays
    assert policy.shift_for(schedule_of(weekdays), date(2026, 2, WED)) is None


def test_reporting_policy_uses_start_day_of_wrapping_shift():
    weekend = Shift(start_day=5, end_day=1, start_time="22:00", end_time="06:00")
    policy = ReportingDayPolicy()

    assert policy.shift_for(schedule_of(weekend), date(2026, 2, FRI)) == weekend
    assert policy.shift_for(schedule_of(weekend), date(2026, 2, MON)) is None
