from __future__ import annotations

import pytest

from checkmate.core.enums import EventKind


@pytest.fixture
def frozen_clock(monkeypatch, fixed_now):
    clock = {"now": fixed_now}
    for module in ("checkmate.access.service", "checkmate.reports.service", "checkmate.events.service"):
        monkeypatch.setattr(f"{module}.now_local", lambda: clock["now"])
    return clock


def test_hardware_scan_cycle(client, frozen_clock):
    first = client.post("/api/hardware_endpoint", json={"rfid_tag": "TAG-1", "pin": 1234})
    frozen_clock["now"] = frozen_clock["now"].replace(hour=17, minute=5)
    second = client.post("/api/hardware_endpoint", json={"rfid_tag": "TAG-1", "pin": 1234})
    third = client.post("/api/hardware_endpoint", json={"rfid_tag": "TAG-1", "pin": 1234})

    assert first.status_code == 200
    assert first.get_json() == {"access": True, "action": "attendance_recorded"}
    assert second.get_json() == {"access": True, "action": "leave_recorded"}
    assert third.get_json() == {"access": False, "message": "already has both records for today"}


def test_hardware_scan_outside_shift(client, frozen_clock):
    frozen_clock["now"] = frozen_clock["now"].replace(hour=7, minute=0)

    resp = client.post("/api/hardware_endpoint", json={"rfid_tag": "TAG-1", "pin": 1234})

    assert resp.get_json() == {"access": False, "message": "outside scheduled shift or buffer"}


def test_hardware_scan_missing_pin(client, frozen_clock):
    resp = client.post("/api/hardware_endpoint", json={"rfid_tag": "TAG-1"})

    assert resp.status_code == 400
    assert "pin" in resp.get_json()["error"]


def test_hardware_roster(client):
    resp = client.get("/api/hardware_endpoint")

    assert resp.status_code == 200
    assert resp.get_json()[0]["rfid_tag"] == "TAG-1"


def test_hardware_scan_fractional_pin_is_rejected(client, frozen_clock):
    resp = client.post("/api/hardware_endpoint", json={"rfid_tag": "TAG-1", "pin": 1234.9})

    assert resp.status_code == 400


def test_hardware_roster_failure_is_json(client, container, monkeypatch):
    def boom():
        raise RuntimeError("roster unavailable")

    monkeypatch.setattr(container.presence_log_service, "device_roster", boom)

    resp = client.get("/api/hardware_endpoint")

    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Failed to fetch employees"}


def test_daily_rapport_endpoint(client, events, frozen_clock):
    events.add(EventKind.ATTENDANCE, 1, frozen_clock["now"])
    events.add(EventKind.LEAVE, 1, frozen_clock["now"].replace(hour=17, minute=5))

    resp = client.post("/api/daily_rapport", json={"employee_id": 1})

    body = resp.get_json()
    assert resp.status_code == 200
    assert body["status"] == "Present"
    assert body["entered_late_by_minutes"] == "0h 10m"
    assert body["left_early_by_minutes"] == "0h 0m"


def test_report_endpoints_errors(client, frozen_clock):
    assert client.post("/api/daily_rapport", json={}).status_code == 400
    assert client.post("/api/daily_rapport", json={"employee_id": 99}).status_code == 404
    assert client.post("/api/monthly_rapport", json={"employee_id": 99}).status_code == 404


def test_monthly_rapport_endpoint(client, frozen_clock):
    resp = client.post("/api/monthly_rapport", json={"employee_id": 1})

    body = resp.get_json()
    assert resp.status_code == 200
    assert body["total_days"] == 5
    assert body["absent_days"] == 5
    assert body["monthly_presence_rate"] == "0.00%"


def test_manual_attendance_log(client, frozen_clock):
    created = client.post("/api/attendance", json={"rfid_tag": "TAG-1", "pin": 1})
    repeated = client.post("/api/attendance", json={"rfid_tag": "TAG-1", "pin": 1})
    missing = client.post("/api/attendance", json={"rfid_tag": "TAG-1"})
    unknown = client.post("/api/leaves", json={"rfid_tag": "NOPE", "pin": 1})

    assert created.status_code == 201
    assert repeated.status_code == 200
    assert repeated.get_json()["id"] == created.get_json()["id"]
    assert missing.status_code == 400
    assert unknown.status_code == 404
    assert len(client.get("/api/attendance").get_json()) == 1
    assert client.get("/api/leaves").get_json() == []


def test_presence_board_and_checkins(client, frozen_clock):
    client.post("/api/hardware_endpoint", json={"rfid_tag": "TAG-1", "pin": 1234})

    board = client.get("/api/employees_today").get_json()
    checkins = client.get("/api/check-in-today").get_json()

    assert board[0]["status"] == "in"
    assert len(checkins["attendances"]) == 1
    assert checkins["leaves"] == []
