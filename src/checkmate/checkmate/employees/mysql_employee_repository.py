from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from ..schedules.repository import ScheduleRepository
from .model import Department, Employee, EmployeeProfile
from .repository import EmployeeRepository

_COLUMNS = """
    e.employee_id, e.first_name, e.last_name, e.email, e.phone_number,
    e.rfid_tag, e.pin, e.department_id, e.schedule_id, e.status
"""


def _to_employee(row: Dict[str, Any]) -> Employee:
    return Employee(
        employee_id=int(row["employee_id"]),
        first_name=row["first_name"],
        last_name=row["last_name"],
        email=row.get("email"),
        phone_number=row.get("phone_number"),
        rfid_tag=row["rfid_tag"],
        pin=int(row["pin"]),
        department_id=row.get("department_id"),
        schedule_id=row.get("schedule_id"),
        status=row.get("status") or "active",
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection, schedules: ScheduleRepository):
        self._conn_factory = conn_factory
        self._schedules = schedules

    def _get_one(self, where: str, params: tuple) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees e WHERE {where}", params)
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._get_one("e.employee_id=%s", (int(employee_id),))

    def get_by_credential(self, rfid_tag: str, pin: int) -> Optional[Employee]:
        return self._get_one("e.rfid_tag=%s AND e.pin=%s", (rfid_tag, int(pin)))

    def get_by_tag(self, rfid_tag: str) -> Optional[Employee]:
        return self._get_one("e.rfid_tag=%s", (rfid_tag,))

    def get_profile(self, employee_id: int) -> Optional[EmployeeProfile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}, d.department_name
                FROM employees e
                LEFT JOIN departments d ON d.department_id = e.department_id
                WHERE e.employee_id=%s
                """,
                (int(employee_id),),
            )
            row = fetchone(cur)
        if not row:
            return None

        employee = _to_employee(row)
        department = None
        if employee.department_id is not None and row.get("department_name") is not None:
            department = Department(department_id=int(employee.department_id), department_name=row["department_name"])
        schedule = self._schedules.get_by_id(employee.schedule_id) if employee.schedule_id is not None else None
        return EmployeeProfile(employee=employee, department=department, schedule=schedule)

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees e ORDER BY e.employee_id")
            return [_to_employee(r) for r in fetchall(cur)]
