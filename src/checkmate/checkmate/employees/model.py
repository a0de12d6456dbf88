from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..schedules.model import Schedule


@dataclass(frozen=True)
class Department:
    department_id: int
    department_name: str


@dataclass(frozen=True)
class Employee:
    """Domain entity: badge holder.

    Note: plain data object, read-only to the engine.
    """

    employee_id: int
    first_name: str
    last_name: str
    rfid_tag: str
    pin: int
    department_id: Optional[int]
    schedule_id: Optional[int]
    email: Optional[str] = None
    phone_number: Optional[str] = None
    status: str = "active"

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass(frozen=True)
class EmployeeProfile:
    """Employee with department and schedule already resolved."""

    employee: Employee
    department: Optional[Department]
    schedule: Optional[Schedule]

    def summary(self) -> dict:
        return {
            "id": self.employee.employee_id,
            "name": self.employee.full_name,
            "department": self.department.department_name if self.department else None,
            "email": self.employee.email,
        }
