from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee, EmployeeProfile


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): services depend on this interface, never on a concrete store.
    """

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_credential(self, rfid_tag: str, pin: int) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_tag(self, rfid_tag: str) -> Optional[Employee]:
        raise NotImplementedError

    def get_profile(self, employee_id: int) -> Optional[EmployeeProfile]:
        """Employee joined with department and schedule (shifts included)."""

        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError
