from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.enums import EventKind


@dataclass(frozen=True)
class Credential:
    """(tag, PIN) pair presented by a scan device."""

    rfid_tag: str
    pin: int


@dataclass(frozen=True)
class PresenceEvent:
    """Domain entity: one attendance (entry) or leave (exit) record."""

    event_id: int
    kind: EventKind
    employee_id: int
    rfid_tag: str
    pin: int
    timestamp: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.event_id,
            "kind": self.kind.value,
            "employee_id": self.employee_id,
            "rfid_tag": self.rfid_tag,
            "pin": self.pin,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True)
class RecordOutcome:
    event: PresenceEvent
    created: bool
