from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AdmissionAction

REASON_OUTSIDE_SHIFT = "outside scheduled shift or buffer"
REASON_BOTH_RECORDED = "already has both records for today"


@dataclass(frozen=True)
class AdmissionResult:
    """Outcome of one scan. A denial is a normal result, not an error."""

    granted: bool
    action: Optional[AdmissionAction] = None
    reason: Optional[str] = None

    @classmethod
    def deny(cls, reason: Optional[str] = None) -> "AdmissionResult":
        return cls(granted=False, reason=reason)

    @classmethod
    def grant(cls, action: AdmissionAction) -> "AdmissionResult":
        return cls(granted=True, action=action)

    def to_response(self) -> dict:
        body: dict = {"access": self.granted}
        if self.action is not None:
            body["action"] = self.action.value
        if self.reason is not None:
            body["message"] = self.reason
        return body
