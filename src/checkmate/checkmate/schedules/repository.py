from __future__ import annotations

from typing import Optional, Protocol

from .model import Schedule


class ScheduleRepository(Protocol):
    def get_by_id(self, schedule_id: int) -> Optional[Schedule]:
        raise NotImplementedError
