from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional


class WorkTimeCalculator(ABC):
    """Calculator interface (Strategy Pattern for worked time)."""

    @abstractmethod
    def net_minutes(
        self,
        start: Any,
        end: Any,
        lunch_start: Any = None,
        lunch_end: Any = None,
    ) -> Optional[float]:
        """Worked minutes for one shift, or None when the shift is not computable."""
        raise NotImplementedError

    def net_hours(
        self,
        start: Any,
        end: Any,
        lunch_start: Any = None,
        lunch_end: Any = None,
    ) -> Optional[float]:
        minutes = self.net_minutes(start, end, lunch_start, lunch_end)
        if minutes is None:
            return None
        return minutes / 60
