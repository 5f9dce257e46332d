"""Module-level helpers over the default calculator, for formatting code."""

from __future__ import annotations

from typing import Any, Optional

from ..core.constants import UNKNOWN_DURATION
from .calculator.net_calculator import NetWorkTimeCalculator

_default = NetWorkTimeCalculator()


def net_minutes(start: Any, end: Any, lunch_start: Any = None, lunch_end: Any = None) -> Optional[float]:
    return _default.net_minutes(start, end, lunch_start, lunch_end)


def net_hours(start: Any, end: Any, lunch_start: Any = None, lunch_end: Any = None) -> Optional[float]:
    return _default.net_hours(start, end, lunch_start, lunch_end)


def format_duration(minutes: Optional[float]) -> str:
    """``HH:MM`` for a minute count, ``--:--`` when the duration is unknown."""
    if minutes is None:
        return UNKNOWN_DURATION
    total = int(round(minutes))
    return f"{total // 60:02d}:{total % 60:02d}"
