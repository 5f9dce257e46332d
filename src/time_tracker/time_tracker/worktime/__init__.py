from .calculator import NetWorkTimeCalculator, WorkTimeCalculator
from .duration import format_duration, net_hours, net_minutes
from .time_parser import normalize_time, to_minutes

__all__ = [
    "NetWorkTimeCalculator",
    "WorkTimeCalculator",
    "format_duration",
    "net_hours",
    "net_minutes",
    "normalize_time",
    "to_minutes",
]
