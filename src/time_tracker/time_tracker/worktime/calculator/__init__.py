from .base import WorkTimeCalculator
from .net_calculator import NetWorkTimeCalculator

__all__ = ["WorkTimeCalculator", "NetWorkTimeCalculator"]
