from __future__ import annotations

import logging
from typing import Any, Optional

from ..time_parser import normalize_time, to_minutes
from .base import WorkTimeCalculator

logger = logging.getLogger(__name__)


class NetWorkTimeCalculator(WorkTimeCalculator):
    """Standard rule: (end - start) - max(0, lunch_end - lunch_start), not below 0.

    Shifts are same-day only: an end before the start is not read as crossing
    midnight, it clamps to 0 like an over-long lunch does. Clamping is logged
    so bad data entry stays visible.
    """

    def net_minutes(
        self,
        start: Any,
        end: Any,
        lunch_start: Any = None,
        lunch_end: Any = None,
    ) -> Optional[float]:
        start_s = normalize_time(start)
        end_s = normalize_time(end)
        if start_s is None or end_s is None:
            return None

        minutes = to_minutes(end_s) - to_minutes(start_s)

        lunch_start_s = normalize_time(lunch_start)
        lunch_end_s = normalize_time(lunch_end)
        if lunch_start_s is not None and lunch_end_s is not None:
            lunch = to_minutes(lunch_end_s) - to_minutes(lunch_start_s)
            if lunch < 0:
                logger.warning("Lunch %s-%s ends before it starts, ignoring it", lunch_start_s, lunch_end_s)
            minutes -= max(0, lunch)

        if minutes < 0:
            logger.warning(
                "Shift %s-%s (lunch %s-%s) yields negative worked time, clamped to 0",
                start_s,
                end_s,
                lunch_start_s,
                lunch_end_s,
            )
            return 0.0
        return float(minutes)
