from __future__ import annotations

from enum import Enum


class DayType(str, Enum):
    """Classification of one employee's calendar day."""

    WORK_DAY = "WORK_DAY"
    DAY_OFF = "DAY_OFF"
    VACATION = "VACATION"
    SICK_LEAVE = "SICK_LEAVE"
    ABSENCE = "ABSENCE"
    UNPAID_LEAVE = "UNPAID_LEAVE"

    @property
    def label(self) -> str:
        return DAY_TYPE_LABELS[self]


DAY_TYPE_LABELS = {
    DayType.WORK_DAY: "Work day",
    DayType.DAY_OFF: "Day off",
    DayType.VACATION: "Vacation",
    DayType.SICK_LEAVE: "Sick leave",
    DayType.ABSENCE: "Absence",
    DayType.UNPAID_LEAVE: "Unpaid leave",
}
