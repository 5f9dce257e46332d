"""JSON backup and restore of the roster and the attendance records."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Mapping

from ..core.exceptions import DomainError, ValidationError
from ..employees.repository import EmployeeRepository
from ..employees.serialization import employee_from_dict, employee_to_dict
from ..workdays.repository import WorkDayRepository
from ..workdays.serialization import workday_from_dict, workday_to_dict
from ..workdays.service import enforce_record_rules

logger = logging.getLogger(__name__)


def _read_workday(item: Mapping[str, Any]):
    # Same record rules as a save from the timesheet.
    return enforce_record_rules(workday_from_dict(item))


class BackupService:
    def __init__(self, workdays: WorkDayRepository, employees: EmployeeRepository):
        self._workdays = workdays
        self._employees = employees

    def export(self) -> dict:
        return {
            "createdAt": datetime.now().isoformat(timespec="seconds"),
            "employees": [employee_to_dict(e) for e in self._employees.list_employees()],
            "workDays": [workday_to_dict(wd) for wd in self._workdays.list_all()],
        }

    @staticmethod
    def _valid_workday_entry(item: Any) -> bool:
        return (
            isinstance(item, Mapping)
            and isinstance(item.get("employeeId"), str)
            and isinstance(item.get("date"), str)
            and bool(item["employeeId"])
            and bool(item["date"])
        )

    def restore(self, payload: Mapping[str, Any]) -> dict:
        """Replace stored data with the snapshot.

        Entries that cannot be read are skipped; a section present in the
        payload without a single readable entry rejects the whole restore.
        """
        if not isinstance(payload, Mapping) or ("employees" not in payload and "workDays" not in payload):
            raise ValidationError("Backup must contain employees and/or workDays")

        employees = None
        if "employees" in payload:
            employees = self._read_section(payload["employees"], "employees", employee_from_dict)

        workdays = None
        if "workDays" in payload:
            raw = payload["workDays"]
            if not isinstance(raw, list):
                raise ValidationError("workDays must be a list")
            workdays = self._read_section(
                [item for item in raw if self._valid_workday_entry(item)], "workDays", _read_workday, total=len(raw)
            )

        result = {}
        if employees is not None:
            result["employees"] = self._employees.replace_all(employees)
        if workdays is not None:
            result["workDays"] = self._workdays.replace_all(workdays)
        logger.info("Restored backup: %s", result)
        return result

    @staticmethod
    def _read_section(raw: Any, name: str, reader, *, total: int | None = None) -> list:
        if not isinstance(raw, list):
            raise ValidationError(f"{name} must be a list")
        items = []
        for item in raw:
            try:
                items.append(reader(item))
            except (DomainError, TypeError, AttributeError) as exc:
                logger.warning("Skipping invalid %s entry %r: %s", name, item, exc)
        skipped = (total if total is not None else len(raw)) - len(items)
        if skipped:
            logger.warning("Skipped %d invalid %s entries", skipped, name)
        if not items:
            raise ValidationError(f"No valid {name} entries in backup")
        return items
