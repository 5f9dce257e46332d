from __future__ import annotations

import json
import uuid
from typing import Any, Iterable, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetch_all, fetch_one, replace_table
from .model import WorkDay
from .repository import WorkDayRepository
from .serialization import time_entry_to_dict, work_stats_to_dict, workday_from_dict

_COLUMNS = ("id", "employee_id", "work_date", "day_type", "time_entry", "work_stats", "tasks", "connections", "comment")
_SELECT = f"SELECT {', '.join(_COLUMNS)} FROM work_days"


def _dumps(value: Any) -> Optional[str]:
    if value is None:
        return None
    return json.dumps(value, ensure_ascii=False)


def _to_params(wd: WorkDay) -> tuple:
    return (
        wd.id or uuid.uuid4().hex,
        wd.employee_id,
        wd.date,
        wd.day_type.value,
        _dumps(time_entry_to_dict(wd.time_entry)),
        _dumps(work_stats_to_dict(wd.work_stats)),
        _dumps([dict(t) for t in wd.tasks]),
        _dumps([dict(c) for c in wd.connections]),
        wd.comment,
    )


def _from_row(r: dict) -> WorkDay:
    # JSON columns are decoded by the shared wire-format reader.
    return workday_from_dict(
        {
            "id": r["id"],
            "employeeId": r["employee_id"],
            "date": r["work_date"],
            "dayType": r["day_type"],
            "timeEntry": r.get("time_entry"),
            "workStats": r.get("work_stats"),
            "tasks": r.get("tasks"),
            "connections": r.get("connections"),
            "comment": r.get("comment"),
        }
    )


class MySQLWorkDayRepository(WorkDayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, employee_id: str, date: str) -> Optional[WorkDay]:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(f"{_SELECT} WHERE employee_id=%s AND work_date=%s", (employee_id, date))
            return fetch_one(cur, _from_row)

    def get_by_date(self, date: str) -> Sequence[WorkDay]:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(f"{_SELECT} WHERE work_date=%s ORDER BY employee_id ASC", (date,))
            return fetch_all(cur, _from_row)

    def get_by_date_range(self, start: str, end: str) -> Sequence[WorkDay]:
        # CHAR(10) keys compare lexically, which matches calendar order for YYYY-MM-DD.
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                f"{_SELECT} WHERE work_date BETWEEN %s AND %s ORDER BY work_date ASC, employee_id ASC",
                (start, end),
            )
            return fetch_all(cur, _from_row)

    def upsert(self, workday: WorkDay) -> WorkDay:
        params = _to_params(workday)
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                f"""
                INSERT INTO work_days({', '.join(_COLUMNS)})
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    day_type=VALUES(day_type),
                    time_entry=VALUES(time_entry),
                    work_stats=VALUES(work_stats),
                    tasks=VALUES(tasks),
                    connections=VALUES(connections),
                    comment=VALUES(comment)
                """,
                params,
            )
        stored = self.get(workday.employee_id, workday.date)
        if stored is None:
            raise RuntimeError(f"Work day {workday.employee_id}@{workday.date} vanished after upsert")
        return stored

    def delete(self, workday_id: str) -> bool:
        with db_cursor(self._conn_factory) as cur:
            cur.execute("DELETE FROM work_days WHERE id=%s", (workday_id,))
            return cur.rowcount > 0

    def list_all(self) -> Sequence[WorkDay]:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(f"{_SELECT} ORDER BY work_date ASC, employee_id ASC")
            return fetch_all(cur, _from_row)

    def replace_all(self, workdays: Iterable[WorkDay]) -> int:
        unique = {wd.key: wd for wd in workdays}
        rows = [_to_params(wd) for wd in unique.values()]
        with db_cursor(self._conn_factory) as cur:
            return replace_table(cur, "work_days", _COLUMNS, rows)
