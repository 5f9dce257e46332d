from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetch_all, fetch_one, replace_table
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = ("employee_id", "name", "position")
_SELECT = f"SELECT {', '.join(_COLUMNS)} FROM employees"


def _from_row(r: dict) -> Employee:
    return Employee(employee_id=str(r["employee_id"]), name=r["name"], position=r.get("position") or "")


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(f"{_SELECT} WHERE employee_id=%s", (employee_id,))
            return fetch_one(cur, _from_row)

    def list_employees(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(f"{_SELECT} ORDER BY name ASC")
            return fetch_all(cur, _from_row)

    def create(self, employee: Employee) -> Employee:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                "INSERT INTO employees(employee_id, name, position) VALUES(%s,%s,%s)",
                (employee.employee_id, employee.name, employee.position),
            )
        return employee

    def update(self, employee: Employee) -> bool:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                "UPDATE employees SET name=%s, position=%s WHERE employee_id=%s",
                (employee.name, employee.position, employee.employee_id),
            )
            return cur.rowcount > 0

    def replace_all(self, employees: Iterable[Employee]) -> int:
        unique = {e.employee_id: e for e in employees}
        rows = [(e.employee_id, e.name, e.position) for e in unique.values()]
        with db_cursor(self._conn_factory) as cur:
            return replace_table(cur, "employees", _COLUMNS, rows)
