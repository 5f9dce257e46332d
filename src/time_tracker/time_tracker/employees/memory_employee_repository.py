from __future__ import annotations

import threading
from typing import Iterable, Optional, Sequence

from .model import Employee
from .repository import EmployeeRepository


class InMemoryEmployeeRepository(EmployeeRepository):
    def __init__(self, employees: Iterable[Employee] = ()):
        self._lock = threading.Lock()
        self._by_id: dict[str, Employee] = {e.employee_id: e for e in employees}

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with self._lock:
            return self._by_id.get(employee_id)

    def list_employees(self) -> Sequence[Employee]:
        with self._lock:
            items = list(self._by_id.values())
        items.sort(key=lambda e: e.name)
        return items

    def create(self, employee: Employee) -> Employee:
        with self._lock:
            self._by_id[employee.employee_id] = employee
        return employee

    def update(self, employee: Employee) -> bool:
        with self._lock:
            if employee.employee_id not in self._by_id:
                return False
            self._by_id[employee.employee_id] = employee
            return True

    def replace_all(self, employees: Iterable[Employee]) -> int:
        fresh = {e.employee_id: e for e in employees}
        with self._lock:
            self._by_id = fresh
        return len(fresh)
