from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Employee:
    """Thực thể miền (domain): Employee.

    Lưu ý: ``employee_id`` is immutable; name and position may be edited by an admin.
    """

    employee_id: str
    name: str
    position: str = ""
