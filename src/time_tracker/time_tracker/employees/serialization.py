from __future__ import annotations

from typing import Any, Mapping

from ..core.exceptions import ValidationError
from .model import Employee


def employee_to_dict(employee: Employee) -> dict:
    return {"id": employee.employee_id, "name": employee.name, "position": employee.position}


def employee_from_dict(data: Mapping[str, Any]) -> Employee:
    if not data.get("id") or not data.get("name"):
        raise ValidationError("Missing required fields: id, name")
    return Employee(employee_id=str(data["id"]), name=str(data["name"]), position=str(data.get("position") or ""))
