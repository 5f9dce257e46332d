from __future__ import annotations

import logging
import uuid
from typing import Optional, Sequence

from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: maintain the employee roster."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_employees()

    def get(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} does not exist")
        return employee

    def create(self, *, name: str, position: str = "", employee_id: Optional[str] = None) -> Employee:
        name = require_non_empty(name, "name")
        employee_id = (employee_id or "").strip() or uuid.uuid4().hex
        if self._employees.get_by_id(employee_id):
            raise ValidationError(f"Employee {employee_id} already exists")

        employee = self._employees.create(Employee(employee_id=employee_id, name=name, position=(position or "").strip()))
        logger.info("Created employee %s (%s)", employee.employee_id, employee.name)
        return employee

    def update(self, employee_id: str, *, name: str, position: str = "") -> Employee:
        self.get(employee_id)
        employee = Employee(
            employee_id=employee_id,
            name=require_non_empty(name, "name"),
            position=(position or "").strip(),
        )
        self._employees.update(employee)
        return employee
