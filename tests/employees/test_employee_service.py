from __future__ import annotations

import pytest

from time_tracker.core.exceptions import NotFoundError, ValidationError
from time_tracker.employees.memory_employee_repository import InMemoryEmployeeRepository
from time_tracker.employees.model import Employee
from time_tracker.employees.service import EmployeeService


@pytest.fixture
def svc():
    return EmployeeService(InMemoryEmployeeRepository([Employee("e1", "Zoe", "Engineer")]))


def test_create_assigns_id_and_trims(svc):
    employee = svc.create(name="  Anna ", position=" Manager ")

    assert employee.employee_id
    assert employee.name == "Anna"
    assert employee.position == "Manager"
    assert svc.get(employee.employee_id) == employee


def test_create_with_explicit_id(svc):
    employee = svc.create(name="Boris", employee_id="e2")

    assert employee == Employee("e2", "Boris", "")


def test_create_duplicate_id(svc):
    with pytest.raises(ValidationError):
        svc.create(name="Other", employee_id="e1")


@pytest.mark.parametrize("name", [None, "", "   "])
def test_create_requires_name(svc, name):
    with pytest.raises(ValidationError):
        svc.create(name=name)


def test_update_keeps_identity(svc):
    updated = svc.update("e1", name="Zoe K.", position="Lead")

    assert updated == Employee("e1", "Zoe K.", "Lead")
    assert svc.get("e1") == updated


def test_update_unknown(svc):
    with pytest.raises(NotFoundError):
        svc.update("ghost", name="X")


def test_list_sorted_by_name(svc):
    svc.create(name="Anna", employee_id="e2")

    assert [e.name for e in svc.list_employees()] == ["Anna", "Zoe"]
