"""Seed demo employees and one week of work days into the configured store."""

from __future__ import annotations

import importlib
import sys
from datetime import date, timedelta
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src" / "time_tracker"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_settings_module

from time_tracker.container import build_container
from time_tracker.core.enums import DayType

DEMO_EMPLOYEES = [
    ("emp-1", "Ivan Petrov", "Installer"),
    ("emp-2", "Anna Smirnova", "Dispatcher"),
    ("emp-3", "Oleg Sidorov", "Network engineer"),
]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(store_backend=settings.STORE_BACKEND, db_config=dict(settings.DB_CONFIG))

    for employee_id, name, position in DEMO_EMPLOYEES:
        if container.employees_repo.get_by_id(employee_id) is None:
            container.employee_service.create(employee_id=employee_id, name=name, position=position)

    today = date.today()
    saved = 0
    for offset in range(7):
        day = today - timedelta(days=offset)
        for idx, (employee_id, _, _) in enumerate(DEMO_EMPLOYEES):
            if day.weekday() >= 5:
                payload = {"employeeId": employee_id, "date": day.isoformat(), "dayType": DayType.DAY_OFF.value}
            else:
                payload = {
                    "employeeId": employee_id,
                    "date": day.isoformat(),
                    "dayType": DayType.WORK_DAY.value,
                    "startTime": f"{8 + idx}:00",
                    "endTime": f"{17 + idx}:00",
                    "lunchStartTime": "13:00",
                    "lunchEndTime": "14:00",
                    "tasksCompleted": 2 + idx,
                    "connectionsEstablished": idx,
                }
            container.workday_service.save(payload)
            saved += 1

    print(f"OK: Seeded {len(DEMO_EMPLOYEES)} employees and {saved} work days ({settings.STORE_BACKEND})")


if __name__ == "__main__":
    main()
