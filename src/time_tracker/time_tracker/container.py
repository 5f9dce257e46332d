from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .backup.service import BackupService
from .core.constants import DEFAULT_REPORT_DAYS
from .database.connection import DBConfig, DatabaseConnection
from .employees.memory_employee_repository import InMemoryEmployeeRepository
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .reports.service import ReportService
from .workdays.memory_workday_repository import InMemoryWorkDayRepository
from .workdays.mysql_workday_repository import MySQLWorkDayRepository
from .workdays.repository import WorkDayRepository
from .workdays.service import WorkDayService
from .worktime.calculator.net_calculator import NetWorkTimeCalculator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository
    workdays_repo: WorkDayRepository

    employee_service: EmployeeService
    workday_service: WorkDayService
    report_service: ReportService
    backup_service: BackupService

    default_report_days: int = DEFAULT_REPORT_DAYS


def build_container(
    *,
    store_backend: str = "memory",
    db_config: Optional[dict] = None,
    default_report_days: int = DEFAULT_REPORT_DAYS,
) -> Container:
    conn = None
    if store_backend == "mysql":
        if not db_config:
            raise ValueError("DB_CONFIG is required for the mysql store backend")
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
        employees_repo = MySQLEmployeeRepository(conn)
        workdays_repo = MySQLWorkDayRepository(conn)
    elif store_backend == "memory":
        employees_repo = InMemoryEmployeeRepository()
        workdays_repo = InMemoryWorkDayRepository()
    else:
        raise ValueError(f"Unknown store backend {store_backend!r}")
    logger.info("Using %s store", store_backend)

    calculator = NetWorkTimeCalculator()

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        workdays_repo=workdays_repo,
        employee_service=EmployeeService(employees_repo),
        workday_service=WorkDayService(workdays_repo, employees_repo, calculator=calculator),
        report_service=ReportService(workdays_repo, employees_repo, calculator=calculator),
        backup_service=BackupService(workdays_repo, employees_repo),
        default_report_days=int(default_report_days),
    )
