"""Example: using the service layer and the report engine without Flask."""

from time_tracker.container import build_container
from time_tracker.reports import ReportFilters


def main():
    container = build_container(store_backend="memory")
    container.employee_service.create(employee_id="e1", name="Ivan Petrov", position="Installer")
    container.workday_service.save(
        {
            "employeeId": "e1",
            "date": "2025-04-15",
            "dayType": "WORK_DAY",
            "timeEntry": {"startTime": "09:00", "endTime": "18:00", "lunchStartTime": "13:00", "lunchEndTime": "14:00"},
            "workStats": {"tasksCompleted": 3, "connectionsEstablished": 1},
        }
    )

    report = container.report_service.build_report(start="2025-04-01", end="2025-04-30", filters=ReportFilters())
    print(container.report_service.report_to_dict(report))
    print(container.report_service.dashboard("2025-04-15"))


if __name__ == "__main__":
    main()
