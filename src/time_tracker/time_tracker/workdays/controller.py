from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_errors
from ..container import Container
from .serialization import workday_to_dict


def register(app: Flask, container: Container) -> None:
    @app.route("/api/workdays", methods=["GET"], endpoint="api_workdays_list")
    @json_errors
    def api_workdays_list():
        """``?date=`` for the daily timesheet, ``?startDate=&endDate=`` for reports."""
        date_s = request.args.get("date")
        start_s = request.args.get("startDate")
        end_s = request.args.get("endDate")
        employee_id = request.args.get("employeeId") or None

        if date_s:
            items = container.workday_service.get_day(date_s, employee_id=employee_id)
        elif start_s and end_s:
            items = container.workday_service.get_range(start_s, end_s, employee_id=employee_id)
        else:
            return jsonify({"error": "Either date or startDate and endDate are required"}), 400

        employees = {e.employee_id: e for e in container.employee_service.list_employees()}
        return jsonify([workday_to_dict(wd, employee=employees.get(wd.employee_id)) for wd in items])

    @app.route("/api/workdays", methods=["POST", "PUT"], endpoint="api_workdays_save")
    @json_errors
    def api_workdays_save():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "JSON object body required"}), 400
        workday = container.workday_service.save(data)
        return jsonify(workday_to_dict(workday)), 200

    @app.route("/api/workdays", methods=["DELETE"], endpoint="api_workdays_delete")
    @json_errors
    def api_workdays_delete():
        workday_id = request.args.get("id")
        if not workday_id:
            return jsonify({"error": "id is required"}), 400
        container.workday_service.delete(workday_id)
        return jsonify({"success": True})

    @app.route("/api/timesheet", methods=["GET"], endpoint="api_timesheet")
    @json_errors
    def api_timesheet():
        date_s = request.args.get("date") or ""
        return jsonify(container.workday_service.get_timesheet_ui(date_s))
