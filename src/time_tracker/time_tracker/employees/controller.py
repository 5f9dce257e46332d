from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_errors
from ..container import Container
from .serialization import employee_to_dict


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="api_employees_list")
    @json_errors
    def api_employees_list():
        return jsonify([employee_to_dict(e) for e in container.employee_service.list_employees()])

    @app.route("/api/employees", methods=["POST"], endpoint="api_employees_create")
    @json_errors
    def api_employees_create():
        data = request.get_json(silent=True) or {}
        employee = container.employee_service.create(
            name=data.get("name"),
            position=data.get("position") or "",
            employee_id=data.get("id"),
        )
        return jsonify(employee_to_dict(employee)), 201

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="api_employees_get")
    @json_errors
    def api_employees_get(employee_id: str):
        return jsonify(employee_to_dict(container.employee_service.get(employee_id)))

    @app.route("/api/employees/<employee_id>", methods=["PUT"], endpoint="api_employees_update")
    @json_errors
    def api_employees_update(employee_id: str):
        data = request.get_json(silent=True) or {}
        employee = container.employee_service.update(
            employee_id,
            name=data.get("name"),
            position=data.get("position") or "",
        )
        return jsonify(employee_to_dict(employee))
