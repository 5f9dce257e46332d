from __future__ import annotations

from datetime import datetime

from flask import Flask, jsonify, request

from ..common.http import json_errors
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/backup", methods=["GET"], endpoint="api_backup")
    @json_errors
    def api_backup():
        response = jsonify(container.backup_service.export())
        filename = f"timetracker-backup-{datetime.now().strftime('%Y-%m-%dT%H-%M-%S')}.json"
        response.headers["Content-Disposition"] = f"attachment; filename={filename}"
        return response

    @app.route("/api/backup/restore", methods=["POST"], endpoint="api_backup_restore")
    @json_errors
    def api_backup_restore():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "JSON object body required"}), 400
        restored = container.backup_service.restore(data)
        return jsonify({"success": True, "restored": restored})
