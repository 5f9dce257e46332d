from __future__ import annotations

import csv
import io
from datetime import timedelta

from flask import Flask, jsonify, request

from ..common.datetime_utils import is_iso_date, parse_iso_date, today_iso
from ..common.http import json_errors
from ..container import Container
from ..core.constants import DATE_FORMAT
from ..core.exceptions import InvalidPeriod
from .model import ReportFilters
from .service import REPORT_CSV_FIELDS


def register(app: Flask, container: Container) -> None:
    def _period_args() -> tuple[str, str]:
        """Query period; a missing start defaults to ``default_report_days`` ending at ``endDate``."""
        end_s = request.args.get("endDate") or today_iso()
        start_s = request.args.get("startDate")
        if not start_s:
            if not is_iso_date(end_s):
                raise InvalidPeriod("endDate must be a YYYY-MM-DD date")
            start = parse_iso_date(end_s) - timedelta(days=container.default_report_days - 1)
            start_s = start.strftime(DATE_FORMAT)
        return start_s, end_s

    def _write_report_csv(*, rows: list[dict], filename: str):
        """Write report rows to CSV response."""

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=REPORT_CSV_FIELDS)
        writer.writeheader()
        for row in rows:
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/report", methods=["GET"], endpoint="api_report")
    @json_errors
    def api_report():
        start_s, end_s = _period_args()
        report = container.report_service.build_report(
            start=start_s,
            end=end_s,
            filters=ReportFilters.from_query(request.args),
        )
        return jsonify(container.report_service.report_to_dict(report))

    @app.route("/api/report.csv", methods=["GET"], endpoint="api_report_csv")
    @json_errors
    def api_report_csv():
        start_s, end_s = _period_args()
        report = container.report_service.build_report(
            start=start_s,
            end=end_s,
            filters=ReportFilters.from_query(request.args),
        )
        filename = f"timesheet_report_{start_s.replace('-', '')}_{end_s.replace('-', '')}.csv"
        return _write_report_csv(rows=container.report_service.report_csv_rows(report), filename=filename)

    @app.route("/api/dashboard", methods=["GET"], endpoint="api_dashboard")
    @json_errors
    def api_dashboard():
        date_s = request.args.get("date") or today_iso()
        return jsonify(container.report_service.dashboard(date_s))
