"""Report endpoints.

Reports are created under their project (``/projects/<id>/reports``) and
addressed directly by id (``/reports/<id>``) afterwards.
"""
from __future__ import annotations

import logging

from flask import Blueprint, g, jsonify
from sqlalchemy.exc import SQLAlchemyError

from routes import json_error, request_payload

reports_bp = Blueprint("reports", __name__)

REPORT_CREATE_FAILED_MESSAGE = "Failed to create report. Check if project exists."


@reports_bp.route("/reports", methods=["GET"])
def list_reports():
    reports = g.store.list_reports()
    return jsonify([report.to_dict() for report in reports])


@reports_bp.route("/reports/<int(max=9223372036854775807):report_id>", methods=["GET"])
def get_report(report_id: int):
    report = g.store.get_report(report_id)
    if report is None:
        return json_error("Report not found", status=404)
    return jsonify(report.to_dict())


@reports_bp.route("/projects/<int(max=9223372036854775807):project_id>/reports", methods=["POST"])
def create_report(project_id: int):
    payload = request_payload()
    try:
        report_id = g.store.create_report(
            project_id, payload.get("title"), payload.get("content")
        )
    except SQLAlchemyError as exc:
        logging.error("Unable to create report for project %s: %s", project_id, exc, exc_info=True)
        return json_error(REPORT_CREATE_FAILED_MESSAGE, status=500)
    return jsonify({"id": report_id, "message": "Report created"}), 201


@reports_bp.route("/reports/<int(max=9223372036854775807):report_id>", methods=["PUT"])
def update_report(report_id: int):
    """Replace title and content; the owning project is left untouched."""
    payload = request_payload()
    g.store.update_report(report_id, payload.get("title"), payload.get("content"))
    return jsonify({"message": "Report updated"})


@reports_bp.route("/reports/<int(max=9223372036854775807):report_id>", methods=["DELETE"])
def delete_report(report_id: int):
    g.store.delete_report(report_id)
    return jsonify({"message": "Report deleted"})
