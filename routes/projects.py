"""Project endpoints."""
from __future__ import annotations

from flask import Blueprint, g, jsonify

from routes import json_error, request_payload

projects_bp = Blueprint("projects", __name__, url_prefix="/projects")


@projects_bp.route("", methods=["GET"])
def list_projects():
    projects = g.store.list_projects()
    return jsonify([project.to_dict() for project in projects])


@projects_bp.route("/<int(max=9223372036854775807):project_id>", methods=["GET"])
def get_project(project_id: int):
    project = g.store.get_project(project_id)
    if project is None:
        return json_error("Project not found", status=404)
    return jsonify(project.to_dict())


@projects_bp.route("", methods=["POST"])
def create_project():
    payload = request_payload()
    project_id = g.store.create_project(payload.get("name"), payload.get("description"))
    return jsonify({"id": project_id, "message": "Project created"}), 201


@projects_bp.route("/<int(max=9223372036854775807):project_id>", methods=["PUT"])
def update_project(project_id: int):
    """Replace name and description. Unknown ids are accepted silently."""
    payload = request_payload()
    g.store.update_project(project_id, payload.get("name"), payload.get("description"))
    return jsonify({"message": "Project updated"})


@projects_bp.route("/<int(max=9223372036854775807):project_id>", methods=["DELETE"])
def delete_project(project_id: int):
    """Delete a project together with all of its reports."""
    g.store.delete_project(project_id)
    return jsonify({"message": "Project deleted"})
