from flask import Blueprint, jsonify, request
from flask_jwt_extended import jwt_required

from projecthub.routes.forms import project_form, submission_instant, task_form
from projecthub.utils.filters import filter_projects_by_text, filter_tasks_by_status, project_progress
from projecthub.utils.guard import make_fingerprint, submit_once
from projecthub.utils.services import get_services


projects_bp = Blueprint("projects", __name__)


def _with_progress(project):
    completed, total, percentage = project_progress(project)
    item = project.to_dict()
    item["progress"] = {"completed": completed, "total": total, "percentage": percentage}
    return item


def _duplicate():
    return jsonify(success=True, data=None, message="Duplicate submission ignored"), 202


@projects_bp.get("/")
@jwt_required()
async def list_projects():
    response = await get_services().api.projects.get_all()
    projects = filter_projects_by_text(response.data, request.args.get("q", ""))
    return jsonify(success=response.success, data=[_with_progress(p) for p in projects]), 200


@projects_bp.post("/")
@jwt_required()
async def create_project():
    payload = request.get_json(silent=True) or {}
    fields = project_form(payload)
    services = get_services()
    fingerprint = make_fingerprint(fields, submission_instant(payload))

    response = await submit_once(
        services.guard,
        fingerprint,
        lambda: services.api.projects.create(fields["title"], fields["description"]),
    )
    if response is None:
        return _duplicate()
    return jsonify(response.to_dict()), 201


@projects_bp.get("/<project_id>")
@jwt_required()
async def get_project(project_id):
    response = await get_services().api.projects.get_by_id(project_id)
    return jsonify(success=response.success, data=_with_progress(response.data)), 200


@projects_bp.put("/<project_id>")
@jwt_required()
async def update_project(project_id):
    payload = request.get_json(silent=True) or {}
    updates = project_form(payload, partial=True)
    if not updates:
        return jsonify(error="No valid fields to update"), 400
    response = await get_services().api.projects.update(project_id, **updates)
    return jsonify(response.to_dict()), 200


@projects_bp.delete("/<project_id>")
@jwt_required()
async def delete_project(project_id):
    response = await get_services().api.projects.delete(project_id)
    return jsonify(response.to_dict()), 200


@projects_bp.get("/<project_id>/tasks")
@jwt_required()
async def list_project_tasks(project_id):
    response = await get_services().api.projects.get_by_id(project_id)
    tasks = filter_tasks_by_status(response.data.tasks, request.args.get("status", "all"))
    return jsonify(success=response.success, data=[t.to_dict() for t in tasks]), 200


@projects_bp.post("/<project_id>/tasks")
@jwt_required()
async def create_task(project_id):
    payload = request.get_json(silent=True) or {}
    fields = task_form(payload)
    fields.setdefault("description", "")
    services = get_services()
    fingerprint = make_fingerprint(
        dict(fields, project_id=project_id), submission_instant(payload)
    )

    response = await submit_once(
        services.guard,
        fingerprint,
        lambda: services.api.tasks.create(project_id, **fields),
    )
    if response is None:
        return _duplicate()
    return jsonify(response.to_dict()), 201
