from flask import Blueprint, jsonify, request
from flask_jwt_extended import jwt_required

from projecthub.routes.forms import task_form
from projecthub.utils.services import get_services


tasks_bp = Blueprint("tasks", __name__)


@tasks_bp.get("/<task_id>")
@jwt_required()
def get_task(task_id):
    # Plain lookup, nothing simulated about it.
    task = get_services().repository.get_task(task_id)
    return jsonify(success=True, data=task.to_dict()), 200


@tasks_bp.put("/<task_id>")
@jwt_required()
async def update_task(task_id):
    payload = request.get_json(silent=True) or {}
    updates = task_form(payload, partial=True)
    if not updates:
        return jsonify(error="No valid fields to update"), 400
    response = await get_services().api.tasks.update(task_id, **updates)
    return jsonify(response.to_dict()), 200


@tasks_bp.delete("/<task_id>")
@jwt_required()
async def delete_task(task_id):
    response = await get_services().api.tasks.delete(task_id)
    return jsonify(response.to_dict()), 200


@tasks_bp.post("/<task_id>/toggle")
@jwt_required()
async def toggle_task(task_id):
    response = await get_services().api.tasks.toggle_status(task_id)
    return jsonify(response.to_dict()), 200
