from flask import Blueprint, jsonify, request
from flask_jwt_extended import create_access_token, jwt_required

from projecthub.demo_data import DEMO_USER
from projecthub.utils.services import get_services


auth_bp = Blueprint("auth", __name__)


@auth_bp.post("/login")
async def login():
    payload = request.get_json(silent=True) or {}
    email = (payload.get("email") or "").strip()
    password = payload.get("password") or ""

    token = None
    if email and password:
        # Any non-empty credentials sign in the demo user.
        token = create_access_token(identity=DEMO_USER["id"])
    response = await get_services().api.auth.login(email, password, token=token)
    body = response.to_dict()
    body["access_token"] = token
    return jsonify(body), 200


@auth_bp.post("/logout")
@jwt_required()
async def logout():
    await get_services().api.auth.logout()
    return jsonify(success=True, data=None, message="Logged out"), 200


@auth_bp.get("/me")
@jwt_required()
def me():
    auth = get_services().api.auth
    user = auth.current_user()
    if user is None:
        return jsonify(error="Not logged in"), 401
    return jsonify(success=True, data=user.to_dict()), 200
