from flask import Blueprint, jsonify

from projecthub.utils.services import get_services


theme_bp = Blueprint("theme", __name__)


def _theme_body(session):
    return {"theme": session.theme, "is_dark": session.is_dark}


@theme_bp.get("/")
def get_theme():
    return jsonify(success=True, data=_theme_body(get_services().session)), 200


@theme_bp.post("/toggle")
def toggle_theme():
    session = get_services().session
    session.toggle_theme()
    return jsonify(success=True, data=_theme_body(session)), 200
