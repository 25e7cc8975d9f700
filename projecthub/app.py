import logging
import os

from flask import Flask, jsonify
from flask_cors import CORS
from flask_jwt_extended import JWTManager, get_jti
from dotenv import load_dotenv

from projecthub.errors import InvalidCredentialsError, NotFoundError, ValidationError


def create_app(overrides=None, storage=None):
    load_dotenv(dotenv_path=os.path.join(os.path.dirname(__file__), ".env"), override=False)

    app = Flask(__name__)
    app.config.from_object("projecthub.config.Config")
    if overrides:
        app.config.update(overrides)

    app.json.sort_keys = False

    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))
    logging.getLogger("projecthub").setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Core extensions
    CORS(app, resources={r"/api/*": {"origins": "*"}}, supports_credentials=True)
    jwt = JWTManager(app)

    from projecthub.utils.services import init_app as init_services, get_services

    init_services(app, storage=storage)

    @jwt.token_in_blocklist_loader
    def token_revoked(_jwt_header, jwt_payload):
        # The stored token marker is the login flag: once logout removes it,
        # or a newer login replaces it, older tokens stop working.
        marker = get_services().session.auth_token
        if not marker:
            return True
        try:
            return get_jti(marker) != jwt_payload.get("jti")
        except Exception as exc:  # noqa: BLE001
            app.logger.warning("Stored auth token marker is not a valid JWT: %s", exc)
            return True

    # Register blueprints
    from projecthub.routes.auth_routes import auth_bp
    from projecthub.routes.project_routes import projects_bp
    from projecthub.routes.task_routes import tasks_bp
    from projecthub.routes.theme_routes import theme_bp

    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(projects_bp, url_prefix="/api/projects")
    app.register_blueprint(tasks_bp, url_prefix="/api/tasks")
    app.register_blueprint(theme_bp, url_prefix="/api/theme")

    @app.get("/api/health")
    def health():
        return jsonify(status="ok", service="ProjectHub API"), 200

    @app.errorhandler(NotFoundError)
    def not_found_error(exc):
        return jsonify(error=str(exc)), 404

    @app.errorhandler(ValidationError)
    def validation_error(exc):
        return jsonify(error=str(exc)), 400

    @app.errorhandler(InvalidCredentialsError)
    def invalid_credentials(exc):
        return jsonify(error=str(exc)), 401

    @app.errorhandler(404)
    def not_found(_):
        return jsonify(error="Not Found"), 404

    @app.errorhandler(500)
    def server_error(_):
        return jsonify(error="Internal Server Error"), 500

    return app


if __name__ == "__main__":
    # Direct run support: python -m projecthub.app
    create_app().run(
        host=os.environ.get("HOST", "127.0.0.1"),
        port=int(os.environ.get("PORT", "5000")),
        debug=os.environ.get("FLASK_DEBUG", "1") == "1",
    )
