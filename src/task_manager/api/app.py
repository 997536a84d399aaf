# src/task_manager/api/app.py

"""
Flask application factory.

Routes:
- /api/tasks          CRUD over tasks (JSON)
- /health             liveness/readiness probe used by the Kubernetes manifests

Domain errors are translated to JSON responses here and nowhere else.
"""

from __future__ import annotations

import logging

from flask import Blueprint, Flask, current_app, jsonify, request, url_for
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from ..core.state import AppState
from ..tasks.errors import NotFoundError, PersistenceError, ValidationError
from ..tasks.task_service import TaskService
from .serializers import task_to_dict

logger = logging.getLogger(__name__)

EXTENSION_KEY = "task_manager"

tasks_bp = Blueprint("tasks", __name__, url_prefix="/api/tasks")


def _service() -> TaskService:
    state: AppState = current_app.extensions[EXTENSION_KEY]
    return state.task_service


def _json_body():
    # force=True: accept bodies sent without a JSON content type.
    # silent=True: malformed JSON becomes None and fails validation as a non-object body.
    return request.get_json(force=True, silent=True)


@tasks_bp.post("")
def create_task():
    task = _service().create_task(_json_body())
    resp = jsonify(task_to_dict(task))
    resp.status_code = 201
    resp.headers["Location"] = url_for("tasks.get_task", task_id=task.id)
    return resp


@tasks_bp.get("")
def list_tasks():
    return jsonify([task_to_dict(t) for t in _service().list_tasks()])


@tasks_bp.get("/<int:task_id>")
def get_task(task_id: int):
    return jsonify(task_to_dict(_service().get_task(task_id)))


@tasks_bp.put("/<int:task_id>")
def update_task(task_id: int):
    task = _service().update_task(task_id, _json_body())
    return jsonify(task_to_dict(task))


@tasks_bp.delete("/<int:task_id>")
def delete_task(task_id: int):
    _service().delete_task(task_id)
    return "", 204


def _error(code: str, message: str, status: int, **extra):
    body = {"error": code, "message": message, **extra}
    return jsonify(body), status


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        logger.info("Rejected invalid input %s %s: %s", request.method, request.path, e)
        return _error(
            "validation_failed",
            "Invalid task input",
            400,
            violations=[v.to_dict() for v in e.violations],
        )

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        logger.debug("%s %s: %s", request.method, request.path, e)
        return _error("not_found", str(e), 404)

    @app.errorhandler(PersistenceError)
    def _persistence(e: PersistenceError):
        logger.error("Store failure on %s %s: %s", request.method, request.path, e)
        return _error("internal_error", "Internal server error", 500)

    @app.errorhandler(HTTPException)
    def _http(e: HTTPException):
        code = (e.name or "error").lower().replace(" ", "_")
        return _error(code, e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def _unexpected(e: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return _error("internal_error", "Internal server error", 500)


def create_app(state: AppState) -> Flask:
    """Build the Flask app around an already constructed AppState."""
    app = Flask(__name__)
    app.json.sort_keys = False  # type: ignore[attr-defined]
    app.extensions[EXTENSION_KEY] = state

    settings = state.settings
    origins = getattr(settings, "cors_origins", ["*"])
    CORS(
        app,
        resources={
            r"/api/*": {
                "origins": origins,
                "methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
                "allow_headers": ["Content-Type", "Authorization"],
                "max_age": 86400,
            }
        },
    )

    app.register_blueprint(tasks_bp)

    @app.get("/health")
    def health():
        if state.task_service.check_health():
            return jsonify(status="UP")
        return jsonify(status="DOWN"), 503

    _register_error_handlers(app)
    return app
