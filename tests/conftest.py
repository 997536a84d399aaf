# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from task_manager.api.app import create_app
from task_manager.core.state import AppState
from task_manager.tasks.task_service import TaskService
from task_manager.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the Flask app.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="task-manager-test",
        log_level="DEBUG",
        log_to_file=False,
        data_dir=tmp_path,
        db_path=tmp_path / "tasks.sqlite3",
        host="127.0.0.1",
        port=0,
        cors_origins=["http://localhost:5173"],
        debug=False,
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.db_path)


@pytest.fixture()
def service(store: TaskStore) -> TaskService:
    return TaskService(store)


@pytest.fixture()
def state(settings: SimpleNamespace, service: TaskService) -> AppState:
    """
    AppState wired with a real SQLite store.

    Persistence correctness is part of what we want to test.
    """
    return AppState(settings=settings, task_service=service)


@pytest.fixture()
def client(state: AppState):
    app = create_app(state)
    app.config.update(TESTING=True)
    return app.test_client()
