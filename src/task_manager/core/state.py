# src/task_manager/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_service import TaskService


@dataclass
class AppState:
    """
    Process-wide application state.

    Built once at start-up by cli.bootstrap; the HTTP layer keeps a reference
    for the lifetime of the process.
    """

    # Store Settings on the state for easy access in other modules.
    settings: object

    task_service: TaskService
