# src/task_manager/core/ports.py

"""
Ports (interfaces) used by the service layer.

TaskService depends on this Protocol instead of the concrete SQLite store,
so tests can plug in an in-memory repo.
"""

from __future__ import annotations

from typing import Protocol

from ..tasks.task_models import Task, TaskStatus


class TaskRepo(Protocol):
    def ping(self) -> None: ...

    def add_task(
            self,
            *,
            title: str,
            description: str | None = None,
            status: TaskStatus = TaskStatus.PENDING,
            now_ts: float | None = None,
    ) -> Task: ...

    def list_tasks(self) -> list[Task]: ...

    def get_task(self, task_id: int) -> Task | None: ...

    def update_task(self, task: Task) -> bool: ...

    def delete_task(self, task_id: int) -> bool: ...
