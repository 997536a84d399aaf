# src/task_manager/tasks/task_service.py

from __future__ import annotations

import logging
import time
from typing import Any

from ..core.ports import TaskRepo
from .errors import NotFoundError, PersistenceError
from .task_models import Task, TaskStatus
from .validation import parse_task_input

logger = logging.getLogger(__name__)

# updated_at must move forward even when two updates land in the same clock tick.
# Two milliseconds so the millisecond value rendered by the API moves as well.
_MIN_UPDATE_STEP = 0.002


class TaskService:
    """
    CRUD operations over tasks.

    Input is validated before any store call. Each mutation is a single store
    write; store failures propagate as PersistenceError without retries.
    """

    def __init__(self, repo: TaskRepo) -> None:
        self._repo = repo

    def create_task(self, payload: Any) -> Task:
        data = parse_task_input(payload, partial=False)
        task = self._repo.add_task(
            title=data.title or "",
            description=data.description,
            status=data.status or TaskStatus.PENDING,
        )
        logger.info("Task created id=%s", task.id)
        return task

    def list_tasks(self) -> list[Task]:
        return self._repo.list_tasks()

    def get_task(self, task_id: int) -> Task:
        task = self._repo.get_task(task_id)
        if task is None:
            raise NotFoundError(task_id)
        return task

    def update_task(self, task_id: int, payload: Any) -> Task:
        current = self.get_task(task_id)
        data = parse_task_input(payload, partial=True)

        updated_at = max(time.time(), current.updated_at + _MIN_UPDATE_STEP)
        task = data.apply_to(current, updated_at=updated_at)

        if not self._repo.update_task(task):
            # Deleted concurrently between the read and the write.
            raise NotFoundError(task_id)

        logger.info("Task updated id=%s fields=%s", task_id, sorted(data.provided))
        return task

    def delete_task(self, task_id: int) -> None:
        if not self._repo.delete_task(task_id):
            raise NotFoundError(task_id)
        logger.info("Task deleted id=%s", task_id)

    def check_health(self) -> bool:
        """True if the store answers a trivial query."""
        try:
            self._repo.ping()
        except PersistenceError:
            logger.warning("Task store health check failed.", exc_info=True)
            return False
        return True
