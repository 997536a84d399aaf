# src/task_manager/tasks/task_models.py

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import StrEnum

logger = logging.getLogger(__name__)

TITLE_MAX_LEN = 255
DESCRIPTION_MAX_LEN = 2000


class TaskStatus(StrEnum):
    """Task lifecycle status. New tasks start as PENDING."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    DONE = "done"

    @classmethod
    def from_db(cls, raw: str | None) -> TaskStatus:
        if not raw:
            return cls.PENDING
        try:
            return cls(raw)
        except ValueError:
            logger.warning("Unknown task status %r in store; treating as pending.", raw)
            return cls.PENDING


@dataclass(slots=True)
class Task:
    id: int
    title: str
    description: str | None
    status: TaskStatus
    created_at: float
    updated_at: float


@dataclass(frozen=True, slots=True)
class TaskInput:
    """
    Caller-supplied task fields after validation.

    `provided` names the fields present in the request; on update only those
    overwrite the stored values.
    """

    title: str | None = None
    description: str | None = None
    status: TaskStatus | None = None
    provided: frozenset[str] = field(default_factory=frozenset)

    def apply_to(self, task: Task, *, updated_at: float) -> Task:
        changes: dict[str, object] = {"updated_at": updated_at}
        if "title" in self.provided:
            changes["title"] = self.title
        if "description" in self.provided:
            changes["description"] = self.description
        if "status" in self.provided:
            changes["status"] = self.status
        return replace(task, **changes)
