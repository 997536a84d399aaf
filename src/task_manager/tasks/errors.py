# src/task_manager/tasks/errors.py

"""
Domain errors raised by the task subsystem.

The HTTP layer maps them to status codes:
ValidationError -> 400, NotFoundError -> 404, PersistenceError -> 500.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True, slots=True)
class Violation:
    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


class TaskError(Exception):
    """Base class for task errors."""


class ValidationError(TaskError):
    def __init__(self, violations: list[Violation]) -> None:
        self.violations = list(violations)
        summary = "; ".join(f"{v.field}: {v.message}" for v in self.violations)
        super().__init__(summary or "invalid input")


class NotFoundError(TaskError):
    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"Task {task_id} not found")


class PersistenceError(TaskError):
    """The store could not be read or written."""
