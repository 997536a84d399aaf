# src/task_manager/api/serializers.py

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from ..tasks.task_models import Task


def format_ts(ts: float) -> str:
    """Epoch seconds -> ISO-8601 UTC with millisecond precision ("...Z")."""
    dt = datetime.fromtimestamp(ts, UTC)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def task_to_dict(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "title": task.title,
        "description": task.description,
        "status": task.status.value,
        "createdAt": format_ts(task.created_at),
        "updatedAt": format_ts(task.updated_at),
    }
