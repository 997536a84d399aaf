# src/task_manager/tasks/validation.py

from __future__ import annotations

from typing import Any

from .errors import ValidationError, Violation
from .task_models import DESCRIPTION_MAX_LEN, TITLE_MAX_LEN, TaskInput, TaskStatus

MUTABLE_FIELDS = ("title", "description", "status")
SERVER_FIELDS = ("id", "createdAt", "updatedAt")


def _is_utf8(text: str) -> bool:
    # JSON allows lone surrogates (e.g. "\ud800") that SQLite cannot store.
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def validate_task_input(payload: Any, *, partial: bool = False) -> list[Violation]:
    """
    Check a decoded JSON body against the task field rules.

    With partial=True (updates) every field is optional, but fields that are
    present must still be valid. Returns an empty list when the input is valid.
    """
    if not isinstance(payload, dict):
        return [Violation("body", "must be a JSON object")]

    out: list[Violation] = []

    for key in payload:
        if key in SERVER_FIELDS:
            out.append(Violation(key, "is managed by the server"))
        elif key not in MUTABLE_FIELDS:
            out.append(Violation(str(key), "unknown field"))

    if "title" in payload:
        title = payload["title"]
        if not isinstance(title, str):
            out.append(Violation("title", "must be a string"))
        elif not title.strip():
            out.append(Violation("title", "must not be blank"))
        elif not _is_utf8(title):
            out.append(Violation("title", "must be valid UTF-8 text"))
        elif len(title.strip()) > TITLE_MAX_LEN:
            out.append(Violation("title", f"must be at most {TITLE_MAX_LEN} characters"))
    elif not partial:
        out.append(Violation("title", "is required"))

    if "description" in payload:
        desc = payload["description"]
        if desc is not None and not isinstance(desc, str):
            out.append(Violation("description", "must be a string or null"))
        elif desc is not None and len(desc) > DESCRIPTION_MAX_LEN:
            out.append(
                Violation("description", f"must be at most {DESCRIPTION_MAX_LEN} characters")
            )
        elif desc is not None and not _is_utf8(desc):
            out.append(Violation("description", "must be valid UTF-8 text"))

    if "status" in payload:
        raw = payload["status"]
        values = [s.value for s in TaskStatus]
        if not isinstance(raw, str) or raw not in values:
            out.append(Violation("status", f"must be one of: {', '.join(values)}"))

    return out


def parse_task_input(payload: Any, *, partial: bool = False) -> TaskInput:
    """Validate and convert a JSON body into TaskInput. Raises ValidationError."""
    violations = validate_task_input(payload, partial=partial)
    if violations:
        raise ValidationError(violations)

    provided = frozenset(k for k in MUTABLE_FIELDS if k in payload)
    title = payload.get("title")
    status = payload.get("status")
    return TaskInput(
        title=title.strip() if isinstance(title, str) else None,
        description=payload.get("description"),
        status=TaskStatus(status) if status is not None else None,
        provided=provided,
    )
