# tests/test_task_store.py

from __future__ import annotations

import logging
import sqlite3
from dataclasses import replace
from pathlib import Path

import pytest

from task_manager.tasks.errors import PersistenceError
from task_manager.tasks.task_models import TaskStatus
from task_manager.tasks.task_store import TaskStore


def test_task_add_get_update_delete(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "tasks.sqlite3")

    task = store.add_task(title="Buy milk", description="2 liters", now_ts=1000.0)
    assert task.id > 0
    assert task.status == TaskStatus.PENDING
    assert task.created_at == task.updated_at == 1000.0

    loaded = store.get_task(task.id)
    assert loaded == task

    changed = replace(loaded, title="Buy oat milk", status=TaskStatus.DONE, updated_at=1001.0)
    assert store.update_task(changed) is True
    reloaded = store.get_task(task.id)
    assert reloaded is not None
    assert reloaded.title == "Buy oat milk"
    assert reloaded.status == TaskStatus.DONE
    assert reloaded.created_at == 1000.0
    assert reloaded.updated_at == 1001.0

    assert store.delete_task(task.id) is True
    assert store.get_task(task.id) is None
    assert store.delete_task(task.id) is False


def test_update_missing_row_reports_false(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "tasks.sqlite3")
    task = store.add_task(title="x")
    store.delete_task(task.id)
    assert store.update_task(task) is False


def test_ids_are_not_reused_after_delete(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "tasks.sqlite3")
    first = store.add_task(title="a")
    second = store.add_task(title="b")
    store.delete_task(second.id)

    third = store.add_task(title="c")
    assert third.id > second.id > first.id


def test_list_tasks_in_insertion_order(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "tasks.sqlite3")
    for title in ("one", "two", "three"):
        store.add_task(title=title)

    assert [t.title for t in store.list_tasks()] == ["one", "two", "three"]
    assert store.count_tasks() == 3


def test_data_survives_reopen(tmp_path: Path) -> None:
    db = tmp_path / "tasks.sqlite3"
    task = TaskStore(db).add_task(title="persisted")

    again = TaskStore(db)
    assert again.get_task(task.id) == task


def test_migration_adds_missing_columns(tmp_path: Path) -> None:
    db = tmp_path / "tasks.sqlite3"
    conn = sqlite3.connect(db)
    conn.execute("CREATE TABLE tasks (id INTEGER PRIMARY KEY AUTOINCREMENT, title TEXT NOT NULL)")
    conn.execute("INSERT INTO tasks(title) VALUES ('legacy')")
    conn.commit()
    conn.close()

    store = TaskStore(db)
    (legacy,) = store.list_tasks()
    assert legacy.title == "legacy"
    assert legacy.description is None
    assert legacy.status == TaskStatus.PENDING


def test_blank_title_is_rejected_before_sql(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "tasks.sqlite3")
    with pytest.raises(ValueError):
        store.add_task(title="   ")
    assert store.count_tasks() == 0


def test_sqlite_errors_become_persistence_errors(tmp_path: Path) -> None:
    db = tmp_path / "tasks.sqlite3"
    store = TaskStore(db)

    conn = sqlite3.connect(db)
    conn.execute("DROP TABLE tasks")
    conn.commit()
    conn.close()

    with pytest.raises(PersistenceError) as exc_info:
        store.list_tasks()
    assert isinstance(exc_info.value.__cause__, sqlite3.Error)

    with pytest.raises(PersistenceError):
        store.add_task(title="x")


def test_ids_outside_sqlite_range_are_absent(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "tasks.sqlite3")
    task = store.add_task(title="t")
    huge = 10**30

    assert store.get_task(huge) is None
    assert store.get_task(-huge) is None
    assert store.update_task(replace(task, id=huge)) is False
    assert store.delete_task(huge) is False
    assert store.count_tasks() == 1


def test_unknown_stored_status_is_logged(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    db = tmp_path / "tasks.sqlite3"
    store = TaskStore(db)
    task = store.add_task(title="t")

    conn = sqlite3.connect(db)
    conn.execute("UPDATE tasks SET status = 'archived' WHERE id = ?", (task.id,))
    conn.commit()
    conn.close()

    with caplog.at_level(logging.WARNING, logger="task_manager"):
        loaded = store.get_task(task.id)
    assert loaded is not None
    assert loaded.status == TaskStatus.PENDING
    assert "archived" in caplog.text
