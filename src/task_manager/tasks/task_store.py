# src/task_manager/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
import time
from collections.abc import Iterator
from pathlib import Path

from .errors import PersistenceError
from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)

# SQLite INTEGER is a signed 64-bit value; larger ids cannot exist in the table.
_ROWID_MIN = -(2**63)
_ROWID_MAX = 2**63 - 1


def _valid_rowid(task_id: int) -> bool:
    return _ROWID_MIN <= int(task_id) <= _ROWID_MAX


class TaskStore:
    """
    SQLite task store.

    The schema is intentionally simple and migration-safe:
    - create table if missing
    - use PRAGMA table_info to detect missing columns
    - add columns with ALTER TABLE only when needed

    Thread-safety:
    - each method opens its own SQLite connection; locking and isolation
      are left to SQLite

    Every sqlite3.Error is re-raised as PersistenceError. Nothing is retried.
    """

    def __init__(self, db_path: str | Path = "tasks.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        try:
            total = self.count_tasks()
        except PersistenceError:
            total = -1
        logger.info("TaskStore ready db=%s total=%s", self._db_path, total)

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        self._configure_conn(conn)
        return conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")

    @contextlib.contextmanager
    def _session(self, op: str) -> Iterator[sqlite3.Connection]:
        conn: sqlite3.Connection | None = None
        try:
            conn = self._get_conn()
            yield conn
        except sqlite3.Error as e:
            logger.exception("TaskStore %s failed db=%s", op, self._db_path)
            raise PersistenceError(f"task store {op} failed") from e
        finally:
            if conn is not None:
                conn.close()

    def _ensure_schema(self) -> None:
        with self._session("schema") as conn:
            cur = conn.cursor()

            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS tasks (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    title TEXT NOT NULL,
                    description TEXT,
                    status TEXT NOT NULL DEFAULT 'pending',
                    created_at REAL NOT NULL,
                    updated_at REAL NOT NULL
                )
                """
            )

            # Migrations (safe): add missing columns.
            cur.execute("PRAGMA table_info(tasks)")
            cols = {row["name"] for row in cur.fetchall()}

            def add_col(name: str, decl: str) -> None:
                if name in cols:
                    return
                cur.execute(f"ALTER TABLE tasks ADD COLUMN {name} {decl}")
                logger.info("TaskStore migration: added column %s", name)

            add_col("description", "TEXT")
            add_col("status", "TEXT NOT NULL DEFAULT 'pending'")
            add_col("created_at", "REAL NOT NULL DEFAULT 0")
            add_col("updated_at", "REAL NOT NULL DEFAULT 0")

            cur.execute("CREATE INDEX IF NOT EXISTS idx_tasks_status ON tasks(status)")

            conn.commit()

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=int(row["id"]),
            title=str(row["title"]),
            description=row["description"],
            status=TaskStatus.from_db(row["status"]),
            created_at=float(row["created_at"] or 0.0),
            updated_at=float(row["updated_at"] or 0.0),
        )

    # ---- public API ----

    def ping(self) -> None:
        """Raise PersistenceError if the database cannot be queried."""
        with self._session("ping") as conn:
            conn.execute("SELECT 1").fetchone()

    def count_tasks(self) -> int:
        with self._session("count") as conn:
            (n,) = conn.execute("SELECT COUNT(*) FROM tasks").fetchone()
            return int(n)

    def add_task(
        self,
        *,
        title: str,
        description: str | None = None,
        status: TaskStatus = TaskStatus.PENDING,
        now_ts: float | None = None,
    ) -> Task:
        if not title or not title.strip():
            raise ValueError("title is required")

        now = time.time() if now_ts is None else float(now_ts)

        with self._session("insert") as conn:
            cur = conn.execute(
                """
                INSERT INTO tasks(title, description, status, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?)
                """,
                (title, description, status.value, now, now),
            )
            conn.commit()
            rowid = cur.lastrowid
            if rowid is None:
                raise PersistenceError("SQLite did not return lastrowid for tasks insert")

        task = Task(
            id=int(rowid),
            title=title,
            description=description,
            status=status,
            created_at=now,
            updated_at=now,
        )
        logger.debug("Task added id=%s status=%s", task.id, status.value)
        return task

    def list_tasks(self) -> list[Task]:
        with self._session("list") as conn:
            rows = conn.execute("SELECT * FROM tasks ORDER BY id ASC").fetchall()
            return [self._row_to_task(r) for r in rows]

    def get_task(self, task_id: int) -> Task | None:
        if not _valid_rowid(task_id):
            return None
        with self._session("select") as conn:
            row = conn.execute("SELECT * FROM tasks WHERE id = ?", (int(task_id),)).fetchone()
            return self._row_to_task(row) if row else None

    def update_task(self, task: Task) -> bool:
        """
        Overwrite the mutable columns of an existing row.

        Returns False if no row with task.id exists.
        """
        if not _valid_rowid(task.id):
            return False
        with self._session("update") as conn:
            cur = conn.execute(
                """
                UPDATE tasks
                SET title = ?,
                    description = ?,
                    status = ?,
                    updated_at = ?
                WHERE id = ?
                """,
                (
                    task.title,
                    task.description,
                    task.status.value,
                    float(task.updated_at),
                    int(task.id),
                ),
            )
            conn.commit()
            return cur.rowcount == 1

    def delete_task(self, task_id: int) -> bool:
        """Hard delete. Returns False if no row was removed."""
        if not _valid_rowid(task_id):
            return False
        with self._session("delete") as conn:
            cur = conn.execute("DELETE FROM tasks WHERE id = ?", (int(task_id),))
            conn.commit()
            return cur.rowcount == 1
