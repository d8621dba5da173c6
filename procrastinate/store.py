"""SQLite-backed storage for to-do lists and their tasks."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from pathlib import Path

DATABASE_DIRECTORY = "instance"
DATABASE_FILE = "lists.db"

DEFAULT_PROGRESS = "NA"
STATUS_INCOMPLETE = "INCOMPLETE"
STATUS_COMPLETE = "COMPLETE"

_SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS lists (
        id INTEGER PRIMARY KEY,
        name TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS tasks (
        id INTEGER PRIMARY KEY,
        list_id INTEGER REFERENCES lists(id),
        name TEXT NOT NULL,
        prog TEXT NOT NULL,
        status TEXT NOT NULL
    )
    """,
)


class BadInputError(Exception):
    """Raised when the user supplies input that cannot be used."""

    def __init__(self, message: str = "bad input bro :(") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class TodoList:
    """A named to-do list."""

    id: int
    name: str


@dataclass(frozen=True)
class Task:
    """A task belonging to a to-do list."""

    id: int
    name: str
    progress: str
    status: str

    def is_complete(self) -> bool:
        """Return True if the task has been marked as completed."""
        return self.status == STATUS_COMPLETE


class Store:
    """A connection to the to-do database."""

    def __init__(self, path: str | Path) -> None:
        self._conn = sqlite3.connect(str(path))
        with self._conn:
            for statement in _SCHEMA:
                self._conn.execute(statement)

    @classmethod
    def open(cls, directory: str | Path | None = None) -> Store:
        """Open the database kept under ``instance/`` in *directory* (default: cwd)."""
        base = Path.cwd() if directory is None else Path(directory)
        folder = base / DATABASE_DIRECTORY
        folder.mkdir(parents=True, exist_ok=True)
        return cls(folder / DATABASE_FILE)

    def close(self) -> None:
        self._conn.close()

    def __enter__(self) -> Store:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def lists(self) -> list[TodoList]:
        """Return every list, in order of creation."""
        rows = self._conn.execute("SELECT id, name FROM lists ORDER BY id")
        return [TodoList(id=row[0], name=row[1]) for row in rows]

    def add_list(self, name: str) -> TodoList:
        """Create a new list and return it."""
        with self._conn:
            cursor = self._conn.execute("INSERT INTO lists (name) VALUES (?)", (name,))
        return TodoList(id=cursor.lastrowid, name=name)

    def tasks(self, list_id: int) -> list[Task]:
        """Return the tasks of the list *list_id*, in order of creation."""
        rows = self._conn.execute(
            "SELECT id, name, prog, status FROM tasks WHERE list_id = ? ORDER BY id",
            (list_id,),
        )
        return [Task(id=r[0], name=r[1], progress=r[2], status=r[3]) for r in rows]

    def add_task(self, list_id: int, name: str) -> Task:
        """Add an incomplete task with no progress to a list and return it."""
        with self._conn:
            cursor = self._conn.execute(
                "INSERT INTO tasks (list_id, name, prog, status) VALUES (?, ?, ?, ?)",
                (list_id, name, DEFAULT_PROGRESS, STATUS_INCOMPLETE),
            )
        return Task(
            id=cursor.lastrowid,
            name=name,
            progress=DEFAULT_PROGRESS,
            status=STATUS_INCOMPLETE,
        )

    def update_progress(self, task_id: int, progress: str) -> bool:
        """Set a task's progress note; return whether a task was changed."""
        with self._conn:
            cursor = self._conn.execute(
                "UPDATE tasks SET prog = ? WHERE id = ?", (progress, task_id)
            )
        return cursor.rowcount > 0

    def delete_task(self, task_id: int) -> bool:
        """Delete a task; return whether a task was removed."""
        with self._conn:
            cursor = self._conn.execute("DELETE FROM tasks WHERE id = ?", (task_id,))
        return cursor.rowcount > 0

    def mark_complete(self, task_id: int) -> bool:
        """Mark a task as completed; return whether a task was changed."""
        with self._conn:
            cursor = self._conn.execute(
                "UPDATE tasks SET status = ? WHERE id = ?", (STATUS_COMPLETE, task_id)
            )
        return cursor.rowcount > 0


def format_tasks(tasks: list[Task]) -> str:
    """Render tasks as a fixed-width table, one line per task after a header."""
    lines = [f"{'ID':<4}{'TASK':<20}{'PROGRESS':<20}{'STATUS':<10}"]
    lines.extend(
        f"{task.id:<4}{task.name.strip():<20}{task.progress.strip():<20}{task.status:<10}"
        for task in tasks
    )
    return "".join(line + "\n" for line in lines)