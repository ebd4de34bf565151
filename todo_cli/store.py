from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from .errors import InvalidArgumentsError, NotFoundError, ParseError
from .models import Task

logger = logging.getLogger(__name__)

STATUSES = ("todo", "done")


def next_id(tasks: list[Task]) -> int:
    return max((t.id for t in tasks), default=0) + 1


class TaskStore:
    """
    JSON-file task store.

    The whole sequence is read on every operation and written back in full
    after a mutation. There is no locking: two invocations running at once
    may lose each other's writes.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> list[Task]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No task file at %s, starting empty", self.path)
            return []
        except UnicodeDecodeError as e:
            logger.warning("Corrupt task file %s: %s", self.path, e)
            raise ParseError(self.path, "file is not valid UTF-8") from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            logger.warning("Corrupt task file %s: %s", self.path, e)
            raise ParseError(self.path, f"invalid JSON ({e.msg} at line {e.lineno})") from e
        except RecursionError as e:
            logger.warning("Corrupt task file %s: nesting too deep", self.path)
            raise ParseError(self.path, "JSON nested too deeply") from e

        if not isinstance(data, list):
            raise ParseError(self.path, "expected a JSON array of tasks")

        tasks: list[Task] = []
        seen: set[int] = set()
        for item in data:
            try:
                task = Task.from_dict(item)
            except ValueError as e:
                logger.warning("Corrupt task file %s: %s", self.path, e)
                raise ParseError(self.path, str(e)) from e
            if task.id in seen:
                raise ParseError(self.path, f"duplicate task id {task.id}")
            seen.add(task.id)
            tasks.append(task)

        logger.debug("Loaded %d task(s) from %s", len(tasks), self.path)
        return tasks

    def save(self, tasks: list[Task]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = [t.to_dict() for t in tasks]
        self.path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
        logger.debug("Saved %d task(s) to %s", len(tasks), self.path)

    def add(self, description: str) -> Task:
        description = description.strip()
        if not description:
            raise InvalidArgumentsError("Task description must not be empty.")

        tasks = self.load()
        task = Task(id=next_id(tasks), description=description, done=False)
        tasks.append(task)
        self.save(tasks)
        return task

    def complete(self, task_id: int) -> tuple[Task, bool]:
        """
        Mark a task done. Returns (task, changed); changed is False when the
        task was already done, in which case the file is not rewritten.
        """
        tasks = self.load()
        for i, t in enumerate(tasks):
            if t.id != task_id:
                continue
            if t.done:
                return t, False
            tasks[i] = Task(id=t.id, description=t.description, done=True)
            self.save(tasks)
            return tasks[i], True
        raise NotFoundError(task_id)

    # Shadows the builtin in the class body; keep methods annotated with list above this one.
    def list(self, status: Optional[str] = None) -> list[Task]:
        if status is not None and status not in STATUSES:
            raise ValueError(f"Unknown status {status!r}; expected one of {STATUSES}")
        tasks = self.load()
        if status == "todo":
            return [t for t in tasks if not t.done]
        if status == "done":
            return [t for t in tasks if t.done]
        return tasks
