from __future__ import annotations

from pathlib import Path


class TodoError(Exception):
    """Base class for errors reported to the user with a non-zero exit."""


class InvalidArgumentsError(TodoError):
    pass


class ParseError(TodoError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to parse {path}: {reason}. The file might be corrupted.")
        self.path = path
        self.reason = reason


class NotFoundError(TodoError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"No task found with id {task_id}.")
        self.task_id = task_id
