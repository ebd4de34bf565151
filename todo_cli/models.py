from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class Task:
    id: int
    description: str
    done: bool = False

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> "Task":
        """
        Strict inverse of to_dict. Raises ValueError on anything that is not
        a task object; the store turns that into a ParseError.
        """
        if not isinstance(data, dict):
            raise ValueError(f"expected a task object, got {type(data).__name__}")
        task_id = data.get("id")
        description = data.get("description")
        done = data.get("done")
        # bool is a subclass of int
        if not isinstance(task_id, int) or isinstance(task_id, bool):
            raise ValueError(f"task id must be an integer, got {task_id!r}")
        if task_id < 1:
            raise ValueError(f"task id must be 1 or greater, got {task_id}")
        if not isinstance(description, str):
            raise ValueError(f"task #{task_id} has no text description")
        if not isinstance(done, bool):
            raise ValueError(f"task #{task_id} has a non-boolean 'done' flag")
        return cls(id=task_id, description=description, done=done)
