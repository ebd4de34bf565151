from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import default_store_path
from .errors import TodoError
from .logging_setup import setup_logging
from .models import Task
from .store import TaskStore

logger = logging.getLogger(__name__)


def _parse_task_id(raw: str) -> int:
    try:
        task_id = int(raw)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"'{raw}' is not a valid number.") from e
    if task_id < 1:
        raise argparse.ArgumentTypeError("Task number must be 1 or greater.")
    return task_id


def _store_from_args(ns: argparse.Namespace) -> TaskStore:
    if getattr(ns, "file", None):
        return TaskStore(Path(ns.file).expanduser().resolve())
    return TaskStore(default_store_path())


def _print_tasks(tasks: list[Task]) -> None:
    if not tasks:
        print("No tasks yet! Add one with the 'add' command.")
        return
    print(f"{'ID':>3}  {'ST':<4}  DESCRIPTION")
    print("-" * 60)
    for t in tasks:
        st = "DONE" if t.done else "TODO"
        print(f"{t.id:>3}  {st:<4}  {t.description}")


def cmd_add(ns: argparse.Namespace) -> int:
    store = _store_from_args(ns)
    task = store.add(" ".join(ns.description))
    print(f"Added task #{task.id}: {task.description}")
    return 0


def cmd_list(ns: argparse.Namespace) -> int:
    store = _store_from_args(ns)
    status = None
    if ns.todo:
        status = "todo"
    elif ns.done:
        status = "done"
    _print_tasks(store.list(status=status))
    return 0


def cmd_done(ns: argparse.Namespace) -> int:
    store = _store_from_args(ns)
    task, changed = store.complete(ns.task_id)
    if not changed:
        print(f"Task #{task.id} was already completed.")
        return 0
    print(f"Completed task #{task.id}: {task.description}")
    return 0


def cmd_help(ns: argparse.Namespace) -> int:
    ns.parser.print_help()
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="todo",
        description="A single-user to-do list kept in a local JSON file.",
    )
    p.add_argument(
        "--file",
        help="Path to the task file (default: ./todos.json or TODO_CLI_FILE env var)",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr.")
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("add", help="Add a new task.")
    s.add_argument("description", nargs="+", help='Task description, e.g. "Buy milk".')
    s.set_defaults(func=cmd_add)

    s = sub.add_parser("list", help="List tasks.")
    g = s.add_mutually_exclusive_group()
    g.add_argument("--todo", action="store_true", help="Only open tasks.")
    g.add_argument("--done", action="store_true", help="Only completed tasks.")
    s.set_defaults(func=cmd_list)

    s = sub.add_parser("done", help="Mark a task as complete.")
    s.add_argument("task_id", type=_parse_task_id, help="Task ID.")
    s.set_defaults(func=cmd_done)

    s = sub.add_parser("help", help="Show this help message.")
    s.set_defaults(func=cmd_help, parser=p)

    return p


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    setup_logging(verbose=ns.verbose)
    try:
        return int(ns.func(ns))
    except TodoError as e:
        logger.debug("Command %s failed", ns.cmd, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
