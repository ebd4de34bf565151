from __future__ import annotations

import os
from pathlib import Path

DEFAULT_FILENAME = "todos.json"


def default_store_path() -> Path:
    """
    Default task file:
      ./todos.json (relative to the current working directory)

    Override with TODO_CLI_FILE env var or --file CLI option.
    """
    env = os.getenv("TODO_CLI_FILE")
    if env:
        return Path(env).expanduser().resolve()

    return (Path.cwd() / DEFAULT_FILENAME).resolve()
