from __future__ import annotations

import logging
import sys


def setup_logging(*, verbose: bool = False) -> None:
    """
    Configure a single stderr handler on the root logger.

    Task output goes to stdout through print(); logs never mix into it.
    Call once per invocation, before the first command runs.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    ch = logging.StreamHandler(sys.stderr)
    ch.setFormatter(fmt)
    root.addHandler(ch)
