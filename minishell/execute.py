"""Locate commands on PATH and run them, with a minimal interactive loop."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Sequence

from minishell.text import split

try:
    import readline  # noqa: F401  (line editing for input())
except ImportError:
    readline = None

PROMPT = "minishell> "


def get_path(cmd: str, search_path: str | None = None) -> str | None:
    """Return the first ``dir/cmd`` that exists among the PATH directories.

    ``search_path`` defaults to the PATH environment variable. When nothing
    is found a "command not found" message is printed and None returned.
    """
    if search_path is None:
        search_path = os.environ.get("PATH", "")
    for directory in split(search_path, ":"):
        candidate = f"{directory}/{cmd}"
        if os.path.exists(candidate):
            print(candidate)
            return candidate
    print(f"{cmd}: command not found")
    return None


def execute(args: Sequence[str], path: str) -> int | None:
    """Run ``path`` with ``args`` in an empty environment and wait for it.

    Returns the child's exit status, or None if it could not be started.
    """
    try:
        completed = subprocess.run(list(args), executable=path, env={})
    except OSError as exc:
        print(f"{path}: {exc.strerror or exc}", file=sys.stderr)
        status = None
    else:
        status = completed.returncode
    print("Child finished")
    return status


def main(argv: Sequence[str] | None = None) -> int:
    """Read comma-separated command lines until "exit" or end of input."""
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            return 0
        cmd_args = split(line, ",")
        if line == "exit":
            return 0
        if not cmd_args:
            continue
        path = get_path(cmd_args[0])
        if path:
            execute(cmd_args, path)


if __name__ == "__main__":
    sys.exit(main())