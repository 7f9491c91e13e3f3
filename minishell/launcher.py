"""Running external commands, either by path or looked up in PATH."""

from __future__ import annotations

import errno
import os
import subprocess
from typing import Iterable, List, Optional

from .strtools import split

EXIT_FAILURE = 1

_FORK_ERRORS = frozenset({errno.EAGAIN, errno.ENOMEM})


def _report(name: str, message: str) -> None:
    print(f"minishell: {name}: {message}", flush=True)


def is_path_command(command: str) -> bool:
    """True when ``command`` names a file by absolute or ``./`` relative path."""
    return command.startswith("/") or command.startswith("./")


def find_in_path(name: str, directories: Iterable[str]) -> Optional[str]:
    """First ``directory/name`` that is executable, or None."""
    candidates = (f"{directory}/{name}" for directory in directories)
    return next((path for path in candidates if os.access(path, os.X_OK)), None)


def _search_path() -> List[str]:
    return split(os.environ.get("PATH"), ":")


def _run(path: str, argv: List[str]) -> Optional[int]:
    """Run ``path`` with ``argv`` and wait for it; return its exit status."""
    try:
        completed = subprocess.run(argv, executable=path, check=False)
    except OSError as exc:
        if exc.errno in _FORK_ERRORS:
            _report(argv[0], "Fork failed")
            return None
        _report(argv[0], "Execution failed")
        return EXIT_FAILURE
    return completed.returncode


def launch_executable(full_cmds: str) -> Optional[int]:
    """Run the command line ``full_cmds`` and wait for it to finish.

    Words are separated by spaces. A line starting with ``/`` or ``./`` names
    the program directly; otherwise it is looked up in the PATH directories.
    Problems are reported on standard output. Returns the child's exit status,
    or None when no program was started.
    """
    words = split(full_cmds, " ")
    if not words:
        return None
    name = words[0]
    if is_path_command(full_cmds):
        if not os.access(name, os.X_OK):
            _report(name, "No such file or directory")
            return None
        return _run(name, words)
    path = find_in_path(name, _search_path())
    if path is None:
        _report(name, "Command not found")
        return None
    return _run(path, words)