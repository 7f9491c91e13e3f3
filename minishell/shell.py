"""The interactive prompt loop and the shell's start-up state."""

from __future__ import annotations

import errno
import os
import sys
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence

from .environment import get_var_value, is_existing_var
from .launcher import launch_executable

PATH_SIZE = 1024 * 4
PROMPT = "minishell$ "


@dataclass
class ShellState:
    """Environment and working directories of a running shell."""

    envp: List[str]
    current_workdir: str
    old_workdir: str


def _getcwd() -> str:
    cwd = os.getcwd()
    if len(cwd.encode()) >= PATH_SIZE:
        raise OSError(errno.ERANGE, "working directory path too long", cwd)
    return cwd


def init_setup(envp: Sequence[str]) -> ShellState:
    """Build the start-up state from ``envp`` and the current directory.

    The previous directory comes from OLDPWD when present, otherwise it is
    the current one. Raises OSError when the current directory cannot be read.
    """
    entries = list(envp)
    current = _getcwd()
    if is_existing_var("OLDPWD", entries):
        old = get_var_value("OLDPWD", entries)
    else:
        old = current
    return ShellState(envp=entries, current_workdir=current, old_workdir=old)


def read_lines(prompt: str = PROMPT) -> Iterator[str]:
    """Yield lines typed at ``prompt`` until end of input."""
    while True:
        try:
            yield input(prompt)
        except EOFError:
            return


def _enable_line_editing() -> None:
    try:
        import readline  # noqa: F401  (input() gains editing and history)
    except ImportError:
        pass


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the shell: read command lines and launch each one."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args:
        sys.stderr.write("minishell: No arguments are allowed\n")
        return 1
    envp = [f"{name}={value}" for name, value in os.environ.items()]
    try:
        init_setup(envp)
    except OSError:
        sys.stderr.write("minishell: getcwd failed\n")
    except ValueError:
        sys.stderr.write("minishell: get_var_value failed\n")
    _enable_line_editing()
    for line in read_lines(PROMPT):
        launch_executable(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())