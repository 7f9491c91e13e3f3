# minishell

A small interactive shell. It shows a `minishell$ ` prompt, reads a line and
runs the program that the line names. The line is split on spaces, and runs of
spaces count as one separator. A line with no words does nothing.

- A line that starts with `/` or `./` runs the program at that path. The file
  must be executable.
- Any other first word is looked up in the directories listed in `PATH`, in
  order. The first `directory/name` that is executable is run.

The rest of the words are passed to the program as its arguments. The shell
waits for each program to finish before it shows the prompt again.

When something goes wrong it prints one line on standard output:

```
minishell: <name>: No such file or directory
minishell: <name>: Command not found
minishell: <name>: Execution failed
minishell: <name>: Fork failed
```

End of input (Ctrl-D) leaves the shell with status 0. If Python's `readline`
module is available, it is loaded, so the prompt has line editing and history.

## Install and run

```
pip install .
minishell
```

`minishell` accepts no arguments. If you give it any, it prints
`minishell: No arguments are allowed` to standard error and exits with status 1.

## What it does not do

The shell only starts programs. It has no built-in commands (no `cd`, `exit`,
`echo` or `export`), no quoting, no variable expansion, no pipes, no
redirections and no job control. It does not show the exit status of a program.
At start-up it records the current directory and `OLDPWD` in a `ShellState`,
but nothing uses that state while the shell runs.

## Using it as a library

The modules that make up the shell can also be imported on their own.

- `minishell.launcher`
  - `is_path_command(command)`: true if `command` starts with `/` or `./`.
  - `find_in_path(name, directories)`: the first executable
    `directory/name`, or `None`.
  - `launch_executable(full_cmds)`: runs a command line and waits. Returns
    the exit status, or `None` when no program was started.
- `minishell.environment`: look up entries in a list of `NAME=value` strings.
  An entry matches when it starts with the given name.
  - `get_var_index(var, envp)`: index of the first match, or `None`.
  - `get_var_value(var, envp)`: the text after the first `=`, or `None`.
    Raises `ValueError` if the matching entry has no `=`.
  - `is_existing_var(var, envp)`
- `minishell.shell`
  - `ShellState`: a dataclass with `envp`, `current_workdir` and `old_workdir`.
  - `init_setup(envp)`: builds a `ShellState`. `old_workdir` is taken from
    `OLDPWD` if that is set, and is the current directory if not.
  - `read_lines(prompt)`: yields the lines typed at `prompt` until end of input.
  - `main(argv=None)`: the prompt loop that the `minishell` command runs.
- `minishell.strtools`: C-style string helpers that work on Python strings and
  return indexes where C would return pointers: `strlen`, `strchr`, `strrchr`,
  `strdup`, `strncmp`, `strnstr`, `strlcpy`, `strlcat`, `substr`, `strjoin`,
  `strtrim`, `split`, `strmapi`, `striteri`.
- `minishell.convert`: `atoi(s)` parses a leading decimal integer and wraps it
  to 32 bits, the way a C `int` does. `itoa(n)` gives the decimal text of `n`.
- `minishell.chars`: `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`,
  `tolower`, `toupper`. Each takes an `int` code or a one-character `str`.
- `minishell.memory`: `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`,
  `memmove`, `memset`. These work on `bytes` and `bytearray` objects.
  `memmove` moves bytes within one buffer by offset.
- `minishell.output`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`
  write to a file descriptor.
- `minishell.linkedlist`: `Node` and `LinkedList`. A `LinkedList` has
  `push_front`, `push_back`, `last`, `len()`, iteration, `clear`, `iterate`
  and `map`.

```python
from minishell.environment import get_var_value
from minishell.strtools import split

env = ["HOME=/home/demo", "PATH=/usr/bin:/bin"]
get_var_value("PATH", env)          # "/usr/bin:/bin"
split("ls  -l   /tmp", " ")         # ["ls", "-l", "/tmp"]
```

## Tests

```
pip install .[test]
pytest
```