"""A minimal interactive shell that runs programs, with string, memory and list helpers."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "convert",
    "environment",
    "launcher",
    "linkedlist",
    "memory",
    "output",
    "shell",
    "strtools",
]