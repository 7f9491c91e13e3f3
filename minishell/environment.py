"""Lookup of variables in a list of ``NAME=value`` environment entries."""

from __future__ import annotations

from typing import Optional, Sequence


def get_var_index(var: str, envp: Sequence[str]) -> Optional[int]:
    """Index of the first entry that starts with ``var``, or None."""
    return next(
        (index for index, entry in enumerate(envp) if entry.startswith(var)),
        None,
    )


def get_var_value(var: str, envp: Sequence[str]) -> Optional[str]:
    """Text after the first ``=`` of the entry matching ``var``, or None.

    Raises ValueError when the matching entry holds no ``=``.
    """
    index = get_var_index(var, envp)
    if index is None:
        return None
    entry = envp[index]
    _, sep, value = entry.partition("=")
    if not sep:
        raise ValueError(f"environment entry has no '=': {entry!r}")
    return value


def is_existing_var(var: str, envp: Sequence[str]) -> bool:
    """True when some entry starts with ``var``."""
    return get_var_index(var, envp) is not None