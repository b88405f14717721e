"""Commands that the shell runs itself."""

from __future__ import annotations

import os
from typing import Sequence, TextIO

from .environment import EnvStore

BUILTINS = frozenset({"echo", "cd", "pwd", "exit", "unset", "env"})


def is_builtin(args: Sequence[str]) -> bool:
    """Return whether the command named by ``args[0]`` is a builtin."""
    return bool(args) and args[0] in BUILTINS


def echo(args: Sequence[str], out: TextIO) -> None:
    """Print the arguments; any ``-n`` among them suppresses the newline."""
    operands = list(args[1:])
    newline = "-n" not in operands
    parts: list[str] = []
    for position, word in enumerate(operands):
        if word == "-n":
            continue
        parts.append(word)
        if position + 1 < len(operands):
            parts.append(" ")
    out.write("".join(parts))
    if newline:
        out.write("\n")


def env(args: Sequence[str], store: EnvStore, out: TextIO, err: TextIO) -> None:
    """Print every variable that has a value as ``KEY=VALUE``."""
    if len(args) > 1:
        err.write("No such file or directory\n")
    for var in store:
        if var.value is not None:
            out.write(f"{var.key}={var.value}\n")


def pwd(out: TextIO, err: TextIO) -> None:
    """Print the current working directory."""
    try:
        cwd = os.getcwd()
    except OSError as exc:
        err.write(f"Path not found: {exc.strerror}\n")
        return
    out.write(f"{cwd}\n")


def unset(args: Sequence[str], store: EnvStore) -> None:
    """Remove each named variable from the environment."""
    for name in args[1:]:
        store.remove(name)