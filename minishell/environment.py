"""The shell's environment: an ordered store of ``KEY=VALUE`` variables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass
class EnvVar:
    """One environment variable; ``value`` is None when no ``=`` was given."""

    key: str
    value: str | None = None

    def __str__(self) -> str:
        if self.value is None:
            return self.key
        return f"{self.key}={self.value}"


def parse_entry(entry: str) -> EnvVar:
    """Split an entry of the form ``KEY=VALUE`` at its first ``=``.

    An entry without ``=`` gives a variable with no value.
    """
    key, sep, value = entry.partition("=")
    return EnvVar(key, value if sep else None)


class EnvStore:
    """Environment variables kept in insertion order."""

    def __init__(self, entries: Iterable[str] | None = None) -> None:
        self._vars: list[EnvVar] = []
        for entry in entries or ():
            self.add(entry)

    def _find(self, key: str) -> EnvVar | None:
        return next((var for var in self._vars if var.key == key), None)

    def add(self, entry: str) -> EnvVar:
        """Add a ``KEY=VALUE`` or ``KEY`` entry and return the stored variable.

        An existing variable of the same name takes the new value; an entry
        without a value leaves an existing variable as it is.
        """
        var = parse_entry(entry)
        existing = self._find(var.key)
        if existing is None:
            self._vars.append(var)
            return var
        if var.value is not None:
            existing.value = var.value
        return existing

    def get(self, key: str) -> str | None:
        """Return the value of the first variable whose name starts with ``key``."""
        for var in self._vars:
            if var.key.startswith(key):
                return var.value
        return None

    def remove(self, key: str) -> bool:
        """Remove the variable named ``key``; return whether one was removed."""
        var = self._find(key)
        if var is None:
            return False
        self._vars.remove(var)
        return True

    def __iter__(self) -> Iterator[EnvVar]:
        return iter(list(self._vars))

    def __len__(self) -> int:
        return len(self._vars)