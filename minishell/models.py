"""Core data types shared by the lexer and parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable


class TokenType(Enum):
    """Kind of a lexical token."""

    STR = "str"
    LESS = "<"
    GREAT = ">"
    LESSLESS = "<<"
    GREATGREAT = ">>"
    PIPE = "|"

    @property
    def is_redirection(self) -> bool:
        return self in (
            TokenType.LESS,
            TokenType.GREAT,
            TokenType.LESSLESS,
            TokenType.GREATGREAT,
        )


class ErrorKind(Enum):
    """Kinds of syntax error found while parsing a line."""

    LESS = "less"
    LESSLESS = "lessless"
    GREAT = "great"
    GREATGREAT = "greatgreat"
    PIPE = "pipe"
    COMMAND = "command"
    QUOTE = "quote"


@dataclass(frozen=True)
class Token:
    """A word of input together with its classified type."""

    text: str
    type: TokenType = TokenType.STR


@dataclass
class Redirection:
    """A redirection operator applied to a file (or here-doc delimiter)."""

    kind: TokenType
    file: str


@dataclass
class Command:
    """One simple command of a pipeline."""

    name: str | None = None
    args: list[str] = field(default_factory=list)
    redirections: list[Redirection] = field(default_factory=list)

    def add_arg(self, arg: str) -> None:
        """Append an argument word to the command."""
        self.args.append(arg)


class ParseError(Exception):
    """Raised when a line cannot be parsed; carries every error found."""

    def __init__(self, errors: Iterable[ErrorKind]) -> None:
        self.errors: tuple[ErrorKind, ...] = tuple(errors)
        super().__init__(", ".join(kind.value for kind in self.errors) or "parse error")