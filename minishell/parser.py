"""Turning a line of input into a pipeline of commands."""

from __future__ import annotations

from typing import Iterable, Sequence, TextIO

from .lexer import classify, lex
from .models import Command, ErrorKind, ParseError, Redirection, Token, TokenType

_REDIRECTION_ERRORS = {
    TokenType.LESS: ErrorKind.LESS,
    TokenType.GREAT: ErrorKind.GREAT,
    TokenType.LESSLESS: ErrorKind.LESSLESS,
    TokenType.GREATGREAT: ErrorKind.GREATGREAT,
}

_MESSAGES = {
    ErrorKind.QUOTE: "quote error",
    ErrorKind.COMMAND: "command error",
    ErrorKind.PIPE: "pipe error",
    ErrorKind.LESS: "in redirection error",
    ErrorKind.GREAT: "out redirection error",
    ErrorKind.LESSLESS: "here-document redirection error",
    ErrorKind.GREATGREAT: "append redirection error",
}


def _word_flags(tokens: Sequence[Token]) -> list[bool]:
    """Mark the tokens that are command words rather than redirection targets.

    A word counts when it is first on the line or follows another word or a pipe.
    """
    previous: list[Token | None] = [None, *tokens[:-1]]
    return [
        token.type is TokenType.STR
        and (prev is None or prev.type in (TokenType.STR, TokenType.PIPE))
        for token, prev in zip(tokens, previous)
    ]


def _segment_end(tokens: Sequence[Token], start: int) -> int:
    """Return the index of the pipe closing the segment at ``start``, or the end."""
    return next(
        (
            index
            for index, token in enumerate(tokens[start:], start)
            if token.type is TokenType.PIPE
        ),
        len(tokens),
    )


def _parse_segment(
    tokens: Sequence[Token], words: Sequence[bool], start: int, end: int
) -> Command:
    # The name is looked for past the segment's own pipe as well.
    name = next(
        (token.text for token, word in zip(tokens[start:], words[start:]) if word),
        None,
    )
    command = Command(name=name)
    for index, token in enumerate(tokens[start:end], start):
        if not token.type.is_redirection:
            continue
        target = tokens[index + 1] if index + 1 < len(tokens) else None
        if target is None or target.type is not TokenType.STR:
            raise ParseError([_REDIRECTION_ERRORS[token.type]])
        command.redirections.append(Redirection(token.type, target.text))
    for token, word in zip(tokens[start:end], words[start:end]):
        if word:
            command.add_arg(token.text)
    return command


def parse_tokens(tokens: Iterable[Token]) -> list[Command]:
    """Build the commands of a pipeline from classified tokens.

    Raises ParseError on a redirection without a target or a pipe at
    either end of the line.
    """
    tokens = list(tokens)
    words = _word_flags(tokens)
    commands: list[Command] = []
    start = 0
    while True:
        end = _segment_end(tokens, start)
        commands.append(_parse_segment(tokens, words, start, end))
        if end == len(tokens):
            return commands
        if end == 0 or end + 1 == len(tokens):
            raise ParseError([ErrorKind.PIPE])
        start = end + 1


def parse(line: str) -> list[Command]:
    """Parse one line of input into a pipeline of commands."""
    return parse_tokens(classify(lex(line)))


def error_message(kind: ErrorKind) -> str:
    """Return the text reported for an error kind."""
    return _MESSAGES[kind]


def report_errors(errors: Iterable[ErrorKind], stream: TextIO) -> None:
    """Write one ``minishell: <message>`` line per error to ``stream``."""
    for kind in errors:
        stream.write(f"minishell: {error_message(kind)}\n")