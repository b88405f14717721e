"""Interactive prompt that parses each line and shows the result."""

from __future__ import annotations

import sys
from typing import Sequence

from .models import Command, ParseError, TokenType
from .parser import parse, report_errors

PROMPT = "minishell>"
_KIND_IDS = {kind: number for number, kind in enumerate(TokenType)}


def render(commands: Sequence[Command]) -> str:
    """Describe a parsed pipeline: names, arguments and redirections."""
    if not commands:
        return ""

    def name(command: Command) -> str:
        return command.name if command.name is not None else "(null)"

    lines = [f"command={name(commands[0])}"]
    for command in commands:
        lines.append(f"command={name(command)}")
        lines.extend(f"args={arg}" for arg in command.args)
        lines.extend(
            f"file={redirection.file} id={_KIND_IDS[redirection.kind]}"
            for redirection in command.redirections
        )
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Read lines until ``exit`` or end of input, printing each parse."""
    if sys.stdin.isatty():
        try:
            import readline  # noqa: F401  (enables line editing and history)
        except ImportError:
            pass
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            break
        if line.startswith("exit"):
            break
        try:
            commands = parse(line)
        except ParseError as exc:
            report_errors(exc.errors, sys.stderr)
            continue
        sys.stdout.write(render(commands))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())