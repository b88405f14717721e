"""Replacing ``$NAME`` references with environment values."""

from __future__ import annotations

import re
from typing import Iterable

from .environment import EnvStore
from .models import Token, TokenType

_REFERENCE = re.compile(r"\$([A-Za-z_][A-Za-z0-9_]*)")


def expand_word(word: str, store: EnvStore) -> str:
    """Replace each ``$NAME`` in ``word`` with its value, or nothing if unset."""
    return _REFERENCE.sub(lambda match: store.get(match.group(1)) or "", word)


def expand_tokens(tokens: Iterable[Token], store: EnvStore) -> list[Token]:
    """Expand variable references in the word tokens; operators stay as they are."""
    return [
        Token(expand_word(token.text, store), token.type)
        if token.type is TokenType.STR
        else token
        for token in tokens
    ]