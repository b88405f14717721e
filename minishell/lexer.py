"""Splitting an input line into classified tokens."""

from __future__ import annotations

from typing import Iterable

from .models import ErrorKind, ParseError, Token, TokenType

_QUOTES = "'\""
_OPERATOR_CHARS = "<>|"
WHITESPACE = " \n\t\v\f\r"

# Order matters: a word is matched against each literal in turn.
_OPERATORS = (
    ("<", TokenType.LESS),
    (">", TokenType.GREAT),
    ("<<", TokenType.LESSLESS),
    (">>", TokenType.GREATGREAT),
    ("|", TokenType.PIPE),
)


def _quoted_mask(text: str) -> list[bool]:
    """Mark the characters lying strictly inside a closed pair of quotes.

    Scanning stops at the first quote that is never closed.
    """
    mask = [False] * len(text)
    i = 0
    while i < len(text):
        quote = text[i]
        if quote not in _QUOTES:
            i += 1
            continue
        end = text.find(quote, i + 1)
        if end == -1:
            break
        mask[i + 1 : end] = [True] * (end - i - 1)
        i = end + 1
    return mask


def is_quoted(text: str, index: int) -> bool:
    """Return whether the character at ``index`` is inside a closed quote pair."""
    if not 0 <= index < len(text):
        return False
    return _quoted_mask(text)[index]


def split_unquoted(text: str, separators: str) -> list[str]:
    """Split ``text`` on separator characters that are not inside quotes."""
    words: list[str] = []
    current: list[str] = []
    for char, quoted in zip(text, _quoted_mask(text)):
        if char in separators and not quoted:
            if current:
                words.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        words.append("".join(current))
    return words


def pad_operators(text: str) -> str:
    """Surround every unquoted operator with spaces.

    A ``<`` or ``>`` followed by another ``<`` or ``>`` is kept together as
    one two-character operator.
    """
    mask = _quoted_mask(text)
    pieces: list[str] = []
    skip = False
    for index, char in enumerate(text):
        if skip:
            skip = False
            continue
        if char in _OPERATOR_CHARS and not mask[index]:
            operator = char
            following = text[index + 1 : index + 2]
            if char != "|" and following and following in "<>":
                operator += following
                skip = True
            pieces.append(f" {operator} ")
        else:
            pieces.append(char)
    return "".join(pieces)


def lex(text: str) -> list[str]:
    """Break an input line into words, separating operators from the rest."""
    return split_unquoted(pad_operators(text), WHITESPACE)


def _token_type(word: str) -> TokenType:
    for literal, kind in _OPERATORS:
        if literal.startswith(word):
            return kind
    return TokenType.STR


def classify(words: Iterable[str]) -> list[Token]:
    """Attach a token type to each word."""
    return [Token(word, _token_type(word)) for word in words]


def remove_quotes(word: str) -> str:
    """Remove the first pair of matching quotes from ``word``.

    Raises ParseError when the first quote is never closed.
    """
    positions = [(word.find(q), q) for q in _QUOTES if q in word]
    if not positions:
        return word
    start, quote = min(positions)
    end = word.find(quote, start + 1)
    if end == -1:
        raise ParseError([ErrorKind.QUOTE])
    return word[:start] + word[start + 1 : end] + word[end + 1 :]


def strip_quotes(tokens: Iterable[Token]) -> list[Token]:
    """Return the tokens with the first quote pair of each removed."""
    return [Token(remove_quotes(token.text), token.type) for token in tokens]