"""Split a captured ``:highlight`` dump into lines and tokens."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Token:
    """One whitespace separated field of a highlight declaration."""

    key: str
    value: Optional[str] = None


def split_lines(raw: str) -> list[str]:
    """Return the newline terminated lines of ``raw``.

    Whatever follows the last newline is dropped, even when it is not empty.
    Vim always terminates redirected lines, so an unterminated tail is never
    a complete declaration.
    """

    if not raw:
        return []
    return raw.split("\n")[:-1]


def parse_token(field: str) -> Token:
    """Split ``field`` on its first ``=`` into a key/value token."""

    if "=" not in field:
        return Token(field)
    key, value = field.split("=", 1)
    return Token(key, value)


def tokenize_line(line: str) -> list[Token]:
    """Return the tokens of one declaration line, in order."""

    return [parse_token(field) for field in line.split()]


def tokenize_dump(raw: str) -> list[list[Token]]:
    """Tokenize every line of ``raw``."""

    return [tokenize_line(line) for line in split_lines(raw)]
