"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    # Keywords
    TASK = auto()  # task

    # Content
    IDENT = auto()  # [a-zA-Z_][a-zA-Z_0-9]*

    # Structural (single-character)
    LEFT_BRACE = auto()  # {
    RIGHT_BRACE = auto()  # }


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Half-open byte range into the source, as offset and length."""

    offset: int
    length: int

    @property
    def end(self) -> int:
        return self.offset + self.length


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token: its kind, exact source text, and byte offset."""

    kind: TokenKind
    text: str
    offset: int

    @property
    def length(self) -> int:
        """Length of the token text in UTF-8 bytes."""
        return len(self.text.encode("utf-8", "surrogatepass"))

    @property
    def span(self) -> SourceSpan:
        return SourceSpan(self.offset, self.length)


KEYWORDS: dict[str, TokenKind] = {
    "task": TokenKind.TASK,
}

_ASCII_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_ASCII_DIGITS = frozenset("0123456789")

# Information separators pass str.isspace() but are not Unicode White_Space.
_NOT_WHITE_SPACE = frozenset("\x1c\x1d\x1e\x1f")


def is_ident_start(ch: str) -> bool:
    """Return True if ch can begin an identifier (ASCII letter or underscore)."""
    return ch in _ASCII_LETTERS or ch == "_"


def is_ident_char(ch: str) -> bool:
    """Return True if ch can continue an identifier."""
    return ch in _ASCII_LETTERS or ch in _ASCII_DIGITS or ch == "_"


def is_whitespace(ch: str) -> bool:
    """Return True if ch has the Unicode White_Space property."""
    return ch.isspace() and ch not in _NOT_WHITE_SPACE


def keyword_kind(text: str) -> TokenKind:
    """Classify an identifier-shaped run as a reserved word or a plain identifier."""
    return KEYWORDS.get(text, TokenKind.IDENT)
