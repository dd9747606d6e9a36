"""barelang lexer: converts source text into a lazy stream of tokens."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from barelang.errors import LexError
from barelang.tokens import (
    SourceSpan,
    Token,
    TokenKind,
    is_ident_char,
    is_ident_start,
    is_whitespace,
    keyword_kind,
)

logger = logging.getLogger(__name__)


def _utf8_len(ch: str) -> int:
    """Number of bytes ch occupies when encoded as UTF-8."""
    cp = ord(ch)
    if cp < 0x80:
        return 1
    if cp < 0x800:
        return 2
    if cp < 0x10000:
        return 3
    return 4


class Lexer:
    """Pull-based scanner over a source string.

    Each call to :meth:`next_item` yields a :class:`Token`, a :class:`LexError`
    for a single unrecognized character, or ``None`` once the input is
    exhausted. Scanning never backtracks; after an error the scanner has
    already moved past the offending character and resumes from there.

    Iterating the lexer directly raises the ``LexError`` instead of returning
    it, so ``list(Lexer(src))`` stops at the first bad character while a
    caller that catches the error may keep calling ``next()``.
    """

    def __init__(self, source: str) -> None:
        self._whole = source
        self._pos = 0  # index into _whole, in characters
        self._cursor = 0  # offset into _whole, in UTF-8 bytes

    @property
    def whole(self) -> str:
        return self._whole

    @property
    def remaining(self) -> str:
        """The unconsumed suffix of the input."""
        return self._whole[self._pos :]

    @property
    def cursor(self) -> int:
        """Byte offset of the start of :attr:`remaining` within :attr:`whole`."""
        return self._cursor

    def __iter__(self) -> Lexer:
        return self

    def __next__(self) -> Token:
        item = self.next_item()
        if item is None:
            raise StopIteration
        if isinstance(item, LexError):
            raise item
        return item

    def items(self) -> Iterator[Token | LexError]:
        """Yield every remaining token and error, in source order."""
        while True:
            item = self.next_item()
            if item is None:
                return
            yield item

    def next_item(self) -> Token | LexError | None:
        """Scan and return the next token or error, or None at end of input."""
        source = self._whole
        while self._pos < len(source):
            ch = source[self._pos]
            ch_at = self._cursor
            width = _utf8_len(ch)
            self._pos += 1
            self._cursor += width

            if ch == "{":
                return Token(TokenKind.LEFT_BRACE, ch, ch_at)

            if ch == "}":
                return Token(TokenKind.RIGHT_BRACE, ch, ch_at)

            if is_ident_start(ch):
                return self._lex_identifier(self._pos - 1, ch_at)

            if is_whitespace(ch):
                continue

            logger.debug("unrecognized character %r at byte %d", ch, ch_at)
            return LexError(source, ch, SourceSpan(ch_at, width))

        return None

    def _lex_identifier(self, start: int, offset: int) -> Token:
        """Take the longest identifier run beginning at the already-consumed start char."""
        source = self._whole
        end = start + 1
        while end < len(source) and is_ident_char(source[end]):
            end += 1

        literal = source[start:end]
        # Identifier characters are ASCII, so characters and bytes coincide.
        self._cursor += end - self._pos
        self._pos = end
        return Token(keyword_kind(literal), literal, offset)


def tokenize(source: str) -> list[Token]:
    """Tokenize source text, raising the first LexError encountered."""
    return list(Lexer(source))


def scan(source: str) -> tuple[list[Token], list[LexError]]:
    """Tokenize source text, collecting every error instead of stopping."""
    tokens: list[Token] = []
    errors: list[LexError] = []
    for item in Lexer(source).items():
        if isinstance(item, LexError):
            errors.append(item)
        else:
            tokens.append(item)
    return tokens, errors
