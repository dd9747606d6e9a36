"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from barelang.lexer import tokenize
from barelang.tokens import Token, TokenKind


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns the token list."""

    def _lex(source: str) -> list[Token]:
        return tokenize(source)

    return _lex


def assert_kinds(tokens: list[Token], expected: list[TokenKind]) -> None:
    """Assert that the token kinds match the expected list."""
    actual = [t.kind for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_texts(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token texts match the expected list."""
    actual = [t.text for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_offsets(tokens: list[Token], expected: list[int]) -> None:
    """Assert that the token byte offsets match the expected list."""
    actual = [t.offset for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


TASK_BLOCK = [TokenKind.TASK, TokenKind.IDENT, TokenKind.LEFT_BRACE, TokenKind.RIGHT_BRACE]
