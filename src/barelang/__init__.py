"""barelang lexer: tokens for task blocks, identifiers, and braces."""

from __future__ import annotations

from barelang.errors import LexError
from barelang.lexer import Lexer, scan, tokenize
from barelang.tokens import SourceSpan, Token, TokenKind

__version__ = "0.1.0"

__all__ = [
    "LexError",
    "Lexer",
    "SourceSpan",
    "Token",
    "TokenKind",
    "scan",
    "tokenize",
]
