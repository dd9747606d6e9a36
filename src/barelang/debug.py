"""--debug token dump to stderr."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from barelang.tokens import Token


def _line_col(source: bytes, offset: int) -> tuple[int, int]:
    prefix = source[:offset]
    line = prefix.count(b"\n") + 1
    last_line = prefix[prefix.rfind(b"\n") + 1 :].decode("utf-8", "surrogatepass")
    return line, len(last_line) + 1


def dump_tokens(tokens: Iterable[Token], source: str, *, file: TextIO = sys.stderr) -> None:
    """Print one human-readable line per token to *file*."""
    encoded = source.encode("utf-8", "surrogatepass")
    for tok in tokens:
        line, col = _line_col(encoded, tok.offset)
        file.write(f"{line}:{col}\t@{tok.offset}\t{tok.kind.name}\t{tok.text!r}\n")
