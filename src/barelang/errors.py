"""Error types with formatted source context."""

from __future__ import annotations

from barelang.tokens import SourceSpan


class LexError(Exception):
    """An unrecognized character, located by its byte span in the source."""

    def __init__(self, source: str, token: str, span: SourceSpan) -> None:
        self.source = source
        self.token = token
        self.span = span
        self.message = f"unexpected character {token!r}"
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.format()

    def _prefix(self) -> str:
        raw = self.source.encode("utf-8", "surrogatepass")
        return raw[: self.span.offset].decode("utf-8", "surrogatepass")

    def line(self) -> int:
        """1-based line number: newlines before the error offset, plus one."""
        return self._prefix().count("\n") + 1

    def column(self) -> int:
        """1-based character column of the offending character on its line."""
        prefix = self._prefix()
        return len(prefix) - (prefix.rfind("\n") + 1) + 1

    def format(self, filename: str = "input.bare") -> str:
        line = self.line()
        col = self.column()

        lines = self.source.split("\n")
        if 0 <= line - 1 < len(lines):
            source_line = lines[line - 1].rstrip("\r")
        else:
            source_line = ""

        pad = " " * (col - 1)

        line_num = str(line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}^ this character"
        )
