"""Lexical diagnostics with formatted source context."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from coollex.tokens import Position


class ErrorKind(Enum):
    ILLEGAL_CHARACTER = auto()
    UNTERMINATED_STRING = auto()  # raw newline inside a string
    EOF_IN_STRING = auto()
    STRING_TOO_LONG = auto()
    NON_PRINTABLE_IN_STRING = auto()
    EOF_IN_COMMENT = auto()
    UNMATCHED_COMMENT_CLOSE = auto()


@dataclass(frozen=True, slots=True)
class LexDiagnostic:
    """A non-fatal lexical error reported alongside the token stream."""

    kind: ErrorKind
    message: str
    position: Position
    length: int = 1

    @property
    def line(self) -> int:
        return self.position.line

    def format(self, source: str, filename: str = "<stdin>") -> str:
        # Only "\n" advances the lexer's line counter
        lines = source.split("\n")
        line_idx = self.position.line - 1
        col = self.position.column

        # Build the source line (drop the CR of a CRLF ending)
        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\r")
        else:
            source_line = ""

        # At least one caret, but stay within the line when it has room
        underline_len = max(1, min(self.length, len(source_line) - col + 1))

        pad = " " * (col - 1)
        carets = "^" * underline_len

        line_num = str(self.position.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.position.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )
