"""COOL lexer: a four-mode scanner that pulls tokens from source text."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from enum import Enum, auto

from coollex.errors import ErrorKind, LexDiagnostic
from coollex.strings import MAX_STRING_LENGTH, StringAccumulator
from coollex.tokens import (
    SINGLE_CHAR_TOKENS,
    STRING_ESCAPES,
    TWO_CHAR_TOKENS,
    WHITESPACE,
    Position,
    Token,
    TokenKind,
    classify_word,
    is_digit,
    is_ident_char,
    is_ident_start,
)


class ScanMode(Enum):
    DEFAULT = auto()
    STRING = auto()
    LINE_COMMENT = auto()
    BLOCK_COMMENT = auto()


class Lexer:
    """Tokenize COOL source text one match at a time.

    Lexical errors never stop the scan. They are appended to
    ``diagnostics`` and the scanner recovers in DEFAULT mode.
    """

    def __init__(
        self,
        source: str,
        max_string_length: int = MAX_STRING_LENGTH,
    ) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._col = 1
        self._mode = ScanMode.DEFAULT
        self._comment_depth = 0
        self._string = StringAccumulator(max_string_length)
        self._string_line = 0
        self.diagnostics: list[LexDiagnostic] = []

    # ------------------------------------------------------------------
    # Public state
    # ------------------------------------------------------------------

    @property
    def mode(self) -> ScanMode:
        return self._mode

    @property
    def line(self) -> int:
        return self._line

    @property
    def comment_depth(self) -> int:
        return self._comment_depth

    @property
    def done(self) -> bool:
        """True once the input is exhausted and the scanner is back in DEFAULT mode."""
        return self._pos >= len(self._source) and self._mode is ScanMode.DEFAULT

    # ------------------------------------------------------------------
    # Pull interface
    # ------------------------------------------------------------------

    def step(self) -> Token | None:
        """Perform one match in the current mode and return the token it produced, if any."""
        if self._mode is ScanMode.DEFAULT:
            return self._scan_default()
        if self._mode is ScanMode.STRING:
            return self._scan_string()
        if self._mode is ScanMode.LINE_COMMENT:
            self._skip_line_comment()
        else:
            self._skip_block_comment()
        return None

    def next_token(self) -> Token | None:
        """Return the next token, or None at end of stream."""
        while not self.done:
            tok = self.step()
            if tok is not None:
                return tok
        return None

    def __iter__(self) -> Iterator[Token]:
        while True:
            tok = self.next_token()
            if tok is None:
                return
            yield tok

    def tokenize(self) -> list[Token]:
        """Scan the remaining input and return all tokens."""
        return list(self)

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _current_pos(self) -> Position:
        return Position(self._line, self._col, self._pos)

    def _peek(self, offset: int = 0) -> str:
        idx = self._pos + offset
        if idx < len(self._source):
            return self._source[idx]
        return ""

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch

    def _report(
        self, kind: ErrorKind, message: str, pos: Position | None = None, length: int = 1
    ) -> None:
        if pos is None:
            pos = self._current_pos()
        self.diagnostics.append(LexDiagnostic(kind, message, pos, length))

    # ------------------------------------------------------------------
    # Default mode
    # ------------------------------------------------------------------

    def _scan_default(self) -> Token | None:
        ch = self._peek()
        if ch == "":
            return None

        if ch == "\n" or ch in WHITESPACE:
            self._advance()
            return None

        pair = self._source[self._pos : self._pos + 2]

        if pair == "--":
            self._advance()
            self._advance()
            self._mode = ScanMode.LINE_COMMENT
            return None

        if pair == "(*":
            self._advance()
            self._advance()
            self._mode = ScanMode.BLOCK_COMMENT
            self._comment_depth = 1
            return None

        if pair == "*)":
            start = self._current_pos()
            self._advance()
            self._advance()
            self._report(ErrorKind.UNMATCHED_COMMENT_CLOSE, "unexpected comment close", start, 2)
            return Token(TokenKind.ERROR, pair, start.line)

        if ch == '"':
            self._string_line = self._line
            self._advance()
            self._string.reset()
            self._mode = ScanMode.STRING
            return None

        if is_digit(ch):
            line = self._line
            return Token(TokenKind.INT_CONST, self._take_while(is_digit), line)

        if is_ident_start(ch):
            line = self._line
            word = self._take_while(is_ident_char)
            return Token(classify_word(word), word, line)

        if pair in TWO_CHAR_TOKENS:
            line = self._line
            self._advance()
            self._advance()
            return Token(TWO_CHAR_TOKENS[pair], pair, line)

        if ch in SINGLE_CHAR_TOKENS:
            line = self._line
            self._advance()
            return Token(SINGLE_CHAR_TOKENS[ch], ch, line)

        # Anything else is an illegal character
        start = self._current_pos()
        self._advance()
        self._report(ErrorKind.ILLEGAL_CHARACTER, f"illegal character {ch!r}", start)
        return Token(TokenKind.ERROR, ch, start.line)

    def _take_while(self, pred: Callable[[str], bool]) -> str:
        start = self._pos
        while self._pos < len(self._source) and pred(self._peek()):
            self._advance()
        return self._source[start : self._pos]

    # ------------------------------------------------------------------
    # String mode
    # ------------------------------------------------------------------

    def _scan_string(self) -> Token | None:
        while True:
            ch = self._peek()

            if ch == "":
                self._report(ErrorKind.EOF_IN_STRING, "EOF inside string")
                self._leave_string()
                return None

            if ch == '"':
                self._advance()
                if self._string.overflowed:
                    self._report(
                        ErrorKind.STRING_TOO_LONG,
                        "string constant too long",
                        Position(self._string_line, self._col - 1, self._pos - 1),
                    )
                    self._leave_string()
                    return None
                tok = Token(TokenKind.STR_CONST, self._string.text(), self._string_line)
                self._leave_string()
                return tok

            if ch == "\n" or (ch == "\r" and self._peek(1) == "\n"):
                self._report(ErrorKind.UNTERMINATED_STRING, "unclosed string")
                if ch == "\r":
                    self._advance()
                self._advance()
                self._leave_string()
                return None

            if ch == "\\" and self._peek(1) in STRING_ESCAPES:
                self._string.append(self._advance() + self._advance())
                continue

            if not ch.isprintable():
                self._report(ErrorKind.NON_PRINTABLE_IN_STRING, "non-printable character in string")
                self._advance()
                self._leave_string()
                return None

            self._string.append(self._advance())

    def _leave_string(self) -> None:
        self._string.reset()
        self._mode = ScanMode.DEFAULT

    # ------------------------------------------------------------------
    # Comment modes
    # ------------------------------------------------------------------

    def _skip_line_comment(self) -> None:
        while self._pos < len(self._source):
            if self._advance() == "\n":
                break
        self._mode = ScanMode.DEFAULT

    def _skip_block_comment(self) -> None:
        while self._pos < len(self._source):
            pair = self._source[self._pos : self._pos + 2]
            if pair == "(*":
                self._advance()
                self._advance()
                self._comment_depth += 1
            elif pair == "*)":
                self._advance()
                self._advance()
                self._comment_depth -= 1
                if self._comment_depth == 0:
                    self._mode = ScanMode.DEFAULT
                    return
            else:
                self._advance()

        self._report(ErrorKind.EOF_IN_COMMENT, "EOF inside comment")
        self._comment_depth = 0
        self._mode = ScanMode.DEFAULT


def tokenize(
    source: str,
    max_string_length: int = MAX_STRING_LENGTH,
) -> tuple[list[Token], list[LexDiagnostic]]:
    """Convenience function: scan source text and return (tokens, diagnostics)."""
    lexer = Lexer(source, max_string_length)
    tokens = lexer.tokenize()
    return tokens, lexer.diagnostics
