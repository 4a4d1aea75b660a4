"""Token kinds, data structures, keyword table and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    # Keywords
    CLASS = auto()
    ELSE = auto()
    IF = auto()
    FI = auto()
    IN = auto()
    INHERITS = auto()
    LET = auto()
    LOOP = auto()
    POOL = auto()
    THEN = auto()
    WHILE = auto()
    CASE = auto()
    ESAC = auto()
    NEW = auto()
    ISVOID = auto()
    NOT = auto()
    OF = auto()

    # Names and literals
    OBJECTID = auto()  # [a-z_][A-Za-z0-9_]*
    TYPEID = auto()  # [A-Z][A-Za-z0-9_]*
    INT_CONST = auto()  # [0-9]+
    STR_CONST = auto()  # contents between quotes, escapes kept encoded

    # Operators
    PLUS = auto()  # +
    MINUS = auto()  # -
    STAR = auto()  # *
    SLASH = auto()  # /
    EQ = auto()  # =
    LT = auto()  # <
    LE = auto()  # <=
    TILDE = auto()  # ~
    ASSIGN = auto()  # <-

    # Delimiters
    LBRACE = auto()  # {
    RBRACE = auto()  # }
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    SEMI = auto()  # ;
    COLON = auto()  # :
    COMMA = auto()  # ,
    DOT = auto()  # .
    DARROW = auto()  # =>

    ERROR = auto()


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based character offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Token:
    """A classified lexeme and the line it started on."""

    kind: TokenKind
    lexeme: str
    line: int


KEYWORDS: dict[str, TokenKind] = {
    "class": TokenKind.CLASS,
    "else": TokenKind.ELSE,
    "if": TokenKind.IF,
    "fi": TokenKind.FI,
    "in": TokenKind.IN,
    "inherits": TokenKind.INHERITS,
    "let": TokenKind.LET,
    "loop": TokenKind.LOOP,
    "pool": TokenKind.POOL,
    "then": TokenKind.THEN,
    "while": TokenKind.WHILE,
    "case": TokenKind.CASE,
    "esac": TokenKind.ESAC,
    "new": TokenKind.NEW,
    "isvoid": TokenKind.ISVOID,
    "not": TokenKind.NOT,
    "of": TokenKind.OF,
}

# Consulted before SINGLE_CHAR_TOKENS so that "<=" is never split.
TWO_CHAR_TOKENS: dict[str, TokenKind] = {
    "<=": TokenKind.LE,
    "<-": TokenKind.ASSIGN,
    "=>": TokenKind.DARROW,
}

SINGLE_CHAR_TOKENS: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "=": TokenKind.EQ,
    "<": TokenKind.LT,
    "~": TokenKind.TILDE,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    ";": TokenKind.SEMI,
    ":": TokenKind.COLON,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
}

# Characters that may follow a backslash inside a string literal
STRING_ESCAPES = frozenset('btnfr"\\')

# Newline is handled separately so the line counter sees it
WHITESPACE = frozenset(" \t\r\f\v")


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return "0" <= ch <= "9"


def is_ident_start(ch: str) -> bool:
    """Return True if ch may begin an identifier."""
    return ch == "_" or ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def is_ident_char(ch: str) -> bool:
    """Return True if ch may continue an identifier."""
    return is_ident_start(ch) or is_digit(ch)


def classify_word(word: str) -> TokenKind:
    """Classify a matched word as a keyword, type identifier or object identifier.

    Keywords match case-insensitively. Anything else is a TYPEID when it
    starts with an uppercase letter and an OBJECTID otherwise.
    """
    kind = KEYWORDS.get(word.lower())
    if kind is not None:
        return kind
    if word[0].isupper():
        return TokenKind.TYPEID
    return TokenKind.OBJECTID
