"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from coollex.errors import ErrorKind, LexDiagnostic
from coollex.lexer import Lexer
from coollex.tokens import Token, TokenKind


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns the token list."""

    def _lex(source: str) -> list[Token]:
        return Lexer(source).tokenize()

    return _lex


@pytest.fixture
def scan():
    """Return a helper that runs a full scan and returns the exhausted Lexer."""

    def _scan(source: str, **kwargs) -> Lexer:
        lexer = Lexer(source, **kwargs)
        lexer.tokenize()
        return lexer

    return _scan


def assert_kinds(tokens: list[Token], expected: list[TokenKind]) -> None:
    """Assert that the token kinds match the expected list."""
    actual = [t.kind for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_lexemes(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token lexemes match the expected list."""
    actual = [t.lexeme for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def error_kinds(diagnostics: list[LexDiagnostic]) -> list[ErrorKind]:
    return [d.kind for d in diagnostics]
