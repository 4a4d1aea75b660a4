"""Human-readable token and diagnostic listings."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from coollex.errors import LexDiagnostic
from coollex.tokens import SINGLE_CHAR_TOKENS, Token, TokenKind

# Kinds whose lexeme is printed after the kind name
_VALUED = frozenset({TokenKind.OBJECTID, TokenKind.TYPEID, TokenKind.INT_CONST})


def format_token(token: Token) -> str:
    """Render one token as a ``#line KIND [value]`` listing line."""
    prefix = f"#{token.line}"
    if token.kind is TokenKind.STR_CONST:
        return f'{prefix} STR_CONST "{token.lexeme}"'
    if token.kind is TokenKind.ERROR:
        return f'{prefix} ERROR "{token.lexeme}"'
    if token.kind in _VALUED:
        return f"{prefix} {token.kind.name} {token.lexeme}"
    if token.lexeme in SINGLE_CHAR_TOKENS:
        return f"{prefix} '{token.lexeme}'"
    return f"{prefix} {token.kind.name}"


def dump_tokens(
    tokens: Iterable[Token], *, file: TextIO = sys.stdout, filename: str | None = None
) -> int:
    """Write one listing line per token to *file* and return how many were written."""
    if filename is not None:
        file.write(f'#name "{filename}"\n')
    count = 0
    for tok in tokens:
        file.write(format_token(tok) + "\n")
        count += 1
    return count


def dump_diagnostics(
    diagnostics: Iterable[LexDiagnostic],
    source: str,
    filename: str = "<stdin>",
    *,
    file: TextIO = sys.stderr,
) -> None:
    for diag in diagnostics:
        print(diag.format(source, filename), file=file)
