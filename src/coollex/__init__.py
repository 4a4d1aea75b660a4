"""Lexical analyzer for the COOL teaching language."""

from __future__ import annotations

__version__ = "0.1.0"


def lex(source: str, filename: str = "<stdin>") -> str:
    """Scan COOL source and return its token listing, one ``#line KIND`` line per token."""
    import io

    from coollex.debug import dump_tokens
    from coollex.lexer import Lexer

    out = io.StringIO()
    dump_tokens(Lexer(source), file=out, filename=filename)
    return out.getvalue()
