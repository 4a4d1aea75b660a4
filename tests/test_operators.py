"""Test operators, delimiters, whitespace and illegal characters."""

import pytest

from coollex.errors import ErrorKind
from coollex.tokens import TokenKind

from .conftest import assert_kinds, assert_lexemes, error_kinds


class TestSingleCharacter:
    @pytest.mark.parametrize(
        "text,kind",
        [
            ("+", TokenKind.PLUS),
            ("-", TokenKind.MINUS),
            ("*", TokenKind.STAR),
            ("/", TokenKind.SLASH),
            ("=", TokenKind.EQ),
            ("<", TokenKind.LT),
            ("~", TokenKind.TILDE),
            ("{", TokenKind.LBRACE),
            ("}", TokenKind.RBRACE),
            ("(", TokenKind.LPAREN),
            (")", TokenKind.RPAREN),
            (";", TokenKind.SEMI),
            (":", TokenKind.COLON),
            (",", TokenKind.COMMA),
            (".", TokenKind.DOT),
        ],
    )
    def test_kind(self, lex, text, kind):
        tokens = lex(text)
        assert_kinds(tokens, [kind])
        assert_lexemes(tokens, [text])


class TestTwoCharacter:
    def test_le(self, lex):
        assert_kinds(lex("<="), [TokenKind.LE])

    def test_assign(self, lex):
        assert_kinds(lex("<-"), [TokenKind.ASSIGN])

    def test_darrow(self, lex):
        assert_kinds(lex("=>"), [TokenKind.DARROW])

    def test_le_never_split(self, lex):
        tokens = lex("a<=b")
        assert_kinds(tokens, [TokenKind.OBJECTID, TokenKind.LE, TokenKind.OBJECTID])

    def test_spaced_le_is_split(self, lex):
        assert_kinds(lex("< ="), [TokenKind.LT, TokenKind.EQ])

    def test_lt_then_assign(self, lex):
        assert_kinds(lex("<<-"), [TokenKind.LT, TokenKind.ASSIGN])

    def test_single_minus(self, lex):
        assert_kinds(lex("a - b"), [TokenKind.OBJECTID, TokenKind.MINUS, TokenKind.OBJECTID])


class TestWhitespace:
    def test_whitespace_only(self, scan):
        lexer = scan(" \t\r\f\v ")
        assert lexer.diagnostics == []
        assert lexer.line == 1

    def test_newlines_counted(self, scan):
        lexer = scan("\n\n\n")
        assert lexer.line == 4

    def test_token_lines(self, lex):
        tokens = lex("a\nb\n\nc")
        assert [t.line for t in tokens] == [1, 2, 4]

    def test_empty_source(self, scan):
        lexer = scan("")
        assert lexer.done
        assert lexer.diagnostics == []


class TestIllegalCharacters:
    @pytest.mark.parametrize("ch", ["@", "#", "$", "!", "[", "]", "`", "'", "\\", "\0"])
    def test_single_illegal(self, lex, scan, ch):
        tokens = lex(ch)
        assert_kinds(tokens, [TokenKind.ERROR])
        assert_lexemes(tokens, [ch])
        assert error_kinds(scan(ch).diagnostics) == [ErrorKind.ILLEGAL_CHARACTER]

    def test_scan_continues_past_illegal(self, lex):
        tokens = lex("a @ b")
        assert_kinds(tokens, [TokenKind.OBJECTID, TokenKind.ERROR, TokenKind.OBJECTID])

    def test_run_of_illegal_characters(self, scan):
        lexer = scan("@#$")
        assert len(lexer.diagnostics) == 3

    def test_message_names_character(self, scan):
        lexer = scan("@")
        assert lexer.diagnostics[0].message == "illegal character '@'"


class TestProgram:
    def test_small_class(self, lex):
        source = "class Main inherits IO {\n  main() : Object { out_string(\"hi\\n\") };\n};\n"
        tokens = lex(source)
        assert_kinds(
            tokens,
            [
                TokenKind.CLASS,
                TokenKind.TYPEID,
                TokenKind.INHERITS,
                TokenKind.TYPEID,
                TokenKind.LBRACE,
                TokenKind.OBJECTID,
                TokenKind.LPAREN,
                TokenKind.RPAREN,
                TokenKind.COLON,
                TokenKind.TYPEID,
                TokenKind.LBRACE,
                TokenKind.OBJECTID,
                TokenKind.LPAREN,
                TokenKind.STR_CONST,
                TokenKind.RPAREN,
                TokenKind.RBRACE,
                TokenKind.SEMI,
                TokenKind.RBRACE,
                TokenKind.SEMI,
            ],
        )
        assert tokens[13].lexeme == "hi\\n"
        assert tokens[-1].line == 3

    def test_case_expression(self, lex):
        tokens = lex("case x of y : Int => y; esac")
        assert_kinds(
            tokens,
            [
                TokenKind.CASE,
                TokenKind.OBJECTID,
                TokenKind.OF,
                TokenKind.OBJECTID,
                TokenKind.COLON,
                TokenKind.TYPEID,
                TokenKind.DARROW,
                TokenKind.OBJECTID,
                TokenKind.SEMI,
                TokenKind.ESAC,
            ],
        )

    def test_let_binding(self, lex):
        tokens = lex("let x : Int <- 1 in x")
        assert_kinds(
            tokens,
            [
                TokenKind.LET,
                TokenKind.OBJECTID,
                TokenKind.COLON,
                TokenKind.TYPEID,
                TokenKind.ASSIGN,
                TokenKind.INT_CONST,
                TokenKind.IN,
                TokenKind.OBJECTID,
            ],
        )
