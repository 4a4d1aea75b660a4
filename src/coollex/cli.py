"""Command-line interface for coollex."""

from __future__ import annotations

import argparse
import io
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from coollex.errors import LexDiagnostic
from coollex.strings import MAX_STRING_LENGTH

CONFIG_NAME = "coollex.toml"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None
    output_file: Path | None
    max_string_length: int
    show_errors: bool
    show_header: bool


@dataclass(frozen=True, slots=True)
class LexResult:
    """Token listing and diagnostics for one scanned source."""

    listing: str
    token_count: int
    diagnostics: list[LexDiagnostic]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="coollex",
        description="Lexical analyzer for COOL source files",
    )
    p.add_argument("input", nargs="?", help="Input .cl file (default: stdin)")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument(
        "--max-string-length",
        type=int,
        default=None,
        metavar="N",
        help=f"Longest accepted string constant (default: {MAX_STRING_LENGTH})",
    )
    p.add_argument("--no-errors", action="store_true", help="Do not print diagnostics to stderr")
    p.add_argument("--no-header", action="store_true", help='Omit the #name "file" line')
    return p


def load_config(config_path: Path | None, search_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else search_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_file = Path(args.input) if args.input else None
    if input_file is not None and input_file.parent.parts:
        search_dir = input_file.parent
    else:
        search_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, search_dir)

    max_string_length = MAX_STRING_LENGTH
    cfg_lexer = config.get("lexer")
    if isinstance(cfg_lexer, dict):
        cfg_max = cfg_lexer.get("max_string_length")
        if isinstance(cfg_max, int) and not isinstance(cfg_max, bool):
            max_string_length = cfg_max
    if args.max_string_length is not None:
        max_string_length = args.max_string_length
    if max_string_length < 0:
        raise argparse.ArgumentTypeError(
            f"max string length must be non-negative, got {max_string_length}"
        )

    show_errors = True
    show_header = True
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        if isinstance(cfg_output.get("errors"), bool):
            show_errors = cfg_output["errors"]
        if isinstance(cfg_output.get("header"), bool):
            show_header = cfg_output["header"]
    if args.no_errors:
        show_errors = False
    if args.no_header:
        show_header = False

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        max_string_length=max_string_length,
        show_errors=show_errors,
        show_header=show_header,
    )


def display_name(options: CliOptions) -> str:
    return str(options.input_file) if options.input_file is not None else "<stdin>"


def read_source(options: CliOptions) -> str:
    """Read the input file, or stdin when no file was given."""
    if options.input_file is None:
        return sys.stdin.read()
    return options.input_file.read_text(encoding="utf-8")


def lex_source(source: str, options: CliOptions) -> LexResult:
    """Pull every token from a fresh Lexer and render the listing."""
    from coollex.debug import dump_tokens
    from coollex.lexer import Lexer

    name = display_name(options)
    lexer = Lexer(source, options.max_string_length)
    out = io.StringIO()
    count = dump_tokens(lexer, file=out, filename=name if options.show_header else None)
    return LexResult(listing=out.getvalue(), token_count=count, diagnostics=lexer.diagnostics)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    from coollex.debug import dump_diagnostics

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except (OSError, tomllib.TOMLDecodeError) as exc:
        print(f"error: cannot load config: {exc}", file=sys.stderr)
        return 2

    try:
        source = read_source(options)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: cannot read {display_name(options)}: {exc}", file=sys.stderr)
        return 2

    result = lex_source(source, options)

    if options.output_file:
        try:
            options.output_file.write_text(result.listing, encoding="utf-8")
        except OSError as exc:
            print(f"error: cannot write {options.output_file}: {exc}", file=sys.stderr)
            return 2
    else:
        sys.stdout.write(result.listing)

    if options.show_errors:
        dump_diagnostics(result.diagnostics, source, display_name(options), file=sys.stderr)

    return 1 if result.diagnostics else 0
