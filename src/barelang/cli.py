"""Command-line interface for the barelang lexer."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from barelang.errors import LexError
from barelang.lexer import Lexer, scan
from barelang.tokens import Token

logger = logging.getLogger(__name__)

FORMATS = ("text", "json")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None  # None reads stdin
    output_file: Path | None
    output_format: str
    all_errors: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="barelang",
        description="Tokenize barelang source and report lexical errors",
    )
    p.add_argument("input", help="Input .bare file, or - for stdin")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-f",
        "--format",
        choices=FORMATS,
        default=None,
        help="Token output format (default: text)",
    )
    p.add_argument(
        "--all-errors",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Report every unrecognized character instead of stopping at the first",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover barelang.toml)",
    )
    p.add_argument("--debug", action="store_true", help="Dump tokens with positions to stderr")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "barelang.toml"

    if not path.is_file():
        return {}

    logger.debug("loading config from %s", path)
    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    if args.input == "-":
        input_file = None
        input_dir = Path(".")
    else:
        input_file = Path(args.input)
        input_dir = input_file.parent
        if not input_dir.parts:
            input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    cfg_lex = config.get("lex")
    if not isinstance(cfg_lex, dict):
        cfg_lex = {}

    output_format = "text"
    cfg_format = cfg_lex.get("format")
    if cfg_format is not None:
        if cfg_format not in FORMATS:
            raise argparse.ArgumentTypeError(
                f"invalid format in config (expected one of {', '.join(FORMATS)}): {cfg_format}"
            )
        output_format = cfg_format
    if args.format is not None:
        output_format = args.format

    all_errors = False
    cfg_all = cfg_lex.get("all_errors")
    if isinstance(cfg_all, bool):
        all_errors = cfg_all
    if args.all_errors is not None:
        all_errors = args.all_errors

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        output_format=output_format,
        all_errors=all_errors,
        debug=args.debug,
    )


def read_source(options: CliOptions) -> str:
    if options.input_file is None:
        return sys.stdin.read()
    return options.input_file.read_text(encoding="utf-8")


def lex_source(source: str, all_errors: bool) -> tuple[list[Token], list[LexError]]:
    """Tokenize source, either collecting every error or stopping at the first."""
    if all_errors:
        return scan(source)

    tokens: list[Token] = []
    try:
        for tok in Lexer(source):
            tokens.append(tok)
    except LexError as exc:
        return tokens, [exc]
    return tokens, []


def render_tokens(tokens: list[Token], errors: list[LexError], output_format: str) -> str:
    """Render the token stream (and, for JSON, the errors) as text."""
    if output_format == "json":
        payload = {
            "tokens": [
                {"kind": tok.kind.name, "text": tok.text, "offset": tok.offset}
                for tok in tokens
            ],
            "errors": [
                {
                    "message": err.message,
                    "char": err.token,
                    "offset": err.span.offset,
                    "length": err.span.length,
                    "line": err.line(),
                    "column": err.column(),
                }
                for err in errors
            ],
        }
        return json.dumps(payload, indent=2) + "\n"

    return "".join(f"{tok.offset}\t{tok.kind.name}\t{tok.text}\n" for tok in tokens)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except tomllib.TOMLDecodeError as exc:
        print(f"error: invalid config file: {exc}", file=sys.stderr)
        return 2

    try:
        source = read_source(options)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: cannot read input: {exc}", file=sys.stderr)
        return 2

    tokens, errors = lex_source(source, options.all_errors)
    logger.debug("lexed %d tokens, %d errors", len(tokens), len(errors))

    if options.debug:
        from barelang.debug import dump_tokens

        dump_tokens(tokens, source, file=sys.stderr)

    filename = str(options.input_file) if options.input_file is not None else "<stdin>"
    for err in errors:
        print(err.format(filename), file=sys.stderr)

    output = render_tokens(tokens, errors, options.output_format)
    if options.output_file:
        options.output_file.write_text(output, encoding="utf-8")
    else:
        sys.stdout.write(output)

    return 1 if errors else 0
