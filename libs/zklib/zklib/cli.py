"""Command-line driver: load a .zk file, parse it, print the AST."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from zklib import __version__
from zklib.parser import LexError, Lexer, dump_yaml, parse

DEFAULT_SOURCE = Path("test.zk")


def _print_tokens(source: str, filename: str) -> None:
    try:
        tokens = Lexer(source, filename).tokenize()
    except LexError:
        # Reported by the parse that follows.
        return
    for tok in tokens:
        print(f"{{kind = '{tok.kind}', value = {tok.lexeme!r}}}")


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="zkc", description="Parse a zk source file and print its AST.")
    ap.add_argument(
        "file",
        nargs="?",
        type=Path,
        default=DEFAULT_SOURCE,
        help="Source file to parse (default: test.zk)",
    )
    ap.add_argument("--tokens", action="store_true", help="Print the token stream before parsing")
    ap.add_argument(
        "--format",
        choices=("yaml", "repr"),
        default="yaml",
        help="AST output format (default: yaml)",
    )
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = ap.parse_args(argv)

    if not args.file.is_file():
        print(f"No '{args.file}' file", file=sys.stderr)
        return 1
    source = args.file.read_text(encoding="utf-8")
    filename = str(args.file)

    if args.tokens:
        _print_tokens(source, filename)

    program, diag = parse(source, filename)
    if program is None:
        print(diag.format_all(), file=sys.stderr)
        return 1

    try:
        rendered = dump_yaml(program) if args.format == "yaml" else repr(program) + "\n"
    except RecursionError:
        print(f"{filename}: error: AST too deep to render as {args.format}", file=sys.stderr)
        return 1
    sys.stdout.write(rendered)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
