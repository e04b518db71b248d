"""CLI entry point: parse an AbleScript file and dump its AST."""
from __future__ import annotations
import sys
import argparse

from .errors import AbleError, format_span
from .parser import Parser


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ablescript",
        description="AbleScript parser: prints the statements of a source file",
    )
    parser.add_argument("file", help="Source file to parse (.able)")
    parser.add_argument("--spans", action="store_true", help="Prefix each statement with its source span")
    parser.add_argument("--version", action="version", version="AbleScript front end 0.1.0")

    args = parser.parse_args(argv)
    return run_file(args.file, spans=args.spans)


def run_file(path: str, spans: bool = False) -> int:
    """Parse a file and print one statement per line."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            source = f.read()
    except FileNotFoundError:
        print(f"[AbleScript] File not found: {path}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(f"[AbleScript] {path} is not UTF-8 text: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"[AbleScript] Cannot read {path}: {e.strerror or e}", file=sys.stderr)
        return 1

    try:
        ast = Parser(source).init()
    except AbleError as e:
        print(f"Error: {e.kind.value} at {format_span(e.span)}", file=sys.stderr)
        if e.span is not None:
            print(f"  {source[e.span[0]:e.span[1]]!r}", file=sys.stderr)
        return 1

    for stmt in ast:
        if spans:
            print(f"{format_span(stmt.span)}\t{stmt!r}")
        else:
            print(repr(stmt))
    return 0


if __name__ == "__main__":
    sys.exit(main())
