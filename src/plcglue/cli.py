"""Command line entry point: ``LOCATED_VARIABLES.h`` -> ``glueVars.cpp``."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import NoReturn

from rich.console import Console
from rich.markup import escape

from plcglue.codegen import DEFAULT_INPUT_PATH, DEFAULT_OUTPUT_PATH, generate_glue
from plcglue.core.declaration import DeclarationSyntaxError
from plcglue.core.validation import GlueFinding, GlueValidationError

EXIT_OK = 0
EXIT_USAGE = -1
EXIT_INPUT_ERROR = 1
EXIT_OUTPUT_ERROR = 2
EXIT_INVALID_DECLARATIONS = 3

_SEVERITY_STYLES = {"error": "bold red", "warning": "yellow", "hint": "cyan"}


class _ParserExit(Exception):
    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status


class _GlueArgumentParser(argparse.ArgumentParser):
    def exit(self, status: int = 0, message: str | None = None) -> NoReturn:
        if message:
            self._print_message(message, sys.stderr)
        raise _ParserExit(status)

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    parser = _GlueArgumentParser(
        prog="glue-generator",
        description=(
            "Reads the LOCATED_VARIABLES.h file generated by the MATIEC compiler and "
            "produces glueVars.cpp for the OpenPLC runtime. If not specified, paths "
            "are relative to the current directory."
        ),
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="PATH",
        help=(
            f"<path-to-located-variables.h> <path-to-glue-vars.cpp> "
            f"(default: {DEFAULT_INPUT_PATH} {DEFAULT_OUTPUT_PATH})."
        ),
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Treat slot collisions, bit positions above 7 and unknown types as errors.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print every located variable as it is read.",
    )
    return parser


def _print_finding(console: Console, finding: GlueFinding) -> None:
    style = _SEVERITY_STYLES[finding.severity]
    console.print(
        f"[{style}]{finding.severity}[/{style}] {finding.code} @ "
        f"{escape(finding.location)}: {escape(finding.message)}"
    )


def main(argv: Sequence[str] | None = None) -> int:
    out = Console(soft_wrap=True, highlight=False)
    err = Console(stderr=True, soft_wrap=True, highlight=False)

    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except _ParserExit as exc:
        return exc.status

    if len(args.paths) not in (0, 2):
        parser.print_usage(sys.stderr)
        err.print("[bold red]Expected either no paths or both input and output paths.[/bold red]")
        return EXIT_USAGE

    input_path, output_path = args.paths or (DEFAULT_INPUT_PATH, DEFAULT_OUTPUT_PATH)

    try:
        with open(input_path, encoding="utf-8", newline="") as handle:
            lines = handle.readlines()
    except (OSError, UnicodeDecodeError) as exc:
        err.print(f"[bold red]Error opening located variables file at {escape(input_path)}[/bold red]")
        err.print(escape(str(exc)))
        return EXIT_INPUT_ERROR

    try:
        result = generate_glue(lines, mode="strict" if args.strict else "warn")
    except DeclarationSyntaxError as exc:
        err.print(f"[bold red]{escape(input_path)}: {escape(str(exc))}[/bold red]")
        return EXIT_INVALID_DECLARATIONS
    except GlueValidationError as exc:
        for finding in exc.report.findings():
            _print_finding(err, finding)
        err.print(f"[bold red]{escape(exc.report.summary())}[/bold red]")
        return EXIT_INVALID_DECLARATIONS

    if args.verbose:
        for decl in result.declarations:
            out.print(f"varName: {escape(decl.name)}\tvarType: {escape(decl.type)}")

    for finding in result.report.findings():
        _print_finding(err, finding)

    try:
        with open(output_path, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(result.source)
    except OSError as exc:
        err.print(f"[bold red]Error opening glue variables file at {escape(output_path)}[/bold red]")
        err.print(escape(str(exc)))
        return EXIT_OUTPUT_ERROR

    out.print(
        f"Wrote {escape(output_path)} ({result.glue_size} glue variables, "
        f"{len(result.groups)} bool groups)"
    )
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
