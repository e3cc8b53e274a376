#!/usr/bin/env python3
"""
intcalc.py — IntCalc command line tool.

Runs fully locally on top of PipelineCalculator; configuration comes from
INTCALC_* environment variables or a .env file (see config.py).

Subcommands:
    repl    — read expressions line by line from stdin, print "-> <n>" or the error code
    eval    — evaluate one expression and show the reduction steps
    tokens  — show the token list of an expression
    tree    — show the parsed expression tree

Usage:
    echo "2 + 3 * 4" | python intcalc.py repl
    python intcalc.py eval --text "(2 + 3) * 4"
    python intcalc.py tokens -t "-7 / 2"
    python intcalc.py tree -t "1 - 2 - 3"
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, NoReturn

from rich import box
from rich.console import Console
from rich.table import Table

from adapters.calculator.pipeline_calculator import PipelineCalculator, build_calculator
from adapters.parser._printer import format_tree, to_infix
from config import Settings
from contracts import CalcError

logger = logging.getLogger("intcalc")


# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


def _safe_terminal_text(value: Any) -> str:
    s = str(value)
    encoding = sys.stdout.encoding or "utf-8"
    try:
        s.encode(encoding)
        return s
    except UnicodeEncodeError:
        return s.encode(encoding, errors="replace").decode(encoding, errors="replace")


def _print_kv_table(title: str, rows: list[tuple[str, Any]]) -> None:
    table = Table(title=title, box=box.ASCII, show_header=False, pad_edge=False)
    table.add_column("Key", no_wrap=True, style="bold cyan")
    table.add_column("Value")
    for key, value in rows:
        table.add_row(_safe_terminal_text(key), _safe_terminal_text(value))
    _console().print(table)


def _print_steps_table(steps: list[str]) -> None:
    table = Table(title=f"Steps [{len(steps)}]", box=box.ASCII, show_lines=False)
    table.add_column("#", justify="right", no_wrap=True)
    table.add_column("Reduction")
    for idx, step in enumerate(steps, 1):
        table.add_row(str(idx), _safe_terminal_text(step))
    _console().print(table)


def _read_text(args: argparse.Namespace) -> str:
    text = getattr(args, "text", None) or sys.stdin.read().strip()
    if not text:
        print("Error: pass an expression with --text or on stdin", file=sys.stderr)
        sys.exit(1)
    return text


def _fail(exc: CalcError) -> NoReturn:
    print(f"Error: {exc.code}: {exc.message}", file=sys.stderr)
    sys.exit(1)


# -- subcommands -----------------------------------------------------------

def _repl(args: argparse.Namespace, calculator: PipelineCalculator) -> None:
    for line in sys.stdin:
        line = line.rstrip("\r\n")
        if not line.strip():
            continue
        result = calculator.calc(line)
        if result.ok:
            print(f"-> {result.value}")
            if args.steps:
                for step in result.steps:
                    print(f"   {step}")
        else:
            print(result.error.code)


def _eval(args: argparse.Namespace, calculator: PipelineCalculator) -> None:
    text = _read_text(args)
    result = calculator.calc(text)
    if not result.ok:
        print(f"Error: {result.error.code}: {result.error.message}", file=sys.stderr)
        sys.exit(1)

    _print_kv_table("Result", [
        ("expression", result.expression),
        ("value", result.value),
        ("steps", len(result.steps)),
    ])
    if result.steps:
        _print_steps_table(result.steps)


def _tokens(args: argparse.Namespace, calculator: PipelineCalculator) -> None:
    text = _read_text(args)
    try:
        tokens = calculator.lexer.tokenize(text)
    except CalcError as exc:
        _fail(exc)

    table = Table(title=f"Tokens [{len(tokens)}]", box=box.ASCII, show_lines=False)
    table.add_column("#", justify="right", no_wrap=True)
    table.add_column("Kind", no_wrap=True, style="cyan")
    table.add_column("Value", justify="right")
    for idx, tok in enumerate(tokens):
        table.add_row(str(idx), tok.kind.name, "" if tok.value is None else str(tok.value))
    _console().print(table)


def _tree(args: argparse.Namespace, calculator: PipelineCalculator) -> None:
    text = _read_text(args)
    try:
        ast = calculator.parser.parse(calculator.lexer.tokenize(text))
    except CalcError as exc:
        _fail(exc)

    print(to_infix(ast))
    print(format_tree(ast))


# -- main ------------------------------------------------------------------

def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="intcalc",
        description="IntCalc — integer arithmetic expression calculator",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # repl
    p = sub.add_parser("repl", help="Evaluate stdin line by line")
    p.add_argument("--steps", "-s", action="store_true",
                   help="Also print the reduction steps")

    # eval
    p = sub.add_parser("eval", help="Evaluate one expression")
    p.add_argument("--text", "-t", help="Expression (or stdin)")

    # tokens
    p = sub.add_parser("tokens", help="Show the tokens of an expression")
    p.add_argument("--text", "-t", help="Expression (or stdin)")

    # tree
    p = sub.add_parser("tree", help="Show the parsed expression tree")
    p.add_argument("--text", "-t", help="Expression (or stdin)")

    args = parser.parse_args(argv)

    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())
    logger.debug("Running %s with %s", args.command, settings)

    commands = {
        "repl":   _repl,
        "eval":   _eval,
        "tokens": _tokens,
        "tree":   _tree,
    }
    commands[args.command](args, build_calculator(settings))


if __name__ == "__main__":
    main()
