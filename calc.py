"""Command line front end for the infix evaluator and the text checks.

Usage:
    calc eval "(2 + 3) * 4"        # 20
    calc eval "4 / 0"              # diagnostic on stderr, then 0
    calc eval -- "-5 + 3"          # StackUnderflow on stderr, then 0
    calc repl                      # one expression per line until EOF
    calc password 'Strong@123'     # strong
    calc digits "room 101"         # 3
    calc words "Hello world"       # 2
"""

from __future__ import annotations

import logging
import sys

import typer
from rich.console import Console
from rich.markup import escape

from infix import evaluate_expression, format_number
from text_checks import count_digits, count_words, is_strong_password

app = typer.Typer(
    name="calc",
    help="Evaluate infix arithmetic and run simple text checks",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every reduction"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    if verbose:
        logging.getLogger("infix").setLevel(logging.DEBUG)


def _report(exc: Exception) -> None:
    err_console.print(f"[red]{type(exc).__name__}:[/red] {escape(str(exc))}", highlight=False)


# Expressions may start with an operator ("-5 + 3"), which click would
# otherwise take for an option.
@app.command("eval", context_settings={"ignore_unknown_options": True})
def cmd_eval(
    expression: str = typer.Argument(help="Infix expression, e.g. '(2 + 3) * 4'"),
    strict: bool = typer.Option(False, "--strict", help="Reject unknown characters instead of skipping them"),
    default: float = typer.Option(0.0, "--default", help="Result printed when evaluation fails"),
) -> None:
    """Evaluate one expression."""
    console.print(format_number(evaluate_expression(expression, default, strict, on_error=_report)), highlight=False)


@app.command("repl")
def cmd_repl(
    strict: bool = typer.Option(False, "--strict", help="Reject unknown characters instead of skipping them"),
    default: float = typer.Option(0.0, "--default", help="Result printed when evaluation fails"),
) -> None:
    """Evaluate expressions read from stdin, one per line."""
    for line in sys.stdin:
        if not line.strip():
            continue
        console.print(format_number(evaluate_expression(line, default, strict, on_error=_report)), highlight=False)


@app.command("password")
def cmd_password(text: str = typer.Argument(help="Password to check")) -> None:
    """Report whether a password is strong."""
    if is_strong_password(text):
        console.print("[green]strong[/green]")
    else:
        console.print("[yellow]weak[/yellow]")


@app.command("digits")
def cmd_digits(text: str = typer.Argument(help="Text to scan")) -> None:
    """Count decimal digits."""
    console.print(count_digits(text), highlight=False)


@app.command("words")
def cmd_words(text: str = typer.Argument(help="Text to scan")) -> None:
    """Count whitespace-separated words."""
    console.print(count_words(text), highlight=False)


if __name__ == "__main__":
    app()
