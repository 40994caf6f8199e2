from __future__ import annotations

from typing import List, Optional

import click
import typer
from typer.core import TyperCommand

from kellycalc.core.errors import KellyInputError
from kellycalc.core.validation import (
    parse_count,
    validate_arbitrage,
    validate_polymarket,
    validate_standard,
    validate_stock,
)
from kellycalc.interactive import interactive
from kellycalc.runner import report_error, run_arbitrage, run_kelly


__version__ = "0.1.0"

USAGE_ERROR = 2

app = typer.Typer(add_completion=False)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"kellycalc {__version__}")
        raise typer.Exit()


def _usage(message: str, json_output: bool) -> typer.Exit:
    report_error(message, json_output=json_output)
    return typer.Exit(code=USAGE_ERROR)


def _split_capital(values: list[str], required: int, mode: str, json_output: bool) -> tuple[list[str], str | None]:
    if len(values) not in (required, required + 1):
        raise _usage(
            f"{mode} mode takes {required} values plus an optional capital, got {len(values)}",
            json_output,
        )
    return values[:required], (values[required] if len(values) > required else None)


def dispatch(mode: str, values: list[str], json_output: bool, verbose: bool = False) -> None:
    if mode == "standard":
        (odds, win_rate), capital = _split_capital(values, 2, mode, json_output)
        run_kelly(validate_standard(odds, win_rate, capital), json_output=json_output, verbose=verbose)
    elif mode == "polymarket":
        (price, prob), capital = _split_capital(values, 2, mode, json_output)
        run_kelly(validate_polymarket(price, prob, capital), json_output=json_output, verbose=verbose)
    elif mode == "stock":
        (entry, target, stop, win_rate), capital = _split_capital(values, 4, mode, json_output)
        run_kelly(validate_stock(entry, target, stop, win_rate, capital), json_output=json_output, verbose=verbose)
    elif mode == "arbitrage":
        odds, capital = _split_capital(values, 2, mode, json_output)
        run_arbitrage(validate_arbitrage(odds, capital), json_output=json_output, verbose=verbose)
    elif mode == "multi-arbitrage":
        n = parse_count(values[0])
        odds, capital = _split_capital(values[1:], n, mode, json_output)
        run_arbitrage(validate_arbitrage(odds, capital), json_output=json_output, verbose=verbose)
    else:
        raise ValueError(f"unknown mode {mode!r}")


def _is_number(token: str) -> bool:
    try:
        float(token)
    except ValueError:
        return False
    return True


class ValuesCommand(TyperCommand):
    """Reads negative numbers such as `-5` or `-nan` as values, not option clusters.

    Flags are moved in front of a `--` separator and every other token after it,
    so click never splits a numeric token into single-letter options.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        if "--" in args:
            return super().parse_args(ctx, args)
        flags = [a for a in args if a.startswith("-") and not _is_number(a)]
        values = [a for a in args if not a.startswith("-") or _is_number(a)]
        return super().parse_args(ctx, flags + ["--"] + values if values else flags)


@app.command(cls=ValuesCommand, context_settings={"help_option_names": ["-h", "--help"]})
def main(
    values: Optional[List[str]] = typer.Argument(None, metavar="VALUES...", show_default=False),
    polymarket: bool = typer.Option(False, "-p", "--polymarket", help="Market price (cents) and your probability (%)."),
    stock: bool = typer.Option(False, "-s", "--stock", help="Entry, target, stop-loss prices and win rate (%)."),
    arbitrage: bool = typer.Option(False, "-a", "--arbitrage", help="Two-way arbitrage over two decimal odds."),
    multi_arbitrage: bool = typer.Option(
        False, "-A", "--multi-arbitrage", help="N-way arbitrage: outcome count followed by the odds."
    ),
    json_output: bool = typer.Option(False, "--json", help="Print results and errors as JSON."),
    verbose: bool = typer.Option(False, "-V", "--verbose", help="Trace the calculation on stderr."),
    version: bool = typer.Option(
        False, "-v", "--version", callback=_version_callback, is_eager=True, help="Show the version and exit."
    ),
):
    """Kelly Criterion position sizing.

    Standard mode takes decimal odds, win rate in percent and an optional capital,
    e.g. `kellycalc 2.0 60 1000`.

    Polymarket mode takes the market price in cents and your probability in percent,
    e.g. `kellycalc -p 60 75`.

    Without values the calculator prompts for its inputs.
    """
    flags = {
        "polymarket": polymarket,
        "stock": stock,
        "arbitrage": arbitrage,
        "multi-arbitrage": multi_arbitrage,
    }
    chosen = [name for name, on in flags.items() if on]
    if len(chosen) > 1:
        raise _usage(f"choose one mode, got {', '.join(chosen)}", json_output)
    mode = chosen[0] if chosen else "standard"

    if not values:
        if json_output:
            raise _usage("--json needs command-line values; interactive mode is text only", json_output)
        if mode == "multi-arbitrage":
            mode = "arbitrage"
        interactive(mode if chosen else None, verbose=verbose)
        return

    try:
        dispatch(mode, values, json_output, verbose)
    except KellyInputError as e:
        report_error(str(e), json_output=json_output)
        raise typer.Exit(code=1)
