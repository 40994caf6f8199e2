from __future__ import annotations

from typing import Callable, TypeVar

import click
import typer

from kellycalc.core.errors import InvalidStockLevels, KellyInputError
from kellycalc.core.types import ArbitrageInput, PolymarketInput, StandardInput, StockInput
from kellycalc.core.validation import (
    check_stock_levels,
    parse_capital,
    parse_count,
    parse_market_price,
    parse_odds,
    parse_percent,
    parse_positive_price,
)
from kellycalc.runner import report_error, run_arbitrage, run_kelly


T = TypeVar("T")

MODES = ("standard", "polymarket", "stock", "arbitrage")
QUIT = "q"


class Quit(Exception):
    pass


def _ask(prompt: str, parse: Callable[[str], T], *, quittable: bool = False) -> T:
    """Prompt until `parse` accepts the answer; validation errors re-prompt."""
    while True:
        raw = typer.prompt(prompt + (f" ({QUIT} to quit)" if quittable else ""))
        if quittable and raw.strip().lower() == QUIT:
            raise Quit()
        try:
            return parse(raw)
        except KellyInputError as e:
            report_error(str(e))


def _ask_capital() -> float | None:
    while True:
        raw = typer.prompt("Capital (optional, blank to skip)", default="", show_default=False)
        try:
            return parse_capital(raw)
        except KellyInputError as e:
            report_error(str(e))


def _standard_round(verbose: bool) -> None:
    odds = _ask("Decimal odds (e.g. 2.0)", parse_odds, quittable=True)
    p = _ask("Win rate % (0-100)", lambda s: parse_percent(s, "win rate"))
    run_kelly(StandardInput(odds=odds, win_rate=p, capital=_ask_capital()), verbose=verbose)


def _polymarket_round(verbose: bool) -> None:
    price = _ask("Market price in cents (0-100)", parse_market_price, quittable=True)
    p = _ask("Your probability % (0-100)", lambda s: parse_percent(s, "your probability"))
    run_kelly(PolymarketInput(market_price=price, your_probability=p, capital=_ask_capital()), verbose=verbose)


def _stock_round(verbose: bool) -> None:
    while True:
        entry = _ask("Entry price", lambda s: parse_positive_price(s, "entry price"), quittable=True)
        target = _ask("Target price", lambda s: parse_positive_price(s, "target price"))
        stop = _ask("Stop loss", lambda s: parse_positive_price(s, "stop loss"))
        p = _ask("Win rate % (0-100)", lambda s: parse_percent(s, "win rate"))
        capital = _ask_capital()
        try:
            check_stock_levels(entry, target, stop)
        except InvalidStockLevels as e:
            report_error(str(e))
            continue
        inp = StockInput(entry_price=entry, target_price=target, stop_loss=stop, win_rate=p, capital=capital)
        run_kelly(inp, verbose=verbose)
        return


def _arbitrage_round(verbose: bool) -> None:
    n = _ask("Number of outcomes (>= 2)", parse_count, quittable=True)
    odds = tuple(_ask(f"Odds {i}", lambda s, i=i: parse_odds(s, f"odds {i}")) for i in range(1, n + 1))
    run_arbitrage(ArbitrageInput(odds=odds, capital=_ask_capital()), verbose=verbose)


ROUNDS: dict[str, Callable[[bool], None]] = {
    "standard": _standard_round,
    "polymarket": _polymarket_round,
    "stock": _stock_round,
    "arbitrage": _arbitrage_round,
}


def interactive(mode: str | None = None, verbose: bool = False) -> None:
    """Prompt for inputs and print results until the user quits."""
    if mode is None:
        mode = typer.prompt("Mode", type=click.Choice(MODES), default="standard")
    round_ = ROUNDS[mode]
    typer.echo(f"{mode} mode, enter {QUIT} at the first prompt to quit")
    while True:
        try:
            round_(verbose)
        except Quit:
            typer.echo("Bye!")
            return
        typer.echo()
