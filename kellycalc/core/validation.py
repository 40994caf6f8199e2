from __future__ import annotations

import math
from typing import Sequence

from kellycalc.core.errors import (
    InvalidCapital,
    InvalidOdds,
    InvalidOddsCount,
    InvalidPrice,
    InvalidProbability,
    InvalidStockLevels,
    ParseFailure,
)
from kellycalc.core.types import ArbitrageInput, PolymarketInput, StandardInput, StockInput


Raw = str | float | int


def parse_number(raw: Raw, field: str) -> float:
    if isinstance(raw, str):
        raw = raw.strip()
    try:
        return float(raw)
    except (TypeError, ValueError):
        raise ParseFailure(field, f"must be a number, got {raw!r}") from None


def parse_odds(raw: Raw, field: str = "odds") -> float:
    odds = parse_number(raw, field)
    if not (math.isfinite(odds) and odds > 1.0):
        raise InvalidOdds(field, f"must be greater than 1.0, got {odds:g}")
    return odds


def check_probability(p: float, field: str = "probability") -> float:
    """Probabilities are decimals in the open interval (0, 1)."""
    if not 0.0 < p < 1.0:
        raise InvalidProbability(field, f"must be strictly between 0% and 100%, got {p * 100:g}%")
    return p


def parse_percent(raw: Raw, field: str = "win rate") -> float:
    return check_probability(parse_number(raw, field) / 100.0, field)


def parse_market_price(raw: Raw, field: str = "market price") -> float:
    """Market price is entered in cents (0-100); 0 and 100 are degenerate."""
    price = parse_number(raw, field) / 100.0
    if not 0.0 < price < 1.0:
        raise InvalidPrice(field, f"must be strictly between 0 and 100 cents, got {price * 100:g}")
    return price


def parse_positive_price(raw: Raw, field: str) -> float:
    price = parse_number(raw, field)
    if not (math.isfinite(price) and price > 0.0):
        raise InvalidPrice(field, f"must be a positive number, got {price:g}")
    return price


def parse_capital(raw: Raw | None, field: str = "capital") -> float | None:
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return None
    capital = parse_number(raw, field)
    if not (math.isfinite(capital) and capital >= 0.0):
        raise InvalidCapital(field, f"must be a non-negative finite number, got {capital:g}")
    return capital


def validate_standard(odds: Raw, win_rate: Raw, capital: Raw | None = None) -> StandardInput:
    """Build a StandardInput from CLI-style values (win rate in percent)."""
    return StandardInput(
        odds=parse_odds(odds),
        win_rate=parse_percent(win_rate, "win rate"),
        capital=parse_capital(capital),
    )


def validate_polymarket(market_price: Raw, your_probability: Raw, capital: Raw | None = None) -> PolymarketInput:
    """Build a PolymarketInput from a price in cents and a probability in percent."""
    return PolymarketInput(
        market_price=parse_market_price(market_price),
        your_probability=parse_percent(your_probability, "your probability"),
        capital=parse_capital(capital),
    )


def validate_stock(
    entry_price: Raw,
    target_price: Raw,
    stop_loss: Raw,
    win_rate: Raw,
    capital: Raw | None = None,
) -> StockInput:
    entry = parse_positive_price(entry_price, "entry price")
    target = parse_positive_price(target_price, "target price")
    stop = parse_positive_price(stop_loss, "stop loss")
    p = parse_percent(win_rate, "win rate")
    cap = parse_capital(capital)
    check_stock_levels(entry, target, stop)
    return StockInput(entry_price=entry, target_price=target, stop_loss=stop, win_rate=p, capital=cap)


def check_stock_levels(entry: float, target: float, stop: float) -> None:
    if target <= entry:
        raise InvalidStockLevels("target price", f"must be above the entry price {entry:g}, got {target:g}")
    if stop >= entry:
        raise InvalidStockLevels("stop loss", f"must be below the entry price {entry:g}, got {stop:g}")


def parse_count(raw: Raw, field: str = "count") -> int:
    n = parse_number(raw, field)
    if not (math.isfinite(n) and n.is_integer()):
        raise ParseFailure(field, f"must be a whole number, got {raw!r}")
    if n < 2:
        raise InvalidOddsCount(field, f"need at least 2 outcomes, got {int(n)}")
    return int(n)


def validate_arbitrage(odds: Sequence[Raw], capital: Raw | None = None) -> ArbitrageInput:
    if len(odds) < 2:
        raise InvalidOddsCount("odds", f"need at least 2 outcomes, got {len(odds)}")
    parsed = tuple(parse_odds(o, f"odds {i}") for i, o in enumerate(odds, start=1))
    return ArbitrageInput(odds=parsed, capital=parse_capital(capital))
