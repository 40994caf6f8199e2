from __future__ import annotations

from kellycalc.core.types import (
    Allocation,
    KellyInput,
    KellyResult,
    PolymarketInput,
    Recommendation,
    StandardInput,
    StockInput,
)


def kelly_standard(odds: float, win_rate: float) -> float:
    """Decimal odds paying `odds` per unit staked, so b = odds - 1.
    Kelly f* = (bp - q)/b.
    """
    b = odds - 1
    p = win_rate
    q = 1 - p
    return (b * p - q) / b


def kelly_polymarket(market_price: float, your_probability: float) -> float:
    """Binary contract paying $1 if YES, bought at `market_price`.
    With b=(1-price)/price the Kelly fraction reduces to (p - price)/(1 - price).
    """
    return (your_probability - market_price) / (1 - market_price)


def kelly_stock(entry_price: float, target_price: float, stop_loss: float, win_rate: float) -> float:
    """Fraction of capital to put at risk; b is the reward/risk ratio."""
    b = (target_price - entry_price) / (entry_price - stop_loss)
    p = win_rate
    q = 1 - p
    return (b * p - q) / b


def expected_value(b: float, p: float) -> float:
    """Expected profit per unit staked at net odds b and win probability p."""
    return b * p - (1 - p)


def classify(fraction: float, min_fraction: float = 0.0) -> Recommendation:
    # zero edge is not a bet
    if fraction <= 0:
        return Recommendation.NEGATIVE_EDGE
    if fraction < min_fraction:
        return Recommendation.NO_BET
    return Recommendation.BET


def allocate(fraction: float, capital: float | None) -> Allocation | None:
    if capital is None:
        return None
    full = fraction * capital
    return Allocation(full_amount=full, half_amount=full * 0.5, quarter_amount=full * 0.25)


def _result(
    fraction: float,
    ev: float,
    capital: float | None,
    min_fraction: float,
    position_fraction: float | None = None,
) -> KellyResult:
    alloc = allocate(fraction, capital)
    return KellyResult(
        fraction=fraction,
        expected_value=ev,
        recommendation=classify(fraction, min_fraction),
        full_amount=alloc.full_amount if alloc else None,
        half_amount=alloc.half_amount if alloc else None,
        quarter_amount=alloc.quarter_amount if alloc else None,
        position_fraction=position_fraction,
        position=allocate(position_fraction, capital) if position_fraction is not None else None,
    )


def evaluate(inp: KellyInput, min_fraction: float = 0.0) -> KellyResult:
    """Compute and allocate for any validated input record."""
    if isinstance(inp, StandardInput):
        f = kelly_standard(inp.odds, inp.win_rate)
        ev = expected_value(inp.odds - 1, inp.win_rate)
        return _result(f, ev, inp.capital, min_fraction)

    if isinstance(inp, PolymarketInput):
        f = kelly_polymarket(inp.market_price, inp.your_probability)
        ev = (inp.your_probability - inp.market_price) / inp.market_price
        return _result(f, ev, inp.capital, min_fraction)

    if isinstance(inp, StockInput):
        f = kelly_stock(inp.entry_price, inp.target_price, inp.stop_loss, inp.win_rate)
        ev = expected_value(inp.reward_risk_ratio, inp.win_rate)
        return _result(f, ev, inp.capital, min_fraction, position_fraction=f / inp.stop_distance)

    raise TypeError(f"unsupported input: {type(inp).__name__}")
