from __future__ import annotations

from kellycalc.core.types import ArbitrageInput, ArbitrageResult


def implied_probability(odds: float) -> float:
    return 1.0 / odds


def find_arbitrage(inp: ArbitrageInput) -> ArbitrageResult:
    """Sure-bet check across mutually exclusive outcomes.

    If the implied probabilities sum below 1, staking each outcome in proportion to
    its implied probability returns 1/total per unit whatever happens. Otherwise the
    excess over 1 is the bookmaker's juice and no stakes are suggested.
    """
    implied = [implied_probability(o) for o in inp.odds]
    total = sum(implied)

    if total < 1.0:
        ratios = tuple(x / total for x in implied)
        profit = 1.0 / total - 1.0
        juice = 0.0
    else:
        ratios = tuple(0.0 for _ in implied)
        profit = 0.0
        juice = total - 1.0

    stakes = None
    if inp.capital is not None:
        stakes = tuple(r * inp.capital for r in ratios)

    return ArbitrageResult(
        total_implied_prob=total,
        has_arbitrage=total < 1.0,
        profit=profit,
        juice=juice,
        stake_ratios=ratios,
        stakes=stakes,
    )
