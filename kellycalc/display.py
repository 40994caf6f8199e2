"""Plain-text and JSON renderings of calculator results.

Everything here is pure: functions take result records and return strings or
JSON-ready dicts. Printing is left to the runner.
"""
from __future__ import annotations

from dataclasses import asdict
from typing import Any

from kellycalc.core.types import (
    Allocation,
    ArbitrageInput,
    ArbitrageResult,
    KellyInput,
    KellyResult,
    PolymarketInput,
    Recommendation,
    StandardInput,
    StockInput,
)


WIDTH = 50

ADVICE = {
    Recommendation.BET: "BET (positive edge)",
    Recommendation.NO_BET: "NO BET (edge below threshold)",
    Recommendation.NEGATIVE_EDGE: "NO BET (no positive edge)",
}

TITLES = {
    "standard": "Kelly Criterion Result",
    "polymarket": "Polymarket Kelly Result",
    "stock": "Stock Trade Kelly Result",
}


def format_pct(value: float, precision: int = 2) -> str:
    return f"{value * 100:.{precision}f}%"


def _header(title: str) -> list[str]:
    rule = "─" * WIDTH
    return [rule, title.center(WIDTH).rstrip(), rule, ""]


def _tree(label: str, rows: list[tuple[str, str]]) -> list[str]:
    lines = [f"  {label}:"]
    for i, (k, v) in enumerate(rows):
        branch = "└─" if i == len(rows) - 1 else "├─"
        lines.append(f"    {branch} {k}: {v}")
    lines.append("")
    return lines


def _input_rows(inp: KellyInput, precision: int) -> list[tuple[str, str]]:
    if isinstance(inp, StandardInput):
        return [
            ("Odds", f"{inp.odds:.2f}"),
            ("Net odds (b)", f"{inp.odds - 1:.2f}"),
            ("Win rate (p)", format_pct(inp.win_rate, precision)),
        ]
    if isinstance(inp, PolymarketInput):
        return [
            ("Market price", f"{inp.market_price * 100:.{precision}f}¢ (implied {format_pct(inp.market_price, precision)})"),
            ("Your probability", format_pct(inp.your_probability, precision)),
            ("Implied odds", f"{1 / inp.market_price:.4f}"),
        ]
    if isinstance(inp, StockInput):
        return [
            ("Entry price", f"{inp.entry_price:.2f}"),
            ("Target price", f"{inp.target_price:.2f}"),
            ("Stop loss", f"{inp.stop_loss:.2f}"),
            ("Win rate (p)", format_pct(inp.win_rate, precision)),
            ("Reward/risk (b)", f"{inp.reward_risk_ratio:.2f}"),
            ("Stop distance", format_pct(inp.stop_distance, precision)),
        ]
    raise TypeError(f"unsupported input: {type(inp).__name__}")


def _amount_rows(alloc: Allocation, suffix: str = "") -> list[tuple[str, str]]:
    return [
        (f"Full Kelly{suffix}", f"{alloc.full_amount:.2f}"),
        (f"Half Kelly{suffix}", f"{alloc.half_amount:.2f}"),
        (f"Quarter Kelly{suffix}", f"{alloc.quarter_amount:.2f}"),
    ]


def format_kelly(inp: KellyInput, result: KellyResult, precision: int = 2) -> str:
    lines = _header(TITLES[inp.mode])
    lines += _tree("Inputs", _input_rows(inp, precision))

    analysis = [
        ("Expected value", format_pct(result.expected_value, precision)),
        ("Kelly fraction", format_pct(result.fraction, precision)),
    ]
    if result.position_fraction is not None:
        analysis.append(("Position size", format_pct(result.position_fraction, precision)))
    analysis.append(("Advice", ADVICE[result.recommendation]))
    lines += _tree("Analysis", analysis)

    sized = result.position_fraction if result.position_fraction is not None else result.fraction
    if result.recommendation is Recommendation.BET and sized > 1:
        lines += [f"  ! Position above 100% of capital requires {sized:.2f}x leverage", ""]

    alloc = result.allocation
    if alloc is not None and inp.capital is not None:
        rows = _amount_rows(alloc, " risk" if result.position is not None else "")
        if result.position is not None:
            rows += _amount_rows(result.position, " position")
        lines += _tree(f"Allocation of capital {inp.capital:.2f}", rows)
        if result.recommendation is not Recommendation.BET:
            lines += ["  ! Amounts shown for reference only; do not bet", ""]

    lines.append("─" * WIDTH)
    return "\n".join(lines)


def format_arbitrage(inp: ArbitrageInput, result: ArbitrageResult, precision: int = 2) -> str:
    lines = _header("Arbitrage Result")
    lines += _tree("Inputs", [(f"Odds {i}", f"{o:.2f}") for i, o in enumerate(inp.odds, start=1)])

    analysis = [("Implied probability sum", format_pct(result.total_implied_prob, precision))]
    if result.has_arbitrage:
        analysis.append(("Guaranteed return", format_pct(result.profit, precision)))
        analysis += [(f"Stake {i}", format_pct(r, precision)) for i, r in enumerate(result.stake_ratios, start=1)]
    else:
        analysis.append(("Juice", format_pct(result.juice, precision)))
        analysis.append(("Advice", "NO ARBITRAGE"))
    lines += _tree("Analysis", analysis)

    if result.stakes is not None and result.has_arbitrage and inp.capital is not None:
        rows = [(f"Stake {i}", f"{s:.2f}") for i, s in enumerate(result.stakes, start=1)]
        rows.append(("Payout", f"{inp.capital * (1 + result.profit):.2f}"))
        lines += _tree(f"Allocation of capital {inp.capital:.2f}", rows)

    lines.append("─" * WIDTH)
    return "\n".join(lines)


def kelly_payload(inp: KellyInput, result: KellyResult) -> dict[str, Any]:
    fields = asdict(inp)
    fields.pop("mode")
    out = asdict(result)
    out["recommendation"] = result.recommendation.value
    return {"ok": True, "mode": inp.mode, "input": fields, "result": out}


def arbitrage_payload(inp: ArbitrageInput, result: ArbitrageResult) -> dict[str, Any]:
    return {
        "ok": True,
        "mode": "arbitrage",
        "input": {"odds": list(inp.odds), "capital": inp.capital},
        "result": {
            "total_implied_prob": result.total_implied_prob,
            "has_arbitrage": result.has_arbitrage,
            "profit": result.profit,
            "juice": result.juice,
            "stake_ratios": list(result.stake_ratios),
            "stakes": list(result.stakes) if result.stakes is not None else None,
        },
    }


def error_payload(message: str) -> dict[str, Any]:
    return {"ok": False, "error": message}
