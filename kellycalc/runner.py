from __future__ import annotations

import json
from typing import Any

from rich.console import Console

from kellycalc.core.arbitrage import find_arbitrage
from kellycalc.core.risk import evaluate
from kellycalc.core.types import ArbitrageInput, ArbitrageResult, KellyInput, KellyResult
from kellycalc.display import (
    arbitrage_payload,
    error_payload,
    format_arbitrage,
    format_kelly,
    kelly_payload,
)
from kellycalc.settings import settings


console = Console()
log_console = Console(stderr=True)


def trace(message: str, verbose: bool = False) -> None:
    if verbose or settings.verbose:
        log_console.log(message, emoji=False)


def _emit(text: str) -> None:
    console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)


def _emit_json(payload: dict[str, Any]) -> None:
    console.print_json(json.dumps(payload))


def run_kelly(inp: KellyInput, *, json_output: bool = False, verbose: bool = False) -> KellyResult:
    """Compute, allocate and print one Kelly result."""
    trace(f"input {inp}", verbose)
    result = evaluate(inp, min_fraction=settings.min_fraction)
    trace(f"result fraction={result.fraction:.6f} ev={result.expected_value:.6f} {result.recommendation.value}", verbose)

    if json_output:
        _emit_json(kelly_payload(inp, result))
    else:
        _emit(format_kelly(inp, result, precision=settings.precision))
    return result


def run_arbitrage(inp: ArbitrageInput, *, json_output: bool = False, verbose: bool = False) -> ArbitrageResult:
    trace(f"input {inp}", verbose)
    result = find_arbitrage(inp)
    trace(f"result total_implied={result.total_implied_prob:.6f} arbitrage={result.has_arbitrage}", verbose)

    if json_output:
        _emit_json(arbitrage_payload(inp, result))
    else:
        _emit(format_arbitrage(inp, result, precision=settings.precision))
    return result


def report_error(message: str, *, json_output: bool = False) -> None:
    if json_output:
        _emit_json(error_payload(message))
    else:
        log_console.print(f"✗ {message}", markup=False, emoji=False, highlight=False, soft_wrap=True)
