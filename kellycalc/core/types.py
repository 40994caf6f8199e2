from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, Union


Mode = Literal["standard", "polymarket", "stock"]


class Recommendation(str, Enum):
    BET = "BET"
    NO_BET = "NO_BET"
    NEGATIVE_EDGE = "NEGATIVE_EDGE"


@dataclass(frozen=True)
class StandardInput:
    odds: float  # decimal odds, > 1
    win_rate: float  # (0,1)
    capital: float | None = None
    mode: Mode = field(default="standard", init=False)


@dataclass(frozen=True)
class PolymarketInput:
    market_price: float  # implied probability in (0,1)
    your_probability: float
    capital: float | None = None
    mode: Mode = field(default="polymarket", init=False)


@dataclass(frozen=True)
class StockInput:
    entry_price: float
    target_price: float
    stop_loss: float
    win_rate: float
    capital: float | None = None
    mode: Mode = field(default="stock", init=False)

    @property
    def profit(self) -> float:
        return self.target_price - self.entry_price

    @property
    def risk(self) -> float:
        return self.entry_price - self.stop_loss

    @property
    def reward_risk_ratio(self) -> float:
        return self.profit / self.risk

    @property
    def stop_distance(self) -> float:
        """Stop-loss distance as a fraction of the entry price."""
        return self.risk / self.entry_price


KellyInput = Union[StandardInput, PolymarketInput, StockInput]


@dataclass(frozen=True)
class Allocation:
    full_amount: float
    half_amount: float
    quarter_amount: float


@dataclass(frozen=True)
class KellyResult:
    fraction: float  # signed, never clamped
    expected_value: float  # per unit staked
    recommendation: Recommendation
    full_amount: float | None = None
    half_amount: float | None = None
    quarter_amount: float | None = None
    # stock mode only: share of capital to deploy so a stop-out loses `fraction`
    position_fraction: float | None = None
    position: Allocation | None = None

    @property
    def allocation(self) -> Allocation | None:
        if self.full_amount is None:
            return None
        return Allocation(self.full_amount, self.half_amount, self.quarter_amount)  # type: ignore[arg-type]


@dataclass(frozen=True)
class ArbitrageInput:
    odds: tuple[float, ...]
    capital: float | None = None


@dataclass(frozen=True)
class ArbitrageResult:
    total_implied_prob: float
    has_arbitrage: bool
    profit: float  # guaranteed return on total stake, 0 without arbitrage
    juice: float  # bookmaker margin, 0 with arbitrage
    stake_ratios: tuple[float, ...]
    stakes: tuple[float, ...] | None = None
