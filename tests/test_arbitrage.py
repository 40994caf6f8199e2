import pytest

from kellycalc.core.arbitrage import find_arbitrage, implied_probability
from kellycalc.core.types import ArbitrageInput


def test_implied_probability():
    assert implied_probability(4.0) == 0.25


def test_two_way_arbitrage():
    result = find_arbitrage(ArbitrageInput(odds=(2.1, 2.1), capital=100.0))
    assert result.has_arbitrage
    assert result.total_implied_prob == pytest.approx(2 / 2.1)
    assert result.profit == pytest.approx(0.05)
    assert result.juice == 0.0
    assert result.stake_ratios == pytest.approx((0.5, 0.5))
    assert result.stakes == pytest.approx((50.0, 50.0))


def test_uneven_two_way_stakes_follow_opposite_odds():
    """Stake on side 1 is odds2 / (odds1 + odds2)."""
    result = find_arbitrage(ArbitrageInput(odds=(1.5, 4.0)))
    assert result.has_arbitrage
    assert result.stake_ratios == pytest.approx((4.0 / 5.5, 1.5 / 5.5))
    assert result.stakes is None


def test_every_outcome_pays_the_same():
    odds = (3.0, 3.6, 4.2)
    result = find_arbitrage(ArbitrageInput(odds=odds, capital=1000.0))
    assert result.has_arbitrage
    payouts = [stake * o for stake, o in zip(result.stakes, odds)]
    for payout in payouts:
        assert payout == pytest.approx(1000.0 * (1 + result.profit))


def test_no_arbitrage_reports_juice():
    result = find_arbitrage(ArbitrageInput(odds=(1.9, 1.9), capital=100.0))
    assert not result.has_arbitrage
    assert result.juice == pytest.approx(2 / 1.9 - 1)
    assert result.profit == 0.0
    assert result.stake_ratios == (0.0, 0.0)
    assert result.stakes == (0.0, 0.0)


def test_fair_book_is_not_arbitrage():
    result = find_arbitrage(ArbitrageInput(odds=(2.0, 2.0)))
    assert not result.has_arbitrage
    assert result.juice == 0.0
