"""
Tests for input parsing and normalization.

Covers the boundary rejections of every field, percent/cents normalization and
the fixed order in which fields are checked.
"""

import math

import pytest

from kellycalc.core.errors import (
    InvalidCapital,
    InvalidOdds,
    InvalidOddsCount,
    InvalidPrice,
    InvalidProbability,
    InvalidStockLevels,
    KellyInputError,
    ParseFailure,
)
from kellycalc.core.types import PolymarketInput, StandardInput, StockInput
from kellycalc.core.validation import (
    check_probability,
    parse_capital,
    parse_count,
    parse_market_price,
    parse_number,
    parse_odds,
    parse_percent,
    validate_arbitrage,
    validate_polymarket,
    validate_standard,
    validate_stock,
)


class TestParseNumber:

    def test_accepts_strings_and_numbers(self):
        assert parse_number(" 2.5 ", "odds") == 2.5
        assert parse_number(3, "odds") == 3.0

    def test_non_numeric_is_parse_failure(self):
        """Scenario: odds='abc' never reaches the engine."""
        with pytest.raises(ParseFailure, match="invalid odds"):
            parse_number("abc", "odds")

    def test_empty_is_parse_failure(self):
        with pytest.raises(ParseFailure):
            parse_number("", "win rate")

    def test_errors_are_value_errors(self):
        """Callers that only know ValueError still catch validation failures."""
        with pytest.raises(ValueError):
            parse_odds("x")


class TestParseOdds:

    def test_exactly_one_rejected(self):
        with pytest.raises(InvalidOdds):
            parse_odds("1.0")

    def test_just_above_one_accepted(self):
        assert parse_odds("1.0000001") == pytest.approx(1.0000001)

    def test_below_one_rejected(self):
        with pytest.raises(InvalidOdds):
            parse_odds("0.9")

    def test_infinite_odds_rejected(self):
        with pytest.raises(InvalidOdds):
            parse_odds("inf")

    def test_nan_rejected(self):
        with pytest.raises(InvalidOdds):
            parse_odds("nan")

    def test_error_names_field(self):
        with pytest.raises(InvalidOdds) as exc:
            parse_odds("1", "odds 2")
        assert exc.value.field == "odds 2"
        assert "greater than 1.0" in exc.value.reason


class TestProbability:

    def test_percent_is_normalized(self):
        assert parse_percent("60") == pytest.approx(0.6)

    @pytest.mark.parametrize("raw", ["0", "100", "-1", "101"])
    def test_closed_bounds_rejected(self, raw):
        with pytest.raises(InvalidProbability):
            parse_percent(raw)

    @pytest.mark.parametrize("p", [0.0, 1.0, math.nan])
    def test_decimal_bounds_rejected(self, p):
        with pytest.raises(InvalidProbability):
            check_probability(p)

    def test_interior_accepted(self):
        assert check_probability(0.999) == 0.999


class TestMarketPrice:

    def test_cents_are_normalized(self):
        assert parse_market_price("60") == pytest.approx(0.6)

    @pytest.mark.parametrize("raw", ["0", "100", "-5", "150"])
    def test_degenerate_prices_rejected(self, raw):
        with pytest.raises(InvalidPrice):
            parse_market_price(raw)

    def test_fractional_cents_accepted(self):
        assert parse_market_price("0.5") == pytest.approx(0.005)


class TestCapital:

    def test_absent_capital_is_none(self):
        assert parse_capital(None) is None
        assert parse_capital("  ") is None

    def test_zero_accepted(self):
        assert parse_capital("0") == 0.0

    @pytest.mark.parametrize("raw", ["-1", "inf", "nan"])
    def test_negative_or_non_finite_rejected(self, raw):
        with pytest.raises(InvalidCapital):
            parse_capital(raw)

    def test_non_numeric_is_parse_failure(self):
        with pytest.raises(ParseFailure):
            parse_capital("lots")


class TestValidateStandard:

    def test_builds_record(self):
        inp = validate_standard("2.0", "60", "1000")
        assert inp == StandardInput(odds=2.0, win_rate=pytest.approx(0.6), capital=1000.0)
        assert inp.mode == "standard"

    def test_capital_optional(self):
        assert validate_standard("2.0", "60").capital is None

    def test_odds_checked_first(self):
        with pytest.raises(ParseFailure):
            validate_standard("abc", "150", "-1")

    def test_probability_checked_before_capital(self):
        with pytest.raises(InvalidProbability):
            validate_standard("2.0", "150", "-1")

    def test_capital_checked_last(self):
        with pytest.raises(InvalidCapital):
            validate_standard("2.0", "60", "-1")


class TestValidatePolymarket:

    def test_builds_record(self):
        inp = validate_polymarket("60", "75", "1000")
        assert isinstance(inp, PolymarketInput)
        assert inp.market_price == pytest.approx(0.6)
        assert inp.your_probability == pytest.approx(0.75)
        assert inp.mode == "polymarket"

    def test_price_checked_before_probability(self):
        with pytest.raises(InvalidPrice):
            validate_polymarket("100", "0")

    def test_probability_field_named(self):
        with pytest.raises(InvalidProbability, match="your probability"):
            validate_polymarket("60", "100")


class TestValidateStock:

    def test_builds_record(self):
        inp = validate_stock("100", "120", "90", "50")
        assert isinstance(inp, StockInput)
        assert inp.reward_risk_ratio == pytest.approx(2.0)
        assert inp.stop_distance == pytest.approx(0.1)

    def test_prices_must_be_positive(self):
        with pytest.raises(InvalidPrice, match="stop loss"):
            validate_stock("100", "120", "0", "50")

    def test_target_must_exceed_entry(self):
        with pytest.raises(InvalidStockLevels, match="target price"):
            validate_stock("100", "100", "90", "50")

    def test_stop_must_be_below_entry(self):
        with pytest.raises(InvalidStockLevels, match="stop loss"):
            validate_stock("100", "120", "110", "50")

    def test_field_errors_before_level_errors(self):
        with pytest.raises(InvalidProbability):
            validate_stock("100", "90", "110", "0")


class TestValidateArbitrage:

    def test_builds_record(self):
        inp = validate_arbitrage(["2.1", "2.1"], "100")
        assert inp.odds == (2.1, 2.1)
        assert inp.capital == 100.0

    def test_needs_two_outcomes(self):
        with pytest.raises(InvalidOddsCount):
            validate_arbitrage(["2.0"])

    def test_each_odds_checked(self):
        with pytest.raises(InvalidOdds, match="odds 3"):
            validate_arbitrage(["2.0", "3.0", "1.0"])

    def test_parse_count(self):
        assert parse_count("3") == 3
        with pytest.raises(InvalidOddsCount):
            parse_count("1")
        with pytest.raises(ParseFailure):
            parse_count("2.5")

    def test_all_errors_share_base(self):
        for call in (lambda: parse_count("x"), lambda: validate_arbitrage([])):
            with pytest.raises(KellyInputError):
                call()
