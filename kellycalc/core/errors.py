from __future__ import annotations


class KellyInputError(ValueError):
    """Raised by the validator for any input the engine must not see."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"invalid {field}: {reason}")


class ParseFailure(KellyInputError):
    pass


class InvalidOdds(KellyInputError):
    pass


class InvalidProbability(KellyInputError):
    pass


class InvalidPrice(KellyInputError):
    pass


class InvalidCapital(KellyInputError):
    pass


class InvalidStockLevels(KellyInputError):
    pass


class InvalidOddsCount(KellyInputError):
    pass
