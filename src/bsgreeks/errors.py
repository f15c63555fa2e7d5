"""Exception hierarchy for the pricing engine."""

from __future__ import annotations

__all__ = ["PricingError", "InvalidParameterError", "NumericDegeneracyError"]


class PricingError(Exception):
    """Base class for every error raised by ``bsgreeks``."""


class InvalidParameterError(PricingError, ValueError):
    """A market parameter lies outside its domain (e.g. ``S0 <= 0``)."""

    def __init__(self, field: str, value: float, requirement: str):
        self.field = field
        self.value = value
        super().__init__(f"{field} must be {requirement}, got {value}")


class NumericDegeneracyError(PricingError, ArithmeticError):
    """``sigma * sqrt(T)`` vanished or the discount factor overflowed."""
