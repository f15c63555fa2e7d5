from __future__ import annotations
import math
from dataclasses import dataclass
from enum import Enum

from .errors import InvalidParameterError


class OptionSide(str, Enum):
    """Which payoff branch a side-dependent Greek evaluates."""
    CALL = "call"
    PUT = "put"

    @classmethod
    def parse(cls, s: str) -> OptionSide:
        """Accept ``call``/``c``/``put``/``p`` in any case."""
        key = s.strip().lower()
        if key in {"call", "c"}:
            return cls.CALL
        if key in {"put", "p"}:
            return cls.PUT
        raise ValueError(f"side must be 'call' or 'put', got {s!r}")


CALL = OptionSide.CALL
PUT  = OptionSide.PUT


@dataclass(frozen=True)
class MarketParameters:
    """The five Black-Scholes inputs for one pricing request.

    Construction is the validation boundary: an instance that exists is
    always safe to hand to the engine.  ``T == 0`` is accepted (the option
    is at expiry and prices at intrinsic value); every other non-rate
    field must be strictly positive.

    Parameters
    ----------
    S0 : float
        Current underlying price.
    K : float
        Strike price.
    T : float
        Time to expiry in years.
    r : float
        Continuously-compounded risk-free rate, decimal.  Any sign.
    sigma : float
        Annualised volatility, decimal.
    """
    S0: float
    K: float
    T: float          # years
    r: float          # continuous risk-free
    sigma: float

    def __post_init__(self):
        for name in ("S0", "K", "T", "r", "sigma"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise InvalidParameterError(name, value, "finite")
        if self.S0 <= 0:
            raise InvalidParameterError("S0", self.S0, "positive")
        if self.K <= 0:
            raise InvalidParameterError("K", self.K, "positive")
        if self.T < 0:
            raise InvalidParameterError("T", self.T, "non-negative")
        if self.sigma <= 0:
            raise InvalidParameterError("sigma", self.sigma, "positive")

    @property
    def expired(self) -> bool:
        return self.T <= 0

    def with_strike(self, K: float) -> MarketParameters:
        """Same market, different strike (used by scenario analysis)."""
        return MarketParameters(S0=self.S0, K=K, T=self.T, r=self.r, sigma=self.sigma)
