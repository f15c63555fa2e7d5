# black_scholes.py
# Closed-form Black-Scholes prices and Greeks for European options (no dividends).
# Every function is pure and special-cases T <= 0 before touching d1/d2.

from __future__ import annotations
import math
from math import log, sqrt, exp
from dataclasses import dataclass
from typing import Dict

from .core import MarketParameters, OptionSide, CALL, PUT
from .errors import NumericDegeneracyError

__all__ = [
    "normal_cdf", "normal_pdf", "d1", "d2",
    "call_price", "put_price", "price",
    "delta", "gamma", "theta", "vega", "rho", "greeks",
    "OptionValuation", "valuate",
    "DAYS_PER_YEAR",
]

DAYS_PER_YEAR = 365.0
_INV_SQRT_2PI = 1.0 / sqrt(2.0 * math.pi)


def normal_cdf(x: float) -> float:
    """Standard normal CDF, Phi(x) = 0.5 * (1 + erf(x / sqrt(2)))."""
    return 0.5 * (1.0 + math.erf(x / sqrt(2.0)))


def normal_pdf(x: float) -> float:
    """Standard normal density, phi(x)."""
    return _INV_SQRT_2PI * exp(-0.5 * x * x)


def _sig_sqrt_T(p: MarketParameters) -> float:
    rt = p.sigma * sqrt(p.T) if p.T > 0 else 0.0
    if rt == 0.0:
        raise NumericDegeneracyError(
            f"sigma*sqrt(T) is zero (sigma={p.sigma}, T={p.T}); d1/d2 undefined"
        )
    return rt


def _discount(p: MarketParameters) -> float:
    """e^(-rT); a large negative rate can push this past float range."""
    try:
        return exp(-p.r * p.T)
    except OverflowError:
        raise NumericDegeneracyError(
            f"discount factor exp(-r*T) overflows (r={p.r}, T={p.T})"
        ) from None


def d1(p: MarketParameters) -> float:
    """(ln(S/K) + (r + sigma^2/2) T) / (sigma sqrt(T)).  Requires T > 0."""
    rt = _sig_sqrt_T(p)
    return (log(p.S0 / p.K) + (p.r + 0.5 * p.sigma * p.sigma) * p.T) / rt


def d2(p: MarketParameters) -> float:
    return d1(p) - _sig_sqrt_T(p)


# ---------------------------------------------------------------------------
# Prices
# ---------------------------------------------------------------------------
def call_price(p: MarketParameters) -> float:
    if p.T <= 0:
        return max(p.S0 - p.K, 0.0)
    return p.S0 * normal_cdf(d1(p)) - p.K * _discount(p) * normal_cdf(d2(p))


def put_price(p: MarketParameters) -> float:
    if p.T <= 0:
        return max(p.K - p.S0, 0.0)
    return p.K * _discount(p) * normal_cdf(-d2(p)) - p.S0 * normal_cdf(-d1(p))


def price(p: MarketParameters, side: OptionSide = CALL) -> float:
    if side == CALL:
        return call_price(p)
    elif side == PUT:
        return put_price(p)
    else:
        raise ValueError("side must be 'call' or 'put'")


# ---------------------------------------------------------------------------
# Greeks
# ---------------------------------------------------------------------------
def delta(p: MarketParameters, side: OptionSide = CALL) -> float:
    """dPrice/dS.

    At expiry the step function is used: a call is 1 strictly in the money,
    a put is -1 strictly in the money, and both are 0 at S == K.
    """
    if p.T <= 0:
        if side == CALL:
            return 1.0 if p.S0 > p.K else 0.0
        return -1.0 if p.S0 < p.K else 0.0
    N_d1 = normal_cdf(d1(p))
    return N_d1 if side == CALL else N_d1 - 1.0


def gamma(p: MarketParameters) -> float:
    if p.T <= 0:
        return 0.0
    return normal_pdf(d1(p)) / (p.S0 * p.sigma * sqrt(p.T))


def theta(p: MarketParameters, side: OptionSide = CALL) -> float:
    """Time decay per calendar day (annual theta / 365)."""
    if p.T <= 0:
        return 0.0
    term1 = -(p.S0 * normal_pdf(d1(p)) * p.sigma) / (2.0 * sqrt(p.T))
    carry = p.r * p.K * _discount(p)
    if side == CALL:
        return (term1 - carry * normal_cdf(d2(p))) / DAYS_PER_YEAR
    return (term1 + carry * normal_cdf(-d2(p))) / DAYS_PER_YEAR


def vega(p: MarketParameters) -> float:
    """Price change per 1 percentage-point move in volatility."""
    if p.T <= 0:
        return 0.0
    return p.S0 * normal_pdf(d1(p)) * sqrt(p.T) / 100.0


def rho(p: MarketParameters, side: OptionSide = CALL) -> float:
    """Price change per 1 percentage-point move in the rate."""
    if p.T <= 0:
        return 0.0
    disc = p.K * p.T * _discount(p)
    if side == CALL:
        return disc * normal_cdf(d2(p)) / 100.0
    return -disc * normal_cdf(-d2(p)) / 100.0


def greeks(p: MarketParameters, side: OptionSide = CALL) -> Dict[str, float]:
    """Returns greeks in display units: theta per day, vega and rho per 1%."""
    return {
        "delta": delta(p, side),
        "gamma": gamma(p),
        "vega": vega(p),
        "theta": theta(p, side),
        "rho": rho(p, side),
    }


# ---------------------------------------------------------------------------
# Full valuation
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class OptionValuation:
    """Both prices and every Greek for one set of market parameters."""
    params: MarketParameters
    call_price: float
    put_price: float
    call_delta: float
    put_delta: float
    gamma: float
    call_theta: float
    put_theta: float
    vega: float
    call_rho: float
    put_rho: float


def valuate(p: MarketParameters) -> OptionValuation:
    return OptionValuation(
        params=p,
        call_price=call_price(p),
        put_price=put_price(p),
        call_delta=delta(p, CALL),
        put_delta=delta(p, PUT),
        gamma=gamma(p),
        call_theta=theta(p, CALL),
        put_theta=theta(p, PUT),
        vega=vega(p),
        call_rho=rho(p, CALL),
        put_rho=rho(p, PUT),
    )
