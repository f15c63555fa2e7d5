"""Moneyness scenarios: reprice with the strike moved relative to spot."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .black_scholes import call_price, put_price
from .core import MarketParameters

__all__ = ["Scenario", "scenario_analysis"]


@dataclass(frozen=True)
class Scenario:
    """One repriced strike.  ``put`` is only filled for the ATM case."""
    label: str
    strike: float
    call: float
    put: Optional[float] = None


def scenario_analysis(
    params: MarketParameters,
    *,
    itm_ratio: float = 0.9,
    otm_ratio: float = 1.1,
) -> list[Scenario]:
    """At-the-money, in-the-money call and out-of-the-money call.

    All three share ``S0``, ``T``, ``r`` and ``sigma`` with *params*; only the
    strike changes (``K = S0``, ``itm_ratio * S0``, ``otm_ratio * S0``).
    """
    S = params.S0
    atm = params.with_strike(S)
    itm = params.with_strike(S * itm_ratio)
    otm = params.with_strike(S * otm_ratio)
    return [
        Scenario("At-the-Money", atm.K, call_price(atm), put_price(atm)),
        Scenario("In-the-Money Call", itm.K, call_price(itm)),
        Scenario("Out-of-the-Money Call", otm.K, call_price(otm)),
    ]
