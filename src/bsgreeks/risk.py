"""Bump-and-reprice Greeks.

Central finite differences over any pricer with the signature
``pricer(params, side) -> float``.  Used to cross-check the closed-form
Greeks, so the results are reported in the same display units: theta per
calendar day, vega and rho per 1 percentage-point move.
"""

from __future__ import annotations

from typing import Callable
from dataclasses import replace

from .black_scholes import DAYS_PER_YEAR, price
from .core import MarketParameters, OptionSide

__all__ = ["numerical_greeks"]


def numerical_greeks(
    params: MarketParameters,
    side: OptionSide,
    *,
    pricer: Callable[[MarketParameters, OptionSide], float] = price,
    bump_pct: float = 0.01,
) -> dict[str, float]:
    """Compute Greeks via central finite differences.

    Parameters
    ----------
    params : MarketParameters
    side : OptionSide
    pricer : callable
        ``pricer(params, side) -> float``.  Defaults to the closed form.
    bump_pct : float
        Relative bump size for spot and vol; absolute for rate (default 0.01).

    Returns
    -------
    dict[str, float]
        Keys: ``delta``, ``gamma``, ``vega``, ``theta``, ``rho``.
    """
    if not 0.0 < bump_pct < 1.0:
        raise ValueError(f"bump_pct must be in (0, 1), got {bump_pct}")

    P0 = pricer(params, side)

    # --- Delta & Gamma (spot bump) ---
    eps_S = bump_pct * params.S0
    P_up = pricer(replace(params, S0=params.S0 + eps_S), side)
    P_dn = pricer(replace(params, S0=params.S0 - eps_S), side)
    delta = (P_up - P_dn) / (2.0 * eps_S)
    gamma = (P_up - 2.0 * P0 + P_dn) / (eps_S ** 2)

    # --- Vega (vol bump) ---
    eps_v = max(bump_pct * params.sigma, 1e-4)
    sig_up = params.sigma + eps_v
    sig_dn = max(params.sigma - eps_v, 1e-6)
    P_vup = pricer(replace(params, sigma=sig_up), side)
    P_vdn = pricer(replace(params, sigma=sig_dn), side)
    vega = (P_vup - P_vdn) / (sig_up - sig_dn) / 100.0

    # --- Theta (one calendar day forward) ---
    dt = 1.0 / DAYS_PER_YEAR
    if params.T > dt:
        theta = pricer(replace(params, T=params.T - dt), side) - P0
    else:
        theta = 0.0

    # --- Rho (rate bump) ---
    eps_r = bump_pct
    P_rup = pricer(replace(params, r=params.r + eps_r), side)
    P_rdn = pricer(replace(params, r=params.r - eps_r), side)
    rho = (P_rup - P_rdn) / (2.0 * eps_r) / 100.0

    return {
        "delta": float(delta),
        "gamma": float(gamma),
        "vega": float(vega),
        "theta": float(theta),
        "rho": float(rho),
    }
