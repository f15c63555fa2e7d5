# black_scholes_vec.py
# Vectorised Black-Scholes pricing and Greeks.
# All public functions accept scalars *or* NumPy arrays and broadcast.
# Units and the T <= 0 policy match the scalar engine element by element.

from __future__ import annotations
import numpy as np
from scipy.stats import norm

from .black_scholes import DAYS_PER_YEAR
from .core import MarketParameters, OptionSide, CALL

_N = norm.cdf   # vectorised standard-normal CDF
_n = norm.pdf   # vectorised standard-normal PDF


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------
# Masked-out entries (expired, sigma == 0, overflowing discount) may divide by
# zero or overflow before np.where discards them.
_QUIET = dict(divide="ignore", invalid="ignore", over="ignore")


def _broadcast(S, K, T, r, sigma):
    S, K, T, r, sigma = (np.asarray(x, dtype=float) for x in (S, K, T, r, sigma))
    return np.broadcast_arrays(S, K, T, r, sigma)


def _d1_d2(S, K, T, r, sigma):
    """Compute d1, d2 arrays.  Expired entries are evaluated at T = 1 and
    must be masked out by the caller."""
    T_live = np.where(T > 0, T, 1.0)
    sig_sqrt_T = sigma * np.sqrt(T_live)
    d1 = (np.log(S / K) + (r + 0.5 * sigma * sigma) * T_live) / sig_sqrt_T
    d2 = d1 - sig_sqrt_T
    return d1, d2, T_live


def _is_call(kind) -> np.ndarray:
    """Return boolean mask: True where kind parses to a call."""
    if isinstance(kind, str):
        return np.bool_(OptionSide.parse(kind) is CALL)
    kind = np.asarray(kind, dtype=object)
    return np.array(
        [OptionSide.parse(k if isinstance(k, str) else str(k)) is CALL for k in kind.flat],
        dtype=bool,
    ).reshape(kind.shape)


# ---------------------------------------------------------------------------
# Vectorised price
# ---------------------------------------------------------------------------
def bs_price_vec(S, K, T, r, sigma, kind) -> np.ndarray:
    """Vectorised Black-Scholes price.

    Parameters accept scalars or arrays; NumPy broadcasting rules apply.
    Entries with ``T <= 0`` return intrinsic value.

    Returns
    -------
    np.ndarray
        Option prices (same shape as broadcasted inputs).
    """
    is_call = _is_call(kind)
    S, K, T, r, sigma = _broadcast(S, K, T, r, sigma)
    with np.errstate(**_QUIET):
        d1, d2, T_live = _d1_d2(S, K, T, r, sigma)
        disc_r = np.exp(-r * T_live)
        expired = T <= 0

        call_px = np.where(expired, np.maximum(S - K, 0.0), S * _N(d1) - disc_r * K * _N(d2))
        put_px  = np.where(expired, np.maximum(K - S, 0.0), disc_r * K * _N(-d2) - S * _N(-d1))

    return np.where(is_call, call_px, put_px)


# ---------------------------------------------------------------------------
# Vectorised Greeks
# ---------------------------------------------------------------------------
def bs_greeks_vec(S, K, T, r, sigma, kind) -> dict[str, np.ndarray]:
    """Vectorised Black-Scholes Greeks.

    Returns dict with keys: delta, gamma, vega, theta, rho.
    Theta is per calendar day; vega and rho are per 1% move.
    """
    is_call = _is_call(kind)
    S, K, T, r, sigma = _broadcast(S, K, T, r, sigma)
    with np.errstate(**_QUIET):
        d1, d2, T_live = _d1_d2(S, K, T, r, sigma)
        disc_r = np.exp(-r * T_live)
        sqrt_T = np.sqrt(T_live)
        n_d1 = _n(d1)
        expired = T <= 0
        zero = np.zeros_like(S)

        # Common
        gamma = np.where(expired, zero, n_d1 / (S * sigma * sqrt_T))
        vega  = np.where(expired, zero, S * n_d1 * sqrt_T / 100.0)

        term1 = -S * n_d1 * sigma / (2 * sqrt_T)

        # Call-specific
        delta_c = np.where(expired, np.where(S > K, 1.0, 0.0), _N(d1))
        theta_c = (term1 - r * K * disc_r * _N(d2)) / DAYS_PER_YEAR
        rho_c   = K * T_live * disc_r * _N(d2) / 100.0

        # Put-specific
        delta_p = np.where(expired, np.where(S < K, -1.0, 0.0), _N(d1) - 1.0)
        theta_p = (term1 + r * K * disc_r * _N(-d2)) / DAYS_PER_YEAR
        rho_p   = -K * T_live * disc_r * _N(-d2) / 100.0

        delta = np.where(is_call, delta_c, delta_p)
        theta = np.where(expired, zero, np.where(is_call, theta_c, theta_p))
        rho   = np.where(expired, zero, np.where(is_call, rho_c, rho_p))

    return {"delta": delta, "gamma": gamma, "vega": vega, "theta": theta, "rho": rho}


# ---------------------------------------------------------------------------
# Strike ladder
# ---------------------------------------------------------------------------
def strike_ladder(params: MarketParameters, strikes) -> dict[str, np.ndarray]:
    """Price call and put across many strikes sharing the other inputs.

    Parameters
    ----------
    params : MarketParameters
        Supplies S0, T, r, sigma.  Its own strike is ignored.
    strikes : array-like
        Strikes to evaluate; all must be positive.

    Returns
    -------
    dict
        ``"strikes"``, ``"call"``, ``"put"`` arrays of equal length.
    """
    strikes = np.atleast_1d(np.asarray(strikes, dtype=float))
    if strikes.size == 0 or np.any(~(strikes > 0)):
        raise ValueError("strikes must be a non-empty array of positive values")
    args = (params.S0, strikes, params.T, params.r, params.sigma)
    return {
        "strikes": strikes.copy(),
        "call": bs_price_vec(*args, "call"),
        "put": bs_price_vec(*args, "put"),
    }
