"""Plain-text rendering of a valuation and its scenario analysis."""

from __future__ import annotations

from .black_scholes import OptionValuation
from .scenario import Scenario

__all__ = ["format_results", "format_scenarios"]


def format_results(v: OptionValuation, precision: int = 4) -> str:
    p = v.params

    def f(x: float) -> str:
        return f"{x:.{precision}f}"

    lines = [
        "",
        "=== Black-Scholes Option Pricing Results ===",
        "Parameters:",
        f"  Stock Price (S): ${f(p.S0)}",
        f"  Strike Price (K): ${f(p.K)}",
        f"  Time to Expiry (T): {f(p.T)} years",
        f"  Risk-free Rate (r): {f(p.r * 100)}%",
        f"  Volatility (σ): {f(p.sigma * 100)}%",
        "",
        "Option Prices:",
        f"  Call Price: ${f(v.call_price)}",
        f"  Put Price: ${f(v.put_price)}",
        "",
        "Greeks:",
        f"  Call Delta: {f(v.call_delta)}",
        f"  Put Delta: {f(v.put_delta)}",
        f"  Gamma: {f(v.gamma)}",
        f"  Call Theta: {f(v.call_theta)} (per day)",
        f"  Put Theta: {f(v.put_theta)} (per day)",
        f"  Vega: {f(v.vega)} (per 1% vol change)",
        f"  Call Rho: {f(v.call_rho)} (per 1% rate change)",
        f"  Put Rho: {f(v.put_rho)} (per 1% rate change)",
    ]
    return "\n".join(lines)


def format_scenarios(scenarios: list[Scenario], precision: int = 4) -> str:
    lines = ["", "=== Scenario Analysis ==="]
    for s in scenarios:
        if s.put is not None:
            lines.append(f"{s.label} (K = S = ${s.strike:.{precision}f}):")
        else:
            lines.append(f"{s.label} (K = ${s.strike:.{precision}f}):")
        lines.append(f"  Call Price: ${s.call:.{precision}f}")
        if s.put is not None:
            lines.append(f"  Put Price: ${s.put:.{precision}f}")
    return "\n".join(lines)
