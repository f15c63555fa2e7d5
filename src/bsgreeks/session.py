"""Interactive prompt-and-report loop.

Each pass reads five numbers, builds a fresh :class:`MarketParameters`,
prints the valuation and scenario analysis, then asks whether to go again.
Nothing carries over from one pass to the next.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from .black_scholes import valuate
from .config import Settings
from .core import MarketParameters
from .errors import InvalidParameterError, PricingError
from .report import format_results, format_scenarios
from .scenario import scenario_analysis

__all__ = ["run_session", "prompt_float", "PROMPTS"]

logger = logging.getLogger(__name__)

PROMPTS = (
    ("S0", "Current Stock Price: $"),
    ("K", "Strike Price: $"),
    ("T", "Time to Expiration (years): "),
    ("r", "Risk-free Rate (as decimal, e.g., 0.05 for 5%): "),
    ("sigma", "Volatility (as decimal, e.g., 0.20 for 20%): "),
)

INVALID_MSG = (
    "Error: Invalid input parameters. "
    "Please ensure all values are positive (T can be zero)."
)
NUMERIC_MSG = "Error: These parameters cannot be priced numerically. Please try other values."
AGAIN_PROMPT = "\nDo you want to calculate another option? (y/n): "
FAREWELL = "Thank you for using the Black-Scholes Calculator!"


def _readline(msg: str, stdin: TextIO, stdout: TextIO) -> str:
    stdout.write(msg)
    stdout.flush()
    line = stdin.readline()
    if not line:
        raise EOFError
    return line.strip()


def prompt_float(msg: str, stdin: TextIO, stdout: TextIO) -> float:
    """Ask until the answer parses as a float.  Raises EOFError on end of input."""
    while True:
        s = _readline(msg, stdin, stdout)
        try:
            return float(s)
        except ValueError:
            logger.debug("rejected non-numeric entry %r", s)
            print("Please enter a number.", file=stdout)


def _read_parameters(stdin: TextIO, stdout: TextIO) -> dict[str, float]:
    print("=== Black-Scholes Option Pricing Calculator ===", file=stdout)
    print("Enter the following parameters:", file=stdout)
    return {name: prompt_float(msg, stdin, stdout) for name, msg in PROMPTS}


def run_session(
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    settings: Optional[Settings] = None,
) -> int:
    """Run the calculator until the user declines or input ends.

    Returns the number of option sets that were priced.
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    settings = Settings() if settings is None else settings
    priced = 0

    while True:
        try:
            raw = _read_parameters(stdin, stdout)
        except EOFError:
            print(file=stdout)
            break

        try:
            params = MarketParameters(**raw)
        except InvalidParameterError as e:
            logger.warning("rejected parameters %s: %s", raw, e)
            print(INVALID_MSG, file=stdout)
            continue

        try:
            valuation = valuate(params)
            scenarios = scenario_analysis(
                params,
                itm_ratio=settings.itm_strike_ratio,
                otm_ratio=settings.otm_strike_ratio,
            )
        except PricingError as e:
            logger.warning("could not price %s: %s", params, e)
            print(f"{NUMERIC_MSG} ({e})", file=stdout)
            continue

        priced += 1
        logger.info(
            "priced S0=%s K=%s T=%s r=%s sigma=%s call=%.6f put=%.6f",
            params.S0, params.K, params.T, params.r, params.sigma,
            valuation.call_price, valuation.put_price,
        )
        print(format_results(valuation, settings.precision), file=stdout)
        print(format_scenarios(scenarios, settings.precision), file=stdout)

        try:
            answer = ""
            while not answer:
                answer = _readline(AGAIN_PROMPT, stdin, stdout)
        except EOFError:
            print(file=stdout)
            break
        if not answer.lower().startswith("y"):
            break

    print(FAREWELL, file=stdout)
    logger.debug("session ended after %d valuation(s)", priced)
    return priced
