# bsgreeks: Black-Scholes prices and Greeks for European options
# Public API

from .core import MarketParameters, OptionSide, CALL, PUT
from .errors import PricingError, InvalidParameterError, NumericDegeneracyError

# Scalar closed form
from .black_scholes import (
    normal_cdf, normal_pdf, d1, d2,
    call_price, put_price, price,
    delta, gamma, theta, vega, rho, greeks,
    OptionValuation, valuate,
)

# Vectorised
from .black_scholes_vec import bs_price_vec, bs_greeks_vec, strike_ladder

# Scenarios & risk cross-check
from .scenario import Scenario, scenario_analysis
from .risk import numerical_greeks

from .config import Settings

__all__ = [
    "MarketParameters", "OptionSide", "CALL", "PUT",
    "PricingError", "InvalidParameterError", "NumericDegeneracyError",
    # Scalar
    "normal_cdf", "normal_pdf", "d1", "d2",
    "call_price", "put_price", "price",
    "delta", "gamma", "theta", "vega", "rho", "greeks",
    "OptionValuation", "valuate",
    # Vectorised
    "bs_price_vec", "bs_greeks_vec", "strike_ladder",
    # Scenarios & risk
    "Scenario", "scenario_analysis", "numerical_greeks",
    "Settings",
]

__version__ = "0.1.0"
