"""Runtime settings for the calculator front-ends.

There is no configuration file: defaults live here, ``BSGREEKS_*``
environment variables override them and command-line flags override both.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

__all__ = ["Settings", "ENV_PREFIX"]

ENV_PREFIX = "BSGREEKS_"


@dataclass(frozen=True)
class Settings:
    """Display and scenario settings.

    Parameters
    ----------
    precision : int
        Decimal places in the text report.
    itm_strike_ratio : float
        Strike / spot for the in-the-money call scenario.
    otm_strike_ratio : float
        Strike / spot for the out-of-the-money call scenario.
    log_level : str
        Name of a :mod:`logging` level.
    """
    precision: int = 4
    itm_strike_ratio: float = 0.9
    otm_strike_ratio: float = 1.1
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.precision < 0:
            raise ValueError(f"precision must be non-negative, got {self.precision}")
        if not 0 < self.itm_strike_ratio < 1:
            raise ValueError(
                f"itm_strike_ratio must be in (0, 1), got {self.itm_strike_ratio}"
            )
        if self.otm_strike_ratio <= 1:
            raise ValueError(
                f"otm_strike_ratio must be above 1, got {self.otm_strike_ratio}"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"unknown log level {self.log_level!r}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        env = os.environ if environ is None else environ
        kwargs = {}
        raw = env.get(ENV_PREFIX + "PRECISION")
        if raw is not None:
            try:
                kwargs["precision"] = int(raw)
            except ValueError:
                raise ValueError(
                    f"{ENV_PREFIX}PRECISION must be an integer, got {raw!r}"
                ) from None
        raw = env.get(ENV_PREFIX + "LOG_LEVEL")
        if raw is not None:
            kwargs["log_level"] = raw
        return cls(**kwargs)

    def override(self, **changes) -> Settings:
        """Copy with every non-``None`` keyword applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
