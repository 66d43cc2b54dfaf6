"""
Analysis configuration.
Defaults match the keyword defaults of the public operations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .schema import DEFAULT_MODEL


@dataclass(frozen=True)
class CladeAgeConfig:
    # None -> derived from the youngest fossil, with n reduced by one
    baseline: Optional[float] = None

    # cumulative probability covered by density grids
    p_max: float = 0.99

    # upper limit of the uniform draws fed to the quantile function
    max_p: float = 1.0

    model: str = DEFAULT_MODEL

    # pseudoreplication / binning for interval ages
    reps: int = 1000
    breaks: int = 100

    seed: int = 7
