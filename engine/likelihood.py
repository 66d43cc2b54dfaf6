"""
Probability density of clade age from exact fossil ages.

For fossil ages drawn uniformly below a true clade age Y, the joint probability
of the observed ages is proportional to 1 / Y^n (Wang 2010), read here as a
likelihood over candidate ages Y. The curve is evaluated on unit steps from the
oldest fossil up to the age where the Strauss & Sadler model reaches p_max
(Solow 2003, eq. 4), then rescaled so its area equals p_max.

All arithmetic is done on ages shifted by the baseline; the grid is shifted
back before returning, so it starts exactly at the oldest fossil.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from core.errors import DomainError
from core.utils import as_age_array, check_probability, resolve_baseline

from .base import DensityCurve

logger = logging.getLogger(__name__)


def grid_upper_bound(oldest: float, n: int, p_max: float) -> float:
    """Shifted age at which the Strauss & Sadler cumulative probability reaches p_max."""
    return oldest * (1.0 - p_max) ** (-1.0 / n)


def density(ages, baseline: Optional[float] = None, p_max: float = 0.99) -> DensityCurve:
    """
    Clade-age density for fossil ages known without error.

    Parameters
    ----------
    ages : sequence of float
        Fossil ages.
    baseline : float, optional
        Reference age (e.g. 0 for the present). If omitted, the youngest age is
        used and n is reduced by one.
    p_max : float
        Cumulative probability the grid should cover, in (0, 1).

    Returns
    -------
    DensityCurve on ages max(ages), max(ages) + 1, ...
    """
    ages = as_age_array(ages)
    p_max = check_probability(p_max, "p_max")
    base, n = resolve_baseline(ages, baseline)
    if n < 1:
        raise DomainError(
            "ages", len(ages), "effective sample size is 0; supply a baseline or more ages"
        )

    shifted = ages - base
    oldest = float(shifted.max())
    if oldest <= 0:
        raise DomainError(
            "ages", ages.tolist(), "the oldest age equals the baseline; the likelihood is undefined"
        )

    upper = grid_upper_bound(oldest, n, p_max)
    # unit steps, upper end included when it falls on a step
    steps = np.floor(upper - oldest + 1e-9)
    grid = oldest + np.arange(int(steps) + 1, dtype=float)

    # 1 / Y^n relative to the first point; the constant cancels in the rescale
    lik = np.exp(-n * np.log(grid / oldest))

    # trapezoid rule on unit steps of a decreasing curve
    area = lik.sum() - lik[0] / 2.0
    prob = lik * p_max / area

    logger.debug("density grid: %d points from %.3f to %.3f (n=%d, baseline=%.3f)",
                 len(grid), grid[0] + base, grid[-1] + base, n, base)
    return DensityCurve(age=grid + base, p=prob)
