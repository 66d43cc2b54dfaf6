"""
Pseudoreplication runner — propagates fossil age uncertainty into the clade-age density.

Each pseudoreplicate draws one age per fossil, uniformly inside that fossil's
stratigraphic bounds, and runs the exact-age density on the draw. The replicate
curves start at different ages (whatever the oldest draw was), so they are
re-binned onto a shared grid and averaged (engine/aggregator.py).

There is no closed form for this: the grid bound of each replicate depends
non-linearly on its oldest draw.

Also here: estimate_density(), which picks the exact or interval path from the
shape of the input, and oldest_bound_overlay() for whoever draws the result.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

import numpy as np
import pandas as pd

from core.config import CladeAgeConfig
from core.errors import DomainError
from core.utils import check_positive_int, check_probability, resolve_baseline
from data_prep.intervals import FossilInterval, as_age_bounds

from .aggregator import aggregate_replicate_curves
from .base import DensityCurve
from .likelihood import density

logger = logging.getLogger(__name__)


def draw_pseudoreplicates(
    older: np.ndarray,
    younger: np.ndarray,
    reps: int,
    rng: np.random.Generator,
) -> np.ndarray:
    """(reps, N) matrix of fossil ages, each uniform within its own bounds."""
    return rng.uniform(younger, older, size=(reps, len(older)))


def density_with_uncertainty(
    age_bounds,
    baseline: Optional[float] = None,
    p_max: float = 0.99,
    reps: int = 1000,
    breaks: int = 100,
    *,
    rng: Optional[np.random.Generator] = None,
) -> DensityCurve:
    """
    Clade-age density for fossils whose ages are known only to an interval.

    Parameters
    ----------
    age_bounds
        N fossil intervals: FossilInterval objects, (older, younger) pairs, an
        N x 2 array (column 0 older bound, column 1 younger bound) or a
        DataFrame with older/younger columns.
    baseline : float, optional
        Reference age; if omitted each replicate uses its own youngest draw and
        n - 1.
    p_max : float
        Cumulative probability covered by each replicate's grid.
    reps : int
        Number of pseudoreplicates.
    breaks : int
        Number of bin edges of the shared grid; breaks - 1 bins are returned.
    rng : numpy.random.Generator, optional
        Randomness source; a fresh unseeded generator when omitted.

    Returns
    -------
    DensityCurve with age = left edge of each bin and p = mean replicate mass in it.
    """
    older, younger = as_age_bounds(age_bounds)
    p_max = check_probability(p_max, "p_max")
    reps = check_positive_int(reps, "reps")
    breaks = check_positive_int(breaks, "breaks", minimum=2)
    _, n = resolve_baseline(younger, baseline)
    if n < 1:
        raise DomainError(
            "age_bounds", len(older), "effective sample size is 0; supply a baseline or more fossils"
        )
    rng = rng if rng is not None else np.random.default_rng()

    sim_ages = draw_pseudoreplicates(older, younger, reps, rng)
    curves = [density(row, baseline=baseline, p_max=p_max) for row in sim_ages]

    # every replicate's oldest draw is at least the oldest younger bound, so
    # starting the bins there keeps all replicate mass on the grid
    start = float(younger.max())
    logger.debug("aggregating %d pseudoreplicates of %d fossils into %d bins from %.3f",
                 reps, len(older), breaks - 1, start)
    return aggregate_replicate_curves(curves, start=start, breaks=breaks)


def estimate_density(x, config: Optional[CladeAgeConfig] = None) -> DensityCurve:
    """
    Exact-age or interval density, chosen by the shape of `x`.

    A vector (or single-column table) of ages goes to density(); two columns or
    a list of FossilInterval go to density_with_uncertainty(). Anything else is
    rejected.
    """
    cfg = config or CladeAgeConfig()

    if isinstance(x, pd.DataFrame):
        n_cols = x.shape[1]
        if n_cols == 1:
            return density(x.iloc[:, 0].to_numpy(dtype=float), baseline=cfg.baseline, p_max=cfg.p_max)
    elif len(x) and all(isinstance(b, FossilInterval) for b in x):
        n_cols = 2
    else:
        arr = np.asarray(x, dtype=float)
        if arr.ndim == 1:
            return density(arr, baseline=cfg.baseline, p_max=cfg.p_max)
        n_cols = arr.shape[1] if arr.ndim == 2 else -1
        if n_cols == 1:
            return density(arr[:, 0], baseline=cfg.baseline, p_max=cfg.p_max)

    if n_cols != 2:
        raise DomainError("x", np.shape(x), "check the format of input data x: expected 1 or 2 columns")

    return density_with_uncertainty(
        x,
        baseline=cfg.baseline,
        p_max=cfg.p_max,
        reps=cfg.reps,
        breaks=cfg.breaks,
        rng=np.random.default_rng(cfg.seed),
    )


def oldest_bound_overlay(x) -> Tuple[float, float]:
    """
    Age span to highlight behind a density plot.

    Exact ages give a single line at the oldest fossil (start == end); interval
    ages give the band from the oldest younger bound to the oldest older bound.
    """
    if isinstance(x, pd.DataFrame):
        if x.shape[1] == 1:
            oldest = float(x.iloc[:, 0].max())
            return oldest, oldest
    elif not (len(x) and all(isinstance(b, FossilInterval) for b in x)):
        # a single column of exact ages may arrive flat or as (N, 1)
        if np.ndim(x) == 1 or (np.ndim(x) == 2 and np.shape(x)[1] == 1):
            oldest = float(np.max(x))
            return oldest, oldest
    older, younger = as_age_bounds(x)
    return float(younger.max()), float(older.max())
