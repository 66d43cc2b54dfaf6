"""
Combine many pseudoreplicate density curves into one empirical distribution.

Each replicate's curve sits on its own grid (its first point is that
replicate's oldest fossil), so the curves cannot be averaged point by point.
Instead every (age, p) point is treated as a point mass on a continuous age
axis and dropped into one of a shared set of equal-width bins:

  mass in bin i = sum of p over all points with edge_i <= age < edge_{i+1}

then averaged over the number of replicates.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from core.errors import DomainError

from .base import DensityCurve


def bin_point_masses(ages: np.ndarray, masses: np.ndarray, edges: np.ndarray) -> np.ndarray:
    """
    Sum `masses` into the half-open bins [edges[i], edges[i + 1]).

    Returns an array of len(edges) - 1. Points below the first edge or at/after
    the last edge are not counted.
    """
    ages = np.asarray(ages, dtype=float)
    masses = np.asarray(masses, dtype=float)
    edges = np.asarray(edges, dtype=float)
    n_bins = len(edges) - 1

    idx = np.searchsorted(edges, ages, side="right") - 1
    inside = (idx >= 0) & (idx < n_bins)
    return np.bincount(idx[inside], weights=masses[inside], minlength=n_bins)


def common_edges(start: float, curves: Sequence[DensityCurve], breaks: int) -> np.ndarray:
    """`breaks` equally spaced edges from `start` to the oldest age on any curve."""
    if breaks < 2:
        raise DomainError("breaks", breaks, "need at least two break points")
    stop = max(float(c.age[-1]) for c in curves)
    return np.linspace(start, stop, breaks)


def aggregate_replicate_curves(
    curves: Sequence[DensityCurve],
    *,
    start: float,
    breaks: int = 100,
) -> DensityCurve:
    """
    Average pseudoreplicate curves on a shared grid.

    Parameters
    ----------
    curves : sequence of DensityCurve
        One curve per pseudoreplicate.
    start : float
        First bin edge.
    breaks : int
        Number of bin edges; breaks - 1 bins are returned.

    Returns
    -------
    DensityCurve with age = left edge of each bin, p = mean mass per replicate.
    """
    if len(curves) == 0:
        raise DomainError("curves", 0, "no replicate curves to aggregate")

    edges = common_edges(start, curves, breaks)
    all_ages = np.concatenate([c.age for c in curves])
    all_p = np.concatenate([c.p for c in curves])

    mass = bin_point_masses(all_ages, all_p, edges) / len(curves)
    return DensityCurve(age=edges[:-1], p=mass)
