"""
Summaries of clade-age results for reporting.

Turns a density table into the handful of numbers people quote from it:
  - where the curve peaks (mode)
  - how much mass the grid actually covers
  - ages at chosen cumulative probabilities
"""

from __future__ import annotations

from typing import Dict, Tuple

import numpy as np
import pandas as pd

from core.errors import DomainError
from engine.base import DensityCurve


def cumulative_age(curve: DensityCurve, level: float) -> float:
    """
    Age at which the accumulated p first reaches `level`, interpolated between
    grid points. NaN when the curve never accumulates that much mass.
    """
    if not 0.0 <= level <= 1.0:
        raise DomainError("level", level, "must lie in [0, 1]")
    cum = np.cumsum(curve.p)
    if len(cum) == 0 or level > cum[-1]:
        return float("nan")
    # zero-mass bins leave flat runs in cum; keep the first age of each run
    cum, first = np.unique(cum, return_index=True)
    return float(np.interp(level, cum, np.asarray(curve.age)[first]))


def summarize_curve(
    curve: DensityCurve,
    *,
    levels: Tuple[float, ...] = (0.05, 0.25, 0.50, 0.75, 0.95),
) -> Dict[str, float]:
    """
    Mode, covered mass and cumulative-probability ages for one density curve.

    Returns
    -------
    Dict with keys: first_age, last_age, mode_age, total_mass, and one
    "Pxx" key per level.
    """
    if len(curve) == 0:
        raise DomainError("curve", 0, "empty density curve")

    out = {
        "first_age": float(curve.age[0]),
        "last_age": float(curve.age[-1]),
        "mode_age": float(curve.age[int(np.argmax(curve.p))]),
        "total_mass": curve.total_mass,
    }
    for level in levels:
        out[f"P{int(round(level * 100)):02d}"] = cumulative_age(curve, level)
    return out


def compare_curves(curves: Dict[str, DensityCurve], **kwargs) -> pd.DataFrame:
    """One summary row per named curve, e.g. exact vs interval ages."""
    rows = []
    for name, curve in curves.items():
        row = {"Curve": name}
        row.update(summarize_curve(curve, **kwargs))
        rows.append(row)
    return pd.DataFrame(rows)
