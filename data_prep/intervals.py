"""
Fossil age intervals — turn the many shapes interval data arrives in into
named (older_bound, younger_bound) pairs.

Convention: the older bound is the lower stratigraphic bound (maximum age),
the younger bound is the upper stratigraphic bound (minimum age). Positional
input follows the same order: column 0 older, column 1 younger.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

import numpy as np
import pandas as pd

from core.errors import DomainError
from core.utils import as_age_array, check_bounds


@dataclass(frozen=True)
class FossilInterval:
    """Age range of one fossil occurrence."""
    older_bound: float
    younger_bound: float

    def __post_init__(self):
        if self.younger_bound > self.older_bound:
            raise DomainError(
                "younger_bound",
                self.younger_bound,
                f"younger bound exceeds older_bound={self.older_bound}",
            )
        if self.younger_bound < 0:
            raise DomainError("younger_bound", self.younger_bound, "ages must be >= 0")

    @property
    def width(self) -> float:
        return self.older_bound - self.younger_bound


_COLUMN_ALIASES: Dict[str, str] = {
    # older / lower stratigraphic bound
    "max_age": "older_bound",
    "max_ma": "older_bound",
    "maximum_age": "older_bound",
    "older": "older_bound",
    "lower_bound": "older_bound",
    # younger / upper stratigraphic bound
    "min_age": "younger_bound",
    "min_ma": "younger_bound",
    "minimum_age": "younger_bound",
    "younger": "younger_bound",
    "upper_bound": "younger_bound",
}


def canonicalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Return a copy with interval column aliases normalized to older_bound / younger_bound."""
    ren = {c: _COLUMN_ALIASES.get(str(c).strip().lower(), c) for c in df.columns}
    return df.rename(columns=ren).copy()


def _bounds_from_frame(df: pd.DataFrame) -> Tuple[np.ndarray, np.ndarray]:
    d2 = canonicalize_columns(df)
    missing = [c for c in ("older_bound", "younger_bound") if c not in d2.columns]
    if len(missing) == 2 and d2.shape[1] == 2:
        # no recognised column names: positional, older first
        d2.columns = ["older_bound", "younger_bound"]
    elif missing:
        raise DomainError("age_bounds", list(df.columns), f"missing interval columns: {missing}")
    older = pd.to_numeric(d2["older_bound"], errors="coerce").to_numpy(dtype=float)
    younger = pd.to_numeric(d2["younger_bound"], errors="coerce").to_numpy(dtype=float)
    return older, younger


def as_age_bounds(age_bounds) -> Tuple[np.ndarray, np.ndarray]:
    """
    Return (older, younger) arrays for a collection of fossil age intervals.

    Accepts a sequence of FossilInterval, a sequence of (older, younger) pairs,
    an N x 2 array, or a DataFrame with older/younger columns (see
    _COLUMN_ALIASES). Raises DomainError on empty input or inverted rows.
    """
    if isinstance(age_bounds, pd.DataFrame):
        older, younger = _bounds_from_frame(age_bounds)
    elif len(age_bounds) and all(isinstance(b, FossilInterval) for b in age_bounds):
        older = np.array([b.older_bound for b in age_bounds], dtype=float)
        younger = np.array([b.younger_bound for b in age_bounds], dtype=float)
    else:
        arr = np.asarray(age_bounds, dtype=float)
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise DomainError(
                "age_bounds", arr.shape, "expected N rows of (older_bound, younger_bound)"
            )
        older, younger = arr[:, 0], arr[:, 1]

    older = as_age_array(older, "older_bound")
    younger = as_age_array(younger, "younger_bound")
    check_bounds(older, younger)
    return older, younger


def to_intervals(age_bounds) -> list:
    """Named-pair view of any accepted interval input."""
    older, younger = as_age_bounds(age_bounds)
    return [FossilInterval(float(o), float(y)) for o, y in zip(older, younger)]
