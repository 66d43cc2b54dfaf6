from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from .errors import DomainError


def as_age_array(ages, field: str = "ages") -> np.ndarray:
    """Return `ages` as a 1-D float array, rejecting empty, non-finite or negative values."""
    arr = np.asarray(ages, dtype=float)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    if arr.ndim != 1:
        raise DomainError(field, arr.shape, "expected a one-dimensional vector of ages")
    if arr.size == 0:
        raise DomainError(field, [], "at least one fossil age is required")
    if not np.all(np.isfinite(arr)):
        raise DomainError(field, arr.tolist(), "ages must be finite numbers")
    if np.any(arr < 0):
        raise DomainError(field, arr.tolist(), "ages must be >= 0")
    return arr


def resolve_baseline(ages: np.ndarray, baseline: Optional[float]) -> Tuple[float, int]:
    """
    Resolve the baseline once, returning (baseline, effective n).

    Without an explicit baseline the youngest age is used and one degree of
    freedom is spent estimating it (Solow 2003), so n = len(ages) - 1.
    """
    youngest = float(np.min(ages))
    if baseline is None:
        return youngest, len(ages) - 1

    baseline = float(baseline)
    if not np.isfinite(baseline):
        raise DomainError("baseline", baseline, "baseline must be a finite number")
    if baseline > youngest:
        raise DomainError(
            "baseline", baseline, f"baseline must not be older than the youngest age ({youngest})"
        )
    return baseline, len(ages)


def check_probability(
    value: float,
    field: str,
    *,
    allow_zero: bool = False,
    allow_one: bool = False,
) -> float:
    """Check a scalar cumulative-probability setting against (0, 1) with optional closed ends."""
    value = float(value)
    low_ok = value >= 0.0 if allow_zero else value > 0.0
    high_ok = value <= 1.0 if allow_one else value < 1.0
    if not (np.isfinite(value) and low_ok and high_ok):
        lo = "[0" if allow_zero else "(0"
        hi = "1]" if allow_one else "1)"
        raise DomainError(field, value, f"must lie in {lo}, {hi}")
    return value


def check_bounds(
    older: np.ndarray,
    younger: np.ndarray,
    *,
    older_field: str = "older_bound",
    younger_field: str = "younger_bound",
) -> None:
    """Check paired interval bounds: same length and younger <= older everywhere."""
    if len(older) != len(younger):
        raise DomainError(
            younger_field,
            len(younger),
            f"length differs from {older_field} ({len(older)})",
        )
    inverted = np.flatnonzero(younger > older)
    if inverted.size:
        i = int(inverted[0])
        raise DomainError(
            f"{younger_field}[{i}]",
            float(younger[i]),
            f"younger bound exceeds {older_field}[{i}]={float(older[i])}",
        )


def check_positive_int(value: int, field: str, minimum: int = 1) -> int:
    if int(value) != value or value < minimum:
        raise DomainError(field, value, f"must be an integer >= {minimum}")
    return int(value)
