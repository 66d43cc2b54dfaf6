"""
Quantile function for the age of a clade given the ages of its fossils.

Maps a cumulative probability to the clade age it implies, under one of three
models of where the true origin sits above the oldest fossil:

  StraussSadler — fossil ages uniform below the unknown origin (Strauss & Sadler
                  1989); depends on the oldest shifted age and n.
  Beta          — the same model written through the Beta(n, 1) distribution of
                  observed/true span (Wang et al. 2009). Kept as an independent
                  numerical check on StraussSadler.
  Solow         — no uniformity assumption (Solow 2003); depends only on the gap
                  between the two oldest ages.

With exactly two ages and a derived baseline, StraussSadler and Solow coincide:
both reduce to oldest / (1 - p).
"""

from __future__ import annotations

from typing import Optional, Union

import numpy as np
from scipy import stats

from core.errors import DomainError, NumericOverflow
from core.schema import DEFAULT_MODEL, MIN_AGES_SOLOW, MIN_EFFECTIVE_N, MODELS
from core.utils import as_age_array, resolve_baseline


def _as_probabilities(p) -> np.ndarray:
    probs = np.atleast_1d(np.asarray(p, dtype=float))
    if probs.ndim != 1:
        raise DomainError("p", probs.shape, "expected a scalar or a vector of probabilities")
    bad = ~np.isfinite(probs) | (probs < 0.0) | (probs > 1.0)
    if bad.any():
        raise DomainError("p", float(probs[bad][0]), "probabilities must lie in [0, 1)")
    if (probs == 1.0).any():
        # every model diverges at p = 1; callers cap it with max_p / p_max
        raise NumericOverflow("p", 1.0, "the clade age is infinite at p = 1")
    return probs


def check_model(model: str, n_ages: int, n_effective: int) -> None:
    """Raise DomainError unless `model` is known and has enough ages to work with."""
    if model not in MODELS:
        raise DomainError("model", model, f"unknown model; expected one of {list(MODELS)}")
    if model == "Solow":
        if n_ages < MIN_AGES_SOLOW:
            raise DomainError(
                "ages", n_ages, "the Solow model needs at least two ages to form a gap"
            )
    elif n_effective < MIN_EFFECTIVE_N[model]:
        raise DomainError(
            "ages",
            n_ages,
            f"effective sample size is {n_effective}; {model} needs at least "
            f"{MIN_EFFECTIVE_N[model]} (a derived baseline uses up one age)",
        )


def quantile(
    p,
    ages,
    baseline: Optional[float] = None,
    model: str = DEFAULT_MODEL,
) -> Union[float, np.ndarray]:
    """
    Clade age at cumulative probability `p`.

    Parameters
    ----------
    p : float or sequence of float
        Cumulative probability level(s) in [0, 1). A scalar returns a float, a
        sequence returns an array of the same length.
    ages : sequence of float
        Fossil ages attributed to the clade.
    baseline : float, optional
        Reference age (e.g. 0 for the present). If omitted, the youngest age is
        used and n is reduced by one.
    model : str
        "StraussSadler" (default), "Beta" or "Solow".

    Raises
    ------
    DomainError
        Empty ages, too few ages for the model, unknown model, p outside [0, 1].
    NumericOverflow
        Any p equal to 1.
    """
    scalar = np.ndim(p) == 0
    ages = as_age_array(ages)
    base, n = resolve_baseline(ages, baseline)
    check_model(model, len(ages), n)
    probs = _as_probabilities(p)

    shifted = ages - base
    oldest = float(shifted.max())

    if model == "StraussSadler":
        result = oldest * np.power(1.0 - probs, -1.0 / n)
    elif model == "Beta":
        # upper-tail quantile, so p = 0 lands on the oldest fossil
        span_ratio = stats.beta.isf(probs, n, 1)
        result = oldest / span_ratio
    else:
        ordered = np.sort(shifted)
        gap = ordered[-1] - ordered[-2]
        result = oldest + gap * probs / (1.0 - probs)

    result = result + base
    return float(result[0]) if scalar else result
