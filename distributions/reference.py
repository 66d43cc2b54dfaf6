"""
Reference density curves for comparing against empirical clade-age distributions.

These are the parametric curves users overlay on a sampled histogram or a
density table to pick calibration priors by eye. Nothing here is fitted: the
parameters are supplied by the caller (or derived from the fossil ages by a
fixed rule, as in solow_lognormal_params).

All curves are offset so that zero sits at `offset`, normally the oldest fossil.
"""

from __future__ import annotations

import math
from typing import Tuple

import numpy as np
from scipy import stats

from core.errors import DomainError
from core.utils import as_age_array


def lognormal_from_mode(mode: float, sdlog: float) -> Tuple[float, float]:
    """
    (meanlog, sdlog) of the lognormal whose mode is `mode`.

    The empirical density under interval ages usually peaks near the old end of
    the oldest fossil's range, so setting the mode from that range is easier
    than guessing meanlog. mode = exp(meanlog - sdlog^2).
    """
    if mode <= 0:
        raise DomainError("mode", mode, "must be > 0")
    if sdlog <= 0:
        raise DomainError("sdlog", sdlog, "must be > 0")
    return sdlog ** 2 + math.log(mode), sdlog


def solow_lognormal_params(ages) -> Tuple[float, float]:
    """
    Lognormal parameters suggested for the Solow model (Norris et al.):
    meanlog = log(gap between the two oldest ages), sdlog = pi / sqrt(3).
    """
    ages = np.sort(as_age_array(ages))
    if len(ages) < 2:
        raise DomainError("ages", len(ages), "need at least two ages to form a gap")
    gap = float(ages[-1] - ages[-2])
    if gap <= 0:
        raise DomainError("ages", ages[-2:].tolist(), "the two oldest ages are equal")
    return math.log(gap), math.pi / math.sqrt(3)


def shifted_lognormal_pdf(x, *, offset: float, meanlog: float, sdlog: float) -> np.ndarray:
    x = np.asarray(x, dtype=float)
    return stats.lognorm.pdf(x - offset, s=sdlog, scale=math.exp(meanlog))


def shifted_exponential_pdf(x, *, offset: float, rate: float) -> np.ndarray:
    if rate <= 0:
        raise DomainError("rate", rate, "must be > 0")
    x = np.asarray(x, dtype=float)
    return stats.expon.pdf(x - offset, scale=1.0 / rate)
