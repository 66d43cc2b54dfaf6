"""
Distributions package — the clade-age quantile function and what is built on it.

  1. quantile.py   — age at a cumulative probability (StraussSadler / Beta / Solow)
  2. sampler.py    — random clade ages by inverse-transform sampling
  3. reference.py  — parametric curves to compare empirical results against
"""

from .quantile import quantile
from .sampler import CladeAgeSampler, SampledAges, sample_clade_ages
from .reference import (
    lognormal_from_mode,
    solow_lognormal_params,
    shifted_exponential_pdf,
    shifted_lognormal_pdf,
)

__all__ = [
    "quantile",
    "sample_clade_ages",
    "CladeAgeSampler",
    "SampledAges",
    "lognormal_from_mode",
    "solow_lognormal_params",
    "shifted_exponential_pdf",
    "shifted_lognormal_pdf",
]
