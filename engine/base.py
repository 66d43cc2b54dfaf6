"""
DensityCurve — the (age, probability) table every density operation returns.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

import numpy as np
import pandas as pd

from core.schema import DENSITY_COLUMNS


@dataclass(frozen=True)
class DensityCurve:
    """
    Probabilities of clade origin at a sequence of ages.

    age and p are same-length arrays ordered by increasing age. p is a
    probability per grid step (unit steps for density(), bin width for the
    pseudoreplicated version), so summing p approximates the cumulative mass
    covered by the grid.
    """

    age: np.ndarray
    p: np.ndarray

    def __len__(self) -> int:
        return len(self.age)

    def __iter__(self) -> Iterator[Tuple[float, float]]:
        for a, p in zip(self.age, self.p):
            yield float(a), float(p)

    @property
    def total_mass(self) -> float:
        return float(np.sum(self.p))

    def to_dataframe(self) -> pd.DataFrame:
        age_col, p_col = DENSITY_COLUMNS
        return pd.DataFrame({age_col: self.age, p_col: self.p})
