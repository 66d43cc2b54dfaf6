from __future__ import annotations

from typing import Tuple

# Quantile models: Strauss & Sadler (1989), the equivalent Beta(n, 1) form
# (Wang et al. 2009) and Solow (2003).
MODELS: Tuple[str, ...] = ("StraussSadler", "Beta", "Solow")
DEFAULT_MODEL = "StraussSadler"

# Minimum number of ages each model needs after the baseline is resolved.
MIN_EFFECTIVE_N = {"StraussSadler": 1, "Beta": 1}
MIN_AGES_SOLOW = 2

# Output columns of every density table.
DENSITY_COLUMNS: Tuple[str, str] = ("age", "p")
