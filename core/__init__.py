"""
Core package — configuration, error types, and shared validation helpers.
No estimation logic lives here.
"""

from .schema import MODELS, DEFAULT_MODEL, DENSITY_COLUMNS
from .config import CladeAgeConfig
from .errors import CladeAgeError, DomainError, NumericOverflow
from .utils import as_age_array, resolve_baseline, check_probability, check_bounds

__all__ = [
    "MODELS",
    "DEFAULT_MODEL",
    "DENSITY_COLUMNS",
    "CladeAgeConfig",
    "CladeAgeError",
    "DomainError",
    "NumericOverflow",
    "as_age_array",
    "resolve_baseline",
    "check_probability",
    "check_bounds",
]
