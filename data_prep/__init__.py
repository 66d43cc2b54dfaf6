"""
Data preparation — fossil interval normalization and record validation.
"""

from .intervals import FossilInterval, as_age_bounds, canonicalize_columns, to_intervals
from .validators import ValidationResult, validate_fossil_record

__all__ = [
    "FossilInterval",
    "as_age_bounds",
    "canonicalize_columns",
    "to_intervals",
    "ValidationResult",
    "validate_fossil_record",
]
