"""
Pre-flight checks for a fossil record before it goes into the estimators.

The estimators raise on the first bad value; this collects every problem in
one pass so a whole table can be reviewed at once:
- Missing or unparseable ages
- Negative ages
- Inverted intervals
- Records too small for the models
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import numpy as np
import pandas as pd

from core.errors import DomainError

from .intervals import canonicalize_columns


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for a fossil record."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def raise_for_errors(self) -> None:
        if self.errors:
            raise DomainError("record", len(self.errors), "; ".join(self.errors))

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def validate_fossil_record(record) -> ValidationResult:
    """
    Run all validation checks on a fossil record.

    `record` is either a sequence of exact ages or a DataFrame. A DataFrame with
    older/younger columns (any alias accepted by data_prep.intervals) is checked
    as intervals; one with a single "age" column as exact ages.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    result = ValidationResult()

    if isinstance(record, pd.DataFrame):
        df = canonicalize_columns(record)
        if {"older_bound", "younger_bound"} <= set(df.columns):
            return _validate_intervals(df, result)
        if "age" in df.columns:
            ages = pd.to_numeric(df["age"], errors="coerce").to_numpy(dtype=float)
        else:
            result.errors.append(
                f"No age columns found (got {list(record.columns)}); expected 'age' "
                f"or older/younger bounds."
            )
            return result
    else:
        ages = pd.to_numeric(pd.Series(list(record), dtype=object), errors="coerce").to_numpy(dtype=float)

    _check_ages(ages, "age", result)
    if result.errors:
        return result

    n_dup = int(pd.Series(ages).duplicated().sum())
    if n_dup > 0:
        result.warnings.append(f"{n_dup} duplicate ages found.")
    _check_size(len(ages), result)
    return result


def _check_ages(ages: np.ndarray, label: str, result: ValidationResult) -> None:
    if len(ages) == 0:
        result.errors.append("Record is empty (0 ages).")
        return
    n_null = int(np.isnan(ages).sum())
    if n_null > 0:
        result.errors.append(f"{n_null} rows have null/unparseable {label}.")
    n_neg = int((ages < 0).sum())
    if n_neg > 0:
        result.errors.append(f"{n_neg} rows have negative {label}.")


def _check_size(n_ages: int, result: ValidationResult) -> None:
    if n_ages < 2:
        result.warnings.append(
            "Fewer than two ages: a baseline must be supplied, and the Solow model is unavailable."
        )
    elif n_ages == 2:
        result.warnings.append(
            "Only two ages: without a baseline, StraussSadler and Solow give identical results."
        )


def _validate_intervals(df: pd.DataFrame, result: ValidationResult) -> ValidationResult:
    older = pd.to_numeric(df["older_bound"], errors="coerce").to_numpy(dtype=float)
    younger = pd.to_numeric(df["younger_bound"], errors="coerce").to_numpy(dtype=float)

    _check_ages(older, "older_bound", result)
    _check_ages(younger, "younger_bound", result)
    if result.errors:
        return result

    n_inverted = int((younger > older).sum())
    if n_inverted > 0:
        result.errors.append(f"{n_inverted} rows have younger_bound > older_bound.")
        return result

    n_exact = int((younger == older).sum())
    if n_exact == len(older):
        result.warnings.append("All intervals have zero width; use exact-age estimation instead.")
    elif n_exact > 0:
        result.warnings.append(f"{n_exact} intervals have zero width (exact ages).")

    _check_size(len(older), result)
    return result
