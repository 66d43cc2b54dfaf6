"""
Error types raised by the clade-age computations.

Every public operation validates its inputs before doing any work and raises
one of these. Nothing is retried or clamped: the message is meant to be shown
to the caller as-is.
"""

from __future__ import annotations

from typing import Any


class CladeAgeError(ValueError):
    """Base class for all clade-age errors."""


class DomainError(CladeAgeError):
    """Invalid input: bad shape, inverted bounds, too few ages, p out of range."""

    def __init__(self, field: str, value: Any, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"{field}={value!r}: {reason}")


class NumericOverflow(DomainError):
    """A probability of 1 was passed to a model whose quantile diverges there."""
