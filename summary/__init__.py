"""
Summary outputs — the numbers people quote from a clade-age density.
"""

from .metrics import compare_curves, cumulative_age, summarize_curve

__all__ = [
    "compare_curves",
    "cumulative_age",
    "summarize_curve",
]
