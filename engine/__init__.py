"""
Clade-age density engine — exact-age likelihood density + pseudoreplicated interval version.
"""

from .base import DensityCurve
from .likelihood import density
from .aggregator import aggregate_replicate_curves, bin_point_masses
from .runner import density_with_uncertainty, estimate_density, oldest_bound_overlay

__all__ = [
    "DensityCurve",
    "density",
    "density_with_uncertainty",
    "estimate_density",
    "oldest_bound_overlay",
    "aggregate_replicate_curves",
    "bin_point_masses",
]
