"""
Tests for the exact-age clade-age density.
"""

import numpy as np
import pytest

from core.errors import DomainError
from engine.base import DensityCurve
from engine.likelihood import density, grid_upper_bound

AGES = [54, 31, 25, 14, 5]


class TestDensityGrid:
    """Grid construction"""

    def test_starts_at_oldest_fossil(self) -> None:
        curve = density(AGES)
        assert curve.age[0] == 54.0

    def test_starts_at_oldest_fossil_with_baseline(self) -> None:
        curve = density(AGES, baseline=0)
        assert curve.age[0] == 54.0

    def test_unit_steps(self) -> None:
        curve = density(AGES)
        np.testing.assert_allclose(np.diff(curve.age), 1.0)

    def test_upper_end(self) -> None:
        # baseline 5, n = 4: MAX = 49 * 0.01^(-1/4) ~ 154.95 (shifted)
        curve = density(AGES, p_max=0.99)
        upper = 5 + grid_upper_bound(49.0, 4, 0.99)
        assert curve.age[-1] <= upper
        assert curve.age[-1] > upper - 1
        assert len(curve) == 106

    def test_higher_p_max_extends_grid(self) -> None:
        assert len(density(AGES, p_max=0.999)) > len(density(AGES, p_max=0.95))


class TestDensityValues:
    """Likelihood shape and rescaling"""

    def test_trapezoid_area_equals_p_max(self) -> None:
        curve = density(AGES, p_max=0.99)
        assert curve.p.sum() - curve.p[0] / 2 == pytest.approx(0.99)

    @pytest.mark.parametrize("baseline", [None, 0.0])
    def test_sum_close_to_p_max(self, baseline) -> None:
        curve = density(AGES, baseline=baseline, p_max=0.99)
        assert curve.total_mass == pytest.approx(0.99, rel=0.05)

    def test_proportional_to_inverse_power(self) -> None:
        curve = density(AGES)
        # shifted ages Y with n = 4: p[i] / p[0] == (Y0 / Yi)^4
        shifted = curve.age - 5
        expected = (shifted[0] / shifted) ** 4
        np.testing.assert_allclose(curve.p / curve.p[0], expected, rtol=1e-10)

    def test_non_negative_and_decreasing(self) -> None:
        curve = density(AGES)
        assert np.all(curve.p > 0)
        assert np.all(np.diff(curve.p) < 0)

    def test_many_fossils_do_not_overflow(self) -> None:
        ages = np.linspace(1, 400, 300)
        curve = density(ages, baseline=0)
        assert np.all(np.isfinite(curve.p))
        assert curve.p.sum() - curve.p[0] / 2 == pytest.approx(0.99)

    def test_two_ages_without_baseline(self) -> None:
        # n = 1: the likelihood is 1 / Y
        curve = density([54, 51], p_max=0.9)
        shifted = curve.age - 51
        np.testing.assert_allclose(curve.p / curve.p[0], shifted[0] / shifted)


class TestDensityCurve:
    """Returned table"""

    def test_dataframe_columns(self) -> None:
        df = density(AGES).to_dataframe()
        assert list(df.columns) == ["age", "p"]
        assert df["age"].is_monotonic_increasing

    def test_iterates_as_pairs(self) -> None:
        curve = density(AGES)
        pairs = list(curve)
        assert pairs[0] == (54.0, float(curve.p[0]))
        assert len(pairs) == len(curve)

    def test_is_immutable(self) -> None:
        curve = density(AGES)
        with pytest.raises(AttributeError):
            curve.age = np.array([1.0])
        assert isinstance(curve, DensityCurve)


class TestDensityErrors:
    """Validation"""

    def test_single_age_without_baseline(self) -> None:
        with pytest.raises(DomainError):
            density([54])

    @pytest.mark.parametrize("p_max", [0.0, 1.0, 1.2, -0.1])
    def test_p_max_out_of_range(self, p_max: float) -> None:
        with pytest.raises(DomainError) as exc:
            density(AGES, p_max=p_max)
        assert exc.value.field == "p_max"

    def test_all_ages_at_baseline(self) -> None:
        with pytest.raises(DomainError):
            density([5, 5, 5])

    def test_empty(self) -> None:
        with pytest.raises(DomainError):
            density([])
