"""
Tests for random clade-age sampling.
"""

import numpy as np
import pytest

from core.config import CladeAgeConfig
from core.errors import DomainError
from distributions.quantile import quantile
from distributions.sampler import CladeAgeSampler, SampledAges, sample_clade_ages

MIN_AGES = [50, 30, 25, 14, 3.5]
MAX_AGES = [56, 35, 25, 14, 6]


class TestExactAges:
    """Fixed fossil ages"""

    def test_length_and_floor(self) -> None:
        out = sample_clade_ages(10000, MIN_AGES, max_p=0.95, rng=np.random.default_rng(1))
        assert out.shape == (10000,)
        assert np.all(out >= 50)

    def test_median_matches_rescaled_quantile(self) -> None:
        out = sample_clade_ages(10000, MIN_AGES, max_p=0.95, rng=np.random.default_rng(2))
        # uniform on [0, 0.95): its median is 0.475
        expected = quantile(0.475, MIN_AGES)
        assert np.median(out) == pytest.approx(expected, abs=1.0)

    def test_truncation_caps_values(self) -> None:
        out = sample_clade_ages(5000, MIN_AGES, max_p=0.9, model="Solow",
                                rng=np.random.default_rng(3))
        assert out.max() <= quantile(0.9, MIN_AGES, model="Solow")

    def test_reproducible_with_seeded_rng(self) -> None:
        a = sample_clade_ages(100, MIN_AGES, rng=np.random.default_rng(4))
        b = sample_clade_ages(100, MIN_AGES, rng=np.random.default_rng(4))
        np.testing.assert_array_equal(a, b)

    def test_zero_draws(self) -> None:
        assert sample_clade_ages(0, MIN_AGES).shape == (0,)


class TestIntervalAges:
    """Fossil ages redrawn for every sample"""

    def test_length_and_floor(self) -> None:
        out = sample_clade_ages(2000, MIN_AGES, MAX_AGES, max_p=0.95,
                                rng=np.random.default_rng(5))
        assert out.shape == (2000,)
        # every realization's oldest fossil is at least 50
        assert np.all(out >= 50)

    def test_interval_sample_is_older_on_average(self) -> None:
        exact = sample_clade_ages(4000, MIN_AGES, max_p=0.95, rng=np.random.default_rng(6))
        interval = sample_clade_ages(4000, MIN_AGES, MAX_AGES, max_p=0.95,
                                     rng=np.random.default_rng(6))
        assert np.median(interval) > np.median(exact)

    def test_zero_width_intervals_respect_floor(self) -> None:
        out = sample_clade_ages(500, MIN_AGES, MIN_AGES, max_p=0.5, baseline=0,
                                rng=np.random.default_rng(7))
        assert np.all(out >= 50)
        assert np.all(out <= quantile(0.5, MIN_AGES, baseline=0))

    def test_unequal_lengths(self) -> None:
        with pytest.raises(DomainError):
            sample_clade_ages(10, MIN_AGES, MAX_AGES[:-1])

    def test_inverted_bounds(self) -> None:
        with pytest.raises(DomainError) as exc:
            sample_clade_ages(10, [50, 30], [45, 35])
        assert exc.value.field == "min_ages[0]"


class TestSamplerValidation:
    """Argument checks"""

    @pytest.mark.parametrize("max_p", [0.0, -0.5, 1.5])
    def test_bad_max_p(self, max_p: float) -> None:
        with pytest.raises(DomainError):
            sample_clade_ages(10, MIN_AGES, max_p=max_p)

    def test_negative_draws(self) -> None:
        with pytest.raises(DomainError):
            sample_clade_ages(-1, MIN_AGES)

    def test_solow_needs_two_ages(self) -> None:
        with pytest.raises(DomainError):
            sample_clade_ages(10, [50], [55], model="Solow")


class TestCladeAgeSampler:
    """Object interface"""

    def test_seeded_sampler_is_reproducible(self) -> None:
        a = CladeAgeSampler(MIN_AGES, max_p=0.95, seed=42).sample(500)
        b = CladeAgeSampler(MIN_AGES, max_p=0.95, seed=42).sample(500)
        assert isinstance(a, SampledAges)
        np.testing.assert_array_equal(a.ages, b.ages)

    def test_from_config(self) -> None:
        cfg = CladeAgeConfig(model="Solow", max_p=0.9, seed=11)
        sampler = CladeAgeSampler.from_config(MIN_AGES, MAX_AGES, config=cfg)
        draws = sampler.sample(300)
        assert draws.model == "Solow"
        assert draws.n_draws == 300
        assert np.all(draws.ages >= 50)

    def test_tables(self) -> None:
        draws = CladeAgeSampler(MIN_AGES, seed=1).sample(1000)
        df = draws.to_dataframe()
        assert list(df.columns) == ["draw_id", "age"]
        assert len(df) == 1000

        summary = draws.summary()
        assert len(summary) == 1
        row = summary.iloc[0]
        assert row["Min"] <= row["P2.5"] <= row["P50"] <= row["P97.5"] <= row["Max"]
        assert row["Min"] >= 50
