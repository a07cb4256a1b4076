from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import kstest

from pysatl_variates.distributions import Sampler
from pysatl_variates.errors import DimensionError, DomainError
from pysatl_variates.samplers import VonMisesFisherSampler, vmf_b, vmf_rotation
from pysatl_variates.types import SphericalDistributionType
from tests.utils.mocks import ScriptedVariateSource


def random_unit_vector(p: int, seed: int) -> np.ndarray:
    v = np.random.default_rng(seed).standard_normal(p)
    return v / np.linalg.norm(v)


class TestRotation:
    @pytest.mark.parametrize(
        "mu",
        [
            np.array([1.0, 0.0, 0.0]),
            np.array([-1.0, 0.0, 0.0]),
            np.array([0.0, 0.0, 1.0]),
            np.array([1.0, -1.0]) / math.sqrt(2.0),
            np.array([0.0, -1.0]),
            random_unit_vector(5, 0),
            random_unit_vector(20, 1),
        ],
        ids=["e1", "minus_e1", "e3", "diagonal_2d", "minus_e2", "random_5", "random_20"],
    )
    def test_rotation_is_orthonormal_and_maps_pole_to_mean(self, mu) -> None:
        q = vmf_rotation(mu)
        p = mu.size
        np.testing.assert_allclose(q.T @ q, np.eye(p), atol=1e-12)
        np.testing.assert_allclose(q @ np.eye(p)[0], mu, atol=1e-12)


class TestConstants:
    @pytest.mark.parametrize("p, kappa", [(2, 0.5), (3, 1.0), (10, 50.0), (3, 1e-6)])
    def test_b_matches_textbook_form(self, p, kappa) -> None:
        textbook = (-2.0 * kappa + math.sqrt(4.0 * kappa**2 + (p - 1) ** 2)) / (p - 1)
        assert vmf_b(p, kappa) == pytest.approx(textbook, rel=1e-6)

    def test_b_for_extreme_concentration(self) -> None:
        assert vmf_b(3, 1e17) == pytest.approx(1.0 / (2.0 * 1e17), rel=1e-12)
        assert vmf_b(3, 1.7e308) > 0.0

    def test_derived_constants(self) -> None:
        sampler = VonMisesFisherSampler([0.0, 0.0, 1.0], kappa=10.0)
        b = vmf_b(3, 10.0)
        x0 = (1.0 - b) / (1.0 + b)
        assert sampler.p == 3
        assert sampler.b == pytest.approx(b)
        assert sampler.x0 == pytest.approx(x0)
        assert sampler.c == pytest.approx(10.0 * x0 + 2.0 * math.log(1.0 - x0**2))


class TestValidation:
    @pytest.mark.parametrize(
        "mu",
        [[], [1.0], [1.0, 1.0], [0.5, 0.5, 0.5], [np.nan, 1.0], [[1.0, 0.0]]],
        ids=["empty", "one_coordinate", "norm_sqrt2", "norm_short", "nan", "matrix"],
    )
    def test_invalid_mean_direction(self, mu) -> None:
        with pytest.raises(DimensionError):
            VonMisesFisherSampler(mu, kappa=1.0)

    @pytest.mark.parametrize("kappa", [0.0, -1.0, math.inf, math.nan])
    def test_invalid_concentration(self, kappa) -> None:
        with pytest.raises(DomainError):
            VonMisesFisherSampler([1.0, 0.0], kappa=kappa)

    def test_norm_tolerance(self) -> None:
        VonMisesFisherSampler([1.0 + 5e-7, 0.0], kappa=1.0)
        with pytest.raises(DimensionError):
            VonMisesFisherSampler([1.0 + 1e-5, 0.0], kappa=1.0)

    def test_state_is_read_only(self) -> None:
        sampler = VonMisesFisherSampler([0.0, 1.0], kappa=1.0)
        with pytest.raises(ValueError):
            sampler.rotation[0, 0] = 2.0
        with pytest.raises(ValueError):
            sampler.mean_direction[0] = 1.0


class TestGenerateW:
    def test_accepts_first_proposal(self) -> None:
        sampler = VonMisesFisherSampler([0.0, 0.0, 1.0], kappa=10.0)
        # z = 1/2 maps to w = x0, where the acceptance exponent is exactly zero
        source = ScriptedVariateSource(betas=[0.5], reals=[0.5])
        assert sampler.generate_w(source) == pytest.approx(sampler.x0)

    def test_rejects_far_proposal(self) -> None:
        sampler = VonMisesFisherSampler([0.0, 0.0, 1.0], kappa=10.0)
        source = ScriptedVariateSource(betas=[0.999, 0.5], reals=[0.5, 0.5])
        assert sampler.generate_w(source) == pytest.approx(sampler.x0)
        assert source.betas == []
        assert source.reals == []


class TestSampling:
    def test_draw_is_rotated_tangent_construction(self) -> None:
        mu = random_unit_vector(3, 4)
        sampler = VonMisesFisherSampler(mu, kappa=10.0)
        source = ScriptedVariateSource(betas=[0.5], reals=[0.5], normals=[1.0, 0.0])

        x = sampler.draw(source=source)
        assert x.shape == (3,)
        assert float(np.dot(x, mu)) == pytest.approx(sampler.x0)
        expected = sampler.rotation @ np.array([sampler.x0, math.sqrt(1.0 - sampler.x0**2), 0.0])
        np.testing.assert_allclose(x, expected, atol=1e-12)

    @pytest.mark.parametrize("p, kappa", [(2, 0.1), (3, 5.0), (10, 100.0), (50, 1.0)])
    def test_samples_lie_on_sphere(self, p, kappa) -> None:
        sampler = VonMisesFisherSampler(random_unit_vector(p, p), kappa=kappa)
        sample = sampler.sample(500, source=p)
        assert sample.shape == (500, p)
        norms = np.linalg.norm(sample.array, axis=1)
        np.testing.assert_allclose(norms, 1.0, atol=1e-9)
        assert sampler.support.contains(sample.array).all()

    def test_high_concentration_clusters_at_mean(self) -> None:
        mu = random_unit_vector(4, 2)
        sampler = VonMisesFisherSampler(mu, kappa=1000.0)
        cosines = sampler.sample(2000, source=5).array @ mu
        assert cosines.mean() > 0.99
        assert cosines.min() > 0.9

    def test_low_concentration_is_nearly_uniform(self) -> None:
        sampler = VonMisesFisherSampler([0.0, 0.0, 1.0], kappa=1e-3)
        mean = sampler.sample(5000, source=6).array.mean(axis=0)
        assert np.linalg.norm(mean) < 0.05

    def test_polar_component_distribution_on_two_sphere(self) -> None:
        # On S^2 the cosine w = x . mu has density proportional to exp(kappa w) on [-1, 1]
        kappa = 2.0
        mu = random_unit_vector(3, 8)
        sampler = VonMisesFisherSampler(mu, kappa=kappa)
        w = sampler.sample(5000, source=9).array @ mu

        def cdf(t):
            return np.expm1(kappa * (t + 1.0)) / np.expm1(2.0 * kappa)

        assert kstest(w, cdf).pvalue > 1e-3
        assert w.mean() == pytest.approx(1.0 / math.tanh(kappa) - 1.0 / kappa, abs=0.03)

    @pytest.mark.parametrize("kappa", [1e12, 1e17, 1e300])
    def test_extreme_concentration_collapses_to_mean(self, kappa) -> None:
        mu = random_unit_vector(3, 12)
        sampler = VonMisesFisherSampler(mu, kappa=kappa)
        assert sampler.b > 0.0
        assert math.isfinite(sampler.c)

        sample = sampler.sample(200, source=13).array
        np.testing.assert_allclose(np.linalg.norm(sample, axis=1), 1.0, atol=1e-9)
        assert (sample @ mu > 1.0 - 1e-9).all()
        assert float(np.dot(sampler.draw(source=14), mu)) > 1.0 - 1e-9

    def test_reproducible_with_seed(self) -> None:
        sampler = VonMisesFisherSampler([0.6, 0.8], kappa=3.0)
        np.testing.assert_array_equal(sampler.draw(source=1), sampler.draw(source=1))
        np.testing.assert_array_equal(
            sampler.sample(20, source=2).array, sampler.sample(20, source=2).array
        )

    def test_sample_sizes(self) -> None:
        sampler = VonMisesFisherSampler([0.6, 0.8], kappa=3.0)
        assert sampler.sample(0, source=0).shape == (0, 2)
        with pytest.raises(ValueError, match="non-negative"):
            sampler.sample(-1)

    def test_capabilities(self) -> None:
        sampler = VonMisesFisherSampler([0.0, 1.0, 0.0], kappa=1.0)
        assert isinstance(sampler, Sampler)
        assert sampler.distribution_type == SphericalDistributionType(dimension=3)
        assert repr(sampler) == "VonMisesFisherSampler(p=3, kappa=1.0)"
