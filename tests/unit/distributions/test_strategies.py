from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_variates.distributions import AnalyticalComputation, Distribution
from pysatl_variates.distributions.characteristics import CDF, PPF
from pysatl_variates.types import CharacteristicName, Kind
from tests.utils.mocks import ScriptedVariateSource, StandaloneEuclideanUnivariateDistribution


class TestStrategies:
    @staticmethod
    def make_uniform_distribution() -> StandaloneEuclideanUnivariateDistribution:
        return StandaloneEuclideanUnivariateDistribution(
            kind=Kind.CONTINUOUS,
            analytical_computations=[
                AnalyticalComputation[float, float](
                    target=CharacteristicName.PPF, func=lambda q, **_: q
                ),
                AnalyticalComputation[float, float](
                    target=CharacteristicName.CDF, func=lambda x, **_: np.clip(x, 0.0, 1.0)
                ),
            ],
        )

    def test_is_a_distribution(self) -> None:
        assert isinstance(self.make_uniform_distribution(), Distribution)

    def test_query_method_returns_analytical(self) -> None:
        distr = self.make_uniform_distribution()
        method = distr.query_method(CharacteristicName.CDF)
        assert method is distr.analytical_computations[CharacteristicName.CDF]
        assert distr.calculate_characteristic(CharacteristicName.CDF, 2.0) == 1.0

    def test_missing_characteristic_raises(self) -> None:
        distr = self.make_uniform_distribution()
        with pytest.raises(RuntimeError, match="No analytical 'pdf'"):
            distr.query_method(CharacteristicName.PDF)

    def test_characteristic_descriptors(self) -> None:
        distr = self.make_uniform_distribution()
        assert CDF(distr, -1.0) == 0.0
        assert PPF(distr, 0.3) == pytest.approx(0.3)

    def test_inverse_transform_draw_uses_source(self) -> None:
        distr = self.make_uniform_distribution()
        assert distr.draw(source=ScriptedVariateSource(reals=[0.125])) == 0.125

    def test_inverse_transform_sample(self) -> None:
        distr = self.make_uniform_distribution()
        sample = distr.sample(1000, source=0)
        assert sample.shape == (1000, 1)
        arr = sample.array
        assert ((arr >= 0.0) & (arr < 1.0)).all()
        assert float(arr.mean()) == pytest.approx(0.5, abs=0.1)

    def test_negative_sample_size_raises(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            self.make_uniform_distribution().sample(-1)
