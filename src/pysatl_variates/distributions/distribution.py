"""
Distribution Capabilities
=========================

Capabilities are expressed as protocols rather than through a shared base
class. Each concrete type implements exactly what it supports:

- :class:`Sampler`: ``draw`` a single variate and ``sample`` a batch.
  Satisfied by :class:`~pysatl_variates.samplers.AliasTable` and
  :class:`~pysatl_variates.samplers.VonMisesFisherSampler`.
- :class:`Distribution`: a sampler that also evaluates characteristics
  (``logpdf``, ``cdf``, ``ppf``, moments, ...) through a computation strategy.
  Satisfied by distributions created from parametric families.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_variates.distributions.computation import AnalyticalComputation
    from pysatl_variates.distributions.sampling import Sample
    from pysatl_variates.distributions.strategies import (
        ComputationStrategy,
        Method,
        SamplingStrategy,
    )
    from pysatl_variates.distributions.support import Support
    from pysatl_variates.rng import SourceLike
    from pysatl_variates.types import (
        DistributionType,
        GenericCharacteristicName,
    )


@runtime_checkable
class Sampler(Protocol):
    """Anything that produces independent random draws."""

    @property
    def distribution_type(self) -> DistributionType: ...

    def draw(self, source: SourceLike = None) -> Any: ...

    def sample(self, n: int, source: SourceLike = None) -> Sample: ...


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface used by strategies."""

    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]: ...

    @property
    def sampling_strategy(self) -> SamplingStrategy: ...
    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]: ...

    @property
    def support(self) -> Support | None: ...

    def query_method(
        self, characteristic_name: GenericCharacteristicName, **options: Any
    ) -> Method[Any, Any]:
        return self.computation_strategy.query_method(characteristic_name, self, **options)

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any, **options: Any
    ) -> Any:
        return self.query_method(characteristic_name)(value, **options)

    def draw(self, source: SourceLike = None, **options: Any) -> Any:
        return self.sampling_strategy.draw(self, source=source, **options)

    def sample(self, n: int, source: SourceLike = None, **options: Any) -> Sample:
        return self.sampling_strategy.sample(n, distr=self, source=source, **options)
