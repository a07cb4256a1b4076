"""
Concrete distribution instances with specific parameter values.

This module provides the implementation for individual distribution instances
created from parametric families.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pysatl_variates.distributions.distribution import Distribution
from pysatl_variates.families.registry import ParametricFamilyRegister

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_variates.distributions.computation import AnalyticalComputation
    from pysatl_variates.distributions.sampling import Sample
    from pysatl_variates.distributions.strategies import ComputationStrategy, SamplingStrategy
    from pysatl_variates.distributions.support import Support
    from pysatl_variates.families.parametric_family import ParametricFamily
    from pysatl_variates.families.parametrizations import Parametrization
    from pysatl_variates.rng import SourceLike
    from pysatl_variates.types import (
        DistributionType,
        GenericCharacteristicName,
    )


@dataclass(frozen=True, slots=True)
class ParametricFamilyDistribution(Distribution):
    """
    A specific distribution instance from a parametric family.

    Instances are immutable: parameters are validated once by the family and
    the analytical computations are bound to them at construction.

    Parameters
    ----------
    family_name : str
        Name of the distribution family.
    _distribution_type : DistributionType
        Type of this distribution.
    parameters : Parametrization
        Parameter values for this distribution.
    _support : Support or None
        Support of this distribution.
    _sampling_strategy : SamplingStrategy
        Strategy serving :meth:`draw` and :meth:`sample`.
    _computation_strategy : ComputationStrategy
        Strategy resolving characteristics.
    _analytical : Mapping[str, AnalyticalComputation]
        Characteristic functions bound to ``parameters``.
    """

    family_name: str
    _distribution_type: DistributionType
    parameters: Parametrization
    _support: Support | None
    _sampling_strategy: SamplingStrategy = field(repr=False)
    _computation_strategy: ComputationStrategy[Any, Any] = field(repr=False)
    _analytical: Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]] = field(
        repr=False, compare=False
    )

    @property
    def distribution_type(self) -> DistributionType:
        """Get the distribution type."""
        return self._distribution_type

    @property
    def parametrization_name(self) -> str:
        """Name of the parametrization the distribution was created with."""
        return self.parameters.name

    @property
    def family(self) -> ParametricFamily:
        """Get the registered parametric family this distribution belongs to."""
        return ParametricFamilyRegister.get(self.family_name)

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Get analytical computations for this distribution."""
        return self._analytical

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        """Get the sampling strategy for this distribution."""
        return self._sampling_strategy

    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]:
        """Get the computation strategy for this distribution."""
        return self._computation_strategy

    @property
    def support(self) -> Support | None:
        """Get the support of this distribution."""
        return self._support

    def draw(self, source: SourceLike = None, **options: Any) -> Any:
        """
        Draw a single variate.

        Parameters
        ----------
        source : SourceLike, optional
            Source of randomness; see :func:`~pysatl_variates.rng.as_variate_source`.
        """
        return self._sampling_strategy.draw(self, source=source, **options)

    def sample(self, n: int, source: SourceLike = None, **options: Any) -> Sample:
        """
        Generate ``n`` independent variates.

        Parameters
        ----------
        n : int
            Number of samples to generate.
        source : SourceLike, optional
            Source of randomness; see :func:`~pysatl_variates.rng.as_variate_source`.
        **options : Any
            Additional options for sampling.

        Returns
        -------
        Sample
            Generated samples.
        """
        return self._sampling_strategy.sample(n, distr=self, source=source, **options)
