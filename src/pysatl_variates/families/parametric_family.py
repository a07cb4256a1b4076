"""
Parametric family definitions and management infrastructure.

This module contains the main class for defining parametric families of
distributions, including support for multiple parameterizations, analytical
characteristics, sampling strategies, and computation methods.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from functools import partial
from typing import TYPE_CHECKING

from pysatl_variates.distributions.computation import AnalyticalComputation
from pysatl_variates.distributions.strategies import (
    DefaultComputationStrategy,
    DefaultSamplingUnivariateStrategy,
)
from pysatl_variates.families.distribution import ParametricFamilyDistribution
from pysatl_variates.types import DistributionType

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from pysatl_variates.distributions.strategies import ComputationStrategy, SamplingStrategy
    from pysatl_variates.distributions.support import Support
    from pysatl_variates.families.parametrizations import (
        Parametrization,
    )
    from pysatl_variates.types import (
        GenericCharacteristicName,
        ParametrizationName,
    )

    type ParametrizedFunction = Callable[..., Any]
    type SupportArg = Callable[[Parametrization], Support | None] | None
    type SupportResolver = Callable[[Parametrization], Support | None]

logger = logging.getLogger(__name__)


class ParametricFamily:
    """
    A family of distributions with multiple parametrizations.

    Manages parametrizations and analytical characteristics, and creates
    distribution instances with validated parameters.

    Parameters
    ----------
    name : str
        Name of the distribution family.
    distr_type : DistributionType or Callable[[Parametrization], DistributionType]
        Distribution type or function that infers type from base parametrization.
    distr_parametrizations : list[ParametrizationName]
        List of parametrization names (first is base parametrization).
    distr_characteristics : dict[str, dict[str, Callable] or Callable]
        Mapping from characteristic names to ``func(parameters, data, **options)``.
        Single functions are treated as defined for the base parametrization.
    sampling_strategy : SamplingStrategy, optional
        Strategy for sampling; inverse transform through ``ppf`` by default.
    computation_strategy : ComputationStrategy, optional
        Strategy for resolving characteristics.
    support_by_parametrization : Callable or None, optional
        Function that returns support for given parameters.
    """

    def __init__(
        self,
        name: str,
        distr_type: DistributionType | Callable[[Parametrization], DistributionType],
        distr_parametrizations: list[ParametrizationName],
        distr_characteristics: dict[
            GenericCharacteristicName,
            dict[ParametrizationName, ParametrizedFunction] | ParametrizedFunction,
        ],
        sampling_strategy: SamplingStrategy | None = None,
        computation_strategy: ComputationStrategy[Any, Any] | None = None,
        support_by_parametrization: SupportArg = None,
    ):
        if not distr_parametrizations:
            raise ValueError(f"Family '{name}' needs at least one parametrization.")

        self._name = name
        self._distr_type: Callable[[Parametrization], DistributionType] = (
            (lambda params: distr_type) if isinstance(distr_type, DistributionType) else distr_type
        )

        self.computation_strategy = (
            DefaultComputationStrategy() if computation_strategy is None else computation_strategy
        )
        self.sampling_strategy = (
            DefaultSamplingUnivariateStrategy() if sampling_strategy is None else sampling_strategy
        )

        if support_by_parametrization is None:
            self._support_resolver: SupportResolver
            self._support_resolver = lambda _params: None
        else:
            self._support_resolver = support_by_parametrization

        # Ordered names; the first one is the base parametrization name
        self.parametrization_names: list[ParametrizationName] = distr_parametrizations
        self.base_parametrization_name: ParametrizationName = self.parametrization_names[0]

        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

        def _process_char_val(
            value: dict[ParametrizationName, ParametrizedFunction] | ParametrizedFunction,
        ) -> dict[ParametrizationName, ParametrizedFunction]:
            return value if isinstance(value, dict) else {self.base_parametrization_name: value}

        self.distr_characteristics: dict[
            GenericCharacteristicName, dict[ParametrizationName, ParametrizedFunction]
        ] = {key: _process_char_val(val) for key, val in distr_characteristics.items()}

        # For each parametrization, which parametrization provides each characteristic
        self._analytical_plan: dict[
            ParametrizationName, dict[GenericCharacteristicName, ParametrizationName]
        ] = {}
        base_name = self.base_parametrization_name
        for pname in self.parametrization_names:
            plan_for_p: dict[GenericCharacteristicName, ParametrizationName] = {}
            for characteristic, forms in self.distr_characteristics.items():
                if pname in forms:
                    plan_for_p[characteristic] = pname
                elif base_name in forms:
                    plan_for_p[characteristic] = base_name
            self._analytical_plan[pname] = plan_for_p

    def __repr__(self) -> str:
        return f"ParametricFamily({self._name!r}, parametrizations={self.parametrization_names})"

    @property
    def name(self) -> str:
        """Get the family name."""
        return self._name

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        """Get mapping from parametrization names to classes."""
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """
        Get the base parametrization class.

        Raises
        ------
        ValueError
            If base parametrization is not registered.
        """
        try:
            return self._parametrizations[self.base_parametrization_name]
        except KeyError as exc:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' is not registered."
            ) from exc

    @property
    def support_resolver(self) -> SupportResolver:
        """Get the support resolver function."""
        return self._support_resolver

    def register_parametrization(
        self,
        name: ParametrizationName,
        parametrization_class: type[Parametrization],
    ) -> None:
        """
        Register a parametrization class.

        Raises
        ------
        ValueError
            If name is already registered or was not declared by the family.
        """
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        if name not in self.parametrization_names:
            raise ValueError(f"Parametrization '{name}' is not declared by family '{self._name}'.")
        self._parametrizations[name] = parametrization_class
        logger.debug("Registered parametrization %r of family %r", name, self._name)

    def to_base(self, parameters: Parametrization) -> Parametrization:
        """Convert parameters to the base parametrization."""
        if parameters.name == self.base_parametrization_name:
            return parameters
        return parameters.transform_to_base_parametrization()

    def _build_analytical_computations(
        self, parameters: Parametrization
    ) -> dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Bind every planned characteristic function to ``parameters``."""
        plan = self._analytical_plan.get(parameters.name, {})
        result: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]] = {}
        base_params: Parametrization | None = None

        for characteristic, provider_name in plan.items():
            if provider_name == parameters.name:
                params_obj = parameters
            else:
                if base_params is None:
                    base_params = self.to_base(parameters)
                params_obj = base_params

            func_factory = self.distr_characteristics[characteristic][provider_name]
            result[characteristic] = AnalyticalComputation(
                target=characteristic,
                func=partial(func_factory, params_obj),
            )

        return result

    def distribution(
        self,
        parametrization_name: str | None = None,
        **parameters_values: Any,
    ) -> ParametricFamilyDistribution:
        """
        Create a distribution instance with given parameters.

        Parameters
        ----------
        parametrization_name : str, optional
            Name of parametrization to use (defaults to base).
        **parameters_values
            Parameter values for the distribution.

        Raises
        ------
        KeyError
            If parametrization name is not registered.
        DomainError
            If parameters don't satisfy constraints.
        """
        if parametrization_name is None:
            parametrization_class = self.base
        else:
            parametrization_class = self._parametrizations[parametrization_name]

        parameters = parametrization_class(**parameters_values)
        parameters.validate()
        base_parameters = self.to_base(parameters)
        if base_parameters is not parameters:
            base_parameters.validate()
        distribution_type = self._distr_type(base_parameters)
        return ParametricFamilyDistribution(
            self.name,
            distribution_type,
            parameters,
            self.support_resolver(base_parameters),
            self.sampling_strategy,
            self.computation_strategy,
            self._build_analytical_computations(parameters),
        )

    __call__ = distribution
