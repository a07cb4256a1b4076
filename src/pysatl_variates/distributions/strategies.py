"""
Computation and Sampling Strategies
===================================

This module defines the pluggable strategy interfaces and default implementations:

- :class:`ComputationStrategy`: resolves characteristic methods.
- :class:`DefaultComputationStrategy`: resolves the analytical
  characteristics a distribution provides.
- :class:`SamplingStrategy`: draws one variate or a batch from a distribution.
- :class:`DefaultSamplingUnivariateStrategy`: inverse transform sampling
  through ``ppf`` and i.i.d. uniform variates.

Notes
-----
- Strategies are stateless; randomness comes from the ``source`` option
  (see :func:`pysatl_variates.rng.as_variate_source`).
"""

__author__ = "Leonid Elkin, Mikhail, Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, Protocol

import numpy as np

from pysatl_variates.distributions.computation import AnalyticalComputation
from pysatl_variates.rng import as_variate_source
from pysatl_variates.types import (
    CharacteristicName,
    GenericCharacteristicName,
)

from .sampling import ArraySample, Sample

if TYPE_CHECKING:
    from pysatl_variates.rng import SourceLike

    from .distribution import Distribution

type Method[In, Out] = AnalyticalComputation[In, Out]


class ComputationStrategy[In, Out](Protocol):
    """Protocol for characteristic resolution strategies."""

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]: ...


class DefaultComputationStrategy[In, Out]:
    """
    Default characteristic resolver.

    Only closed forms are served: every characteristic of the built-in
    families is analytical, and no numerical conversion between
    characteristics is attempted.

    Raises
    ------
    RuntimeError
        If the distribution has no analytical implementation of the
        requested characteristic.
    """

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]:
        """
        Resolve the analytical method for ``state``.

        Parameters
        ----------
        state : str
            Target characteristic name to resolve.
        distr : Distribution
            The distribution providing the analytical computations.
        **options
            Unused; accepted for protocol compatibility.

        Returns
        -------
        Method
            Analytical callable implementing ``state``.
        """
        try:
            return distr.analytical_computations[state]
        except KeyError:
            available = ", ".join(sorted(distr.analytical_computations)) or "none"
            raise RuntimeError(
                f"No analytical '{state}' characteristic; available: {available}."
            ) from None


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies."""

    def draw(self, distr: "Distribution", **options: Any) -> Any: ...

    def sample(self, n: int, distr: "Distribution", **options: Any) -> Sample: ...


class DefaultSamplingUnivariateStrategy(SamplingStrategy):
    """
    Default univariate sampler using inverse transform sampling.

    The strategy resolves the distribution's ``ppf`` and applies it to i.i.d.
    uniforms ``U ~ U(0, 1)``.

    Options
    -------
    source : SourceLike, optional
        Source of uniform variates, see
        :func:`~pysatl_variates.rng.as_variate_source`.
    """

    def draw(self, distr: "Distribution", source: "SourceLike" = None, **options: Any) -> float:
        ppf = distr.query_method(CharacteristicName.PPF, **options)
        u = as_variate_source(source).uniform_real()
        return float(ppf(u))

    def sample(
        self, n: int, distr: "Distribution", source: "SourceLike" = None, **options: Any
    ) -> ArraySample:
        """
        Draw ``n`` values.

        Returns
        -------
        ArraySample
            A 2D sample of shape ``(n, 1)``.

        Raises
        ------
        ValueError
            If ``n`` is negative.
        """
        if n < 0:
            raise ValueError(f"Number of samples must be non-negative, got {n}")
        ppf = distr.query_method(CharacteristicName.PPF, **options)
        u = as_variate_source(source).uniform_real(size=n)
        vals = np.asarray(ppf(u), dtype=np.float64).reshape(n, 1)
        return ArraySample(vals)
