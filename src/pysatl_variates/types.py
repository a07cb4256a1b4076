"""
Core Type Definitions
=====================

Fundamental types and data structures used throughout PySATL variates.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import StrEnum
from math import inf
from typing import Any, cast, overload

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """
    Enumeration of distribution kinds.

    Attributes
    ----------
    DISCRETE : str
        Discrete probability distribution.
    CONTINUOUS : str
        Continuous probability distribution.
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


class DistributionType:
    """Base class for distribution type descriptors."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType(DistributionType):
    """
    Distribution type for Euclidean space distributions.

    Parameters
    ----------
    kind : Kind
        Distribution kind (discrete or continuous).
    dimension : int
        Spatial dimension (e.g., 1 for univariate).
    """

    kind: Kind
    dimension: int


@dataclass(frozen=True, slots=True)
class SphericalDistributionType(DistributionType):
    """
    Distribution type for distributions on the unit sphere.

    Parameters
    ----------
    dimension : int
        Dimension ``p`` of the ambient space; samples lie on the
        ``(p - 1)``-sphere embedded in it.
    """

    dimension: int

    @property
    def kind(self) -> Kind:
        """Directional distributions are always continuous."""
        return Kind.CONTINUOUS


UnivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=1)
"""Type for univariate continuous distributions."""

UnivariateDiscrete = EuclideanDistributionType(kind=Kind.DISCRETE, dimension=1)
"""Type for univariate discrete distributions."""

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

BoolArray = NDArray[np.bool_]
"""Type alias for boolean arrays."""


@dataclass(frozen=True, slots=True)
class Interval1D:
    """
    1D interval with configurable closure.

    Parameters
    ----------
    left : float, default=-inf
        Left endpoint of the interval.
    right : float, default=inf
        Right endpoint of the interval.
    left_closed : bool, default=True
        Whether left endpoint is included (ignored if left = -inf).
    right_closed : bool, default=True
        Whether right endpoint is included (ignored if right = inf).
    """

    left: float = -inf
    right: float = inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        """Adjust closure for infinite endpoints."""
        if self.left == -inf and self.left_closed:
            object.__setattr__(self, "left_closed", False)
        if self.right == inf and self.right_closed:
            object.__setattr__(self, "right_closed", False)

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Check if point(s) are contained in the interval.

        Parameters
        ----------
        x : Number or NumericArray
            Point(s) to check.

        Returns
        -------
        bool or BoolArray
            True for points within the interval, False otherwise.
        """
        arr = np.asarray(x)

        left_ok = (arr > self.left) | (self.left_closed & (arr >= self.left))
        right_ok = (arr < self.right) | (self.right_closed & (arr <= self.right))
        result = left_ok & right_ok

        if np.ndim(arr) == 0:
            return bool(result)

        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        """Check if a single point is in the interval."""
        return bool(self.contains(cast(Number, x)))


type GenericCharacteristicName = str
"""Type alias for characteristic names (e.g., 'pdf', 'cdf')."""

type ParametrizationName = str
"""Type alias for parametrization names."""


class CharacteristicName(StrEnum):
    """
    Enumeration of statistical distribution characteristics.

    Note
    ----------
    ``PPF`` is the quantile function, ``CQUANTILE`` its complement
    (quantile of ``1 - p``). ``CCDF`` is the survival function ``1 - cdf``.
    """

    PDF = "pdf"
    LOGPDF = "logpdf"
    GRADLOGPDF = "gradlogpdf"
    CDF = "cdf"
    LOGCDF = "logcdf"
    CCDF = "ccdf"
    LOGCCDF = "logccdf"
    PPF = "ppf"
    CQUANTILE = "cquantile"
    INVLOGCDF = "invlogcdf"
    INVLOGCCDF = "invlogccdf"
    MEAN = "mean"
    MEDIAN = "median"
    MODE = "mode"
    VAR = "var"
    SKEW = "skewness"
    KURT = "kurtosis"
    ENTROPY = "entropy"


class FamilyName(StrEnum):
    FRECHET = "Frechet"


__all__ = [
    "Kind",
    "EuclideanDistributionType",
    "SphericalDistributionType",
    "UnivariateContinuous",
    "UnivariateDiscrete",
    "GenericCharacteristicName",
    "ParametrizationName",
    "DistributionType",
    "Interval1D",
    "BoolArray",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "CharacteristicName",
    "FamilyName",
]
