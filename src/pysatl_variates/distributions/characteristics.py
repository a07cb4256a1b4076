"""
Characteristics API
===================

Callable descriptors for a distribution's characteristics. ``CDF(distr, x)``
reads better at call sites than ``distr.query_method("cdf")(x)`` and
resolves the same analytical function through the distribution's
:class:`~pysatl_variates.distributions.strategies.ComputationStrategy`.

Notes
-----
- The characteristic name controls *what* to compute (e.g., "pdf").
- ``**options`` select a variant of the formula (e.g. ``excess=False``).
"""

__author__ = "Leonid Elkin, Mikhail, Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, cast

from pysatl_variates.distributions.strategies import Method
from pysatl_variates.types import (
    CharacteristicName,
    GenericCharacteristicName,
)

if TYPE_CHECKING:
    from pysatl_variates.distributions.distribution import Distribution


@dataclass(slots=True, frozen=True)
class GenericCharacteristic[In, Out]:
    """
    Callable characteristic descriptor.

    Parameters
    ----------
    name : str
        Characteristic identifier (e.g., ``"pdf"``, ``"cdf"`` or ``"ppf"``).

    Examples
    --------
    >>> from pysatl_variates.distributions.characteristics import CDF
    >>> # CDF(frechet, 1.0) == frechet.query_method("cdf")(1.0)
    """

    name: GenericCharacteristicName

    def __call__(self, distribution: "Distribution", data: In = None, **options: Any) -> Out:
        """
        Evaluate the characteristic on the given data.

        Parameters
        ----------
        distribution : Distribution
            Distribution whose computation strategy resolves the method.
        data : Any, optional
            Point(s) at which to evaluate. Omitted for moments.
        **options
            Formula variant options passed to the resolved method.
        """
        method = cast(
            Method[In, Out],
            distribution.computation_strategy.query_method(self.name, distribution),
        )
        return method(data, **options)


PDF = GenericCharacteristic[Any, Any](CharacteristicName.PDF)
LOGPDF = GenericCharacteristic[Any, Any](CharacteristicName.LOGPDF)
GRADLOGPDF = GenericCharacteristic[Any, Any](CharacteristicName.GRADLOGPDF)
CDF = GenericCharacteristic[Any, Any](CharacteristicName.CDF)
LOGCDF = GenericCharacteristic[Any, Any](CharacteristicName.LOGCDF)
CCDF = GenericCharacteristic[Any, Any](CharacteristicName.CCDF)
LOGCCDF = GenericCharacteristic[Any, Any](CharacteristicName.LOGCCDF)
PPF = GenericCharacteristic[Any, Any](CharacteristicName.PPF)
CQUANTILE = GenericCharacteristic[Any, Any](CharacteristicName.CQUANTILE)
INVLOGCDF = GenericCharacteristic[Any, Any](CharacteristicName.INVLOGCDF)
INVLOGCCDF = GenericCharacteristic[Any, Any](CharacteristicName.INVLOGCCDF)
MEAN = GenericCharacteristic[Any, float](CharacteristicName.MEAN)
MEDIAN = GenericCharacteristic[Any, float](CharacteristicName.MEDIAN)
MODE = GenericCharacteristic[Any, float](CharacteristicName.MODE)
VAR = GenericCharacteristic[Any, float](CharacteristicName.VAR)
SKEW = GenericCharacteristic[Any, float](CharacteristicName.SKEW)
KURT = GenericCharacteristic[Any, float](CharacteristicName.KURT)
ENTROPY = GenericCharacteristic[Any, float](CharacteristicName.ENTROPY)

__all__ = [
    "GenericCharacteristic",
    "PDF",
    "LOGPDF",
    "GRADLOGPDF",
    "CDF",
    "LOGCDF",
    "CCDF",
    "LOGCCDF",
    "PPF",
    "CQUANTILE",
    "INVLOGCDF",
    "INVLOGCCDF",
    "MEAN",
    "MEDIAN",
    "MODE",
    "VAR",
    "SKEW",
    "KURT",
    "ENTROPY",
]
