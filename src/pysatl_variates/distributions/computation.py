"""
Computation Primitives
======================

Closed-form characteristic callables provided by a distribution directly,
wrapped in :class:`AnalyticalComputation` together with their target name.

Notes
-----
- Analytical callables are vectorised over NumPy arrays. A scalar input gives
  a NumPy scalar back.
- Moment-like characteristics (mean, variance, ...) ignore their data
  argument; callers pass ``None``.
- ``**options`` select among variants of the same formula
  (e.g. ``excess=False`` for raw kurtosis).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from mypy_extensions import KwArg

from pysatl_variates.types import GenericCharacteristicName


@dataclass(frozen=True, slots=True)
class AnalyticalComputation[In, Out]:
    """Analytical computation provided directly by the distribution.

    Parameters
    ----------
    target : str
        Characteristic name (e.g., ``"pdf"``).
    func : Callable[[In, KwArg(Any)], Out]
        Analytical callable.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        """Evaluate the analytical function."""
        return self.func(data, **options)
