"""
Supports
========

Sets on which samplers and distributions put their probability mass:

- :class:`ContinuousSupport`: an interval of the real line (Fréchet).
- :class:`ExplicitTableDiscreteSupport`: a finite sorted set of points
  (categories of an alias table).
- :class:`UnitSphereSupport`: the unit sphere in ``R^p`` (von Mises-Fisher).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, cast, overload, runtime_checkable

import numpy as np

from pysatl_variates.types import BoolArray, Interval1D, Number, NumericArray

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


class ContinuousSupport(Interval1D, Support): ...


@runtime_checkable
class DiscreteSupport(Support, Protocol):
    def iter_points(self) -> Iterator[Number]: ...

    def prev(self, x: Number) -> Number | None: ...


class ExplicitTableDiscreteSupport(DiscreteSupport):
    __slots__ = ("_points",)

    def __init__(self, points: Iterable[Number], assume_sorted: bool = False) -> None:
        arr = np.array(list(points))

        if arr.size == 0:
            raise ValueError("Points must be non-empty")

        if not assume_sorted:
            arr.sort()

        unique_mask = np.empty(arr.size, dtype=bool)
        unique_mask[0] = True
        unique_mask[1:] = arr[1:] != arr[:-1]

        self._points = arr[unique_mask]

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        arr = np.asarray(x)
        idx = np.searchsorted(self._points, arr, side="left")

        in_bounds = idx < self._points.size
        idx_clipped = np.minimum(idx, self._points.size - 1)
        result = in_bounds & (self._points[idx_clipped] == arr)

        if np.ndim(arr) == 0:
            return bool(result)
        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    def __len__(self) -> int:
        return int(self._points.size)

    def iter_points(self) -> Iterator[Number]:
        return iter(self._points)

    def prev(self, x: Number) -> Number | None:
        idx = np.searchsorted(self._points, x, side="left")
        if idx == 0:
            return None
        return cast(Number, self._points[idx - 1])

    def first(self) -> Number:
        return cast(Number, self._points[0])

    def last(self) -> Number:
        return cast(Number, self._points[-1])

    @property
    def points(self) -> NumericArray:
        return cast(NumericArray, self._points.copy())

    __iter__ = iter_points


@dataclass(frozen=True, slots=True)
class UnitSphereSupport(Support):
    """
    Unit sphere ``{x in R^p : ||x|| = 1}``.

    Parameters
    ----------
    dimension : int
        Ambient dimension ``p``.
    atol : float, default 1e-9
        Absolute tolerance on the Euclidean norm.
    """

    dimension: int
    atol: float = 1e-9

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Check whether a vector, or each row of a matrix, lies on the sphere.

        Anything whose last axis is not of length ``dimension`` is outside.
        """
        arr = np.atleast_1d(np.asarray(x, dtype=np.float64))
        if arr.shape[-1] != self.dimension:
            if arr.ndim == 1:
                return False
            return np.zeros(arr.shape[:-1], dtype=bool)

        result = np.abs(np.linalg.norm(arr, axis=-1) - 1.0) <= self.atol
        if arr.ndim == 1:
            return bool(result)
        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(NumericArray, x)))


__all__ = [
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "ExplicitTableDiscreteSupport",
    "UnitSphereSupport",
]
