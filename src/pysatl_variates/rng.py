"""
Random Variate Sources
======================

The samplers in this package do not generate raw randomness themselves.
They consume a :class:`VariateSource`, which supplies uniform bits and a few
standard variates. :class:`NumpyVariateSource` implements the protocol on top
of :class:`numpy.random.Generator`.

Notes
-----
- Every method accepts an optional ``size``. ``size=None`` returns a Python
  scalar, otherwise an array of that shape is returned.
- Sources hold mutable generator state. Give each thread its own source;
  nothing here is synchronised.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

MAX_UINT = int(np.iinfo(np.uint64).max)
"""Upper end (inclusive) of :meth:`VariateSource.uniform_integer`."""


@runtime_checkable
class VariateSource(Protocol):
    """Protocol for suppliers of uniform bits and standard variates."""

    def uniform_integer(self, size: int | None = None) -> Any:
        """Unsigned integers uniform over ``[0, MAX_UINT]``."""
        ...

    def uniform_real(self, size: int | None = None) -> Any:
        """Floats uniform over ``[0, 1)``."""
        ...

    def standard_normal(self, size: int | None = None) -> Any: ...

    def beta(self, a: float, b: float, size: int | None = None) -> Any:
        """Beta(a, b) variates in ``(0, 1)``."""
        ...

    def standard_exponential(self, size: int | None = None) -> Any:
        """Exponential variates with unit rate."""
        ...


class NumpyVariateSource:
    """
    :class:`VariateSource` backed by a NumPy generator.

    Parameters
    ----------
    generator : numpy.random.Generator
        Generator whose state is advanced by every call.
    """

    __slots__ = ("generator",)

    def __init__(self, generator: np.random.Generator) -> None:
        self.generator = generator

    def uniform_integer(self, size: int | None = None) -> int | npt.NDArray[np.uint64]:
        raw = self.generator.integers(0, MAX_UINT, size=size, dtype=np.uint64, endpoint=True)
        if size is None:
            return int(raw)
        return raw

    def uniform_real(self, size: int | None = None) -> float | npt.NDArray[np.float64]:
        value = self.generator.random(size)
        return float(value) if size is None else value

    def standard_normal(self, size: int | None = None) -> float | npt.NDArray[np.float64]:
        value = self.generator.standard_normal(size)
        return float(value) if size is None else value

    def beta(
        self, a: float, b: float, size: int | None = None
    ) -> float | npt.NDArray[np.float64]:
        value = self.generator.beta(a, b, size)
        return float(value) if size is None else value

    def standard_exponential(self, size: int | None = None) -> float | npt.NDArray[np.float64]:
        value = self.generator.standard_exponential(size)
        return float(value) if size is None else value

    def __repr__(self) -> str:
        return f"NumpyVariateSource({self.generator!r})"


type SourceLike = VariateSource | np.random.Generator | np.random.SeedSequence | int | None


def as_variate_source(source: SourceLike = None) -> VariateSource:
    """
    Coerce ``source`` into a :class:`VariateSource`.

    Parameters
    ----------
    source : VariateSource, numpy.random.Generator, SeedSequence, int or None
        ``None`` gives a freshly seeded generator from OS entropy, an integer
        or a seed sequence gives a reproducible one. Generators are wrapped
        and existing sources are returned unchanged.

    Returns
    -------
    VariateSource

    Raises
    ------
    TypeError
        If ``source`` is of none of the accepted types.
    """
    if isinstance(source, np.random.Generator):
        return NumpyVariateSource(source)
    if source is None or isinstance(source, (int, np.integer, np.random.SeedSequence)):
        if isinstance(source, bool):
            raise TypeError("A boolean is not a valid random seed.")
        return NumpyVariateSource(np.random.default_rng(source))
    if isinstance(source, VariateSource):
        return source
    raise TypeError(f"Cannot use {type(source).__name__} as a source of random variates.")


__all__ = [
    "MAX_UINT",
    "VariateSource",
    "NumpyVariateSource",
    "SourceLike",
    "as_variate_source",
]
