"""
Sampling Interfaces
===================

This module defines the protocol and the array-backed implementation of the
containers returned by batch draws.

Rows are independent draws and columns are coordinates: univariate samplers
return shape ``(n, 1)``, the von Mises-Fisher sampler returns ``(n, p)``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any

    import numpy.typing as npt


class Sample(Protocol):
    """
    Protocol for sample containers.

    Attributes
    ----------
    array : numpy.ndarray
        Array representation of the samples.
    shape : tuple[int, ...]
        Shape of the sample array.
    """

    def __len__(self) -> int: ...
    @property
    def array(self) -> npt.NDArray[Any]: ...
    @property
    def shape(self) -> tuple[int, ...]: ...


class ArraySample:
    """
    Array-backed sample container of shape ``(n_samples, n_dimensions)``.

    Parameters
    ----------
    data : numpy.ndarray
        Floating-point or integer array. A 1D array of ``n`` scalar draws is
        stored as a single column ``(n, 1)``.

    Attributes
    ----------
    data : numpy.ndarray
        Backing array containing the samples.
    dimension : int
        Dimensionality of the samples (d).

    Raises
    ------
    ValueError
        If data has more than two axes or is not numeric.
    """

    dimension: int
    data: npt.NDArray[Any]

    def __init__(self, data: npt.NDArray[Any]) -> None:
        if data.ndim == 1:
            data = data.reshape(-1, 1)
        if data.ndim != 2:
            raise ValueError("ArraySample expects a 1D array of draws or a 2D array (n, d).")
        if not (np.issubdtype(data.dtype, np.floating) or np.issubdtype(data.dtype, np.integer)):
            raise ValueError(f"ArraySample expects numeric data, got dtype {data.dtype}.")
        self.data = data
        self.dimension = int(data.shape[1])

    def __len__(self) -> int:
        """Return the number of samples (n)."""
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[npt.NDArray[Any]]:
        """Iterate over samples (rows of the array)."""
        yield from self.data

    def __repr__(self) -> str:
        n, d = self.shape
        return f"ArraySample(n={n}, dimension={d}, dtype={self.data.dtype})"

    @property
    def array(self) -> npt.NDArray[Any]:
        """Return the backing array."""
        return self.data

    @property
    def values(self) -> npt.NDArray[Any]:
        """
        Return univariate draws as a flat ``(n,)`` view.

        Raises
        ------
        ValueError
            If the sample has more than one dimension.
        """
        if self.dimension != 1:
            raise ValueError(f"values is only defined for univariate samples, d={self.dimension}.")
        return self.data[:, 0]

    @property
    def shape(self) -> tuple[int, ...]:
        """Return the shape of the sample array (n, d)."""
        n, d = self.data.shape
        return int(n), int(d)
