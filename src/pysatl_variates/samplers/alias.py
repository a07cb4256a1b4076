"""
Alias Table Sampler
===================

Walker's alias method for drawing from a finite categorical distribution in
constant time.

The table has one slot per category. A draw picks a slot uniformly and either
keeps the slot's own category (with the slot's acceptance probability) or
jumps to the slot's alias. Construction is ``O(K)``, each draw ``O(1)``.

Categories are numbered ``1..K`` in the order of the input weights.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING

import numpy as np

from pysatl_variates.distributions.sampling import ArraySample
from pysatl_variates.distributions.support import ExplicitTableDiscreteSupport
from pysatl_variates.errors import ConstructionError
from pysatl_variates.rng import MAX_UINT, as_variate_source
from pysatl_variates.types import UnivariateDiscrete

if TYPE_CHECKING:
    from collections.abc import Sequence

    import numpy.typing as npt

    from pysatl_variates.rng import SourceLike, VariateSource
    from pysatl_variates.types import EuclideanDistributionType, Number

logger = logging.getLogger(__name__)


def _normalized_weights(probs: Sequence[Number] | npt.ArrayLike) -> npt.NDArray[np.float64]:
    """
    Validate the weights and rescale them to sum to one.

    Raises
    ------
    ConstructionError
        If the weights are empty, not one-dimensional, negative, not finite,
        or sum to zero.
    """
    try:
        weights = np.asarray(probs, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise ConstructionError(f"Weights must be numeric: {exc}") from exc

    if weights.ndim != 1:
        raise ConstructionError(f"Weights must be one-dimensional, got shape {weights.shape}")
    if weights.size == 0:
        raise ConstructionError("Weights must be non-empty")
    if not np.all(np.isfinite(weights)):
        raise ConstructionError("Weights must be finite")
    if np.any(weights < 0.0):
        raise ConstructionError("Weights must be non-negative")

    total = float(weights.sum())
    if total <= 0.0:
        raise ConstructionError("Weights must not sum to zero")
    return weights / total


class AliasTable:
    """
    Alias table for ``O(1)`` sampling from a categorical distribution.

    Parameters
    ----------
    probs : sequence of float
        Non-negative weights of the categories ``1..K``. They are normalised
        internally, so any positive total is accepted.

    Attributes
    ----------
    K : int
        Number of categories.
    Ku : int
        Modulus used to reduce raw uniform integers to a slot index (``K``).
    U : int
        Rejection bound: the largest multiple of ``Ku`` not exceeding
        :data:`~pysatl_variates.rng.MAX_UINT`. Raw integers ``>= U`` are
        redrawn so the slot index is unbiased.

    Raises
    ------
    ConstructionError
        If the weights are empty, negative, not finite or sum to zero.

    Notes
    -----
    Exact slot contents depend on the order in which the stacks are drained;
    only the resulting sampling distribution is meaningful.

    Examples
    --------
    >>> table = AliasTable([0.5, 0.5])
    >>> table.acceptance_probabilities
    array([1., 1.])
    >>> table.draw(source=42) in (1, 2)
    True
    """

    __slots__ = ("_probs", "_accept", "_alias", "K", "Ku", "U")

    def __init__(self, probs: Sequence[Number] | npt.ArrayLike) -> None:
        self._probs = _normalized_weights(probs)
        self._probs.flags.writeable = False

        k = int(self._probs.size)
        accept = self._probs * k
        # Settled slots alias to themselves
        alias = np.arange(k, dtype=np.int64)

        larges: list[int] = []
        smalls: list[int] = []
        for i in range(k):
            if accept[i] > 1.0:
                larges.append(i)
            elif accept[i] < 1.0:
                smalls.append(i)
            else:
                accept[i] = 1.0

        while larges and smalls:
            small = smalls.pop()
            large = larges.pop()
            alias[small] = large
            # Slot small keeps accept[small]; large donates the rest of its unit of mass
            accept[large] = accept[large] - (1.0 - accept[small])
            if accept[large] > 1.0:
                larges.append(large)
            elif accept[large] < 1.0:
                smalls.append(large)
            else:
                accept[large] = 1.0

        # Only reached through floating-point rounding: leftovers hold (almost)
        # exactly one unit of mass, so they keep their own category.
        residual = smalls + larges
        if residual:
            logger.debug("Alias table: forcing %d residual slot(s) to acceptance 1", len(residual))
        for i in residual:
            accept[i] = 1.0

        accept.flags.writeable = False
        alias += 1
        alias.flags.writeable = False

        self._accept = accept
        self._alias = alias
        self.K = k
        self.Ku = k
        self.U = (MAX_UINT // self.Ku) * self.Ku

        logger.debug("Built alias table with %d entries", k)

    def __repr__(self) -> str:
        return f"AliasTable with {self.K} entries"

    def __len__(self) -> int:
        return self.K

    @property
    def acceptance_probabilities(self) -> npt.NDArray[np.float64]:
        """Probability of keeping each slot's own category, in ``[0, 1]``."""
        return self._accept

    @property
    def aliases(self) -> npt.NDArray[np.int64]:
        """Fallback category (``1..K``) of each slot; settled slots alias to themselves."""
        return self._alias

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return UnivariateDiscrete

    @property
    def support(self) -> ExplicitTableDiscreteSupport:
        """The categories ``1..K``."""
        return ExplicitTableDiscreteSupport(range(1, self.K + 1), assume_sorted=True)

    def pmf(self) -> npt.NDArray[np.float64]:
        """Normalised probabilities of the categories ``1..K``."""
        return self._probs

    def _slot(self, source: VariateSource) -> int:
        """Unbiased slot index in ``[0, Ku)`` by rejection against ``U``."""
        raw = int(source.uniform_integer())
        while raw >= self.U:
            raw = int(source.uniform_integer())
        return raw % self.Ku

    def draw(self, source: SourceLike = None) -> int:
        """
        Draw one category.

        Parameters
        ----------
        source : SourceLike, optional
            Source of randomness; see :func:`~pysatl_variates.rng.as_variate_source`.

        Returns
        -------
        int
            Category in ``1..K``.
        """
        src = as_variate_source(source)
        i = self._slot(src)
        u = src.uniform_real()
        return i + 1 if u < self._accept[i] else int(self._alias[i])

    def sample(self, n: int, source: SourceLike = None) -> ArraySample:
        """
        Draw ``n`` independent categories.

        Returns
        -------
        ArraySample
            Integer sample of shape ``(n, 1)`` with values in ``1..K``.

        Raises
        ------
        ValueError
            If ``n`` is negative.
        """
        if n < 0:
            raise ValueError(f"Number of samples must be non-negative, got {n}")
        src = as_variate_source(source)

        raw = np.asarray(src.uniform_integer(size=n), dtype=np.uint64)
        bound = np.uint64(self.U)
        rejected = np.flatnonzero(raw >= bound)
        while rejected.size:
            raw[rejected] = np.asarray(src.uniform_integer(size=rejected.size), dtype=np.uint64)
            rejected = rejected[raw[rejected] >= bound]

        slots = (raw % np.uint64(self.Ku)).astype(np.int64)
        u = np.asarray(src.uniform_real(size=n), dtype=np.float64)
        categories = np.where(u < self._accept[slots], slots + 1, self._alias[slots])
        return ArraySample(categories.astype(np.int64).reshape(n, 1))
