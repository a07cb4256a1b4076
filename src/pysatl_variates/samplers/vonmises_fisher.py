"""
Von Mises-Fisher Sampler
========================

Sampling from the von Mises-Fisher distribution on the unit sphere
``S^(p-1)`` in ``R^p`` with mean direction ``mu`` and concentration ``kappa``.

Algorithm
---------
Wood (1994), "Simulation of the von Mises Fisher distribution":

1. Draw the component ``w`` of the sample along the pole ``e_1 = (1, 0, ..., 0)``
   by rejection from a Beta((p-1)/2, (p-1)/2) based proposal.
2. Draw a direction uniformly on the sphere orthogonal to ``e_1`` from
   ``p - 1`` standard normals and scale it to length ``sqrt(1 - w**2)``.
3. Rotate the result with an orthonormal ``Q`` for which ``Q e_1 = mu``.

Everything that depends only on ``(mu, kappa)`` is computed once at
construction, so each draw costs ``O(p^2)`` for the rotation plus an
expected ``O(1)`` number of rejection rounds.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from typing import TYPE_CHECKING

import numpy as np

from pysatl_variates.distributions.sampling import ArraySample
from pysatl_variates.distributions.support import UnitSphereSupport
from pysatl_variates.errors import DimensionError, DomainError
from pysatl_variates.rng import as_variate_source
from pysatl_variates.types import SphericalDistributionType

if TYPE_CHECKING:
    from collections.abc import Sequence

    import numpy.typing as npt

    from pysatl_variates.rng import SourceLike, VariateSource

logger = logging.getLogger(__name__)

UNIT_NORM_TOLERANCE = 1e-6
"""Allowed deviation of ``||mu||`` from 1."""


def vmf_b(p: int, kappa: float) -> float:
    """
    ``b = (p - 1) / (2 kappa + sqrt(4 kappa^2 + (p - 1)^2))``.

    Written without the cancellation of the equivalent form
    ``(-2 kappa + sqrt(4 kappa^2 + (p - 1)^2)) / (p - 1)``. For large
    ``kappa`` the ratio ``(p - 1) / (2 kappa)`` is factored out so that no
    intermediate overflows and ``b`` stays positive.
    """
    h = (p - 1) / 2.0
    if kappa > h:
        r = h / kappa
        return r / (1.0 + math.sqrt(1.0 + r * r))
    return h / (kappa + math.hypot(kappa, h))


def vmf_rotation(mu: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    """
    Orthonormal matrix ``Q`` with ``Q[:, 0] == mu``.

    A full-rank matrix is built with ``mu`` as its first column and indicator
    vectors for the remaining columns, then orthonormalised by QR.

    The indicator of the coordinate where ``|mu|`` is largest is the one left
    out. The remaining ``p - 1`` indicators together with ``mu`` then span
    ``R^p`` with the determinant equal to ``± mu[k]``, whose magnitude is at
    least ``1 / sqrt(p)``, so the factorisation never works on a nearly
    singular matrix.

    Householder QR may return ``-mu`` as the first column; that column alone
    is negated, which keeps ``Q`` orthonormal.
    """
    p = mu.size
    k = int(np.argmax(np.abs(mu)))

    a = np.zeros((p, p), dtype=np.float64)
    a[:, 0] = mu
    others = [i for i in range(p) if i != k]
    a[others, np.arange(1, p)] = 1.0

    q, _ = np.linalg.qr(a)
    if np.dot(q[:, 0], mu) < 0.0:
        q[:, 0] = -q[:, 0]
    return q


def _validated_mean_direction(mu: Sequence[float] | npt.ArrayLike) -> npt.NDArray[np.float64]:
    try:
        arr = np.array(mu, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise DimensionError(f"Mean direction must be a numeric vector: {exc}") from exc

    if arr.ndim != 1 or arr.size == 0:
        raise DimensionError(f"Mean direction must be a non-empty vector, got shape {arr.shape}")
    if arr.size < 2:
        raise DimensionError("Mean direction must have at least 2 coordinates")
    if not np.all(np.isfinite(arr)):
        raise DimensionError("Mean direction must be finite")

    norm = float(np.linalg.norm(arr))
    if abs(norm - 1.0) > UNIT_NORM_TOLERANCE:
        raise DimensionError(f"Mean direction must be a unit vector, got norm {norm}")
    return arr


class VonMisesFisherSampler:
    """
    Sampler of the von Mises-Fisher distribution.

    Parameters
    ----------
    mu : sequence of float
        Mean direction, a unit vector in ``R^p`` with ``p >= 2``.
    kappa : float
        Concentration, ``kappa > 0``. Large values concentrate the draws
        around ``mu``; ``kappa -> 0`` approaches the uniform distribution.

    Attributes
    ----------
    p : int
        Dimension of the ambient space.
    kappa : float
        Concentration.
    b, x0, c : float
        Constants of the rejection step:
        ``x0 = (1 - b) / (1 + b)`` and ``c = kappa x0 + (p - 1) log(1 - x0^2)``,
        with ``1 - x0^2`` evaluated as ``4 b / (1 + b)^2`` so that ``c`` stays
        finite when ``x0`` rounds to 1.

    Raises
    ------
    DimensionError
        If ``mu`` is empty, shorter than 2, not finite or not of unit norm.
    DomainError
        If ``kappa`` is not a finite positive number.

    Examples
    --------
    >>> sampler = VonMisesFisherSampler([0.0, 0.0, 1.0], kappa=50.0)
    >>> x = sampler.draw(source=0)
    >>> x.shape
    (3,)
    """

    __slots__ = ("_mu", "_rotation", "p", "kappa", "b", "x0", "c")

    def __init__(self, mu: Sequence[float] | npt.ArrayLike, kappa: float) -> None:
        mu_arr = _validated_mean_direction(mu)
        kappa = float(kappa)
        if not (math.isfinite(kappa) and kappa > 0.0):
            raise DomainError(f"Concentration must satisfy kappa > 0, got {kappa}")

        p = int(mu_arr.size)
        b = vmf_b(p, kappa)
        x0 = (1.0 - b) / (1.0 + b)

        self.p = p
        self.kappa = kappa
        self.b = b
        self.x0 = x0
        self.c = kappa * x0 + (p - 1) * (math.log(4.0 * b) - 2.0 * math.log1p(b))

        mu_arr.flags.writeable = False
        self._mu = mu_arr
        rotation = vmf_rotation(mu_arr)
        rotation.flags.writeable = False
        self._rotation = rotation

        logger.debug("Built von Mises-Fisher sampler: p=%d, kappa=%g, b=%g", p, kappa, b)

    def __repr__(self) -> str:
        return f"VonMisesFisherSampler(p={self.p}, kappa={self.kappa})"

    @property
    def mean_direction(self) -> npt.NDArray[np.float64]:
        return self._mu

    @property
    def rotation(self) -> npt.NDArray[np.float64]:
        """Orthonormal ``Q`` mapping ``(1, 0, ..., 0)`` to the mean direction."""
        return self._rotation

    @property
    def distribution_type(self) -> SphericalDistributionType:
        return SphericalDistributionType(dimension=self.p)

    @property
    def support(self) -> UnitSphereSupport:
        return UnitSphereSupport(dimension=self.p)

    def generate_w(self, source: VariateSource) -> float:
        """
        Draw the component of a sample along the mean direction.

        The loop has no iteration cap: its acceptance probability is bounded
        away from zero for every valid ``(p, kappa)``, so the number of rounds
        is geometric with an expected value of ``O(1)``.

        The acceptance exponent ``kappa w + (p - 1) log(1 - x0 w) - c`` is
        evaluated through ``d = (1 + b) (1 - (1 - b) z)``, using
        ``w - x0 = 2 b (1 - 2 z) / d`` and ``1 - x0 w = 2 b / d``. Neither
        difference cancels when ``x0`` and ``w`` are both close to 1.
        """
        p, b, kappa = self.p, self.b, self.kappa
        r = (p - 1) / 2.0
        log1p_b = math.log1p(b)
        while True:
            z = source.beta(r, r)
            denom = 1.0 - (1.0 - b) * z
            w = (1.0 - (1.0 + b) * z) / denom
            d = (1.0 + b) * denom
            exponent = kappa * b * 2.0 * (1.0 - 2.0 * z) / d + (p - 1) * (
                2.0 * log1p_b - math.log(2.0 * d)
            )
            # 1 - U lies in (0, 1], so its log is finite
            log_u = math.log(1.0 - source.uniform_real())
            if exponent >= log_u:
                return w

    def _draw_into(
        self, x: npt.NDArray[np.float64], t: npt.NDArray[np.float64], source: VariateSource
    ) -> npt.NDArray[np.float64]:
        """Write one draw into ``x`` using ``t`` as scratch space."""
        w = self.generate_w(source)
        tail = t[1:]
        tail[:] = source.standard_normal(size=self.p - 1)
        s = float(np.dot(tail, tail))
        tail *= math.sqrt((1.0 - w * w) / s)
        t[0] = w
        np.matmul(self._rotation, t, out=x)
        return x

    def draw(self, source: SourceLike = None) -> npt.NDArray[np.float64]:
        """
        Draw one unit vector.

        Parameters
        ----------
        source : SourceLike, optional
            Source of randomness; see :func:`~pysatl_variates.rng.as_variate_source`.

        Returns
        -------
        numpy.ndarray
            Vector of shape ``(p,)`` with unit Euclidean norm.
        """
        src = as_variate_source(source)
        x = np.empty(self.p, dtype=np.float64)
        return self._draw_into(x, np.empty(self.p, dtype=np.float64), src)

    def sample(self, n: int, source: SourceLike = None) -> ArraySample:
        """
        Draw ``n`` independent unit vectors.

        Draws share one scratch vector allocated for this call only, so
        concurrent calls with separate sources do not interfere.

        Returns
        -------
        ArraySample
            Sample of shape ``(n, p)``; each row is one draw.

        Raises
        ------
        ValueError
            If ``n`` is negative.
        """
        if n < 0:
            raise ValueError(f"Number of samples must be non-negative, got {n}")
        src = as_variate_source(source)
        out = np.empty((n, self.p), dtype=np.float64)
        t = np.empty(self.p, dtype=np.float64)
        for row in out:
            self._draw_into(row, t, src)
        return ArraySample(out)
