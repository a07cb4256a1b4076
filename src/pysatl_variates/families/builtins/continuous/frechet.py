"""
Fréchet distribution family implementation.

Contains the Fréchet family with shape-scale and reciprocal-Weibull
parameterizations, the closed forms of all its characteristics, and the
sampling strategy that draws Fréchet variates from exponential ones.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from typing import TYPE_CHECKING, Any, cast

import numpy as np
from scipy.special import gamma

from pysatl_variates._math import log1mexp
from pysatl_variates.distributions.sampling import ArraySample
from pysatl_variates.distributions.strategies import SamplingStrategy
from pysatl_variates.distributions.support import ContinuousSupport
from pysatl_variates.families.parametric_family import ParametricFamily
from pysatl_variates.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.rng import as_variate_source
from pysatl_variates.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from pysatl_variates.distributions.distribution import Distribution
    from pysatl_variates.rng import SourceLike

logger = logging.getLogger(__name__)


def _shape_scale(parameters: Parametrization) -> tuple[float, float]:
    """Return ``(alpha, theta)`` of any Fréchet parametrization."""
    base = parameters.transform_to_base_parametrization().parameters
    return float(base["alpha"]), float(base["theta"])


def _scalar_or_array(result: NumericArray) -> Any:
    """Unwrap 0-d results so that scalar input gives a scalar back."""
    return result[()] if np.ndim(result) == 0 else result


def _power_term(theta: float, alpha: float, x: NumericArray) -> tuple[NumericArray, NumericArray]:
    """
    Return the support mask ``x > 0`` and ``(theta / x) ** alpha`` on it.

    Points outside the support are evaluated at ``x = 1``; callers discard
    them through the mask.
    """
    inside = x > 0.0
    safe_x = np.where(inside, x, 1.0)
    with np.errstate(over="ignore"):
        return inside, (theta / safe_x) ** alpha


class FrechetSamplingStrategy(SamplingStrategy):
    """
    Fréchet sampling by transforming standard exponential variates.

    If ``E ~ Exp(1)`` then ``theta * E ** (-1 / alpha)`` is Fréchet with
    shape ``alpha`` and scale ``theta``: this is inverse transform sampling
    with ``E = -log U`` already supplied by the variate source.
    """

    def draw(self, distr: Distribution, source: SourceLike = None, **options: Any) -> float:
        alpha, theta = _shape_scale(cast(Any, distr).parameters)
        e = as_variate_source(source).standard_exponential()
        with np.errstate(divide="ignore"):
            return float(theta * np.power(e, -1.0 / alpha))

    def sample(
        self, n: int, distr: Distribution, source: SourceLike = None, **options: Any
    ) -> ArraySample:
        if n < 0:
            raise ValueError(f"Number of samples must be non-negative, got {n}")
        alpha, theta = _shape_scale(cast(Any, distr).parameters)
        e = np.asarray(as_variate_source(source).standard_exponential(size=n), dtype=np.float64)
        with np.errstate(divide="ignore"):
            values = theta * e ** (-1.0 / alpha)
        return ArraySample(values.reshape(n, 1))


def configure_frechet_family() -> None:
    """
    Configure and register the Fréchet distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.FRECHET):
        return

    FRECHET_DOC = """
    Fréchet distribution.

    The Fréchet (inverse Weibull) distribution is the heavy-tailed member of
    the extreme value family. It has shape α > 0 and scale θ > 0.

    Probability density function:
        f(x) = (α/θ) * (x/θ)^(-α-1) * exp(-(x/θ)^(-α)) for x > 0

    Moments of order k exist only for α > k.
    """

    def logpdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Log density ``log(α/θ) + (1 + α) log(θ/x) - (θ/x)^α``.

        Returns ``-inf`` for ``x <= 0``.
        """
        alpha, theta = _shape_scale(parameters)
        x = np.asarray(x, dtype=np.float64)
        inside, z_alpha = _power_term(theta, alpha, x)
        safe_x = np.where(inside, x, 1.0)
        with np.errstate(divide="ignore", invalid="ignore"):
            result = math.log(alpha / theta) + (1.0 + alpha) * np.log(theta / safe_x) - z_alpha
        return _scalar_or_array(np.where(inside, result, -np.inf))

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Probability density function, ``exp(logpdf(x))``."""
        return _scalar_or_array(np.exp(logpdf(parameters, x)))

    def gradlogpdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Derivative of the log density, ``(α (θ/x)^α - α - 1) / x``.

        Returns 0 outside the support.
        """
        alpha, theta = _shape_scale(parameters)
        x = np.asarray(x, dtype=np.float64)
        inside, z_alpha = _power_term(theta, alpha, x)
        safe_x = np.where(inside, x, 1.0)
        with np.errstate(over="ignore", invalid="ignore"):
            result = (alpha * z_alpha - (alpha + 1.0)) / safe_x
        return _scalar_or_array(np.where(inside, result, 0.0))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function ``exp(-(θ/x)^α)``, 0 for ``x <= 0``."""
        alpha, theta = _shape_scale(parameters)
        inside, z_alpha = _power_term(theta, alpha, np.asarray(x, dtype=np.float64))
        return _scalar_or_array(np.where(inside, np.exp(-z_alpha), 0.0))

    def logcdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Log of the CDF, ``-(θ/x)^α``; ``-inf`` for ``x <= 0``."""
        alpha, theta = _shape_scale(parameters)
        inside, z_alpha = _power_term(theta, alpha, np.asarray(x, dtype=np.float64))
        return _scalar_or_array(np.where(inside, -z_alpha, -np.inf))

    def ccdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Complementary CDF ``-expm1(-(θ/x)^α)``; 1 for ``x <= 0``.

        The ``expm1`` form keeps full relative precision in the right tail
        where ``1 - cdf`` would cancel.
        """
        alpha, theta = _shape_scale(parameters)
        inside, z_alpha = _power_term(theta, alpha, np.asarray(x, dtype=np.float64))
        return _scalar_or_array(np.where(inside, -np.expm1(-z_alpha), 1.0))

    def logccdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Log of the complementary CDF, ``log1mexp(-(θ/x)^α)``; 0 for ``x <= 0``."""
        alpha, theta = _shape_scale(parameters)
        inside, z_alpha = _power_term(theta, alpha, np.asarray(x, dtype=np.float64))
        return _scalar_or_array(np.where(inside, log1mexp(-z_alpha), 0.0))

    def _check_probability(p: NumericArray) -> None:
        if np.any((p < 0.0) | (p > 1.0)):
            raise ValueError("Probability must be in [0, 1]")

    def _check_log_probability(lp: NumericArray) -> None:
        if np.any(lp > 0.0):
            raise ValueError("Log-probability must be in [-inf, 0]")

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Quantile function ``θ (-log p)^(-1/α)``.

        Returns 0 for ``p = 0`` and ``inf`` for ``p = 1``.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        alpha, theta = _shape_scale(parameters)
        p = np.asarray(p, dtype=np.float64)
        _check_probability(p)
        # abs maps -log(1) = -0.0 to +0.0 so that p = 1 gives +inf for any alpha
        with np.errstate(divide="ignore"):
            return _scalar_or_array(theta * np.abs(np.log(p)) ** (-1.0 / alpha))

    def cquantile(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Complementary quantile ``θ (-log1p(-p))^(-1/α)``, i.e. ``ppf(1 - p)``.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        alpha, theta = _shape_scale(parameters)
        p = np.asarray(p, dtype=np.float64)
        _check_probability(p)
        with np.errstate(divide="ignore"):
            return _scalar_or_array(theta * np.abs(np.log1p(-p)) ** (-1.0 / alpha))

    def invlogcdf(parameters: Parametrization, lp: NumericArray) -> NumericArray:
        """
        Quantile at ``log p``: ``θ (-lp)^(-1/α)``.

        Raises
        ------
        ValueError
            If log-probability is positive
        """
        alpha, theta = _shape_scale(parameters)
        lp = np.asarray(lp, dtype=np.float64)
        _check_log_probability(lp)
        with np.errstate(divide="ignore"):
            return _scalar_or_array(theta * np.abs(lp) ** (-1.0 / alpha))

    def invlogccdf(parameters: Parametrization, lp: NumericArray) -> NumericArray:
        """
        Quantile at which ``logccdf`` equals ``lp``: ``θ (-log1mexp(lp))^(-1/α)``.

        Raises
        ------
        ValueError
            If log-probability is positive
        """
        alpha, theta = _shape_scale(parameters)
        lp = np.asarray(lp, dtype=np.float64)
        _check_log_probability(lp)
        with np.errstate(divide="ignore"):
            return _scalar_or_array(theta * np.abs(log1mexp(lp)) ** (-1.0 / alpha))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean ``θ Γ(1 - 1/α)``; infinite for ``α <= 1``."""
        alpha, theta = _shape_scale(parameters)
        if alpha > 1.0:
            return float(theta * gamma(1.0 - 1.0 / alpha))
        return math.inf

    def median_func(parameters: Parametrization, _: Any) -> float:
        """Median ``θ (log 2)^(-1/α)``."""
        alpha, theta = _shape_scale(parameters)
        return theta * math.log(2.0) ** (-1.0 / alpha)

    def mode_func(parameters: Parametrization, _: Any) -> float:
        """Mode ``θ (α / (1 + α))^(1/α)``."""
        alpha, theta = _shape_scale(parameters)
        i_alpha = -1.0 / alpha
        return theta * (1.0 - i_alpha) ** i_alpha

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance ``θ² (Γ(1 - 2/α) - Γ(1 - 1/α)²)``; infinite for ``α <= 2``."""
        alpha, theta = _shape_scale(parameters)
        if alpha > 2.0:
            i_alpha = 1.0 / alpha
            return float(theta**2 * (gamma(1.0 - 2.0 * i_alpha) - gamma(1.0 - i_alpha) ** 2))
        return math.inf

    def skew_func(parameters: Parametrization, _: Any) -> float:
        """Skewness; infinite for ``α <= 3``."""
        alpha, _theta = _shape_scale(parameters)
        if alpha > 3.0:
            i_alpha = 1.0 / alpha
            g1 = gamma(1.0 - i_alpha)
            g2 = gamma(1.0 - 2.0 * i_alpha)
            g3 = gamma(1.0 - 3.0 * i_alpha)
            return float((g3 - 3.0 * g2 * g1 + 2.0 * g1**3) / (g2 - g1**2) ** 1.5)
        return math.inf

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = True) -> float:
        """Excess or raw kurtosis of Fréchet distribution.

        Parameters
        ----------
        parameters : Parametrization
            Fréchet parameters
        excess : bool
            Excess kurtosis when True (default), raw kurtosis otherwise

        Returns
        -------
        float
            Kurtosis value; infinite for ``α <= 4`` where the fourth moment
            does not exist

        Notes
        -----
        The textbook closed form is often quoted for ``α > 3``; for
        ``3 < α <= 4`` it evaluates Γ at a non-positive argument and gives a
        meaningless finite value.
        """
        alpha, _theta = _shape_scale(parameters)
        if alpha <= 4.0:
            return math.inf
        i_alpha = 1.0 / alpha
        g1 = gamma(1.0 - i_alpha)
        g2 = gamma(1.0 - 2.0 * i_alpha)
        g3 = gamma(1.0 - 3.0 * i_alpha)
        g4 = gamma(1.0 - 4.0 * i_alpha)
        excess_kurtosis = float((g4 - 4.0 * g3 * g1 + 3.0 * g2**2) / (g2 - g1**2) ** 2 - 6.0)
        return excess_kurtosis if excess else excess_kurtosis + 3.0

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        """Differential entropy ``1 + γ/α + γ + log(θ/α)``, γ the Euler–Mascheroni constant."""
        alpha, theta = _shape_scale(parameters)
        return 1.0 + np.euler_gamma / alpha + np.euler_gamma + math.log(theta / alpha)

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of Fréchet distribution, (0, ∞)"""
        return ContinuousSupport(left=0.0, left_closed=False)

    Frechet = ParametricFamily(
        name=FamilyName.FRECHET,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["shape_scale", "reciprocal_weibull"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.LOGPDF: logpdf,
            CharacteristicName.GRADLOGPDF: gradlogpdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.LOGCDF: logcdf,
            CharacteristicName.CCDF: ccdf,
            CharacteristicName.LOGCCDF: logccdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.CQUANTILE: cquantile,
            CharacteristicName.INVLOGCDF: invlogcdf,
            CharacteristicName.INVLOGCCDF: invlogccdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.MEDIAN: median_func,
            CharacteristicName.MODE: mode_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.SKEW: skew_func,
            CharacteristicName.KURT: kurt_func,
            CharacteristicName.ENTROPY: entropy_func,
        },
        sampling_strategy=FrechetSamplingStrategy(),
        support_by_parametrization=_support,
    )
    Frechet.__doc__ = FRECHET_DOC

    @parametrization(family=Frechet, name="shape_scale")
    class _ShapeScale(Parametrization):
        """
        Shape-scale parametrization of Fréchet distribution.

        Parameters
        ----------
        alpha : float
            Shape parameter (α) of the distribution, default 1
        theta : float
            Scale parameter (θ) of the distribution, default 1
        """

        alpha: float = 1.0
        theta: float = 1.0

        @constraint(description="alpha > 0")
        def check_alpha_positive(self) -> bool:
            """Check that shape parameter is positive."""
            return self.alpha > 0

        @constraint(description="theta > 0")
        def check_theta_positive(self) -> bool:
            """Check that scale parameter is positive."""
            return self.theta > 0

        @constraint(description="theta < inf")
        def check_theta_finite(self) -> bool:
            """Check that scale parameter is finite."""
            return math.isfinite(self.theta)

    @parametrization(family=Frechet, name="reciprocal_weibull")
    class _ReciprocalWeibull(Parametrization):
        """
        Parametrization through the Weibull variable ``Y`` with ``X = 1 / Y``.

        Parameters
        ----------
        k : float
            Weibull shape, equal to the Fréchet shape α
        lambda_ : float
            Weibull scale, the reciprocal of the Fréchet scale θ
        """

        k: float
        lambda_: float

        @constraint(description="k > 0")
        def check_k_positive(self) -> bool:
            """Check that Weibull shape is positive."""
            return self.k > 0

        @constraint(description="lambda_ > 0")
        def check_lambda_positive(self) -> bool:
            """Check that Weibull scale is positive."""
            return self.lambda_ > 0

        @constraint(description="lambda_ < inf")
        def check_lambda_finite(self) -> bool:
            """Check that Weibull scale is finite."""
            return math.isfinite(self.lambda_)

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to shape-scale parametrization.

            Returns
            -------
            Parametrization
                Shape-scale parametrization instance
            """
            return _ShapeScale(alpha=self.k, theta=1.0 / self.lambda_)

    ParametricFamilyRegister.register(Frechet)
    logger.debug("Configured %s family", FamilyName.FRECHET)
