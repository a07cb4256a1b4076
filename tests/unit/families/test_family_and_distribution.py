from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import FrozenInstanceError

import pytest

from pysatl_variates.distributions import Distribution
from pysatl_variates.errors import DomainError
from pysatl_variates.families import ParametricFamily, ParametricFamilyRegister
from pysatl_variates.types import UnivariateContinuous
from tests.unit.families.test_basic import TestBaseFamily


class TestFamilyConstruction:
    def test_family_requires_parametrization(self) -> None:
        with pytest.raises(ValueError, match="at least one parametrization"):
            ParametricFamily(
                name="Empty",
                distr_type=UnivariateContinuous,
                distr_parametrizations=[],
                distr_characteristics={},
            )


class TestFamilyAndDistribution(TestBaseFamily):
    def test_analytical_plan_picks_provider(self) -> None:
        fam = self.make_default_family()

        plan = fam._analytical_plan
        assert set(plan.keys()) == {"base", "alt"}
        assert plan["alt"][self.CDF] == "alt"
        assert plan["alt"][self.PDF] == "base"
        assert plan["base"][self.CDF] == "base"

    def test_characteristics_are_bound_to_provider(self) -> None:
        fam = self.make_default_family()

        distr = fam.distribution("alt", value=1.5)
        assert distr.parametrization_name == "alt"
        assert distr.query_method(self.CDF)(0.1) == ("alt", 0.1)
        # base-only characteristics see the converted parameters
        assert distr.query_method(self.PDF).func.args[0].value == 3.0

    def test_undeclared_parametrization_rejected(self) -> None:
        fam = self.make_default_family()
        with pytest.raises(ValueError, match="not declared"):
            fam.register_parametrization("other", fam.base)

    def test_duplicate_parametrization_rejected(self) -> None:
        fam = self.make_default_family()
        with pytest.raises(ValueError, match="already registered"):
            fam.register_parametrization("base", fam.base)

    def test_invalid_parameters_raise_domain_error(self) -> None:
        fam = self.make_default_family()
        with pytest.raises(DomainError, match="value >= 0"):
            fam(value=-1.0)

    def test_converted_base_parameters_are_validated(self) -> None:
        fam = self.make_default_family()
        with pytest.raises(DomainError, match="value >= 0"):
            fam("alt", value=-1.0)

    def test_unknown_parametrization_raises_key_error(self) -> None:
        fam = self.make_default_family()
        with pytest.raises(KeyError):
            fam("missing", value=1.0)

    def test_distribution_is_immutable(self) -> None:
        fam = self.make_default_family()
        distr = fam(value=1.0)
        assert isinstance(distr, Distribution)
        with pytest.raises(FrozenInstanceError):
            distr.parameters = fam.base(value=2.0)  # type: ignore[misc, call-arg]

    def test_distribution_sampling_goes_through_strategy(self) -> None:
        fam = self.make_default_family()
        distr = fam(value=1.0)
        assert distr.draw() == 0.5
        assert distr.sample(4).shape == (4, 1)

    def test_family_lookup_through_register(self) -> None:
        fam = self.make_default_family(name="Registered")
        ParametricFamilyRegister.register(fam)
        assert fam(value=0.0).family is fam

    def test_repr(self) -> None:
        fam = self.make_default_family()
        assert repr(fam) == "ParametricFamily('Default', parametrizations=['base', 'alt'])"
