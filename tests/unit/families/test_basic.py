from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from pysatl_variates.families import (
    ParametricFamily,
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_variates.types import (
    CharacteristicName,
    GenericCharacteristicName,
    UnivariateContinuous,
)
from tests.utils.mocks import MockSamplingStrategy


class TestBaseFamily:
    PDF: GenericCharacteristicName = CharacteristicName.PDF
    CDF: GenericCharacteristicName = CharacteristicName.CDF
    PPF: GenericCharacteristicName = CharacteristicName.PPF

    def make_default_family(
        self,
        distr_characteristics: dict[GenericCharacteristicName, dict[str, object]] | None = None,
        name: str = "Default",
    ) -> ParametricFamily:
        if distr_characteristics is None:
            distr_characteristics = {
                self.PDF: {"base": lambda p, x: x},
                self.CDF: {"alt": lambda p, x: ("alt", x), "base": lambda p, x: ("base", x)},
                self.PPF: {"base": lambda p, x: x},
            }
        fam = ParametricFamily(
            name=name,
            distr_type=UnivariateContinuous,
            distr_parametrizations=["base", "alt"],
            distr_characteristics=distr_characteristics,  # type: ignore[arg-type]
            sampling_strategy=MockSamplingStrategy(),
        )

        @parametrization(family=fam, name="base")
        class Base(Parametrization):
            value: float

            @constraint(description="value >= 0")
            def check_value_non_negative(self) -> bool:
                return self.value >= 0

        @parametrization(family=fam, name="alt")
        class Alt(Parametrization):
            value: float

            def transform_to_base_parametrization(self) -> Parametrization:
                return Base(value=2.0 * self.value)  # type: ignore[call-arg]

        return fam
