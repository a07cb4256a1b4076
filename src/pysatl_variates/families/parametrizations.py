"""
Parameterization classes and specifications for distribution families.

This module provides the abstractions for the different parameterizations of
a family: constraint declaration, eager validation and conversion to the
family's base parameterization.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import dataclass, is_dataclass
from functools import wraps
from inspect import isfunction
from typing import TYPE_CHECKING, ParamSpec

from pysatl_variates.errors import DomainError
from pysatl_variates.types import ParametrizationName

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from pysatl_variates.families.parametric_family import ParametricFamily


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Constraint on parameter values for a parametrization.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint, e.g. ``"alpha > 0"``.
    check : Callable[[Any], bool]
        Predicate that returns True if the constraint is satisfied.
    """

    description: str
    check: Callable[[Any], bool]


class Parametrization(ABC):
    """
    Abstract base class for distribution parametrizations.

    Concrete parametrizations are frozen dataclasses whose fields are the
    parameters; they are produced by the :func:`parametrization` decorator.
    """

    # These attributes are set by the @parametrization decorator
    __family__: ClassVar[ParametricFamily]
    __param_name__: ClassVar[ParametrizationName]

    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    @property
    def name(self) -> str:
        """Get the name of this parametrization."""
        return self.__class__.__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Get parameters as a dictionary, in declaration order."""
        fields = getattr(self, "__dataclass_fields__", None)
        if fields:
            return {f: getattr(self, f) for f in fields}
        ann = getattr(self, "__annotations__", {})
        return {k: getattr(self, k) for k in ann}

    def validate(self) -> None:
        """
        Validate all constraints for this parametrization.

        Raises
        ------
        DomainError
            If any constraint is not satisfied. The message lists every
            violated constraint.
        """
        violated = [c.description for c in self._constraints if not c.check(self)]
        if violated:
            listed = ", ".join(f'"{d}"' for d in violated)
            raise DomainError(
                f"Constraint {listed} does not hold for {self.name} parameters {self.parameters}"
            )

    def transform_to_base_parametrization(self) -> Parametrization:
        """
        Convert this parametrization to the base parametrization.

        Notes
        -----
        Base implementation returns self. Non-base parametrizations override it.
        """
        return self


P = ParamSpec("P")


def constraint(description: str) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Decorator to mark an instance method as a parameter constraint.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.

    Notes
    -----
    The decorated function must be a predicate returning bool.
    Sets marker attributes on the function:
    - __is_constraint: True
    - __constraint_description: description
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> bool:
            return bool(func(*args, **kwargs))

        setattr(wrapper, "__is_constraint", True)
        setattr(wrapper, "__constraint_description", description)
        return wrapper

    return decorator


def parametrization(
    *,
    family: ParametricFamily,
    name: str,
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Decorator to register a class as a parametrization for a family.

    Parameters
    ----------
    family : ParametricFamily
        Family to register the parametrization with.
    name : str
        Name of the parametrization.

    Notes
    -----
    Automatically converts the class to a frozen dataclass if it is not one.
    Collects and registers constraint methods marked with @constraint.
    """

    def _collect_constraints(
        cls: type[Parametrization],
    ) -> list[ParametrizationConstraint]:
        constraints: list[ParametrizationConstraint] = []
        for attr_name, attr in cls.__dict__.items():
            if isinstance(attr, (staticmethod, classmethod)):
                kind = type(attr).__name__
                raise TypeError(f"@constraint '{attr_name}' must be an instance method, not @{kind}")

            func = attr if callable(attr) and isfunction(attr) else None
            if not func:
                continue
            if getattr(func, "__is_constraint", False):
                desc = getattr(func, "__constraint_description", func.__name__)
                constraints.append(ParametrizationConstraint(description=desc, check=func))
        return constraints

    def decorator(cls: type[Parametrization]) -> type[Parametrization]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)

        cls.__family__ = family
        cls.__param_name__ = name
        cls._constraints = _collect_constraints(cls)

        family.register_parametrization(name, cls)
        return cls

    return decorator
