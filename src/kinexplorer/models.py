"""Data structures for reaction parameters and plotted series."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Mapping

from kinexplorer.errors import InvalidParameterError


class ReactionOrder(str, Enum):
    FIRST = "first"
    SECOND = "second"

    @classmethod
    def parse(cls, value: ReactionOrder | str) -> ReactionOrder:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidParameterError(
                f"Unknown reaction order: {value!r} (expected 'first' or 'second')"
            ) from None


@dataclass(frozen=True)
class ReactionParameters:
    """Snapshot of the explorer inputs.

    Attributes:
        temperature: Temperature (K). Must be positive.
        concentration_a: Concentration of reactant A (M).
        concentration_b: Concentration of reactant B (M). Ignored by first-order kinetics.
        catalyst: Whether the catalysed pathway is used.
        order: Rate law applied to the concentrations.
    """

    temperature: float = 298.0
    concentration_a: float = 1.0
    concentration_b: float = 1.0
    catalyst: bool = False
    order: ReactionOrder = ReactionOrder.SECOND

    def __post_init__(self) -> None:
        if not self.temperature > 0:
            raise InvalidParameterError(
                f"Temperature must be > 0 K, got {self.temperature}"
            )
        object.__setattr__(self, "order", ReactionOrder.parse(self.order))

    def with_changes(self, **changes: Any) -> ReactionParameters:
        _check_known(type(self), changes)
        return replace(self, **changes)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ReactionParameters:
        _check_known(cls, data)
        values: dict[str, Any] = {}
        try:
            for name in ("temperature", "concentration_a", "concentration_b"):
                if name in data:
                    values[name] = float(data[name])
        except (TypeError, ValueError) as exc:
            raise InvalidParameterError(f"Invalid numeric parameter: {exc}") from exc
        if "catalyst" in data:
            values["catalyst"] = _parse_flag(data["catalyst"], "catalyst")
        if "order" in data:
            values["order"] = ReactionOrder.parse(data["order"])
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        return {
            "temperature": self.temperature,
            "concentration_a": self.concentration_a,
            "concentration_b": self.concentration_b,
            "catalyst": self.catalyst,
            "order": self.order.value,
        }


@dataclass(frozen=True)
class TemperaturePoint:
    temperature_c: float
    rate_no_catalyst: float
    rate_with_catalyst: float


@dataclass(frozen=True)
class ConcentrationPoint:
    concentration: float
    label: str
    rate: float


@dataclass(frozen=True)
class ArrheniusPoint:
    inverse_temperature: float  # 1000/T (K^-1)
    label: str
    ln_k_no_catalyst: float
    ln_k_with_catalyst: float


@dataclass(frozen=True)
class KineticsSeries:
    temperature: tuple[TemperaturePoint, ...]
    concentration: tuple[ConcentrationPoint, ...]
    arrhenius: tuple[ArrheniusPoint, ...]


@dataclass(frozen=True)
class CurrentConditions:
    """Derived values shown next to the inputs."""

    rate_constant: float
    rate: float
    half_life: float | None
    rate_constant_units: str

    def describe(self) -> list[str]:
        if self.half_life is None:
            half_life = "Depends on [A]0"
        else:
            half_life = f"{self.half_life:.2f} s"
        return [
            f"Rate Constant (k): {self.rate_constant:.3e} {self.rate_constant_units}",
            f"Reaction Rate: {self.rate:.3e} M/s",
            f"Half-life: {half_life}",
        ]


@dataclass(frozen=True)
class ArrheniusFit:
    slope: float
    intercept: float
    r_squared: float
    activation_energy: float  # J/mol
    pre_exponential: float


def _check_known(cls: type, names: Mapping[str, Any]) -> None:
    unknown = set(names) - {field.name for field in fields(cls)}
    if unknown:
        raise InvalidParameterError(
            f"Unknown parameter(s): {', '.join(sorted(unknown))}"
        )


def _parse_flag(value: Any, name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise InvalidParameterError(f"{name} must be true or false, got {value!r}")
