"""Arrhenius rate constants and rate laws for the explorer."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from kinexplorer.constants import (
    ACTIVATION_ENERGY_BASE,
    ACTIVATION_ENERGY_CATALYST,
    PRE_EXPONENTIAL,
    R_GAS,
)
from kinexplorer.errors import InvalidParameterError
from kinexplorer.models import CurrentConditions, ReactionOrder, ReactionParameters

RATE_CONSTANT_UNITS = {
    ReactionOrder.FIRST: "s^-1",
    ReactionOrder.SECOND: "M^-1 s^-1",
}


@dataclass(frozen=True)
class ArrheniusKinetics:
    pre_exponential: float
    activation_energy: float

    def rate_constant(self, temperature: float) -> float:
        if not temperature > 0:
            raise InvalidParameterError(f"Temperature must be > 0 K, got {temperature}")
        return float(
            self.pre_exponential * np.exp(-self.activation_energy / (R_GAS * temperature))
        )


UNCATALYSED = ArrheniusKinetics(PRE_EXPONENTIAL, ACTIVATION_ENERGY_BASE)
CATALYSED = ArrheniusKinetics(PRE_EXPONENTIAL, ACTIVATION_ENERGY_CATALYST)


def arrhenius_for(catalyst: bool) -> ArrheniusKinetics:
    return CATALYSED if catalyst else UNCATALYSED


def activation_energy(catalyst: bool) -> float:
    return arrhenius_for(catalyst).activation_energy


def rate_constant(temperature: float, catalyst: bool) -> float:
    """Arrhenius rate constant k = A * exp(-Ea / (R * T)).

    The catalyst lowers Ea from 50 to 30 kJ/mol, so for any positive
    temperature the catalysed k is the larger one.
    """
    return arrhenius_for(catalyst).rate_constant(temperature)


def reaction_rate(
    temperature: float,
    concentration_a: float,
    concentration_b: float,
    catalyst: bool,
    order: ReactionOrder | str,
) -> float:
    """Rate in M/s: k[A] for first order, k[A][B] for second order.

    ``concentration_b`` is ignored by the first-order rate law.
    """
    k = rate_constant(temperature, catalyst)
    if ReactionOrder.parse(order) is ReactionOrder.FIRST:
        return k * concentration_a
    return k * concentration_a * concentration_b


def half_life(temperature: float, catalyst: bool, order: ReactionOrder | str) -> float | None:
    """First-order half-life ln(2)/k.

    Second-order half-life depends on the initial concentration, so ``None``
    is returned instead.
    """
    if ReactionOrder.parse(order) is not ReactionOrder.FIRST:
        return None
    return float(np.log(2.0)) / rate_constant(temperature, catalyst)


def current_conditions(parameters: ReactionParameters) -> CurrentConditions:
    return CurrentConditions(
        rate_constant=rate_constant(parameters.temperature, parameters.catalyst),
        rate=reaction_rate(
            parameters.temperature,
            parameters.concentration_a,
            parameters.concentration_b,
            parameters.catalyst,
            parameters.order,
        ),
        half_life=half_life(parameters.temperature, parameters.catalyst, parameters.order),
        rate_constant_units=RATE_CONSTANT_UNITS[parameters.order],
    )
