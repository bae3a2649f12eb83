"""Reaction Kinetics Explorer core package."""

from kinexplorer.errors import InvalidParameterError, KinExplorerError
from kinexplorer.kinetics import (
    ArrheniusKinetics,
    current_conditions,
    half_life,
    rate_constant,
    reaction_rate,
)
from kinexplorer.models import KineticsSeries, ReactionOrder, ReactionParameters
from kinexplorer.series import (
    arrhenius_series,
    concentration_series,
    fit_arrhenius,
    generate_series,
    temperature_series,
)

__all__ = [
    "ArrheniusKinetics",
    "InvalidParameterError",
    "KinExplorerError",
    "KineticsSeries",
    "ReactionOrder",
    "ReactionParameters",
    "arrhenius_series",
    "concentration_series",
    "current_conditions",
    "fit_arrhenius",
    "generate_series",
    "half_life",
    "rate_constant",
    "reaction_rate",
    "temperature_series",
]
