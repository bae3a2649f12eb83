"""Data series sampled from the kinetics model for plotting.

Each generator sweeps one input while holding the others at the values of a
``ReactionParameters`` snapshot:

- temperature series: rate with and without catalyst, 273-373 K in 5 K steps;
- concentration series: rate against [A], 0.1-3.0 M in 0.1 M steps;
- Arrhenius series: ln(k) against 1000/T, 273-373 K in 10 K steps.

Sweeps are integer indexed, so the number of points never depends on
floating-point accumulation of the step.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, Sequence

import numpy as np
from scipy.stats import linregress

from kinexplorer.constants import (
    ARRHENIUS_SWEEP,
    CONCENTRATION_SWEEP,
    R_GAS,
    TEMPERATURE_SWEEP,
    ZERO_CELSIUS,
)
from kinexplorer.kinetics import rate_constant, reaction_rate
from kinexplorer.models import (
    ArrheniusFit,
    ArrheniusPoint,
    ConcentrationPoint,
    KineticsSeries,
    ReactionParameters,
    TemperaturePoint,
)

logger = logging.getLogger(__name__)


def sweep(start: float, stop: float, step: float) -> Iterator[float]:
    """Yield ``start + i * step`` up to and including ``stop``."""
    count = round((stop - start) / step) + 1
    for index in range(count):
        yield start + index * step


def temperature_series(parameters: ReactionParameters) -> tuple[TemperaturePoint, ...]:
    points = []
    for temperature in sweep(*TEMPERATURE_SWEEP):
        rates = [
            reaction_rate(
                temperature,
                parameters.concentration_a,
                parameters.concentration_b,
                catalyst,
                parameters.order,
            )
            for catalyst in (False, True)
        ]
        points.append(TemperaturePoint(temperature - ZERO_CELSIUS, rates[0], rates[1]))
    return tuple(points)


def concentration_series(parameters: ReactionParameters) -> tuple[ConcentrationPoint, ...]:
    points = []
    for concentration in sweep(*CONCENTRATION_SWEEP):
        rate = reaction_rate(
            parameters.temperature,
            concentration,
            parameters.concentration_b,
            parameters.catalyst,
            parameters.order,
        )
        points.append(ConcentrationPoint(concentration, f"{concentration:.1f}", rate))
    return tuple(points)


def arrhenius_series(
    parameters: ReactionParameters | None = None,
) -> tuple[ArrheniusPoint, ...]:
    # Both catalyst states are always plotted, so the current inputs do not matter.
    points = []
    for temperature in sweep(*ARRHENIUS_SWEEP):
        inverse = 1000.0 / temperature
        points.append(
            ArrheniusPoint(
                inverse_temperature=inverse,
                label=f"{inverse:.3f}",
                ln_k_no_catalyst=float(np.log(rate_constant(temperature, False))),
                ln_k_with_catalyst=float(np.log(rate_constant(temperature, True))),
            )
        )
    return tuple(points)


def generate_series(parameters: ReactionParameters) -> KineticsSeries:
    """Regenerate all three series from one parameter snapshot."""
    logger.debug("Generating series for %s", parameters)
    return KineticsSeries(
        temperature=temperature_series(parameters),
        concentration=concentration_series(parameters),
        arrhenius=arrhenius_series(parameters),
    )


def fit_arrhenius(points: Sequence[ArrheniusPoint], catalyst: bool) -> ArrheniusFit:
    """Fit ln(k) = ln(A) - Ea/(R T) to an Arrhenius series.

    Slope = -Ea/R, intercept = ln(A).
    """
    x = np.array([point.inverse_temperature for point in points]) / 1000.0
    if catalyst:
        y = np.array([point.ln_k_with_catalyst for point in points])
    else:
        y = np.array([point.ln_k_no_catalyst for point in points])

    result = linregress(x, y)
    fit = ArrheniusFit(
        slope=float(result.slope),
        intercept=float(result.intercept),
        r_squared=float(result.rvalue**2),
        activation_energy=float(-result.slope * R_GAS),
        pre_exponential=float(np.exp(result.intercept)),
    )
    logger.debug("Arrhenius fit (catalyst=%s): %s", catalyst, fit)
    return fit


def series_to_records(series: KineticsSeries) -> dict[str, list[dict[str, Any]]]:
    """Plain-dict form of the series, keyed like the chart data."""
    return {
        "temperature": [
            {
                "temp": point.temperature_c,
                "noCatalyst": point.rate_no_catalyst,
                "withCatalyst": point.rate_with_catalyst,
            }
            for point in series.temperature
        ],
        "concentration": [
            {"concentration": point.label, "rate": point.rate}
            for point in series.concentration
        ],
        "arrhenius": [
            {
                "invT": point.label,
                "lnk_no": point.ln_k_no_catalyst,
                "lnk_yes": point.ln_k_with_catalyst,
            }
            for point in series.arrhenius
        ],
    }
