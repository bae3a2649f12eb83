"""Command-line entrypoints for the kinetics explorer."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Any, Dict

import typer

from kinexplorer.config import load_parameters
from kinexplorer.errors import KinExplorerError
from kinexplorer.kinetics import activation_energy, current_conditions
from kinexplorer.log import env_level, get_logger
from kinexplorer.models import ReactionOrder, ReactionParameters
from kinexplorer.series import arrhenius_series, fit_arrhenius, generate_series, series_to_records

app = typer.Typer(add_completion=False)

ConfigOption = Annotated[
    Path | None, typer.Option("--config", help="JSON file with reaction parameters.")
]
TemperatureOption = Annotated[
    float | None, typer.Option("--temperature", "-T", help="Temperature (K).")
]
ConcentrationAOption = Annotated[
    float | None, typer.Option("--conc-a", help="Concentration of A (M).")
]
ConcentrationBOption = Annotated[
    float | None, typer.Option("--conc-b", help="Concentration of B (M).")
]
CatalystOption = Annotated[
    bool | None, typer.Option("--catalyst/--no-catalyst", help="Use the catalysed pathway.")
]
OrderOption = Annotated[
    ReactionOrder | None, typer.Option("--order", help="Reaction order.")
]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")]


def _configure_logging(verbose: bool) -> None:
    get_logger(logging.DEBUG if verbose else env_level())


def _resolve_parameters(
    config: Path | None,
    temperature: float | None,
    conc_a: float | None,
    conc_b: float | None,
    catalyst: bool | None,
    order: ReactionOrder | None,
) -> ReactionParameters:
    parameters = load_parameters(config) if config is not None else ReactionParameters()
    overrides: Dict[str, Any] = {
        "temperature": temperature,
        "concentration_a": conc_a,
        "concentration_b": conc_b,
        "catalyst": catalyst,
        "order": order,
    }
    return parameters.with_changes(
        **{name: value for name, value in overrides.items() if value is not None}
    )


def _fail(error: KinExplorerError) -> typer.Exit:
    typer.echo(f"Error: {error}", err=True)
    return typer.Exit(code=2)


@app.command()
def conditions(
    config: ConfigOption = None,
    temperature: TemperatureOption = None,
    conc_a: ConcentrationAOption = None,
    conc_b: ConcentrationBOption = None,
    catalyst: CatalystOption = None,
    order: OrderOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print rate constant, rate and half-life for the given parameters."""
    _configure_logging(verbose)
    try:
        parameters = _resolve_parameters(config, temperature, conc_a, conc_b, catalyst, order)
        result = current_conditions(parameters)
    except KinExplorerError as exc:
        raise _fail(exc) from exc

    for line in result.describe():
        typer.echo(line)


@app.command()
def series(
    config: ConfigOption = None,
    temperature: TemperatureOption = None,
    conc_a: ConcentrationAOption = None,
    conc_b: ConcentrationBOption = None,
    catalyst: CatalystOption = None,
    order: OrderOption = None,
    output: Annotated[
        Path | None, typer.Option(help="Path to save output JSON.")
    ] = None,
    verbose: VerboseOption = False,
) -> None:
    """Print the temperature, concentration and Arrhenius series as JSON."""
    _configure_logging(verbose)
    try:
        parameters = _resolve_parameters(config, temperature, conc_a, conc_b, catalyst, order)
        data = series_to_records(generate_series(parameters))
    except KinExplorerError as exc:
        raise _fail(exc) from exc

    data["parameters"] = parameters.to_dict()
    json_output = json.dumps(data, indent=2)
    typer.echo(json_output)

    if output:
        with open(output, "w") as f:
            f.write(json_output)


@app.command()
def fit(verbose: VerboseOption = False) -> None:
    """Fit ln(k) against 1/T and report the recovered activation energies."""
    _configure_logging(verbose)
    points = arrhenius_series()
    payload = {}
    for name, catalyst in (("no_catalyst", False), ("with_catalyst", True)):
        result = fit_arrhenius(points, catalyst)
        payload[name] = {
            "slope": result.slope,
            "intercept": result.intercept,
            "r_squared": result.r_squared,
            "activation_energy": result.activation_energy,
            "expected_activation_energy": activation_energy(catalyst),
            "pre_exponential": result.pre_exponential,
        }
    typer.echo(json.dumps(payload, indent=2))


@app.command()
def gui(
    config: ConfigOption = None,
    temperature: TemperatureOption = None,
    conc_a: ConcentrationAOption = None,
    conc_b: ConcentrationBOption = None,
    catalyst: CatalystOption = None,
    order: OrderOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Open the interactive explorer window."""
    _configure_logging(verbose)
    try:
        parameters = _resolve_parameters(config, temperature, conc_a, conc_b, catalyst, order)
    except KinExplorerError as exc:
        raise _fail(exc) from exc

    # Qt is only imported when the window is requested.
    from kinexplorer.gui.app import main
    from kinexplorer.gui.session import ExplorerSession

    main(ExplorerSession(parameters))
