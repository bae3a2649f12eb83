"""Explorer state shared by the GUI layer."""

from __future__ import annotations

import logging
from typing import Any, Callable

from kinexplorer.kinetics import current_conditions
from kinexplorer.models import CurrentConditions, KineticsSeries, ReactionParameters
from kinexplorer.series import generate_series

logger = logging.getLogger(__name__)

Listener = Callable[[KineticsSeries, CurrentConditions], None]


class ExplorerSession:
    """Holds the current parameter snapshot and the data derived from it.

    Every update regenerates all three series and the current conditions
    from the new snapshot and then notifies listeners.
    """

    def __init__(self, parameters: ReactionParameters | None = None) -> None:
        self._parameters = parameters or ReactionParameters()
        self._listeners: list[Listener] = []
        self._series, self._conditions = self._compute(self._parameters)

    @property
    def parameters(self) -> ReactionParameters:
        return self._parameters

    @property
    def series(self) -> KineticsSeries:
        return self._series

    @property
    def conditions(self) -> CurrentConditions:
        return self._conditions

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def update(self, **changes: Any) -> None:
        # Validation happens before any state is replaced.
        parameters = self._parameters.with_changes(**changes)
        series, conditions = self._compute(parameters)
        self._parameters = parameters
        self._series = series
        self._conditions = conditions
        logger.debug("Session updated: %s", changes)
        for listener in list(self._listeners):
            listener(series, conditions)

    @staticmethod
    def _compute(parameters: ReactionParameters) -> tuple[KineticsSeries, CurrentConditions]:
        return generate_series(parameters), current_conditions(parameters)
