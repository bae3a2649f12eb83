"""Qt application entrypoint for the Reaction Kinetics Explorer."""

from __future__ import annotations

import sys

from PySide6 import QtCore, QtWidgets
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg
from matplotlib.figure import Figure

from kinexplorer.constants import (
    ACTIVATION_ENERGY_BASE,
    ACTIVATION_ENERGY_CATALYST,
    CONCENTRATION_MAX,
    CONCENTRATION_MIN,
    CONCENTRATION_STEP,
    TEMPERATURE_MAX,
    TEMPERATURE_MIN,
    ZERO_CELSIUS,
)
from kinexplorer.gui.session import ExplorerSession
from kinexplorer.log import get_logger
from kinexplorer.models import CurrentConditions, KineticsSeries, ReactionOrder


class PlotCanvas(FigureCanvasQTAgg):
    def __init__(self, parent: QtWidgets.QWidget | None = None) -> None:
        self.figure = Figure(figsize=(11, 4), tight_layout=True)
        super().__init__(self.figure)
        self.setParent(parent)
        self.temperature_axes = self.figure.add_subplot(1, 3, 1)
        self.concentration_axes = self.figure.add_subplot(1, 3, 2)
        self.arrhenius_axes = self.figure.add_subplot(1, 3, 3)

    def plot_series(self, series: KineticsSeries) -> None:
        axes = self.temperature_axes
        axes.clear()
        temps = [point.temperature_c for point in series.temperature]
        axes.plot(temps, [p.rate_no_catalyst for p in series.temperature], color="#ef4444", label="No Catalyst")
        axes.plot(temps, [p.rate_with_catalyst for p in series.temperature], color="#10b981", label="With Catalyst")
        axes.set_title("Rate vs Temperature")
        axes.set_xlabel("Temperature (°C)")
        axes.set_ylabel("Rate (M/s)")
        axes.grid(True, linestyle="--")
        axes.legend()

        axes = self.concentration_axes
        axes.clear()
        axes.plot(
            [point.concentration for point in series.concentration],
            [point.rate for point in series.concentration],
            color="#8b5cf6",
            linewidth=3,
            label="Reaction Rate",
        )
        axes.set_title("Rate vs [A] Concentration")
        axes.set_xlabel("[A] (M)")
        axes.set_ylabel("Rate (M/s)")
        axes.grid(True, linestyle="--")
        axes.legend()

        axes = self.arrhenius_axes
        axes.clear()
        inverse = [point.inverse_temperature for point in series.arrhenius]
        axes.plot(
            inverse,
            [p.ln_k_no_catalyst for p in series.arrhenius],
            marker="o",
            color="#f59e0b",
            label=f"No Catalyst (Ea = {ACTIVATION_ENERGY_BASE / 1000:.0f} kJ/mol)",
        )
        axes.plot(
            inverse,
            [p.ln_k_with_catalyst for p in series.arrhenius],
            marker="o",
            color="#059669",
            label=f"With Catalyst (Ea = {ACTIVATION_ENERGY_CATALYST / 1000:.0f} kJ/mol)",
        )
        axes.set_title("Arrhenius Plot")
        axes.set_xlabel("1000/T (K⁻¹)")
        axes.set_ylabel("ln(k)")
        axes.grid(True, linestyle="--")
        axes.legend()
        self.draw()


class ExplorerWindow(QtWidgets.QMainWindow):
    def __init__(self, session: ExplorerSession | None = None) -> None:
        super().__init__()
        self.session = session or ExplorerSession()
        self.setWindowTitle("Reaction Kinetics Explorer")
        self.resize(1300, 800)

        central = QtWidgets.QWidget()
        self.setCentralWidget(central)
        layout = QtWidgets.QVBoxLayout(central)

        controls = QtWidgets.QWidget()
        form_layout = QtWidgets.QFormLayout(controls)
        form_layout.setLabelAlignment(QtCore.Qt.AlignmentFlag.AlignRight)

        parameters = self.session.parameters
        self.temperature_label = QtWidgets.QLabel()
        self.temperature_slider = self._make_slider(
            int(TEMPERATURE_MIN), int(TEMPERATURE_MAX), round(parameters.temperature)
        )
        self.temperature_slider.valueChanged.connect(
            lambda value: self._update(temperature=float(value))
        )
        form_layout.addRow(self.temperature_label, self.temperature_slider)

        self.concentration_a_label = QtWidgets.QLabel()
        self.concentration_a_slider = self._make_concentration_slider(parameters.concentration_a)
        self.concentration_a_slider.valueChanged.connect(
            lambda value: self._update(concentration_a=value * CONCENTRATION_STEP)
        )
        form_layout.addRow(self.concentration_a_label, self.concentration_a_slider)

        self.concentration_b_label = QtWidgets.QLabel()
        self.concentration_b_slider = self._make_concentration_slider(parameters.concentration_b)
        self.concentration_b_slider.valueChanged.connect(
            lambda value: self._update(concentration_b=value * CONCENTRATION_STEP)
        )
        form_layout.addRow(self.concentration_b_label, self.concentration_b_slider)

        order_box = QtWidgets.QWidget()
        order_layout = QtWidgets.QHBoxLayout(order_box)
        self.first_order = QtWidgets.QRadioButton("First Order (Rate = k[A])")
        self.second_order = QtWidgets.QRadioButton("Second Order (Rate = k[A][B])")
        if parameters.order is ReactionOrder.FIRST:
            self.first_order.setChecked(True)
        else:
            self.second_order.setChecked(True)
        self.first_order.toggled.connect(
            lambda checked: self._update(
                order=ReactionOrder.FIRST if checked else ReactionOrder.SECOND
            )
        )
        order_layout.addWidget(self.first_order)
        order_layout.addWidget(self.second_order)
        form_layout.addRow("Reaction Order", order_box)

        self.catalyst_box = QtWidgets.QCheckBox(
            f"Add Catalyst (reduces Ea from {ACTIVATION_ENERGY_BASE / 1000:.0f}"
            f" to {ACTIVATION_ENERGY_CATALYST / 1000:.0f} kJ/mol)"
        )
        self.catalyst_box.setChecked(parameters.catalyst)
        self.catalyst_box.toggled.connect(lambda checked: self._update(catalyst=checked))
        form_layout.addRow(self.catalyst_box)

        self.conditions_label = QtWidgets.QLabel()
        form_layout.addRow("Current Conditions", self.conditions_label)

        self.plot_canvas = PlotCanvas()

        layout.addWidget(controls, stretch=1)
        layout.addWidget(self.plot_canvas, stretch=2)

        self.session.subscribe(self._refresh)
        self._refresh(self.session.series, self.session.conditions)

    def _make_slider(self, minimum: int, maximum: int, value: int) -> QtWidgets.QSlider:
        slider = QtWidgets.QSlider(QtCore.Qt.Orientation.Horizontal)
        slider.setRange(minimum, maximum)
        slider.setValue(value)
        return slider

    def _make_concentration_slider(self, value: float) -> QtWidgets.QSlider:
        # Integer slider positions in units of the concentration step.
        return self._make_slider(
            round(CONCENTRATION_MIN / CONCENTRATION_STEP),
            round(CONCENTRATION_MAX / CONCENTRATION_STEP),
            round(value / CONCENTRATION_STEP),
        )

    def _update(self, **changes) -> None:
        self.session.update(**changes)

    def _refresh(self, series: KineticsSeries, conditions: CurrentConditions) -> None:
        parameters = self.session.parameters
        self.temperature_label.setText(
            f"Temperature: {parameters.temperature:.0f} K"
            f" ({parameters.temperature - ZERO_CELSIUS:.0f}°C)"
        )
        self.concentration_a_label.setText(
            f"[A] Concentration: {parameters.concentration_a:.2f} M"
        )
        self.concentration_b_label.setText(
            f"[B] Concentration: {parameters.concentration_b:.2f} M"
        )
        self.conditions_label.setText("\n".join(conditions.describe()))
        self.plot_canvas.plot_series(series)


def main(session: ExplorerSession | None = None) -> None:
    get_logger()
    app = QtWidgets.QApplication(sys.argv)
    window = ExplorerWindow(session)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
