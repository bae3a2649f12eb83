import unittest

from kinexplorer.constants import R_GAS
from kinexplorer.kinetics import rate_constant, reaction_rate
from kinexplorer.models import ReactionOrder, ReactionParameters
from kinexplorer.series import (
    arrhenius_series,
    concentration_series,
    fit_arrhenius,
    generate_series,
    series_to_records,
    sweep,
    temperature_series,
)


class TestSweep(unittest.TestCase):
    def test_counts_without_drift(self):
        self.assertEqual(len(list(sweep(273.0, 373.0, 5.0))), 21)
        self.assertEqual(len(list(sweep(0.1, 3.0, 0.1))), 30)
        self.assertEqual(len(list(sweep(273.0, 373.0, 10.0))), 11)

    def test_count_is_an_integer_index(self):
        values = list(sweep(1.0, 2.0, 0.25))
        self.assertEqual(values, [1.0, 1.25, 1.5, 1.75, 2.0])

    def test_endpoints(self):
        values = list(sweep(0.1, 3.0, 0.1))
        self.assertAlmostEqual(values[0], 0.1)
        self.assertAlmostEqual(values[-1], 3.0)


class TestTemperatureSeries(unittest.TestCase):
    def setUp(self):
        self.parameters = ReactionParameters(concentration_a=1.5, concentration_b=0.5)

    def test_shape(self):
        points = temperature_series(self.parameters)
        self.assertEqual(len(points), 21)
        self.assertEqual([p.temperature_c for p in points], [5.0 * i for i in range(21)])

    def test_rates(self):
        for point in temperature_series(self.parameters):
            temperature = point.temperature_c + 273.0
            self.assertAlmostEqual(
                point.rate_no_catalyst,
                reaction_rate(temperature, 1.5, 0.5, False, ReactionOrder.SECOND),
            )
            self.assertAlmostEqual(
                point.rate_with_catalyst / reaction_rate(temperature, 1.5, 0.5, True, "second"),
                1.0,
            )
            self.assertGreater(point.rate_with_catalyst, point.rate_no_catalyst)

    def test_independent_of_selected_temperature_and_catalyst(self):
        other = self.parameters.with_changes(temperature=350.0, catalyst=True)
        self.assertEqual(temperature_series(self.parameters), temperature_series(other))

    def test_first_order_ignores_b(self):
        first = self.parameters.with_changes(order=ReactionOrder.FIRST)
        self.assertEqual(
            temperature_series(first),
            temperature_series(first.with_changes(concentration_b=2.5)),
        )


class TestConcentrationSeries(unittest.TestCase):
    def test_shape_and_labels(self):
        points = concentration_series(ReactionParameters())
        self.assertEqual(len(points), 30)
        self.assertEqual(points[0].label, "0.1")
        self.assertEqual(points[-1].label, "3.0")
        self.assertEqual([p.label for p in points], [f"{i / 10:.1f}" for i in range(1, 31)])

    def test_rates_follow_current_parameters(self):
        parameters = ReactionParameters(
            temperature=330.0, concentration_b=2.0, catalyst=True, order="second"
        )
        k = rate_constant(330.0, True)
        for point in concentration_series(parameters):
            self.assertAlmostEqual(point.rate / (k * point.concentration * 2.0), 1.0)

    def test_linear_in_concentration(self):
        points = concentration_series(ReactionParameters(order="first"))
        ratios = [p.rate / p.concentration for p in points]
        for ratio in ratios:
            self.assertAlmostEqual(ratio / ratios[0], 1.0)


class TestArrheniusSeries(unittest.TestCase):
    def setUp(self):
        self.points = arrhenius_series()

    def test_shape(self):
        self.assertEqual(len(self.points), 11)
        self.assertEqual(self.points[0].label, "3.663")
        self.assertEqual(self.points[-1].label, "2.681")

    def test_ln_k_decreases_with_inverse_temperature(self):
        ordered = sorted(self.points, key=lambda p: p.inverse_temperature)
        for lower, higher in zip(ordered, ordered[1:]):
            self.assertGreater(lower.ln_k_no_catalyst, higher.ln_k_no_catalyst)
            self.assertGreater(lower.ln_k_with_catalyst, higher.ln_k_with_catalyst)

    def test_fit_recovers_activation_energy(self):
        for catalyst, energy in ((False, 50000.0), (True, 30000.0)):
            fit = fit_arrhenius(self.points, catalyst)
            self.assertAlmostEqual(fit.slope / (-energy / R_GAS), 1.0, delta=0.01)
            self.assertAlmostEqual(fit.activation_energy / energy, 1.0, delta=0.01)
            self.assertAlmostEqual(fit.pre_exponential / 1e13, 1.0, delta=0.01)
            self.assertGreater(fit.r_squared, 0.999)

    def test_independent_of_parameters(self):
        self.assertEqual(
            arrhenius_series(ReactionParameters(temperature=360.0, catalyst=True)),
            self.points,
        )


class TestGenerateSeries(unittest.TestCase):
    def test_bundle(self):
        parameters = ReactionParameters(order="first", catalyst=True)
        bundle = generate_series(parameters)
        self.assertEqual(bundle.temperature, temperature_series(parameters))
        self.assertEqual(bundle.concentration, concentration_series(parameters))
        self.assertEqual(bundle.arrhenius, arrhenius_series())

    def test_records(self):
        records = series_to_records(generate_series(ReactionParameters()))
        self.assertEqual(len(records["temperature"]), 21)
        self.assertEqual(set(records["temperature"][0]), {"temp", "noCatalyst", "withCatalyst"})
        self.assertEqual(records["concentration"][9]["concentration"], "1.0")
        self.assertEqual(set(records["arrhenius"][0]), {"invT", "lnk_no", "lnk_yes"})


if __name__ == '__main__':
    unittest.main()
