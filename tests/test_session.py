import unittest

from kinexplorer.errors import InvalidParameterError
from kinexplorer.gui.session import ExplorerSession
from kinexplorer.kinetics import current_conditions
from kinexplorer.models import ReactionOrder, ReactionParameters
from kinexplorer.series import generate_series


class TestExplorerSession(unittest.TestCase):
    def setUp(self):
        self.session = ExplorerSession()
        self.calls = []
        self.unsubscribe = self.session.subscribe(
            lambda series, conditions: self.calls.append((series, conditions))
        )

    def test_initial_state(self):
        self.assertEqual(self.session.parameters, ReactionParameters())
        self.assertEqual(self.session.series, generate_series(ReactionParameters()))
        self.assertEqual(self.session.conditions, current_conditions(ReactionParameters()))

    def test_update_regenerates_everything(self):
        before = self.session.series
        self.session.update(concentration_b=2.0, catalyst=True)

        expected = ReactionParameters(concentration_b=2.0, catalyst=True)
        self.assertEqual(self.session.parameters, expected)
        self.assertEqual(self.session.series, generate_series(expected))
        self.assertIsNot(self.session.series, before)
        self.assertEqual(len(self.calls), 1)
        series, conditions = self.calls[0]
        self.assertEqual(series, self.session.series)
        self.assertEqual(conditions, current_conditions(expected))

    def test_last_update_wins(self):
        self.session.update(temperature=300.0)
        self.session.update(temperature=340.0, order=ReactionOrder.FIRST)
        self.assertEqual(self.session.parameters.temperature, 340.0)
        self.assertIsNotNone(self.session.conditions.half_life)
        self.assertEqual(len(self.calls), 2)

    def test_invalid_update_keeps_previous_state(self):
        series = self.session.series
        with self.assertRaises(InvalidParameterError):
            self.session.update(temperature=0.0)
        self.assertEqual(self.session.parameters.temperature, 298.0)
        self.assertIs(self.session.series, series)
        self.assertEqual(self.calls, [])

    def test_unknown_parameter_keeps_previous_state(self):
        with self.assertRaises(InvalidParameterError):
            self.session.update(pressure=1.0)
        self.assertEqual(self.session.parameters, ReactionParameters())
        self.assertEqual(self.calls, [])

    def test_unsubscribe(self):
        self.unsubscribe()
        self.session.update(concentration_a=2.0)
        self.assertEqual(self.calls, [])


if __name__ == '__main__':
    unittest.main()
