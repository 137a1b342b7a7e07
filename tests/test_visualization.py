"""
Unit tests for Plotly chart builders.
"""

import unittest
import plotly.graph_objects as go
from ductcalc.duct_lookup import DUCT_DIAMETERS_MM
from ductcalc.rectangular import round_to_rect
from ductcalc.tables import airflow_table
from ductcalc.visualization import airflow_figure, ratio_figure, velocity_figure


class TestVelocityFigure(unittest.TestCase):

    def test_traces(self):
        fig = velocity_figure(600, 13)
        self.assertIsInstance(fig, go.Figure)
        self.assertEqual(len(fig.data), 2)
        self.assertEqual(len(fig.data[1].x), len(DUCT_DIAMETERS_MM))
        self.assertIn('600.0 CMM', fig.layout.title.text)

    def test_standard_speed_at_1000mm(self):
        fig = velocity_figure(600, 13)
        idx = list(fig.data[1].x).index(1000)
        self.assertAlmostEqual(fig.data[1].y[idx], 600 / 60 / (3.141592653589793 * 0.25))


class TestRatioFigure(unittest.TestCase):

    def test_bars(self):
        candidates = round_to_rect(200)
        fig = ratio_figure(candidates)
        self.assertEqual(len(fig.data), 1)
        self.assertEqual(list(fig.data[0].x)[0], '50×650')
        self.assertEqual(len(fig.data[0].y), len(candidates))

    def test_empty(self):
        fig = ratio_figure([])
        self.assertEqual(len(fig.data[0].x), 0)


class TestAirflowFigure(unittest.TestCase):

    def test_segments(self):
        df = airflow_table([10, 20, 30], 'CMM', [13], 'm/s')
        fig = airflow_figure(df)
        self.assertEqual(len(fig.data), 2)
        self.assertEqual(list(fig.data[0].text), ['Ø150 mm', 'Ø250 mm', 'Ø350 mm'])

    def test_undersized_segments_highlighted(self):
        df = airflow_table([10, 2000], 'CMM', [5], 'm/s')
        fig = airflow_figure(df)
        self.assertEqual(list(fig.data[0].marker.color), ['seagreen', 'crimson'])

    def test_empty(self):
        df = airflow_table([10], 'CMM', [13], 'm/s').iloc[0:0]
        fig = airflow_figure(df)
        self.assertEqual(len(fig.data), 0)


if __name__ == '__main__':
    unittest.main()
