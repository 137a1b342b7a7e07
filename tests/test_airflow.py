"""
Unit tests for airflow calculations.
"""

import math
import unittest
from ductcalc.airflow import (
    airflow_efficiency,
    calculate_area,
    cumulative_sum,
    efficiency_class,
    max_airflow,
)


class TestCalculateArea(unittest.TestCase):
    """Test area from air volume and speed."""

    def test_formula(self):
        for volume, speed in [(600, 13), (10, 1), (123.4, 7.5), (0, 5)]:
            self.assertEqual(calculate_area(volume, speed), volume / 60 / speed)

    def test_example(self):
        self.assertAlmostEqual(calculate_area(600, 13), 0.769230769, places=6)

    def test_nan_propagates(self):
        self.assertTrue(math.isnan(calculate_area(float('nan'), 13)))

    def test_zero_speed_is_not_guarded(self):
        with self.assertRaises(ZeroDivisionError):
            calculate_area(600, 0)


class TestCumulativeSum(unittest.TestCase):
    """Test running totals for serial segments."""

    def test_basic(self):
        self.assertEqual(cumulative_sum([10, 20, 30]), [10, 30, 60])

    def test_empty(self):
        self.assertEqual(cumulative_sum([]), [])

    def test_preserves_length_and_order(self):
        values = [5.5, 0, 2.5, 12]
        result = cumulative_sum(values)
        self.assertEqual(len(result), len(values))
        self.assertEqual(result, [5.5, 5.5, 8.0, 20.0])

    def test_accepts_iterables(self):
        self.assertEqual(cumulative_sum(v for v in (1, 2, 3)), [1, 3, 6])


class TestAirflowCapacity(unittest.TestCase):
    """Test max airflow and efficiency."""

    def test_max_airflow_inverts_area(self):
        area = calculate_area(600, 13)
        self.assertAlmostEqual(max_airflow(area, 13), 600)

    def test_efficiency(self):
        area = math.pi * 0.25  # 1000 mm duct
        self.assertAlmostEqual(airflow_efficiency(600, area, 13), 97.94, places=2)
        self.assertAlmostEqual(airflow_efficiency(max_airflow(area, 13), area, 13), 100)

    def test_efficiency_class(self):
        self.assertEqual(efficiency_class(97.9), 'high')
        self.assertEqual(efficiency_class(90.01), 'high')
        self.assertEqual(efficiency_class(90.0), 'mid')
        self.assertEqual(efficiency_class(85.0), 'mid')
        self.assertEqual(efficiency_class(80.0), 'mid')
        self.assertEqual(efficiency_class(79.9), '')
        self.assertEqual(efficiency_class(float('nan')), '')


if __name__ == '__main__':
    unittest.main()
