"""
Unit tests for the duct sizing result tables.
"""

import unittest
import pandas as pd
from ductcalc.duct_lookup import circle_area
from ductcalc.tables import (
    AIRFLOW_COLUMNS,
    QUICK_COLUMNS,
    RECT_COLUMNS,
    ROUND_TO_RECT_COLUMNS,
    airflow_table,
    quick_lookup_table,
    rect_recommendation_table,
    rect_to_round_summary,
    round_to_rect_table,
    style_efficiency,
    undersized_warnings,
)


class TestAirflowTable(unittest.TestCase):
    """Test serial segment sizing."""

    def test_cumulative_segments(self):
        df = airflow_table([10, 20, 30], 'CMM', [13], 'm/s')

        self.assertEqual(list(df.columns), AIRFLOW_COLUMNS)
        self.assertEqual(df['Segment'].tolist(), [1, 2, 3])
        self.assertEqual(df['Cumulative (CMM)'].tolist(), [10, 30, 60])
        self.assertEqual(df['Speed (m/s)'].tolist(), [13, 13, 13])
        self.assertEqual(df['Diameter (mm)'].tolist(), [150, 250, 350])
        self.assertAlmostEqual(df['Required Area (m²)'].iloc[2], 60 / 60 / 13)
        self.assertFalse(df['Undersized'].any())

    def test_per_segment_speeds(self):
        df = airflow_table([300, 300], 'CMM', [10, 12], 'm/s')
        self.assertEqual(df['Speed (m/s)'].tolist(), [10, 12])
        self.assertAlmostEqual(df['Required Area (m²)'].iloc[0], 0.5)
        self.assertAlmostEqual(df['Required Area (m²)'].iloc[1], 600 / 60 / 12)

    def test_unit_conversion(self):
        df = airflow_table([1000], 'CFM', [36], 'km/h')
        self.assertAlmostEqual(df['Volume (CMM)'].iloc[0], 28.3168)
        self.assertAlmostEqual(df['Speed (m/s)'].iloc[0], 10.0, places=4)

    def test_undersized_warning(self):
        df = airflow_table([1000, 1000], 'CMM', [5], 'm/s')
        # 2000 CMM at 5 m/s needs 6.67 m², beyond the 1600 mm duct
        self.assertEqual(df['Undersized'].tolist(), [True, True])
        warnings = undersized_warnings(df)
        self.assertEqual(len(warnings), 2)
        self.assertIn("Segment 2", warnings[1])

    def test_no_warnings(self):
        df = airflow_table([10], 'CMM', [13], 'm/s')
        self.assertEqual(undersized_warnings(df), [])

    def test_invalid_inputs(self):
        with self.assertRaisesRegex(ValueError, "air volume"):
            airflow_table([], 'CMM', [13], 'm/s')
        with self.assertRaisesRegex(ValueError, "air speed"):
            airflow_table([10], 'CMM', [], 'm/s')
        with self.assertRaisesRegex(ValueError, "count must be 1"):
            airflow_table([10, 20, 30], 'CMM', [10, 12], 'm/s')
        with self.assertRaisesRegex(ValueError, "positive"):
            airflow_table([10], 'CMM', [0], 'm/s')


class TestRectToRoundSummary(unittest.TestCase):
    """Test rectangular to round conversion summary."""

    def test_mm(self):
        result = rect_to_round_summary(500, 'mm', 400, 'mm')
        self.assertAlmostEqual(result['Rectangular Area (m²)'], 0.2)
        self.assertEqual(result['Diameter (mm)'], 550)
        self.assertAlmostEqual(result['Duct Area (m²)'], circle_area(550))
        self.assertFalse(result['Undersized'])

    def test_mixed_units(self):
        result = rect_to_round_summary(50, 'cm', 0.4, 'm')
        self.assertEqual(result['Diameter (mm)'], 550)

    def test_missing_values(self):
        with self.assertRaisesRegex(ValueError, "length and width"):
            rect_to_round_summary(0, 'mm', 400, 'mm')
        with self.assertRaises(ValueError):
            rect_to_round_summary(500, 'mm', -400, 'mm')


class TestRoundToRectTable(unittest.TestCase):
    """Test round to rectangular candidate table."""

    def test_table(self):
        df = round_to_rect_table(200)
        self.assertEqual(list(df.columns), ROUND_TO_RECT_COLUMNS)
        self.assertEqual(df['Short (mm)'].iloc[0], 50)
        self.assertEqual(df['Long (mm)'].iloc[0], 650)
        self.assertTrue(((df['Ratio'] >= 1.0) & (df['Ratio'] <= 1.25)).all())

    def test_invalid(self):
        with self.assertRaisesRegex(ValueError, "diameter"):
            round_to_rect_table(0)
        with self.assertRaisesRegex(ValueError, "positive"):
            round_to_rect_table(-100)


class TestQuickLookupTable(unittest.TestCase):
    """Test quick round duct lookup."""

    def test_two_recommendations(self):
        df = quick_lookup_table([600], 13, 'm/s')
        self.assertEqual(list(df.columns), QUICK_COLUMNS)

        row = df.iloc[0]
        self.assertEqual(row['Diameter 1 (mm)'], 1000)
        self.assertAlmostEqual(row['Max Airflow 1 (CMM)'], circle_area(1000) * 13 * 60)
        self.assertAlmostEqual(row['Efficiency 1 (%)'], 97.94, places=2)
        self.assertEqual(row['Diameter 2 (mm)'], 1050)
        self.assertAlmostEqual(row['Efficiency 2 (%)'], 88.84, places=2)

    def test_skips_blank_rows(self):
        df = quick_lookup_table([0, 100, 0, 250], 13, 'm/s')
        self.assertEqual(df['Volume (CMM)'].tolist(), [100, 250])

    def test_largest_size_has_no_second(self):
        df = quick_lookup_table([1500], 13, 'm/s')
        row = df.iloc[0]
        self.assertEqual(row['Diameter 1 (mm)'], 1600)
        self.assertTrue(pd.isna(row['Diameter 2 (mm)']))
        self.assertTrue(pd.isna(row['Efficiency 2 (%)']))

    def test_invalid(self):
        with self.assertRaisesRegex(ValueError, "fixed air speed"):
            quick_lookup_table([100], 0, 'm/s')
        with self.assertRaisesRegex(ValueError, "positive"):
            quick_lookup_table([100], -5, 'm/s')
        with self.assertRaisesRegex(ValueError, "at least one air volume row"):
            quick_lookup_table([], 13, 'm/s')
        with self.assertRaisesRegex(ValueError, "at least one row"):
            quick_lookup_table([0, 0], 13, 'm/s')


class TestRectRecommendationTable(unittest.TestCase):
    """Test rectangular recommendations by air volume and speed."""

    def test_table(self):
        df = rect_recommendation_table(600, 'CMM', 13, 'm/s')
        self.assertEqual(list(df.columns), RECT_COLUMNS)
        self.assertFalse(df.empty)
        self.assertTrue((df['Long (mm)'] % 50 == 0).all())
        self.assertTrue(((df['Ratio'] >= 1.0) & (df['Ratio'] <= 1.25)).all())
        # Efficiency is the inverse of the area ratio at the same speed
        for _, row in df.iterrows():
            self.assertAlmostEqual(row['Efficiency (%)'], 100 / row['Ratio'])

    def test_no_candidates(self):
        # 0.06 CMM at 10 m/s needs 0.0001 m²
        df = rect_recommendation_table(0.06, 'CMM', 10, 'm/s')
        self.assertTrue(df.empty)
        self.assertEqual(list(df.columns), RECT_COLUMNS)

    def test_invalid(self):
        with self.assertRaisesRegex(ValueError, "air volume"):
            rect_recommendation_table(0, 'CMM', 13, 'm/s')
        with self.assertRaisesRegex(ValueError, "air speed"):
            rect_recommendation_table(600, 'CMM', 0, 'm/s')
        with self.assertRaisesRegex(ValueError, "positive"):
            rect_recommendation_table(-600, 'CMM', 13, 'm/s')


class TestStyleEfficiency(unittest.TestCase):
    """Test efficiency highlighting."""

    def test_styles_render(self):
        df = quick_lookup_table([600, 1500], 13, 'm/s')
        html = style_efficiency(df).to_html()
        self.assertIn('#d62728', html)  # 97.9 % → high
        self.assertIn('#2ca02c', html)  # 88.8 % → mid


if __name__ == '__main__':
    unittest.main()
