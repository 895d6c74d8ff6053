import random
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.parsing.estimate import extract_estimate  # noqa: E402


class EstimateExtractionTests(unittest.TestCase):
    def test_estimated_iq_heading(self):
        self.assertEqual(extract_estimate("ESTIMATED IQ: 124\n\nCAREER RECOMMENDATIONS:", random.Random(1)), 124)

    def test_inline_iq_mention(self):
        self.assertEqual(extract_estimate("Your IQ is approximately 118 based on the profile.", random.Random(1)), 118)

    def test_score_of_phrase(self):
        self.assertEqual(extract_estimate("The profile suggests a score of 132 overall.", random.Random(1)), 132)

    def test_out_of_range_value_falls_back_inside_bounds(self):
        for seed in range(10):
            value = extract_estimate("IQ: 300", random.Random(seed))
            self.assertGreaterEqual(value, 90)
            self.assertLessEqual(value, 150)

    def test_empty_text_uses_seeded_random_fallback(self):
        first = extract_estimate("", random.Random(7))
        second = extract_estimate("", random.Random(7))
        self.assertEqual(first, second)
        self.assertTrue(90 <= first <= 150)

    def test_fallback_varies_between_calls(self):
        values = {extract_estimate("no numbers here", random.Random(seed)) for seed in range(20)}
        self.assertGreater(len(values), 1)

    def test_custom_bounds(self):
        value = extract_estimate("IQ: 95", random.Random(0), bounds=(100, 110))
        self.assertTrue(100 <= value <= 110)


if __name__ == "__main__":
    unittest.main()
