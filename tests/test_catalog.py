import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.core.catalog import catalog_range, get_catalog, get_catalog_value  # noqa: E402


class CareerCatalogTests(unittest.TestCase):
    def test_loader_and_value_lookup(self):
        catalog = get_catalog()
        self.assertIsInstance(catalog, dict)
        self.assertEqual(get_catalog_value("matching.default"), 85)
        self.assertGreaterEqual(len(get_catalog_value("padding_pool")), 20)

    def test_missing_paths_return_default(self):
        self.assertEqual(get_catalog_value("matching.nope", "x"), "x")
        self.assertEqual(get_catalog_value("", 3), 3)
        self.assertEqual(catalog_range("matching.nope", (1, 2)), (1, 2))

    def test_ranges(self):
        self.assertEqual(catalog_range("estimate.bounds", (0, 0)), (90, 150))
        self.assertEqual(catalog_range("matching.bounds", (0, 0)), (70, 98))

    def test_fallback_details_are_within_match_bounds(self):
        for entry in get_catalog_value("fallback.details"):
            self.assertTrue(70 <= entry["match"] <= 98)
            self.assertTrue(entry["description"])


if __name__ == "__main__":
    unittest.main()
