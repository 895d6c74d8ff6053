import random
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.parsing.reconcile import reconcile  # noqa: E402
from app.schemas.prediction import DetailRecord, ProfileInput  # noqa: E402


class ReconcileTests(unittest.TestCase):
    def setUp(self):
        self.profile = ProfileInput(skills="Welding, Drafting", interests="Bridges; Rivers", workStyle="Hands-on")

    def test_matching_records_kept_in_label_order(self):
        details = [
            DetailRecord(title="civil engineer", match=91, description="Build things"),
            DetailRecord(title="Surveyor", match=80, description="Measure things"),
        ]
        result = reconcile(["Surveyor", "Civil Engineer"], details, self.profile, random.Random(0))
        self.assertEqual([r.title for r in result], ["Surveyor", "Civil Engineer"])
        self.assertEqual([r.match for r in result], [80, 91])
        self.assertFalse(any(r.synthetic for r in result))

    def test_unmatched_labels_are_synthesized_from_profile(self):
        result = reconcile(["Bridge Inspector"], [], self.profile, random.Random(0))
        record = result[0]
        self.assertTrue(record.synthetic)
        self.assertEqual(record.title, "Bridge Inspector")
        self.assertTrue(72 <= record.match <= 90)
        self.assertIn("Welding", record.description)
        self.assertIn("Bridges", record.description)
        self.assertIn("hands-on", record.description)

    def test_missing_profile_fields_use_defaults(self):
        record = reconcile(["Analyst"], [], ProfileInput(), random.Random(0))[0]
        self.assertIn("your current skills", record.description)
        self.assertIn("your interests", record.description)
        self.assertIn("flexible", record.description)

    def test_unused_records_are_dropped_and_duplicates_use_first(self):
        details = [
            DetailRecord(title="Chef", match=88, description="first"),
            DetailRecord(title="Chef", match=75, description="second"),
            DetailRecord(title="Pilot", match=90, description="unused"),
        ]
        result = reconcile(["Chef"], details, ProfileInput(), random.Random(0))
        self.assertEqual(len(result), 1)
        self.assertEqual(result[0].description, "first")

    def test_reconcile_is_idempotent(self):
        labels = ["Chef", "Pilot", "Nurse"]
        details = [DetailRecord(title="pilot", match=93, description="Fly")]
        once = reconcile(labels, details, self.profile, random.Random(5))
        twice = reconcile(labels, once, self.profile, random.Random(99))
        self.assertEqual(once, twice)


if __name__ == "__main__":
    unittest.main()
