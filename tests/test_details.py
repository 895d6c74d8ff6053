import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.parsing.details import extract_details  # noqa: E402

SCENARIO_B = (
    "Career 1: Robotics Engineer (92%)\n"
    "- Growth Potential: high demand in automation\n"
    "- Required Skills: ROS, C++\n"
    "\n"
    "Career 2: UX Researcher Match: 77%\n"
    "* Required Skills: interviewing, survey design\n"
)


class DetailExtractionTests(unittest.TestCase):
    def test_marked_segments_with_mixed_percentage_styles(self):
        details = extract_details(SCENARIO_B)
        self.assertEqual([(d.title, d.match) for d in details], [("Robotics Engineer", 92), ("UX Researcher", 77)])
        self.assertEqual(
            details[0].description,
            "Growth Potential: high demand in automation\nRequired Skills: ROS, C++",
        )
        self.assertEqual(details[1].description, "Required Skills: interviewing, survey design")
        self.assertFalse(any(d.synthetic for d in details))

    def test_bullet_percentages_stay_in_description(self):
        text = (
            "Data Scientist (Match: 92%)\n"
            "- Projected growth (22% by 2030)\n"
            "- Builds predictive models\n"
            "UX Designer (Match: 85%)\n"
            "- Designs user flows\n"
        )
        details = extract_details(text)
        self.assertEqual([(d.title, d.match) for d in details], [("Data Scientist", 92), ("UX Designer", 85)])
        self.assertEqual(details[0].description, "Projected growth (22% by 2030)\nBuilds predictive models")

    def test_unmarked_header_lines_are_segmented(self):
        text = (
            "Robotics Engineer (92%)\n"
            "Growth Potential: high\n"
            "UX Researcher Match: 77%\n"
            "Required Skills: research\n"
        )
        details = extract_details(text)
        self.assertEqual([(d.title, d.match) for d in details], [("Robotics Engineer", 92), ("UX Researcher", 77)])
        self.assertEqual(details[0].description, "Growth Potential: high")

    def test_numbered_title_marker(self):
        text = "1. Title: Data Scientist\nMatch: 88%\nSalary Range: $90k-$120k"
        details = extract_details(text)
        self.assertEqual(len(details), 1)
        self.assertEqual(details[0].title, "Data Scientist")
        self.assertEqual(details[0].match, 88)
        self.assertEqual(details[0].description, "Salary Range: $90k-$120k")

    def test_match_percentage_label(self):
        details = extract_details("Career 1: Pharmacist\nmatch percentage: 81%\nGrowth Potential: steady")
        self.assertEqual(details[0].match, 81)

    def test_markdown_emphasis_removed_from_title(self):
        details = extract_details("**Career 1: Game Designer** (Match: 90%)\n**Growth Potential:** strong")
        self.assertEqual(details[0].title, "Game Designer")
        self.assertEqual(details[0].description, "Growth Potential: strong")

    def test_segments_without_percentage_are_dropped(self):
        text = "Career 1: Chef\nGreat food.\nCareer 2: Baker (81%)\nBread."
        details = extract_details(text)
        self.assertEqual([d.title for d in details], ["Baker"])

    def test_out_of_range_percentages_default_or_clamp(self):
        unparsable = extract_details("Career 1: Astronaut (Match: 250%)\nTraining: years")
        self.assertEqual(unparsable[0].match, 85)
        low = extract_details("Career 1: Intern (Match: 40%)")
        self.assertEqual(low[0].match, 70)
        high = extract_details("Career 1: Founder (100%)")
        self.assertEqual(high[0].match, 98)

    def test_noise_and_empty_text_yield_nothing(self):
        self.assertEqual(extract_details(""), [])
        self.assertEqual(extract_details("lorem ipsum dolor sit amet"), [])


if __name__ == "__main__":
    unittest.main()
