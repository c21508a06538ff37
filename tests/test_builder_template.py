import random
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.builder import ResumeData, resume_data_to_text  # noqa: E402
from app.scoring import analyze  # noqa: E402

RESUME_PAYLOAD = {
    "basics": {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "phone": "555-0100",
        "location": "Berlin",
        "summary": "Frontend developer focused on React.",
    },
    "work": [
        {
            "company": "Acme",
            "position": "Software Engineer",
            "startDate": "2019",
            "endDate": "2022",
            "highlights": "Built dashboards.\nLed migration to TypeScript.",
        },
        {"company": "Globex", "position": "Team Lead", "startDate": "2022", "highlights": "Ran agile ceremonies."},
    ],
    "education": [
        {"institution": "TU Berlin", "area": "Computer Science", "studyType": "BSc", "startDate": "2015", "endDate": "2019"},
    ],
    "skills": [{"name": "React", "level": "Expert"}, {"name": "Python"}],
}


class ResumeTemplateTests(unittest.TestCase):
    def setUp(self):
        self.data = ResumeData.model_validate(RESUME_PAYLOAD)
        self.text = resume_data_to_text(self.data)

    def test_header_and_contact_line(self):
        lines = self.text.splitlines()
        self.assertEqual(lines[0], "# Jane Doe")
        self.assertEqual(lines[1], "jane@example.com | 555-0100 | Berlin")

    def test_work_entries_render_with_present_for_open_roles(self):
        self.assertIn("### Software Engineer | Acme | 2019 - 2022\nBuilt dashboards.\nLed migration to TypeScript.", self.text)
        self.assertIn("### Team Lead | Globex | 2022 - Present", self.text)

    def test_education_and_skills(self):
        self.assertIn("### BSc in Computer Science | TU Berlin | 2015 - 2019", self.text)
        self.assertTrue(self.text.endswith("## Skills\n- React (Expert)\n- Python\n"))

    def test_section_order(self):
        positions = [
            self.text.index(heading)
            for heading in ("## Professional Summary", "## Work Experience", "## Education", "## Skills")
        ]
        self.assertEqual(positions, sorted(positions))

    def test_rendering_is_deterministic(self):
        self.assertEqual(resume_data_to_text(self.data), self.text)

    def test_empty_resume_still_renders_all_sections(self):
        text = resume_data_to_text(ResumeData())
        self.assertIn("## Work Experience", text)
        self.assertIn("## Skills", text)

    def test_rendered_text_has_full_format_score(self):
        result = analyze(self.text, rng=random.Random(0))
        self.assertEqual(result.format_score, 100)
        self.assertIn("react", result.keywords.found)


if __name__ == "__main__":
    unittest.main()
