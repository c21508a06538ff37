import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.scoring.feedback import (  # noqa: E402
    CLOSING_IMPROVEMENTS,
    IMPROVEMENT_RULES,
    STRENGTH_FILLERS,
    STRENGTH_RULES,
    WEAKNESS_FILLERS,
    ScoreSnapshot,
    generate_improvements,
    generate_strengths,
    generate_weaknesses,
)


def _snapshot(**overrides) -> ScoreSnapshot:
    values = {
        "ats_score": 80,
        "keyword_match": 80,
        "readability": 90,
        "format_score": 100,
        "found_keywords": (),
        "missing_keywords": ("cloud", "aws", "azure", "devops", "ai"),
    }
    values.update(overrides)
    return ScoreSnapshot(**values)


class StrengthRuleTests(unittest.TestCase):
    def test_all_strength_rules_fire_in_order(self):
        snapshot = _snapshot(found_keywords=("javascript", "react", "node", "cloud", "aws", "agile"))
        self.assertEqual(
            generate_strengths(snapshot),
            [
                "Your resume has good overall ATS compatibility.",
                "Strong keyword presence with 6 relevant industry terms.",
                "Good demonstration of frontend technology stack.",
                "Backend technologies well represented.",
                "Strong indication of process knowledge and project experience.",
            ],
        )

    def test_fillers_are_appended_when_too_few_rules_fire(self):
        strengths = generate_strengths(_snapshot(found_keywords=("python",)))
        self.assertEqual(strengths[:2], ["Your resume has good overall ATS compatibility.", "Backend technologies well represented."])
        self.assertEqual(strengths[2:], list(STRENGTH_FILLERS))

    def test_frontend_rule_needs_both_keywords(self):
        rule = next(rule for rule in STRENGTH_RULES if rule.rule_id == "frontend_stack")
        self.assertFalse(rule.applies(_snapshot(found_keywords=("javascript",))))
        self.assertTrue(rule.applies(_snapshot(found_keywords=("react", "javascript"))))

    def test_score_of_exactly_70_is_not_a_strength(self):
        strengths = generate_strengths(_snapshot(ats_score=70))
        self.assertEqual(strengths, list(STRENGTH_FILLERS))


class WeaknessRuleTests(unittest.TestCase):
    def test_high_scores_only_get_fillers(self):
        self.assertEqual(generate_weaknesses(_snapshot()), list(WEAKNESS_FILLERS))

    def test_single_weakness_is_padded(self):
        weaknesses = generate_weaknesses(_snapshot(ats_score=65))
        self.assertEqual(weaknesses[0], "Your resume may struggle to pass through some ATS systems.")
        self.assertEqual(weaknesses[1:], list(WEAKNESS_FILLERS))

    def test_all_weaknesses_fire_without_fillers(self):
        weaknesses = generate_weaknesses(
            _snapshot(ats_score=40, keyword_match=30, readability=60, format_score=20)
        )
        self.assertEqual(len(weaknesses), 4)
        self.assertNotIn(WEAKNESS_FILLERS[0], weaknesses)

    def test_threshold_boundaries(self):
        weaknesses = generate_weaknesses(
            _snapshot(ats_score=70, keyword_match=60, readability=65, format_score=70)
        )
        self.assertEqual(weaknesses, list(WEAKNESS_FILLERS))


class ImprovementRuleTests(unittest.TestCase):
    def test_only_closing_lines_for_strong_resume(self):
        self.assertEqual(generate_improvements(_snapshot()), list(CLOSING_IMPROVEMENTS))

    def test_keyword_rule_interpolates_top_three_missing(self):
        improvements = generate_improvements(_snapshot(keyword_match=70))
        self.assertEqual(improvements[0], "Add industry-specific keywords like: cloud, aws, azure.")
        self.assertEqual(improvements[1:], list(CLOSING_IMPROVEMENTS))

    def test_readability_and_format_tips_come_in_pairs(self):
        improvements = generate_improvements(_snapshot(readability=69, format_score=60))
        self.assertEqual(len(improvements), 4 + len(CLOSING_IMPROVEMENTS))
        self.assertEqual(improvements[0], "Use shorter, clearer sentences to improve readability.")
        self.assertEqual(improvements[3], "Use standard section titles that ATS systems can recognize.")

    def test_rule_ids_are_unique(self):
        ids = [rule.rule_id for rule in (*STRENGTH_RULES, *IMPROVEMENT_RULES)]
        self.assertEqual(len(ids), len(set(ids)))


if __name__ == "__main__":
    unittest.main()
