"""Rule tables that turn computed scores into feedback lines.

Each table is evaluated top to bottom and every rule contributes at most one
line. Filler lines are only added when the rules produced too few lines; the
improvement list always ends with the closing recommendations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence


@dataclass(frozen=True)
class ScoreSnapshot:
    ats_score: int
    keyword_match: int
    readability: int
    format_score: int
    found_keywords: tuple[str, ...]
    missing_keywords: tuple[str, ...]

    def has_keyword(self, keyword: str) -> bool:
        return keyword in self.found_keywords

    def template_values(self) -> dict[str, object]:
        return {
            "found_count": len(self.found_keywords),
            "top_missing": ", ".join(self.missing_keywords[:3]),
        }


@dataclass(frozen=True)
class FeedbackRule:
    rule_id: str
    predicate: Callable[[ScoreSnapshot], bool]
    template: str

    def applies(self, snapshot: ScoreSnapshot) -> bool:
        return bool(self.predicate(snapshot))

    def render(self, snapshot: ScoreSnapshot) -> str:
        return self.template.format(**snapshot.template_values())


STRENGTH_RULES: tuple[FeedbackRule, ...] = (
    FeedbackRule(
        "good_ats_score",
        lambda s: s.ats_score > 70,
        "Your resume has good overall ATS compatibility.",
    ),
    FeedbackRule(
        "strong_keyword_presence",
        lambda s: len(s.found_keywords) > 5,
        "Strong keyword presence with {found_count} relevant industry terms.",
    ),
    FeedbackRule(
        "frontend_stack",
        lambda s: s.has_keyword("javascript") and s.has_keyword("react"),
        "Good demonstration of frontend technology stack.",
    ),
    FeedbackRule(
        "backend_stack",
        lambda s: s.has_keyword("node") or s.has_keyword("python"),
        "Backend technologies well represented.",
    ),
    FeedbackRule(
        "process_knowledge",
        lambda s: s.has_keyword("agile") or s.has_keyword("project management"),
        "Strong indication of process knowledge and project experience.",
    ),
)

STRENGTH_FILLERS: tuple[str, ...] = (
    "Resume has a clear structure that ATS systems can process.",
    "Content appears to be relevant to the technology industry.",
    "Length and depth of content is appropriate for ATS scanning.",
)

WEAKNESS_RULES: tuple[FeedbackRule, ...] = (
    FeedbackRule(
        "low_ats_score",
        lambda s: s.ats_score < 70,
        "Your resume may struggle to pass through some ATS systems.",
    ),
    FeedbackRule(
        "few_keywords",
        lambda s: s.keyword_match < 60,
        "Limited presence of industry-relevant keywords.",
    ),
    FeedbackRule(
        "low_readability",
        lambda s: s.readability < 65,
        "Sentence structure and complexity may reduce readability.",
    ),
    FeedbackRule(
        "weak_format",
        lambda s: s.format_score < 70,
        "Resume format is not optimized for ATS scanning.",
    ),
)

WEAKNESS_FILLERS: tuple[str, ...] = (
    "Could benefit from more specific achievements with measurable results.",
    "Experience descriptions may lack sufficient detail for keyword matching.",
)

IMPROVEMENT_RULES: tuple[FeedbackRule, ...] = (
    FeedbackRule(
        "add_keywords",
        lambda s: s.keyword_match < 75,
        "Add industry-specific keywords like: {top_missing}.",
    ),
    FeedbackRule(
        "shorter_sentences",
        lambda s: s.readability < 70,
        "Use shorter, clearer sentences to improve readability.",
    ),
    FeedbackRule(
        "use_bullets",
        lambda s: s.readability < 70,
        "Break down complex descriptions into bullet points.",
    ),
    FeedbackRule(
        "distinct_sections",
        lambda s: s.format_score < 80,
        "Ensure distinct sections with clear headings for experience, education, and skills.",
    ),
    FeedbackRule(
        "standard_titles",
        lambda s: s.format_score < 80,
        "Use standard section titles that ATS systems can recognize.",
    ),
)

CLOSING_IMPROVEMENTS: tuple[str, ...] = (
    "Quantify achievements with specific metrics and results.",
    "Tailor your resume keywords to match the job description.",
    "Avoid complex tables, graphics, or unusual formatting that ATS might not process correctly.",
)

MIN_STRENGTHS = 3
MIN_WEAKNESSES = 2


def apply_rules(rules: Sequence[FeedbackRule], snapshot: ScoreSnapshot) -> list[str]:
    return [rule.render(snapshot) for rule in rules if rule.applies(snapshot)]


def _with_fillers(lines: list[str], minimum: int, fillers: Sequence[str]) -> list[str]:
    # All fillers are appended at once, so the list can end up longer than the minimum.
    if len(lines) < minimum:
        lines.extend(fillers)
    return lines


def generate_strengths(snapshot: ScoreSnapshot) -> list[str]:
    return _with_fillers(apply_rules(STRENGTH_RULES, snapshot), MIN_STRENGTHS, STRENGTH_FILLERS)


def generate_weaknesses(snapshot: ScoreSnapshot) -> list[str]:
    return _with_fillers(apply_rules(WEAKNESS_RULES, snapshot), MIN_WEAKNESSES, WEAKNESS_FILLERS)


def generate_improvements(snapshot: ScoreSnapshot) -> list[str]:
    improvements = apply_rules(IMPROVEMENT_RULES, snapshot)
    improvements.extend(CLOSING_IMPROVEMENTS)
    return improvements
