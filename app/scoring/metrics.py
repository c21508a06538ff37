from __future__ import annotations

import math
import random
import re
from typing import Sequence

from app.core.config.scoring import get_scoring_value

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_BULLET_MARKERS = ("•", "*", "-")
_SECTION_SEPARATOR = "\n\n"
MAX_MISSING_KEYWORDS = 5


def round_half_up(value: float) -> int:
    # Scores are rounded half up (99.5 -> 100, 98.5 -> 99), never half-to-even.
    return int(math.floor(value + 0.5))


def clamp_score(value: int) -> int:
    return max(0, min(100, value))


def find_keywords(text: str, vocabulary: Sequence[str]) -> list[str]:
    lowered = text.lower()
    return [keyword for keyword in vocabulary if keyword in lowered]


def keyword_match_score(found_count: int) -> int:
    ideal = int(get_scoring_value("analysis.keywords.ideal_count", 10)) or 10
    return min(round_half_up(found_count / ideal * 100), 100)


def split_sentences(text: str) -> list[str]:
    return [fragment for fragment in _SENTENCE_SPLIT_RE.split(text) if fragment.strip()]


def average_sentence_length(text: str) -> float | None:
    sentences = split_sentences(text)
    if not sentences:
        return None
    return sum(len(sentence.split()) for sentence in sentences) / len(sentences)


def readability_score(text: str) -> int:
    avg_length = average_sentence_length(text)
    if avg_length is None:
        return clamp_score(int(get_scoring_value("analysis.readability.empty_text_score", 100)))

    ideal = float(get_scoring_value("analysis.readability.ideal_sentence_length", 15))
    per_word = float(get_scoring_value("analysis.readability.penalty_per_word", 5))
    max_penalty = float(get_scoring_value("analysis.readability.max_penalty", 50))
    penalty = min(abs(avg_length - ideal) * per_word, max_penalty)
    return clamp_score(round_half_up(100 - penalty))


def has_bullet_points(text: str) -> bool:
    return any(marker in text for marker in _BULLET_MARKERS)


def has_multiple_sections(text: str) -> bool:
    min_sections = int(get_scoring_value("analysis.format.min_sections", 3))
    return len(text.split(_SECTION_SEPARATOR)) > min_sections


def format_score(text: str) -> int:
    score = int(get_scoring_value("analysis.format.base", 20))
    if has_bullet_points(text):
        score += int(get_scoring_value("analysis.format.bullet_points", 40))
    if has_multiple_sections(text):
        score += int(get_scoring_value("analysis.format.multiple_sections", 40))
    return clamp_score(score)


def composite_score(keyword_match: int, readability: int, format_points: int) -> int:
    weights = get_scoring_value("analysis.weights", {}) or {}
    total = (
        float(weights.get("keywords", 0.4)) * keyword_match
        + float(weights.get("readability", 0.3)) * readability
        + float(weights.get("format", 0.3)) * format_points
    )
    return clamp_score(round_half_up(total))


def sample_missing_keywords(
    found: Sequence[str],
    vocabulary: Sequence[str],
    rng: random.Random,
) -> list[str]:
    """Randomly pick up to N vocabulary terms that the text does not contain."""
    configured = int(get_scoring_value("analysis.keywords.missing_sample_size", MAX_MISSING_KEYWORDS))
    sample_size = max(0, min(configured, MAX_MISSING_KEYWORDS))
    found_set = set(found)
    absent = [keyword for keyword in vocabulary if keyword not in found_set]
    rng.shuffle(absent)
    return absent[:sample_size]
