from __future__ import annotations

import random

from app.scoring.feedback import (
    ScoreSnapshot,
    generate_improvements,
    generate_strengths,
    generate_weaknesses,
)
from app.scoring.metrics import (
    composite_score,
    find_keywords,
    format_score,
    keyword_match_score,
    readability_score,
    sample_missing_keywords,
)
from app.scoring.models import AnalysisFeedback, AnalysisResult, KeywordReport
from app.scoring.vocabulary import get_vocabulary


def analyze(text: str, *, rng: random.Random | None = None) -> AnalysisResult:
    """Score resume text and build the feedback report.

    The result depends only on ``text`` and the state of ``rng``. ``rng`` is only
    used to sample the missing keywords; without one a system-seeded generator is
    used, so ``keywords.missing`` and the keyword improvement line vary between
    calls on the same text.
    """
    text = text or ""
    generator = rng if rng is not None else random.Random()
    vocabulary = get_vocabulary()

    found = find_keywords(text, vocabulary)
    keyword_match = keyword_match_score(len(found))
    readability = readability_score(text)
    format_points = format_score(text)
    ats_score = composite_score(keyword_match, readability, format_points)
    missing = sample_missing_keywords(found, vocabulary, generator)

    snapshot = ScoreSnapshot(
        ats_score=ats_score,
        keyword_match=keyword_match,
        readability=readability,
        format_score=format_points,
        found_keywords=tuple(found),
        missing_keywords=tuple(missing),
    )
    return AnalysisResult(
        ats_score=ats_score,
        keyword_match=keyword_match,
        readability=readability,
        format_score=format_points,
        feedback=AnalysisFeedback(
            strengths=generate_strengths(snapshot),
            weaknesses=generate_weaknesses(snapshot),
            improvements=generate_improvements(snapshot),
        ),
        keywords=KeywordReport(found=found, missing=missing),
    )
