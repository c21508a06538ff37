from __future__ import annotations

from app.core.config.scoring import get_scoring_value

DEFAULT_VOCABULARY: tuple[str, ...] = (
    "javascript", "react", "node", "typescript", "python", "java", "c#",
    "software engineer", "developer", "frontend", "backend", "fullstack",
    "web", "mobile", "app", "cloud", "aws", "azure", "devops", "agile",
    "project management", "team lead", "architect", "machine learning", "ai",
)


def clean_terms(raw: object, default: tuple[str, ...]) -> tuple[str, ...]:
    if not isinstance(raw, list):
        return default
    terms: list[str] = []
    for item in raw:
        term = str(item).strip().lower()
        if term and term not in terms:
            terms.append(term)
    return tuple(terms) if terms else default


def get_vocabulary() -> tuple[str, ...]:
    """Canonical ordered keyword list used by the ATS scorer."""
    return clean_terms(get_scoring_value("analysis.keywords.vocabulary"), DEFAULT_VOCABULARY)
