from __future__ import annotations

from pydantic import BaseModel, Field

from app.core.config.scoring import get_scoring_value
from app.scoring.metrics import round_half_up
from app.scoring.vocabulary import clean_terms

_DEFAULT_RELEVANCE_VOCABULARY: tuple[str, ...] = (
    "javascript", "typescript", "react", "node.js", "html", "css",
    "python", "java", "c#", "cloud", "aws", "azure", "docker", "kubernetes",
    "agile", "scrum", "project management", "team lead", "fullstack",
    "frontend", "backend", "mobile", "database", "sql", "nosql", "mongodb",
)


class KeywordRelevance(BaseModel):
    relevant_keywords: list[str] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)
    score: int = Field(ge=0, le=100)


def relevance_vocabulary() -> tuple[str, ...]:
    return clean_terms(get_scoring_value("relevance.vocabulary"), _DEFAULT_RELEVANCE_VOCABULARY)


def evaluate_keyword_relevance(resume_text: str, job_description: str) -> KeywordRelevance:
    lower_resume = (resume_text or "").lower()
    lower_job = (job_description or "").lower()

    job_keywords = [keyword for keyword in relevance_vocabulary() if keyword in lower_job]
    relevant = [keyword for keyword in job_keywords if keyword in lower_resume]
    missing = [keyword for keyword in job_keywords if keyword not in lower_resume]

    if job_keywords:
        score = round_half_up(len(relevant) / len(job_keywords) * 100)
    else:
        score = int(get_scoring_value("relevance.no_job_keywords_score", 50))

    return KeywordRelevance(relevant_keywords=relevant, missing_keywords=missing, score=score)
