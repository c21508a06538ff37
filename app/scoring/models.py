from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AnalysisFeedback(BaseModel):
    model_config = ConfigDict(frozen=True)

    strengths: list[str] = Field(min_length=3)
    weaknesses: list[str] = Field(min_length=2)
    improvements: list[str] = Field(default_factory=list)


class KeywordReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    found: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list, max_length=5)


class AnalysisResult(BaseModel):
    """Score report for a single resume text.

    Serialized with camelCase aliases (``atsScore``, ``keywordMatch``, ...) for
    the browser client; python code uses the snake_case names.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    ats_score: int = Field(alias="atsScore", ge=0, le=100)
    keyword_match: int = Field(alias="keywordMatch", ge=0, le=100)
    readability: int = Field(ge=0, le=100)
    format_score: int = Field(alias="formatScore", ge=0, le=100)
    feedback: AnalysisFeedback
    keywords: KeywordReport
