from __future__ import annotations

from pydantic import BaseModel, Field

from app.scoring import AnalysisResult

MAX_TEXT_CHARS = 50000


class AnalyzeRequest(BaseModel):
    # Empty text is a valid input and scores with the documented fallbacks.
    text: str = Field(default="", max_length=MAX_TEXT_CHARS)
    seed: int | None = None


class ExtractTextResponse(BaseModel):
    filename: str
    source_type: str
    text: str
    characters: int = Field(ge=0)
    is_placeholder: bool = False
    warnings: list[str] = Field(default_factory=list)


class UploadAnalysisResponse(BaseModel):
    filename: str
    source_type: str
    is_placeholder: bool
    analysis: AnalysisResult


class ResumeTextResponse(BaseModel):
    text: str


class ResumeAnalysisResponse(BaseModel):
    text: str
    analysis: AnalysisResult


class StructureRequest(BaseModel):
    text: str = Field(default="", max_length=MAX_TEXT_CHARS)


class StructureResponse(BaseModel):
    sections: dict[str, str] = Field(default_factory=dict)


class KeywordRelevanceRequest(BaseModel):
    resume_text: str = Field(default="", max_length=MAX_TEXT_CHARS)
    job_description_text: str = Field(default="", max_length=MAX_TEXT_CHARS)
