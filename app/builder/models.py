from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ResumeBasics(BaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    summary: str = ""


class WorkEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    company: str = ""
    position: str = ""
    start_date: str = Field(default="", alias="startDate")
    end_date: str | None = Field(default=None, alias="endDate")
    highlights: str = ""


class EducationEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    institution: str = ""
    area: str = ""
    study_type: str = Field(default="", alias="studyType")
    start_date: str = Field(default="", alias="startDate")
    end_date: str | None = Field(default=None, alias="endDate")


class SkillEntry(BaseModel):
    name: str
    level: str | None = None


class ResumeData(BaseModel):
    basics: ResumeBasics = Field(default_factory=ResumeBasics)
    work: list[WorkEntry] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)
    skills: list[SkillEntry] = Field(default_factory=list)
