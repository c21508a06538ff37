from .models import EducationEntry, ResumeBasics, ResumeData, SkillEntry, WorkEntry
from .template import resume_data_to_text

__all__ = [
    "ResumeBasics",
    "WorkEntry",
    "EducationEntry",
    "SkillEntry",
    "ResumeData",
    "resume_data_to_text",
]
