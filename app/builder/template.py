from __future__ import annotations

from .models import EducationEntry, ResumeData, SkillEntry, WorkEntry

_PRESENT = "Present"


def _date_range(start: str, end: str | None) -> str:
    return f"{start} - {end or _PRESENT}"


def _work_block(entry: WorkEntry) -> list[str]:
    header = f"### {entry.position} | {entry.company} | {_date_range(entry.start_date, entry.end_date)}"
    return ["", header, entry.highlights]


def _education_block(entry: EducationEntry) -> list[str]:
    header = (
        f"### {entry.study_type} in {entry.area} | {entry.institution} | "
        f"{_date_range(entry.start_date, entry.end_date)}"
    )
    return ["", header]


def _skill_line(skill: SkillEntry) -> str:
    if skill.level:
        return f"- {skill.name} ({skill.level})"
    return f"- {skill.name}"


def resume_data_to_text(data: ResumeData) -> str:
    """Render builder data as the markdown-like text the scorer consumes."""
    basics = data.basics
    lines: list[str] = [
        f"# {basics.name}",
        f"{basics.email} | {basics.phone} | {basics.location}",
        "",
        "## Professional Summary",
        basics.summary,
        "",
        "## Work Experience",
    ]
    for work in data.work:
        lines.extend(_work_block(work))

    lines.extend(["", "## Education"])
    for education in data.education:
        lines.extend(_education_block(education))

    lines.extend(["", "## Skills"])
    lines.extend(_skill_line(skill) for skill in data.skills)
    return "\n".join(lines) + "\n"
