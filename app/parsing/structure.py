from __future__ import annotations

SECTION_HEADERS: tuple[str, ...] = (
    "SUMMARY", "PROFILE", "OBJECTIVE",
    "EXPERIENCE", "WORK EXPERIENCE", "EMPLOYMENT",
    "EDUCATION", "ACADEMIC BACKGROUND",
    "SKILLS", "TECHNICAL SKILLS", "COMPETENCIES",
    "PROJECTS", "CERTIFICATIONS", "AWARDS", "REFERENCES",
)
DEFAULT_SECTION = "OTHER"


def _match_header(line: str) -> str | None:
    upper_line = line.strip().upper()
    for header in SECTION_HEADERS:
        if upper_line in (header, f"{header}:", f"## {header}", f"### {header}"):
            return header
    return None


def extract_resume_structure(text: str) -> dict[str, str]:
    """Group resume lines under the most recent recognised section header."""
    sections: dict[str, str] = {DEFAULT_SECTION: ""}
    current = DEFAULT_SECTION

    for line in (text or "").split("\n"):
        header = _match_header(line)
        if header:
            current = header
            sections[current] = ""
        elif line.strip():
            sections[current] += line + "\n"

    return sections
