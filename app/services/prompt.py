from __future__ import annotations

from app.ai.types import ChatMessage
from app.schemas.prediction import ProfileInput

NOT_SPECIFIED = "Not specified"

_AGE_GROUP_SECTIONS: dict[str, tuple[tuple[str, str], ...]] = {
    "student": (
        ("Favorite Subjects", "favorite_subjects"),
        ("Extracurricular Activities", "extracurriculars"),
    ),
    "college": (
        ("Major", "major"),
        ("Minors/Secondary Fields", "minors"),
        ("Internships/Work Experience", "internships"),
    ),
    "earlyCareer": (
        ("Work Experience", "work_experience"),
        ("Professional Achievements", "achievements"),
        ("Certifications/Specialized Training", "certifications"),
    ),
    "careerChange": (
        ("Reason for Career Change", "reason_for_change"),
        ("Transferable Skills", "transferable_skills"),
        ("Desired Work Environment", "desired_work_environment"),
    ),
}
_AGE_GROUP_SECTIONS["midCareer"] = _AGE_GROUP_SECTIONS["earlyCareer"]
_AGE_GROUP_SECTIONS["lateCareer"] = _AGE_GROUP_SECTIONS["earlyCareer"]

_COMMON_SECTIONS = (
    ("Skills", "skills"),
    ("Hobbies", "hobbies"),
    ("Interests", "interests"),
    ("Languages Known", "languages"),
)

_SYSTEM_PROMPT = (
    "You are a career counselor. Analyze personal profiles and give practical, "
    "specific career guidance in plain text without markdown."
)


def _block(heading: str, value: str | None) -> str:
    return f"{heading}:\n{value or NOT_SPECIFIED}\n"


def build_user_bio(profile: ProfileInput) -> str:
    lines = [
        f"Age Group: {profile.age_group or NOT_SPECIFIED}",
        f"Education: {profile.education or NOT_SPECIFIED}",
        f"Work Style Preference: {profile.work_style or NOT_SPECIFIED}",
        "",
    ]
    if profile.project_url:
        lines.extend([f"Portfolio/Project URL: {profile.project_url}", ""])

    sections = _COMMON_SECTIONS + _AGE_GROUP_SECTIONS.get(profile.age_group or "", ())
    for heading, attr in sections:
        lines.append(_block(heading, getattr(profile, attr)))
    return "\n".join(lines).strip() + "\n"


def build_prediction_messages(profile: ProfileInput, target_count: int) -> list[ChatMessage]:
    bio = build_user_bio(profile)
    user = (
        "Analyze the following personal profile and provide comprehensive career guidance.\n\n"
        "IMPORTANT REQUIREMENTS:\n"
        f"- Suggest EXACTLY {target_count} unique and distinct career paths that match the profile\n"
        "- Each career must be specific (not a general category)\n"
        "- Each career must have a unique match percentage between 70-98%\n"
        "- Give an estimated IQ between 90 and 150 based on the profile\n"
        "- If a project/portfolio URL is provided, use it for additional insight\n"
        "- Consider the person's age group and life stage\n\n"
        "Use exactly this structure:\n"
        "ESTIMATED IQ: <number>\n\n"
        "CAREER RECOMMENDATIONS:\n"
        "1. <Career title>\n"
        "2. <Career title>\n\n"
        "DETAILED ANALYSIS:\n"
        "Career 1: <Career title> (Match: <percentage>%)\n"
        "Skills Alignment: current relevant skills\n"
        "Growth Potential: industry outlook and opportunities\n"
        "Work-Life Balance: schedule and environment fit\n"
        "Required Skills: skills to develop\n"
        "Salary Range: expected compensation\n"
        "Career Progression: clear 5-10 year path\n\n"
        f"Personal Profile:\n{bio}\n"
        "Keep descriptions concise and actionable."
    )
    return [
        ChatMessage(role="system", content=_SYSTEM_PROMPT),
        ChatMessage(role="user", content=user),
    ]
