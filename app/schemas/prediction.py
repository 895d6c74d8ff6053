from __future__ import annotations

import re
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

AgeGroup = Literal["student", "college", "earlyCareer", "midCareer", "lateCareer", "careerChange"]
ResultSource = Literal["model", "fallback"]

MATCH_MIN = 70
MATCH_MAX = 98

_LIST_SPLIT_RE = re.compile(r"[,;\n]+")


def _first_item(value: str | None) -> str | None:
    if not value:
        return None
    for item in _LIST_SPLIT_RE.split(value):
        cleaned = item.strip()
        if cleaned:
            return cleaned
    return None


class ProfileInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", str_strip_whitespace=True)

    age_group: str | None = Field(default=None, alias="ageGroup")
    education: str | None = None
    work_style: str | None = Field(default=None, alias="workStyle")
    project_url: str | None = Field(default=None, alias="projectUrl")
    skills: str | None = None
    hobbies: str | None = None
    interests: str | None = None
    languages: str | None = None
    favorite_subjects: str | None = Field(default=None, alias="favoriteSubjects")
    extracurriculars: str | None = None
    major: str | None = None
    minors: str | None = None
    internships: str | None = None
    work_experience: str | None = Field(default=None, alias="workExperience")
    achievements: str | None = None
    certifications: str | None = None
    reason_for_change: str | None = Field(default=None, alias="reasonForChange")
    transferable_skills: str | None = Field(default=None, alias="transferableSkills")
    desired_work_environment: str | None = Field(default=None, alias="desiredWorkEnvironment")

    def first_skill(self) -> str | None:
        return _first_item(self.skills)

    def first_interest(self) -> str | None:
        return _first_item(self.interests)

    def keyword_text(self) -> str:
        """Lowercased text that keyword rules are matched against."""
        parts = [self.skills, self.interests, self.hobbies]
        return " ".join(part for part in parts if part).lower()


class DetailRecord(BaseModel):
    title: str
    match: int
    description: str = ""
    synthetic: bool = False

    @field_validator("match")
    @classmethod
    def _validate_match(cls, value: int) -> int:
        if value < MATCH_MIN or value > MATCH_MAX:
            raise ValueError(f"match must be between {MATCH_MIN} and {MATCH_MAX}")
        return value


class PredictionResult(BaseModel):
    estimate: int
    labels: list[str] = Field(default_factory=list)
    details: list[DetailRecord] = Field(default_factory=list)
    source: ResultSource = "model"


class LimitReachedResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    error: str
    limit_reached: bool = Field(default=True, alias="limitReached")


class GuestSessionResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    guest_id: str = Field(alias="guestId")
    predictions_count: int = Field(alias="predictionsCount")
    limit: int
    remaining: int
