from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Verdict = Literal["Good match", "Partial match", "Not recommended"]


class ResumeSections(BaseModel):
    summary: str = ""
    experience: str = ""
    education: str = ""
    skills: str = ""


class ResumeAnalysis(BaseModel):
    score: int = Field(ge=0, le=100)
    pros: list[str] = Field(default_factory=list)
    cons: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)


class MatchRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    resume_text: str = Field(alias="resumeText", min_length=1)
    jd_text: str = Field(alias="jdText", min_length=1)


class MatchResult(BaseModel):
    score: int = Field(ge=0, le=100)
    verdict: Verdict
    pros: list[str] = Field(default_factory=list)
    cons: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
