from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

MIN_RESUME_CHARS = 30
MAX_DISPLAY_SUGGESTIONS = 4


class ScoreRequest(BaseModel):
    text: str

    @field_validator("text")
    @classmethod
    def _long_enough(cls, value: str) -> str:
        if len(value) < MIN_RESUME_CHARS:
            raise ValueError("Resume text is too short to score")
        return value


class ScoreResult(BaseModel):
    """Structured object requested from the AI model."""

    score: int = Field(ge=0, le=100)
    suggestions: list[str] = Field(min_length=1, max_length=6)


class ScoreResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ats_score: int = Field(alias="atsScore", ge=0, le=100)
    suggestions: list[str] = Field(min_length=1, max_length=MAX_DISPLAY_SUGGESTIONS)
