from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class VideoResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    channel_title: str | None = Field(default=None, alias="channelTitle")
    thumbnail: str
    duration: int | None = None
    view_count: int | None = Field(default=None, alias="viewCount")


class VideoSearchResponse(BaseModel):
    data: list[VideoResult] = Field(default_factory=list)


class AssessmentQuestion(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    question: str
    options: list[str]
    correct_answer: str = Field(alias="correctAnswer")


class AssessmentRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    topic: str
    question_count: int = Field(default=5, alias="questionCount")
    # Sent by the client but not used to filter questions yet.
    level: str | None = None


class AssessmentResponse(BaseModel):
    assessment: list[AssessmentQuestion]


class AssessmentSubmission(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    course_id: str = Field(alias="courseId", min_length=1)
    course_title: str | None = Field(default=None, alias="courseTitle")
    questions: list[AssessmentQuestion] = Field(min_length=1)
    # Keyed by question index; JSON object keys arrive as strings.
    answers: dict[int, str] = Field(default_factory=dict)


class Badge(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    description: str
    earned_at: int = Field(alias="earnedAt")
    course_id: str = Field(alias="courseId")


class AssessmentResult(BaseModel):
    passed: bool
    score: int = Field(ge=0, le=100)
    badge: Badge | None = None
