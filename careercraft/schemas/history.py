from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

HistoryEventType = Literal[
    "resume-upload",
    "resume-review",
    "resume-score",
    "resume-analyze-ai",
    "roadmap-generated",
    "job-search",
    "job-score",
    "job-save",
    "job-apply",
]


class HistoryRecord(BaseModel):
    id: str
    type: HistoryEventType
    at: str
    meta: dict[str, Any] | None = None


class HistoryEntryRequest(BaseModel):
    type: HistoryEventType
    meta: dict[str, Any] | None = Field(default=None)
