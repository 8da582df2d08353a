from __future__ import annotations

import hashlib
import json
import logging
import time

from careercraft.ai.types import AIClient
from careercraft.schemas.ats import MAX_DISPLAY_SUGGESTIONS, ScoreResponse, ScoreResult

logger = logging.getLogger(__name__)

ATS_SYSTEM_PROMPT = (
    "You are an ATS resume evaluator. Score resumes on 0-100 for general ATS best practices "
    "and job-market readiness. "
    "Return only: JSON with { score: integer 0-100, suggestions: array of clear, concise, "
    "actionable recommendations }. "
    "Keep suggestions short (no fluff), no more than 4 items, and focus on quantification, "
    "keywords, clarity, and structure."
)


def _short_hash(value: str) -> str:
    return hashlib.sha256(value.encode("utf-8")).hexdigest()[:12]


def build_ats_prompt(text: str) -> str:
    return (
        "Evaluate the following resume text strictly for ATS compliance, clarity, "
        "quantification of impact, and keyword coverage.\n\n"
        "Resume Text:\n"
        f"{text}"
        "\n\nReturn JSON only."
    )


def shape_score_result(result: ScoreResult) -> ScoreResponse:
    return ScoreResponse(
        ats_score=result.score,
        suggestions=list(result.suggestions)[:MAX_DISPLAY_SUGGESTIONS],
    )


async def score_resume(text: str, client: AIClient) -> ScoreResponse:
    started_at = time.perf_counter()
    result = await client.generate_object(
        system=ATS_SYSTEM_PROMPT,
        prompt=build_ats_prompt(text),
        schema=ScoreResult,
    )
    shaped = shape_score_result(result)
    logger.info(
        json.dumps(
            {
                "event": "ats_score",
                "text_len": len(text),
                "text_hash": _short_hash(text),
                "score": shaped.ats_score,
                "suggestions": len(shaped.suggestions),
                "duration_ms": int((time.perf_counter() - started_at) * 1000),
            }
        )
    )
    return shaped
