import logging

from fastapi import APIRouter, Query, Request, status
from fastapi.responses import JSONResponse

from careercraft.core.validation import parse_body, read_json_body
from careercraft.schemas.learning import (
    AssessmentRequest,
    AssessmentResponse,
    AssessmentSubmission,
    VideoSearchResponse,
)
from careercraft.services.assessments import create_assessment, grade_assessment
from careercraft.services.video_search import get_youtube_video_id, search_videos

router = APIRouter()
logger = logging.getLogger(__name__)


def _parse_limit(raw: str | None) -> int | None:
    if raw is None or raw == "":
        return None
    return int(float(raw))


@router.get("/videos/search")
async def videos_search(
    title: str | None = Query(default=None),
    limit: str | None = Query(default=None),
    category: str | None = Query(default=None),
):
    try:
        videos = await search_videos(title, limit=_parse_limit(limit), category=category)
    except Exception:  # noqa: BLE001 - search never fails the page
        logger.exception("video_search_failed")
        videos = []
    return VideoSearchResponse(data=videos).model_dump(by_alias=True, exclude_none=True)


@router.get("/videos/id")
async def video_id(url: str = Query(default="")):
    return {"videoId": get_youtube_video_id(url)}


@router.post("/career/create-assessment")
async def career_create_assessment(request: Request):
    try:
        payload = parse_body(AssessmentRequest, await read_json_body(request))
        questions = create_assessment(payload.topic, payload.question_count)
    except Exception:  # noqa: BLE001
        logger.exception("create_assessment_failed")
        return JSONResponse(
            {"error": "Failed to create assessment"},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    return AssessmentResponse(assessment=questions).model_dump(by_alias=True)


@router.post("/career/submit-assessment")
async def career_submit_assessment(request: Request):
    try:
        payload = parse_body(AssessmentSubmission, await read_json_body(request))
    except ValueError as exc:
        return JSONResponse({"error": str(exc)}, status_code=status.HTTP_400_BAD_REQUEST)
    result = grade_assessment(payload)
    return result.model_dump(by_alias=True, exclude_none=True)
