import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from careercraft.ai.factory import get_ai_client
from careercraft.core.rate_limit import rate_limit
from careercraft.core.validation import parse_body, read_json_body
from careercraft.schemas.ats import ScoreRequest
from careercraft.services.ats_service import score_resume

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/ats/score")
@rate_limit()
async def ats_score(request: Request):
    # Validation, provider and network failures all surface as 400.
    try:
        payload = parse_body(ScoreRequest, await read_json_body(request))
        result = await score_resume(payload.text, get_ai_client())
    except Exception as exc:  # noqa: BLE001
        message = str(exc) or "ATS scoring failed"
        logger.warning("ats_score_failed: %s", message)
        return JSONResponse({"error": message}, status_code=status.HTTP_400_BAD_REQUEST)
    return result.model_dump(by_alias=True)
