import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from careercraft.ai.factory import get_ai_client
from careercraft.core.rate_limit import rate_limit
from careercraft.core.validation import parse_body, read_json_body
from careercraft.schemas.chat import ChatRequest, ChatResponse
from careercraft.services.chat_service import ask

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/chat/ask")
@rate_limit()
async def chat_ask(request: Request):
    try:
        payload = parse_body(ChatRequest, await read_json_body(request))
        text = await ask(payload.prompt, get_ai_client())
    except Exception as exc:  # noqa: BLE001
        logger.exception("chat_ask_failed")
        message = str(exc) or "Failed to get a valid response from the AI model"
        return JSONResponse({"error": message}, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return ChatResponse(response=text).model_dump()
