import json
import logging
import time

from careercraft.ai.types import AIClient
from careercraft.core.config import settings

logger = logging.getLogger("careercraft.chat")


async def ask(prompt: str, client: AIClient) -> str:
    started_at = time.perf_counter()
    text = await client.generate_text(prompt, temperature=settings.chat_temperature)
    logger.info(
        json.dumps(
            {
                "event": "chat_complete",
                "prompt_len": len(prompt),
                "response_len": len(text),
                "duration_ms": int((time.perf_counter() - started_at) * 1000),
            }
        )
    )
    return text
