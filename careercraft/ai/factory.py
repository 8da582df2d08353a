from functools import lru_cache

from careercraft.ai.config import load_ai_config
from careercraft.ai.types import AIClient

from careercraft.ai.providers.openai_provider import OpenAIProvider
from careercraft.ai.providers.gemini_provider import GeminiProvider


@lru_cache(maxsize=4)
def _build_client(provider: str, model: str) -> AIClient:
    if provider == "openai":
        return OpenAIProvider(model=model)

    if provider == "gemini":
        return GeminiProvider(model=model)

    raise ValueError(f"Unsupported AI_PROVIDER='{provider}'")


def get_ai_client() -> AIClient:
    cfg = load_ai_config()
    return _build_client(cfg.provider, cfg.model)
