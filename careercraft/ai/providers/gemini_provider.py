from typing import Optional

from careercraft.ai.providers.openai_provider import OpenAIProvider


class GeminiProvider(OpenAIProvider):
    """Gemini models served through Google's OpenAI-compatible endpoint."""

    api_key_env = "GEMINI_API_KEY"
    base_url_env = "GEMINI_BASE_URL"
    default_base_url: Optional[str] = "https://generativelanguage.googleapis.com/v1beta/openai/"
