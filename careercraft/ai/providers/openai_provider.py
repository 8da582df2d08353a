from __future__ import annotations

import json
import os
from typing import Optional

from openai import AsyncOpenAI
from pydantic import ValidationError

from careercraft.ai.types import AIProviderError, SchemaT


def _looks_like_placeholder(value: str) -> bool:
    lower = value.strip().lower()
    return lower.startswith("your_") or lower.startswith("replace_") or lower in {"changeme", "todo"}


class OpenAIProvider:
    api_key_env = "OPENAI_API_KEY"
    base_url_env = "OPENAI_BASE_URL"
    default_base_url: Optional[str] = None

    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: float = 30.0,
        max_retries: int = 2,
        temperature: float = 0.2,
    ):
        self._model = model
        self._temperature = temperature
        key = (api_key or os.getenv(self.api_key_env) or "").strip()
        if not key or _looks_like_placeholder(key):
            raise AIProviderError(f"{self.api_key_env} is missing", code="missing_api_key")

        self._client = AsyncOpenAI(
            api_key=key,
            base_url=(base_url or os.getenv(self.base_url_env) or self.default_base_url),
            timeout=float(os.getenv("OPENAI_TIMEOUT_S", str(timeout_s))),
            max_retries=int(os.getenv("OPENAI_MAX_RETRIES", str(max_retries))),
        )

    @property
    def model(self) -> str:
        return self._model

    async def _complete(self, messages: list[dict[str, str]], **kwargs) -> str:
        response = await self._client.chat.completions.create(
            model=self._model,
            messages=messages,
            **kwargs,
        )
        content = response.choices[0].message.content if response.choices else ""
        if not content:
            raise AIProviderError("The AI model returned an empty response.", code="empty_response")
        return str(content)

    async def generate_text(
        self,
        prompt: str,
        *,
        system: str | None = None,
        temperature: float | None = None,
    ) -> str:
        messages = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})
        return await self._complete(
            messages,
            temperature=self._temperature if temperature is None else temperature,
        )

    async def generate_object(
        self,
        *,
        system: str,
        prompt: str,
        schema: type[SchemaT],
    ) -> SchemaT:
        schema_hint = json.dumps(schema.model_json_schema(), ensure_ascii=False)
        content = await self._complete(
            [
                {
                    "role": "system",
                    "content": f"{system}\n\nRespond with a JSON object matching this JSON schema:\n{schema_hint}",
                },
                {"role": "user", "content": prompt},
            ],
            temperature=self._temperature,
            response_format={"type": "json_object"},
        )
        try:
            return schema.model_validate_json(content)
        except ValidationError as exc:
            raise AIProviderError(
                "The AI model response did not match the expected schema.",
                code="invalid_output",
            ) from exc
