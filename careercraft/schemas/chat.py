from pydantic import BaseModel, field_validator


class ChatRequest(BaseModel):
    prompt: str

    @field_validator("prompt")
    @classmethod
    def _required(cls, value: str) -> str:
        if len(value) < 1:
            raise ValueError("Prompt is required")
        return value


class ChatResponse(BaseModel):
    response: str
