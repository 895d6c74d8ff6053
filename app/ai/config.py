import os
from dataclasses import dataclass

_DEFAULT_MODELS = {
    "gemini": "gemini-1.5-flash",
    "openai": "gpt-4o-mini",
}


@dataclass(frozen=True)
class AIConfig:
    provider: str
    model: str


def load_ai_config() -> AIConfig:
    provider = os.getenv("AI_PROVIDER", "gemini").strip().lower()
    model = os.getenv("AI_MODEL", "").strip() or _DEFAULT_MODELS.get(provider, "gemini-1.5-flash")
    return AIConfig(provider=provider, model=model)
