from __future__ import annotations

import os
from typing import Any, Optional, Sequence

import httpx

from app.ai.types import ChatMessage

_DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"


class GeminiProvider:
    """Gemini generateContent over REST."""

    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: float = 30.0,
        temperature: float = 0.7,
        max_output_tokens: int = 2048,
    ):
        self._model = model
        self._temperature = temperature
        self._max_output_tokens = max_output_tokens
        key = (api_key or os.getenv("GOOGLE_AI_API_KEY") or os.getenv("GEMINI_API_KEY") or "").strip()
        if not key:
            raise RuntimeError("GOOGLE_AI_API_KEY is missing")
        self._api_key = key
        self._base_url = (base_url or os.getenv("GEMINI_BASE_URL") or _DEFAULT_BASE_URL).rstrip("/")
        self._timeout_s = float(os.getenv("GEMINI_TIMEOUT_S", str(timeout_s)))

    def _payload(self, messages: Sequence[ChatMessage]) -> dict[str, Any]:
        system_parts = [{"text": m.content} for m in messages if m.role == "system"]
        contents = [
            {
                "role": "model" if m.role == "assistant" else "user",
                "parts": [{"text": m.content}],
            }
            for m in messages
            if m.role != "system"
        ]
        payload: dict[str, Any] = {
            "contents": contents,
            "generationConfig": {
                "temperature": self._temperature,
                "maxOutputTokens": self._max_output_tokens,
            },
        }
        if system_parts:
            payload["systemInstruction"] = {"parts": system_parts}
        return payload

    async def complete(self, messages: Sequence[ChatMessage]) -> str:
        url = f"{self._base_url}/models/{self._model}:generateContent"
        async with httpx.AsyncClient(timeout=self._timeout_s) as client:
            response = await client.post(
                url,
                params={"key": self._api_key},
                json=self._payload(messages),
            )
            response.raise_for_status()
            data = response.json()
        return extract_candidate_text(data)


def extract_candidate_text(data: dict[str, Any]) -> str:
    candidates = data.get("candidates") or []
    if not candidates:
        return ""
    parts = (candidates[0].get("content") or {}).get("parts") or []
    return "".join(str(part.get("text", "")) for part in parts if isinstance(part, dict)).strip()
