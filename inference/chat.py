"""
Hosted chat-completion backend.

Groq, OpenAI and Gemini all expose an OpenAI-compatible
POST {base_url}/chat/completions endpoint, so a single backend class
serves the three hosted providers; only the base URL, the credential
and the model names differ.

  Provider   Base URL
  ─────────  ──────────────────────────────────────────────────────
  Groq       https://api.groq.com/openai/v1
  OpenAI     https://api.openai.com/v1
  Gemini     https://generativelanguage.googleapis.com/v1beta/openai

Invariants:
- Single-turn conversation: exactly one "user" message
- One attempt per call, no retries (metered APIs)
- API keys only travel in the Authorization header, never logged
- Never raises: all failures return a non-success ModelResponse
"""

import logging
from typing import Any, Dict, Optional

import httpx

from .base import ModelBackend
from .types import ModelRequest, ModelResponse

logger = logging.getLogger(__name__)

GROQ_BASE_URL = "https://api.groq.com/openai/v1"
OPENAI_BASE_URL = "https://api.openai.com/v1"
GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai"


def _extract_message_text(data: Any) -> Optional[str]:
    """Pull choices[0].message.content out of a chat-completion envelope."""
    if not isinstance(data, dict):
        return None
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    message = choices[0].get("message") if isinstance(choices[0], dict) else None
    if not isinstance(message, dict):
        return None
    content = message.get("content")
    if not isinstance(content, str) or not content.strip():
        return None
    return content.strip()


class ChatCompletionBackend(ModelBackend):
    """OpenAI-compatible chat-completion client for a hosted provider."""

    def __init__(self, name: str, api_key: str, base_url: str, default_model: str = ""):
        self.name = name
        self._api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.default_model = default_model

    def _build_headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

    def _build_payload(self, request: ModelRequest) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "model": request.model or self.default_model,
            "messages": [{"role": "user", "content": request.prompt}],
            "temperature": request.temperature,
            "max_tokens": request.max_tokens,
        }
        if request.top_p is not None:
            payload["top_p"] = request.top_p
        return payload

    async def invoke(self, request: ModelRequest) -> ModelResponse:
        payload = self._build_payload(request)
        base_metadata = {
            "backend": self.name,
            "model": payload["model"],
            "trace_id": request.trace_id,
        }

        try:
            async with httpx.AsyncClient(timeout=request.timeout_s) as client:
                response = await client.post(
                    f"{self.base_url}/chat/completions",
                    json=payload,
                    headers=self._build_headers(),
                )
                response.raise_for_status()

        except httpx.TimeoutException:
            logger.warning(f"{self.name} request timed out after {request.timeout_s}s")
            return ModelResponse(
                status="recoverable_error",
                error_type="timeout",
                metadata=base_metadata,
            )

        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.warning(f"{self.name} returned HTTP {status_code}")
            return ModelResponse(
                status="recoverable_error" if status_code in (429, 500, 502, 503, 504) else "fatal_error",
                error_type="http_error",
                metadata={**base_metadata, "status_code": status_code},
            )

        except Exception as e:
            logger.warning(f"{self.name} unavailable: {type(e).__name__}")
            return ModelResponse(
                status="fatal_error",
                error_type="backend_unavailable",
                metadata={**base_metadata, "error": type(e).__name__},
            )

        try:
            data = response.json()
        except ValueError:
            data = None

        text = _extract_message_text(data)
        if text is None:
            logger.warning(f"{self.name} returned an unexpected response envelope")
            return ModelResponse(
                status="fatal_error",
                error_type="invalid_envelope",
                metadata=base_metadata,
            )

        usage = data.get("usage") or {}
        return ModelResponse(
            status="success",
            output=text,
            metadata={**base_metadata, "usage": usage},
        )
