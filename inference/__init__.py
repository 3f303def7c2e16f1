"""
Provider boundary layer for LLM inference.

This package provides a clean abstraction for prompt invocation,
allowing the gateway to remain agnostic of the underlying backend.

Supported backends:
- ChatCompletionBackend: Hosted OpenAI-compatible APIs (Groq, OpenAI, Gemini)
- OllamaModelBackend: Local Ollama /api/generate
- StaticTemplateBackend: No model at all; signals "use the fallback"

Example usage:
    from inference import StaticTemplateBackend, ModelRequest

    backend = StaticTemplateBackend()
    request = ModelRequest(task="resume", prompt="Generate a resume...")
    response = await backend.invoke(request)
"""

from .types import ModelRequest, ModelResponse, ModelStatus
from .base import ModelBackend
from .stub import StaticTemplateBackend
from .ollama import OllamaModelBackend
from .chat import ChatCompletionBackend, GROQ_BASE_URL, OPENAI_BASE_URL, GEMINI_BASE_URL

__all__ = [
    "ModelRequest",
    "ModelResponse",
    "ModelStatus",
    "ModelBackend",
    "StaticTemplateBackend",
    "OllamaModelBackend",
    "ChatCompletionBackend",
    "GROQ_BASE_URL",
    "OPENAI_BASE_URL",
    "GEMINI_BASE_URL",
]
