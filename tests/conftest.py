"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

AI_ENV_VARS = (
    "GROQ_API_KEY",
    "OPENAI_API_KEY",
    "GEMINI_API_KEY",
    "OLLAMA_HOST",
    "OLLAMA_MODEL",
    "AI_MAX_TOKENS",
    "AI_TOP_P",
    "AI_TIMEOUT_S",
    "AI_FAILOVER",
)


@pytest.fixture
def no_ai_env(monkeypatch):
    """Environment with no AI provider credentials at all."""
    for name in AI_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
