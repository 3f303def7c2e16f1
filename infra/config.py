"""
Gateway configuration.

Environment-based provider discovery with sensible defaults.
With no credentials at all the gateway still runs, on static templates.
"""

import os
from dataclasses import dataclass
from typing import List

from inference import (
    ModelBackend,
    StaticTemplateBackend,
    OllamaModelBackend,
    ChatCompletionBackend,
    GROQ_BASE_URL,
    OPENAI_BASE_URL,
    GEMINI_BASE_URL,
)

from scholar.errors import ConfigurationError

from .registry import ProviderDescriptor, TransportKind, build_registry, has_credential


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "")
    try:
        return float(raw) if raw.strip() else default
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "")
    try:
        return int(raw) if raw.strip() else default
    except ValueError:
        return default


@dataclass
class GatewayConfig:
    """AI provider configuration from environment."""

    # Credential slots
    groq_api_key: str = ""
    openai_api_key: str = ""
    gemini_api_key: str = ""
    ollama_host: str = ""
    ollama_model: str = "llama3.1"

    # Sampling defaults
    max_tokens: int = 3000
    top_p: float = 0.8
    timeout_s: float = 60.0

    # Try lower-priority providers on transport failure
    failover: bool = False

    @classmethod
    def from_env(cls) -> "GatewayConfig":
        """
        Load configuration from environment variables.

        AI_MAX_TOKENS caps the per-task token budget; AI_TOP_P applies
        where a task does not set its own top_p.
        """
        return cls(
            groq_api_key=os.getenv("GROQ_API_KEY", ""),
            openai_api_key=os.getenv("OPENAI_API_KEY", ""),
            gemini_api_key=os.getenv("GEMINI_API_KEY", ""),
            ollama_host=os.getenv("OLLAMA_HOST", ""),
            ollama_model=os.getenv("OLLAMA_MODEL", "") or "llama3.1",
            max_tokens=_env_int("AI_MAX_TOKENS", 3000),
            top_p=_env_float("AI_TOP_P", 0.8),
            timeout_s=_env_float("AI_TIMEOUT_S", 60.0),
            failover=os.getenv("AI_FAILOVER", "false").lower() == "true",
        )

    def configured_providers(self) -> List[str]:
        """Names of the providers that have credentials, in registration order."""
        return [d.name for d in build_registry(self) if d.transport is not TransportKind.STATIC_TEMPLATE]

    def has_ai_provider(self) -> bool:
        return any(
            has_credential(v)
            for v in (self.groq_api_key, self.ollama_host, self.openai_api_key, self.gemini_api_key)
        )

    def create_backend(self, descriptor: ProviderDescriptor) -> ModelBackend:
        """Create the backend instance for a descriptor, by transport kind."""
        if descriptor.transport is TransportKind.STATIC_TEMPLATE:
            return StaticTemplateBackend()

        if descriptor.transport is TransportKind.LOCAL_HTTP:
            return OllamaModelBackend(
                model_name=descriptor.models.balanced,
                base_url=self.ollama_host,
            )

        hosted = {
            "groq": (self.groq_api_key, GROQ_BASE_URL),
            "openai": (self.openai_api_key, OPENAI_BASE_URL),
            "gemini": (self.gemini_api_key, GEMINI_BASE_URL),
        }
        if descriptor.name not in hosted:
            raise ConfigurationError(f"Unknown hosted provider: {descriptor.name}")
        api_key, base_url = hosted[descriptor.name]
        return ChatCompletionBackend(
            name=descriptor.name,
            api_key=api_key,
            base_url=base_url,
            default_model=descriptor.models.balanced,
        )


def get_config() -> GatewayConfig:
    """Get gateway configuration from the current environment."""
    return GatewayConfig.from_env()
