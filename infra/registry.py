"""
Provider capability registry and selector.

Known providers, in registration order (priority in brackets):

  Provider   Transport         Credential slot     Cost
  ─────────  ────────────────  ──────────────────  ─────────
  groq       hosted_api        GROQ_API_KEY        free-tier  [100]
  ollama     local_http        OLLAMA_HOST         local      [90]
  openai     hosted_api        OPENAI_API_KEY      paid       [60]
  gemini     hosted_api        GEMINI_API_KEY      paid       [70]
  template   static_template   (always present)    none       [0]

The registry is built once per process from configuration and never
mutated. The template descriptor is always appended, so selection can
only fail on a hand-built empty registry.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Sequence, Tuple

from scholar.errors import ConfigurationError

if TYPE_CHECKING:
    from infra.config import GatewayConfig

logger = logging.getLogger(__name__)


class TransportKind(str, Enum):
    HOSTED_API = "hosted_api"
    LOCAL_HTTP = "local_http"
    STATIC_TEMPLATE = "static_template"


@dataclass(frozen=True)
class ModelSelection:
    fast: str
    balanced: str
    creative: str

    def for_tier(self, tier: str) -> str:
        if tier == "fast":
            return self.fast
        if tier == "creative":
            return self.creative
        return self.balanced


@dataclass(frozen=True)
class ProviderDescriptor:
    name: str
    transport: TransportKind
    cost_class: str
    priority: int
    models: ModelSelection


GROQ_MODELS = ModelSelection(
    fast="llama-3.1-8b-instant",
    balanced="llama-3.1-70b-versatile",
    creative="mixtral-8x7b-32768",
)
OPENAI_MODELS = ModelSelection(fast="gpt-4o-mini", balanced="gpt-4o-mini", creative="gpt-4o")
GEMINI_MODELS = ModelSelection(fast="gemini-1.5-flash", balanced="gemini-1.5-flash", creative="gemini-1.5-pro")
TEMPLATE_MODELS = ModelSelection(fast="template", balanced="template", creative="template")

TEMPLATE_DESCRIPTOR = ProviderDescriptor(
    name="template",
    transport=TransportKind.STATIC_TEMPLATE,
    cost_class="none",
    priority=0,
    models=TEMPLATE_MODELS,
)


def has_credential(value: str) -> bool:
    """Empty values and "your_..." placeholders from .env.example do not count."""
    return bool(value) and not value.strip().startswith("your_")


def build_registry(config: "GatewayConfig") -> Tuple[ProviderDescriptor, ...]:
    """Inspect the credential slots and describe every usable provider."""
    registry = []

    if has_credential(config.groq_api_key):
        registry.append(ProviderDescriptor("groq", TransportKind.HOSTED_API, "free-tier", 100, GROQ_MODELS))

    if has_credential(config.ollama_host):
        model = config.ollama_model
        registry.append(
            ProviderDescriptor("ollama", TransportKind.LOCAL_HTTP, "local", 90, ModelSelection(model, model, model))
        )

    if has_credential(config.openai_api_key):
        registry.append(ProviderDescriptor("openai", TransportKind.HOSTED_API, "paid", 60, OPENAI_MODELS))

    if has_credential(config.gemini_api_key):
        registry.append(ProviderDescriptor("gemini", TransportKind.HOSTED_API, "paid", 70, GEMINI_MODELS))

    registry.append(TEMPLATE_DESCRIPTOR)
    return tuple(registry)


def rank(registry: Sequence[ProviderDescriptor]) -> Tuple[ProviderDescriptor, ...]:
    """Registry in selection order: priority descending, registration order on ties."""
    return tuple(sorted(registry, key=lambda d: d.priority, reverse=True))


def select_active(registry: Sequence[ProviderDescriptor]) -> ProviderDescriptor:
    """
    Pick the provider used for the lifetime of the gateway.

    Raises:
        ConfigurationError: If the registry is empty.
    """
    if not registry:
        raise ConfigurationError("No AI provider descriptors available")
    active = rank(registry)[0]
    logger.info(f"Active AI provider: {active.name} (priority={active.priority}, transport={active.transport.value})")
    return active
