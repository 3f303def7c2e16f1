"""
AI Provider Gateway.

Flow per call:
  build_prompt → backend.invoke → normalize → (on any failure) fallback

Guarantees:
- generate() never raises for provider or shape failures; it always
  returns a GenerationOutcome whose result satisfies the task contract
- The active provider is chosen once, at construction
- One attempt per provider. With failover enabled, a transport failure
  moves on to the next provider by priority; a shape failure does not
- No shared mutable state after construction, so concurrent calls need
  no locking
"""

import logging
import uuid
from typing import Any, Dict, Literal, Mapping, Optional, Sequence

from pydantic import BaseModel

from inference import ModelBackend, ModelRequest
from infra.registry import ProviderDescriptor, TransportKind, build_registry, rank, select_active

from .errors import ConfigurationError, ShapeError
from .fallbacks import fallback_for
from .normalizer import normalize
from .prompting import build_prompt
from .tasks import GenerationRequest, TaskType, contract_for

logger = logging.getLogger(__name__)


class GenerationOutcome(BaseModel):
    """Task result plus where it came from."""

    task: TaskType
    result: Dict[str, Any]
    source: Literal["provider", "fallback"]
    provider: str
    reason: Optional[str] = None


class AIGateway:
    """
    Provider-agnostic content generation with guaranteed result shape.

    Usage:
        gateway = AIGateway.from_config(GatewayConfig.from_env())
        outcome = await gateway.generate(TaskType.RESUME, {"fullName": "Asha Rao"}, country="IN")
    """

    def __init__(
        self,
        registry: Sequence[ProviderDescriptor],
        backends: Mapping[str, ModelBackend],
        failover: bool = False,
        max_tokens: Optional[int] = None,
        default_top_p: Optional[float] = None,
        timeout_s: float = 60.0,
    ):
        self.registry = tuple(registry)
        self.active = select_active(self.registry)

        missing = [d.name for d in self.registry if d.name not in backends]
        if missing:
            raise ConfigurationError(f"No backend for provider(s): {', '.join(missing)}")

        self._backends = dict(backends)
        self.failover = failover
        self._chain = rank(self.registry) if failover else (self.active,)
        self.max_tokens = max_tokens
        self.default_top_p = default_top_p
        self.timeout_s = timeout_s

    @classmethod
    def from_config(cls, config) -> "AIGateway":
        """Build registry and backends from a GatewayConfig."""
        registry = build_registry(config)
        backends = {d.name: config.create_backend(d) for d in registry}
        return cls(
            registry,
            backends,
            failover=config.failover,
            max_tokens=config.max_tokens,
            default_top_p=config.top_p,
            timeout_s=config.timeout_s,
        )

    # ──────────────────────────────────────────────────────────
    # PRIMARY INTERFACE
    # ──────────────────────────────────────────────────────────

    async def generate(self, task: TaskType, profile: Optional[Dict[str, Any]] = None, **options: Any) -> GenerationOutcome:
        """
        Generate a task result for a profile.

        Options: target_role, industry, country, target, context.
        """
        request = GenerationRequest(task=task, profile=profile or {}, **options)
        return await self.run(request)

    async def run(self, request: GenerationRequest) -> GenerationOutcome:
        try:
            return await self._run(request)
        except Exception as e:
            logger.error(f"Unexpected gateway error for task={request.task.value}: {type(e).__name__}", exc_info=True)

        try:
            return self._fallback(request, self.active.name, "unexpected_error")
        except Exception as e:
            # profile contents broke the fallback as well: serve it without them
            logger.error(f"Fallback failed for task={request.task.value}: {type(e).__name__}", exc_info=True)
            return self._fallback(GenerationRequest(task=request.task), self.active.name, "unexpected_error")

    async def _run(self, request: GenerationRequest) -> GenerationOutcome:
        contract = contract_for(request.task)
        prompt = build_prompt(request)
        trace_id = str(uuid.uuid4())

        provider = self.active.name
        reason = "static_template"
        attempted = False

        for descriptor in self._chain:
            if descriptor.transport is TransportKind.STATIC_TEMPLATE:
                # keep the last provider failure, if any, as the cause
                if not attempted:
                    provider, reason = descriptor.name, "static_template"
                break

            provider = descriptor.name
            attempted = True
            model_request = ModelRequest(
                task=request.task.value,
                prompt=prompt,
                model=descriptor.models.for_tier(contract.model_tier),
                temperature=contract.temperature,
                max_tokens=min(contract.max_tokens, self.max_tokens) if self.max_tokens else contract.max_tokens,
                top_p=contract.top_p if contract.top_p is not None else self.default_top_p,
                timeout_s=self.timeout_s,
                trace_id=trace_id,
            )
            response = await self._backends[descriptor.name].invoke(model_request)

            if response.status == "success":
                try:
                    result = normalize(response.output or "", contract.required_keys)
                except ShapeError as e:
                    logger.warning(
                        f"Unusable {request.task.value} output from {provider}: {e.reason}",
                        extra={"trace_id": trace_id},
                    )
                    reason = "shape_error"
                    break

                logger.info(f"Generated {request.task.value} with {provider} [trace_id={trace_id}]")
                return GenerationOutcome(
                    task=request.task,
                    result=result,
                    source="provider",
                    provider=provider,
                )

            reason = response.error_type or "backend_unavailable"
            if response.status == "skipped":
                break
            logger.warning(
                f"Provider {provider} failed for {request.task.value}: {reason}",
                extra={"trace_id": trace_id},
            )

        return self._fallback(request, provider, reason)

    def _fallback(self, request: GenerationRequest, provider: str, reason: str) -> GenerationOutcome:
        if reason != "static_template":
            logger.warning(f"Serving fallback {request.task.value} (provider={provider}, reason={reason})")
        return GenerationOutcome(
            task=request.task,
            result=fallback_for(request),
            source="fallback",
            provider=provider,
            reason=reason,
        )

    # ──────────────────────────────────────────────────────────
    # TASK SHORTCUTS (plain result dicts)
    # ──────────────────────────────────────────────────────────

    async def generate_resume(self, profile: Dict[str, Any]) -> Dict[str, Any]:
        outcome = await self.generate(TaskType.RESUME, profile)
        return outcome.result

    async def optimize_profile(self, profile: Dict[str, Any]) -> Dict[str, Any]:
        outcome = await self.generate(TaskType.PROFILE_OPTIMIZATION, profile)
        return outcome.result

    async def generate_networking_suggestions(
        self, profile: Dict[str, Any], target_role: str = "Software Developer"
    ) -> Dict[str, Any]:
        outcome = await self.generate(TaskType.NETWORKING_SUGGESTIONS, profile, target_role=target_role)
        return outcome.result

    async def generate_connection_message(
        self, target: Dict[str, Any], profile: Dict[str, Any], context: str = "general"
    ) -> Dict[str, Any]:
        outcome = await self.generate(TaskType.CONNECTION_MESSAGE, profile, target=target, context=context)
        return outcome.result

    def describe(self) -> Dict[str, Any]:
        """Non-sensitive view of the provider setup."""
        return {
            "active_provider": self.active.name,
            "failover": self.failover,
            "providers": [
                {
                    "name": d.name,
                    "transport": d.transport.value,
                    "cost_class": d.cost_class,
                    "priority": d.priority,
                }
                for d in rank(self.registry)
            ],
        }

    def __repr__(self) -> str:
        return f"AIGateway(active={self.active.name}, providers={[d.name for d in self.registry]}, failover={self.failover})"
