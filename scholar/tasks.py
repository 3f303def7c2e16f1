"""
Task contracts.

Each generation task declares the top-level keys a result must carry
(the shape contract), the model tier to use and its sampling knobs.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field

from .regions import RegionProfile, resolve_region


class TaskType(str, Enum):
    RESUME = "resume"
    PROFILE_OPTIMIZATION = "profile_optimization"
    NETWORKING_SUGGESTIONS = "networking_suggestions"
    CONNECTION_MESSAGE = "connection_message"


@dataclass(frozen=True)
class TaskContract:
    required_keys: Tuple[str, ...]
    model_tier: str            # fast | balanced | creative
    temperature: float
    max_tokens: int
    top_p: Optional[float] = None


CONTRACTS: Dict[TaskType, TaskContract] = {
    TaskType.RESUME: TaskContract(
        required_keys=("contact", "summary"),
        model_tier="balanced",
        temperature=0.7,
        max_tokens=3000,
        top_p=0.8,
    ),
    TaskType.PROFILE_OPTIMIZATION: TaskContract(
        required_keys=("profileScore", "headline", "quickWins"),
        model_tier="balanced",
        temperature=0.7,
        max_tokens=2500,
    ),
    TaskType.NETWORKING_SUGGESTIONS: TaskContract(
        required_keys=("targetCompanies", "connectionMessages"),
        model_tier="creative",
        temperature=0.8,
        max_tokens=2000,
    ),
    TaskType.CONNECTION_MESSAGE: TaskContract(
        required_keys=("messages",),
        model_tier="fast",
        temperature=0.6,
        max_tokens=800,
    ),
}


def contract_for(task: TaskType) -> TaskContract:
    return CONTRACTS[TaskType(task)]


class GenerationRequest(BaseModel):
    """
    One generation call. Built per request and never persisted here.

    `profile` stays loosely typed: it carries whatever the caller has
    (camelCase keys as sent by the dashboard).
    """

    task: TaskType
    profile: Dict[str, Any] = Field(default_factory=dict)
    target_role: Optional[str] = None
    industry: Optional[str] = None
    country: Optional[str] = None
    target: Dict[str, Any] = Field(default_factory=dict)
    context: Optional[str] = None

    @property
    def effective_target_role(self) -> str:
        return self.target_role or self.profile.get("targetRole") or "Software Developer"

    @property
    def effective_industry(self) -> str:
        return self.industry or self.profile.get("industry") or "Technology"

    @property
    def region(self) -> RegionProfile:
        return resolve_region(self.country or self.profile.get("country"))
