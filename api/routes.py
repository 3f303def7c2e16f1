"""
Generation API routes.

Thin HTTP layer over the AI gateway:
  request body → GenerationRequest → gateway.run → JSON envelope

Every route answers 200 with a well-shaped result, even when the provider
fails; "source" tells the client whether the content is AI-generated or
the static template. Logs carry task metadata only, never names or emails.
"""

import logging
from typing import Annotated, Any, Dict, List, Optional, Union

from fastapi import APIRouter, Depends, Request
from pydantic import AfterValidator, BaseModel, Field

from infra.bootstrap import bootstrap_gateway
from scholar.gateway import AIGateway, GenerationOutcome
from scholar.regions import SUPPORTED_COUNTRIES
from scholar.tasks import GenerationRequest, TaskType

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["generation"])

_EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

Skills = Union[Dict[str, List[str]], List[str]]


def _check_country(value: Optional[str]) -> Optional[str]:
    if value is not None and value not in SUPPORTED_COUNTRIES:
        raise ValueError("Invalid country code")
    return value


def _check_not_blank(value: Optional[str]) -> Optional[str]:
    if value is not None:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
    return value


NonBlank = Annotated[str, AfterValidator(_check_not_blank)]
OptionalNonBlank = Annotated[Optional[str], AfterValidator(_check_not_blank)]
CountryCode = Annotated[Optional[str], AfterValidator(_check_country)]


# ──────────────────────────────────────────────────────────────
# REQUEST BODIES
# ──────────────────────────────────────────────────────────────


class ResumeBody(BaseModel):
    fullName: NonBlank
    email: str = Field(..., pattern=_EMAIL_PATTERN)
    targetRole: NonBlank
    country: CountryCode = None
    phone: Optional[str] = None
    linkedin: Optional[str] = None
    headline: Optional[str] = None
    summary: Optional[str] = None
    skills: Optional[Skills] = None
    experience: List[Dict[str, Any]] = Field(default_factory=list)
    education: List[Dict[str, Any]] = Field(default_factory=list)
    projects: List[Dict[str, Any]] = Field(default_factory=list)


class ProfileOptimizationBody(BaseModel):
    fullName: Optional[str] = None
    headline: Optional[str] = Field(default=None, max_length=220)
    summary: Optional[str] = Field(default=None, max_length=2600)
    targetRole: OptionalNonBlank = None
    industry: Optional[str] = None
    country: CountryCode = None
    skills: Optional[Skills] = None
    experience: List[Dict[str, Any]] = Field(default_factory=list)
    education: List[Dict[str, Any]] = Field(default_factory=list)


class NetworkingBody(BaseModel):
    fullName: OptionalNonBlank = None
    targetRole: NonBlank
    targetIndustry: OptionalNonBlank = None
    location: OptionalNonBlank = None
    country: CountryCode = None
    skills: Optional[Skills] = None
    experience: List[Dict[str, Any]] = Field(default_factory=list)
    education: List[Dict[str, Any]] = Field(default_factory=list)


class ConnectionMessageBody(BaseModel):
    userFullName: OptionalNonBlank = None
    userHeadline: Optional[str] = None
    targetName: NonBlank
    targetRole: NonBlank
    targetCompany: OptionalNonBlank = None
    context: OptionalNonBlank = None
    country: CountryCode = None


# ──────────────────────────────────────────────────────────────
# DEPENDENCIES
# ──────────────────────────────────────────────────────────────


def get_gateway(request: Request) -> AIGateway:
    """Gateway built at startup; built on first use if the lifespan did not run."""
    gateway = getattr(request.app.state, "gateway", None)
    if gateway is None:
        gateway = bootstrap_gateway()
        request.app.state.gateway = gateway
    return gateway


def _envelope(key: str, outcome: GenerationOutcome, **extra: Any) -> Dict[str, Any]:
    return {
        "success": True,
        key: outcome.result,
        "source": outcome.source,
        "provider": outcome.provider,
        **extra,
    }


# ──────────────────────────────────────────────────────────────
# ROUTES
# ──────────────────────────────────────────────────────────────


@router.post("/resume/generate")
async def generate_resume(body: ResumeBody, gateway: AIGateway = Depends(get_gateway)):
    """Generate an ATS-optimized resume."""
    logger.info(
        "Resume generation request",
        extra={
            "target_role": body.targetRole,
            "country": body.country,
            "has_experience": bool(body.experience),
            "has_projects": bool(body.projects),
        },
    )
    request = GenerationRequest(
        task=TaskType.RESUME,
        profile=body.model_dump(exclude_none=True),
        target_role=body.targetRole,
        country=body.country,
    )
    outcome = await gateway.run(request)
    return _envelope("resume", outcome, targetRole=body.targetRole)


@router.post("/profile/optimize")
async def optimize_profile(body: ProfileOptimizationBody, gateway: AIGateway = Depends(get_gateway)):
    """Suggest LinkedIn profile improvements."""
    logger.info(
        "Profile optimization request",
        extra={"target_role": body.targetRole, "industry": body.industry, "country": body.country},
    )
    request = GenerationRequest(
        task=TaskType.PROFILE_OPTIMIZATION,
        profile=body.model_dump(exclude_none=True),
        target_role=body.targetRole,
        industry=body.industry,
        country=body.country,
    )
    outcome = await gateway.run(request)
    return _envelope("optimization", outcome)


@router.post("/networking/suggestions")
async def networking_suggestions(body: NetworkingBody, gateway: AIGateway = Depends(get_gateway)):
    """Build a networking strategy for a target role."""
    logger.info(
        "Networking suggestions request",
        extra={
            "target_role": body.targetRole,
            "target_industry": body.targetIndustry,
            "country": body.country,
            "experience_count": len(body.experience),
        },
    )
    request = GenerationRequest(
        task=TaskType.NETWORKING_SUGGESTIONS,
        profile=body.model_dump(exclude_none=True),
        target_role=body.targetRole,
        industry=body.targetIndustry,
        country=body.country,
    )
    outcome = await gateway.run(request)
    return _envelope("suggestions", outcome, targetRole=body.targetRole)


@router.post("/networking/message")
async def connection_message(body: ConnectionMessageBody, gateway: AIGateway = Depends(get_gateway)):
    """Draft LinkedIn connection messages to one person."""
    logger.info(
        "Connection message request",
        extra={"target_role": body.targetRole, "target_company": body.targetCompany, "context": body.context},
    )
    profile = {"fullName": body.userFullName, "headline": body.userHeadline}
    request = GenerationRequest(
        task=TaskType.CONNECTION_MESSAGE,
        profile={k: v for k, v in profile.items() if v},
        target={"name": body.targetName, "role": body.targetRole, "company": body.targetCompany},
        context=body.context,
        country=body.country,
    )
    outcome = await gateway.run(request)
    return _envelope("messages", outcome)
