"""
LinkedInScholar AI gateway.

Turns student profile data into resumes, profile-optimization advice,
networking strategies and connection messages. The gateway itself lives
in scholar.gateway; this package root only exposes the lightweight types
so that infra can import them without a cycle.
"""

from .errors import GatewayError, ConfigurationError, ShapeError
from .regions import RegionProfile, resolve_region, SUPPORTED_COUNTRIES
from .tasks import TaskType, TaskContract, GenerationRequest, contract_for

__all__ = [
    "GatewayError",
    "ConfigurationError",
    "ShapeError",
    "RegionProfile",
    "resolve_region",
    "SUPPORTED_COUNTRIES",
    "TaskType",
    "TaskContract",
    "GenerationRequest",
    "contract_for",
]
