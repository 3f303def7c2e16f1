"""
Infrastructure module exports.

Provider registry and configuration. The gateway bootstrap lives in
infra.bootstrap and is imported from there.
"""

from .registry import (
    ModelSelection,
    ProviderDescriptor,
    TransportKind,
    TEMPLATE_DESCRIPTOR,
    build_registry,
    rank,
    select_active,
)
from .config import GatewayConfig, get_config

__all__ = [
    "ModelSelection",
    "ProviderDescriptor",
    "TransportKind",
    "TEMPLATE_DESCRIPTOR",
    "build_registry",
    "rank",
    "select_active",
    "GatewayConfig",
    "get_config",
]
