"""
Gateway initialization.

The gateway is built once at process start and handed to its callers
(the FastAPI app keeps it on app.state). There is no module-level
singleton: tests build as many independent gateways as they need.
"""

import logging
from typing import Optional

from scholar.gateway import AIGateway

from .config import GatewayConfig, get_config

logger = logging.getLogger(__name__)


def bootstrap_gateway(config: Optional[GatewayConfig] = None) -> AIGateway:
    """
    Build the AI gateway from configuration.

    Args:
        config: Optional custom configuration (defaults to the environment)

    Returns:
        AIGateway with its active provider selected

    Raises:
        ConfigurationError: If no provider can be resolved
    """
    config = config or get_config()
    providers = config.configured_providers()
    if not providers:
        logger.warning("No AI provider configured; all generation will use static templates")
    else:
        logger.info(f"AI providers configured: {', '.join(providers)}")

    gateway = AIGateway.from_config(config)
    logger.info(repr(gateway))
    return gateway
