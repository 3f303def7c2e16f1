"""
Configuration management for LinkedInScholar.

Loads environment variables from .env file and provides typed access to
server configuration. AI provider settings live in infra.config.
"""

import logging
import os
from pathlib import Path
from dotenv import load_dotenv

from infra.config import GatewayConfig

# Load environment variables from .env file
env_path = Path(__file__).parent / ".env"
load_dotenv(env_path)

logger = logging.getLogger(__name__)


class Config:
    """Configuration class for the LinkedInScholar API."""

    # Server
    PORT = int(os.getenv("PORT", "5000"))
    ENVIRONMENT = os.getenv("ENVIRONMENT", os.getenv("NODE_ENV", "development"))
    FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:5173")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "info").upper()

    @classmethod
    def validate(cls) -> bool:
        """
        Check that at least one AI provider is configured.

        Missing providers are not fatal: generation degrades to static
        templates, so this only warns.
        """
        gateway_config = GatewayConfig.from_env()
        if not gateway_config.has_ai_provider():
            logger.warning(
                "No AI provider configured. Set one of GROQ_API_KEY (recommended, free tier), "
                "OLLAMA_HOST (local), OPENAI_API_KEY or GEMINI_API_KEY in .env"
            )
            return False
        return True


if __name__ == "__main__":
    # Test configuration loading
    gateway_config = GatewayConfig.from_env()
    print("Configuration loaded:")
    print(f"  Port: {Config.PORT}")
    print(f"  Environment: {Config.ENVIRONMENT}")
    print(f"  Frontend URL: {Config.FRONTEND_URL}")
    print(f"  AI Providers: {', '.join(gateway_config.configured_providers()) or 'none (templates only)'}")
    print(f"\n  Validation: {'✓ PASSED' if Config.validate() else '✗ NO AI PROVIDER'}")
