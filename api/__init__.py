"""
HTTP API for the LinkedInScholar AI gateway.
"""

from .routes import router, get_gateway

__all__ = ["router", "get_gateway"]
