"""
LinkedInScholar API server.

Wires the AI gateway into FastAPI:
  - /api/* generation routes (resume, profile, networking, messages)
  - Liveness / readiness probes and a config summary
  - Request logging with a catch-all 500 handler

The active AI provider is resolved once in the lifespan handler and kept
on app.state.gateway.

Run: uvicorn main:app --reload --host 0.0.0.0 --port 5000
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from api import router as generation_router, get_gateway
from config import Config
from infra.bootstrap import bootstrap_gateway
from scholar.gateway import AIGateway

# Setup logging
logging.basicConfig(
    level=getattr(logging, Config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan: startup and shutdown handlers.

    The gateway (and with it the active AI provider) is chosen here, once
    per process.
    """
    # Startup
    logger.info("=" * 60)
    logger.info("LinkedInScholar API starting up...")
    logger.info(f"Environment: {Config.ENVIRONMENT}")
    Config.validate()
    app.state.gateway = bootstrap_gateway()
    logger.info(f"Active AI provider: {app.state.gateway.active.name}")
    logger.info("=" * 60)

    yield

    # Shutdown
    logger.info("LinkedInScholar API shutting down...")


# Create FastAPI app
app = FastAPI(
    title="LinkedInScholar API",
    description="AI-assisted resumes, profile optimization and networking for students",
    version="1.0.0",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=[Config.FRONTEND_URL],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log method, path, status and latency; turn stray exceptions into a 500."""
    started = time.perf_counter()
    try:
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.debug(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.0f}ms)")
        return response
    except Exception as e:
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {type(e).__name__}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": "Internal server error"},
        )


# Include routers
app.include_router(generation_router)


# Health check endpoints
@app.get("/health/live")
async def health_live():
    """Live health check (Kubernetes liveness probe)."""
    return {"status": "alive"}


@app.get("/health/ready")
async def health_ready(request: Request):
    """Readiness health check (Kubernetes readiness probe)."""
    try:
        gateway = get_gateway(request)
        return {"status": "ready", "active_provider": gateway.active.name}
    except Exception as e:
        return {"status": "not_ready", "reason": str(e)}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "LinkedInScholar API",
        "version": "1.0.0",
        "status": "running",
        "endpoints": {
            "resume": "POST /api/resume/generate",
            "profile_optimization": "POST /api/profile/optimize",
            "networking_suggestions": "POST /api/networking/suggestions",
            "connection_message": "POST /api/networking/message",
            "health_live": "GET /health/live",
            "health_ready": "GET /health/ready",
            "config_info": "GET /config/info",
        },
    }


@app.get("/config/info")
async def config_info(gateway: AIGateway = Depends(get_gateway)):
    """Get non-sensitive configuration info."""
    return {
        "environment": Config.ENVIRONMENT,
        **gateway.describe(),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host="0.0.0.0",
        port=Config.PORT,
        reload=Config.ENVIRONMENT == "development",
    )
