"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from realiser_service.api.deps import get_processor
from realiser_service.api.routes import realise
from realiser_service.settings import get_service_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    get_processor()
    logger.info("Realiser API ready")
    yield
    # Shutdown
    recording = get_processor().recording
    if recording is not None and recording.is_on:
        recording.finish()


app = FastAPI(
    title="Realiser API",
    description="Surface realization of annotated element trees",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_service_settings().cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(realise.router, prefix="/api", tags=["realise"])


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
