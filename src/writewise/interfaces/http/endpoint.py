"""
WriteWise HTTP app.

Run locally with:

    uvicorn writewise.interfaces.http.endpoint:app --host 0.0.0.0 --port 8000 --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from writewise.interfaces.http.assessment_endpoints import assessment_router, assignment_router
from writewise.settings import get_settings


def configure_logging(level: str) -> None:
    """Apply the configured log level to the root and package loggers."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("writewise").setLevel(level.upper())


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(get_settings().LOG_LEVEL)
    yield


app = FastAPI(
    title="WriteWise - Writing Assessment",
    description="Heuristic CEFR writing assessment for the student portal",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(assessment_router)
app.include_router(assignment_router)


@app.get("/")
async def root():
    return {
        "message": "WriteWise - Writing Assessment API",
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
async def simple_health_check():
    """Simple health check that doesn't require external services."""
    return {
        "status": "healthy",
        "message": "Service is running",
        "scoring_profile": get_settings().SCORING_PROFILE,
    }
