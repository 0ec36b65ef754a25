"""
FastAPI server — scenario catalogue and answer scoring.

Exposes POST /api/analyze (fail-soft scoring), catalogue reads under
/api/scenarios, the taxonomy under /api/categories, and GET /health.
Stateless: no submissions are stored.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from infosec_quiz import __version__
from infosec_quiz.analysis_engine.taxonomy import validate_taxonomy
from infosec_quiz.api_server.analyze import router as analyze_router
from infosec_quiz.api_server.middleware import request_logging_middleware
from infosec_quiz.api_server.scenarios import router as scenarios_router
from infosec_quiz.quiz_logging import get_logger
from infosec_quiz.scenarios import list_scenarios

logger = get_logger(__name__)


# -----------------------------------------------------------------------------
# Lifespan: check taxonomy invariants and warm the catalogue
# -----------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Fail startup on a broken taxonomy; load the scenario catalogue once."""
    validate_taxonomy()
    try:
        count = len(list_scenarios())
        logger.info("api_started", scenarios=count)
    except Exception as e:
        logger.warning("scenario_catalog_load_failed", error=str(e))
    yield
    logger.info("api_stopped")


# -----------------------------------------------------------------------------
# App and routes
# -----------------------------------------------------------------------------

app = FastAPI(
    title="InfoSec Quiz API",
    description="Cybersecurity incident scenarios and keyword/concept scoring of free-text analyses.",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)
app.middleware("http")(request_logging_middleware)

app.include_router(analyze_router, prefix="/api")
app.include_router(scenarios_router, prefix="/api")


@app.get("/health")
def health() -> dict[str, str]:
    """Liveness probe: API is up."""
    return {"status": "ok"}


@app.exception_handler(HTTPException)
def http_exception_handler(request: Any, exc: HTTPException) -> JSONResponse:
    """Consistent JSON error response for HTTPException."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
    )
