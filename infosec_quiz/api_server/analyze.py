"""
FastAPI router: POST /analyze, POST /scenarios/{scenario_id}/analyze.

Bodies are read as raw JSON and never rejected: invalid JSON or missing
fields are answered with the fallback analysis (HTTP 200), matching the
scoring engine's fail-soft contract. Answers longer than MAX_RESPONSE_CHARS
are truncated before scoring.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request

from infosec_quiz.analysis_engine import FALLBACK_RESULT, analyze_response
from infosec_quiz.api_server.schemas import AnalysisResponse
from infosec_quiz.config import Settings, get_settings
from infosec_quiz.core.exceptions import ScenarioNotFound
from infosec_quiz.quiz_logging import get_logger
from infosec_quiz.scenarios import get_scenario

logger = get_logger(__name__)

router = APIRouter(tags=["analysis"])


async def _read_json(request: Request) -> dict[str, Any] | None:
    """Parsed JSON object body, or None when the body is not a JSON object."""
    try:
        body = await request.json()
    except (ValueError, RecursionError) as e:
        logger.warning("analyze_invalid_json", error=str(e))
        return None
    if not isinstance(body, dict):
        logger.warning("analyze_body_not_object", body_type=type(body).__name__)
        return None
    return body


def _limit_response(user_response: Any, max_chars: int) -> Any:
    if isinstance(user_response, str) and len(user_response) > max_chars:
        logger.warning("analyze_response_truncated", response_chars=len(user_response), max_chars=max_chars)
        return user_response[:max_chars]
    return user_response


@router.post("/analyze", response_model=AnalysisResponse)
async def analyze(request: Request, settings: Settings = Depends(get_settings)) -> AnalysisResponse:
    """
    Score a free-text analysis of a scenario.

    Body: {"userResponse": str, "scenario": {"title", "description", ...}}.
    Always 200; malformed input yields the fallback analysis.
    """
    body = await _read_json(request)
    if body is None:
        return AnalysisResponse.from_result(FALLBACK_RESULT)
    user_response = _limit_response(body.get("userResponse"), settings.max_response_chars)
    result = analyze_response(user_response, body.get("scenario"))
    return AnalysisResponse.from_result(result)


@router.post("/scenarios/{scenario_id}/analyze", response_model=AnalysisResponse)
async def analyze_catalog_scenario(
    scenario_id: int,
    request: Request,
    settings: Settings = Depends(get_settings),
) -> AnalysisResponse:
    """
    Score an analysis of a catalogue scenario. Body: {"userResponse": str}.
    404 if scenario_id is not in the catalogue.
    """
    try:
        scenario = get_scenario(scenario_id)
    except ScenarioNotFound as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    body = await _read_json(request)
    if body is None:
        return AnalysisResponse.from_result(FALLBACK_RESULT)
    user_response = _limit_response(body.get("userResponse"), settings.max_response_chars)
    return AnalysisResponse.from_result(analyze_response(user_response, scenario))
