"""
FastAPI router: scenario catalogue and taxonomy (read-only).

GET /scenarios, GET /scenarios/random, GET /scenarios/{scenario_id},
GET /categories.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query

from infosec_quiz.analysis_engine.taxonomy import SECURITY_CONCEPTS
from infosec_quiz.api_server.schemas import CategoryResponse, ScenarioResponse
from infosec_quiz.core.exceptions import ScenarioNotFound
from infosec_quiz.scenarios import get_scenario, list_scenarios, random_scenario

router = APIRouter(tags=["scenarios"])


@router.get("/scenarios", response_model=list[ScenarioResponse])
def get_scenarios() -> list[ScenarioResponse]:
    """All catalogue scenarios in catalogue order."""
    return [ScenarioResponse.from_scenario(s) for s in list_scenarios()]


# Registered before /scenarios/{scenario_id} so "random" is not parsed as an id.
@router.get("/scenarios/random", response_model=ScenarioResponse)
def get_random_scenario(
    exclude: int | None = Query(None, description="Scenario id to avoid (the one just played)"),
) -> ScenarioResponse:
    """One scenario chosen at random, different from exclude when possible."""
    try:
        return ScenarioResponse.from_scenario(random_scenario(exclude_id=exclude))
    except ScenarioNotFound as e:
        raise HTTPException(status_code=404, detail="Scenario catalogue is empty") from e


@router.get("/scenarios/{scenario_id}", response_model=ScenarioResponse)
def get_scenario_by_id(scenario_id: int) -> ScenarioResponse:
    """One scenario; 404 if unknown."""
    try:
        return ScenarioResponse.from_scenario(get_scenario(scenario_id))
    except ScenarioNotFound as e:
        raise HTTPException(status_code=404, detail=str(e)) from e


@router.get("/categories", response_model=list[CategoryResponse])
def get_categories() -> list[CategoryResponse]:
    """Keywords and concepts used to score each scenario category."""
    return [CategoryResponse.from_entry(entry) for entry in SECURITY_CONCEPTS.values()]
