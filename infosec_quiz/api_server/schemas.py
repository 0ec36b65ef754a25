"""
Response models for the quiz API.

Wire keys are camelCase to match the quiz front end; attributes are snake_case.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from infosec_quiz.analysis_engine.models import AnalysisResult, Scenario
from infosec_quiz.analysis_engine.taxonomy import ConceptEntry


class AnalysisResponse(BaseModel):
    """POST /api/analyze response."""

    model_config = ConfigDict(populate_by_name=True)

    strengths: list[str] = Field(..., description="What the answer did well")
    gaps: list[str] = Field(..., description="Concepts the answer missed")
    suggestions: list[str] = Field(..., description="How to improve the answer")
    score: int = Field(..., ge=0, le=10, description="0 for low-quality answers, otherwise 1–10")
    overall_feedback: str = Field(..., alias="overallFeedback", description="Summary feedback")

    @classmethod
    def from_result(cls, result: AnalysisResult) -> AnalysisResponse:
        return cls.model_validate(result.to_dict())


class ScenarioResponse(BaseModel):
    """One catalogue scenario."""

    id: int | None = Field(None, description="Catalogue id")
    title: str
    organization: str = ""
    date: str = ""
    description: str
    impact: str = ""

    @classmethod
    def from_scenario(cls, scenario: Scenario) -> ScenarioResponse:
        return cls.model_validate(scenario.to_dict())


class CategoryResponse(BaseModel):
    """GET /api/categories item: taxonomy entry for one category."""

    category: str
    keywords: list[str] = Field(default_factory=list)
    concepts: list[str] = Field(default_factory=list)

    @classmethod
    def from_entry(cls, entry: ConceptEntry) -> CategoryResponse:
        return cls.model_validate(entry.to_dict())
