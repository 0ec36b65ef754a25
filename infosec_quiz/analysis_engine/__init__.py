"""
Analysis engine package — scoring of free-text incident analyses.

Classifies a scenario into a taxonomy category, measures keyword and concept
coverage of the user's answer, and renders strengths, gaps, suggestions and a
0–10 score. Rule-based and deterministic; no ML.
"""

from infosec_quiz.analysis_engine.analyzer import FALLBACK_RESULT, analyze_response
from infosec_quiz.analysis_engine.classifier import (
    CLASSIFICATION_RULES,
    FALLBACK_CATEGORY,
    ClassificationRule,
    classify,
)
from infosec_quiz.analysis_engine.evaluator import (
    LowQuality,
    RawMetrics,
    Scored,
    evaluate,
)
from infosec_quiz.analysis_engine.formatter import format_result
from infosec_quiz.analysis_engine.models import AnalysisResult, FeedbackTier, Scenario
from infosec_quiz.analysis_engine.taxonomy import (
    SECURITY_CONCEPTS,
    ConceptEntry,
    ScenarioCategory,
    get_concepts,
    validate_taxonomy,
)

__all__ = [
    "FALLBACK_RESULT",
    "analyze_response",
    "CLASSIFICATION_RULES",
    "FALLBACK_CATEGORY",
    "ClassificationRule",
    "classify",
    "LowQuality",
    "RawMetrics",
    "Scored",
    "evaluate",
    "format_result",
    "AnalysisResult",
    "FeedbackTier",
    "Scenario",
    "SECURITY_CONCEPTS",
    "ConceptEntry",
    "ScenarioCategory",
    "get_concepts",
    "validate_taxonomy",
]
