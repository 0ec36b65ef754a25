"""
Fail-soft scoring entry point: classify → evaluate → format.

analyze_response never raises. Any failure (malformed input included) is
logged and answered with FALLBACK_RESULT so the quiz always has feedback to
show.
"""

from __future__ import annotations

from typing import Any

from infosec_quiz.analysis_engine.classifier import classify
from infosec_quiz.analysis_engine.evaluator import evaluate
from infosec_quiz.analysis_engine.formatter import format_result
from infosec_quiz.analysis_engine.models import AnalysisResult, Scenario
from infosec_quiz.core.exceptions import InvalidSubmission
from infosec_quiz.quiz_logging import get_logger

logger = get_logger(__name__)

FALLBACK_RESULT = AnalysisResult(
    strengths=("You provided a thoughtful analysis of the security scenario.",),
    gaps=(
        "Consider exploring more specific technical controls that could have prevented this incident.",
        "Think about the organizational and process improvements needed beyond just technical solutions.",
    ),
    suggestions=(
        "Review common security frameworks like NIST or CIS Controls for comprehensive prevention strategies.",
        "Consider both preventive and detective controls in your analysis.",
    ),
    score=6,
    overall_feedback=(
        "Your analysis shows good security awareness. To improve, focus on identifying specific "
        "technical controls and organizational processes that address each vulnerability."
    ),
)


def _coerce_scenario(scenario: Any) -> Scenario:
    if isinstance(scenario, Scenario):
        return scenario
    return Scenario.from_dict(scenario)


def analyze_response(user_response: Any, scenario: Any) -> AnalysisResult:
    """
    Score a free-text answer for a scenario.

    Args:
        user_response: Answer text. Anything other than a str yields the fallback.
        scenario: Scenario instance or mapping with at least title and description.

    Returns:
        AnalysisResult; FALLBACK_RESULT on any internal failure.
    """
    try:
        if not isinstance(user_response, str):
            raise InvalidSubmission("userResponse must be a string")
        parsed = _coerce_scenario(scenario)
        category = classify(parsed)
        metrics = evaluate(category, user_response)
        result = format_result(category, user_response, metrics)
    except Exception as e:
        logger.exception("analysis_failed", error=str(e), error_type=type(e).__name__)
        return FALLBACK_RESULT

    logger.info(
        "response_analyzed",
        category=category.value,
        score=result.score,
        low_quality=metrics.is_low_quality,
        word_count=metrics.word_count,
        response_chars=len(user_response),
        matched_keywords=len(metrics.matched_keywords),
        covered_concepts=len(metrics.covered_concepts),
    )
    return result
