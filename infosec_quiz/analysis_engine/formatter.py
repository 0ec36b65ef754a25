"""
Result formatter — render coverage metrics as user-facing feedback text.

Pure and deterministic: the same metrics always produce the same
AnalysisResult. All user-visible wording lives in this module.
"""

from __future__ import annotations

from infosec_quiz.analysis_engine.evaluator import LowQuality, RawMetrics, Scored
from infosec_quiz.analysis_engine.models import AnalysisResult, FeedbackTier
from infosec_quiz.analysis_engine.taxonomy import ScenarioCategory, get_concepts

DETAILED_RESPONSE_CHARS = 200
SUGGEST_FOCUS_BELOW = 7
MAX_GAPS = 3

LOW_QUALITY_STRENGTH = (
    "Your response appears to contain non-meaningful text or lacks sufficient detail "
    "to identify security concepts"
)
LOW_QUALITY_SUGGESTIONS = (
    "Please provide a meaningful analysis of the security incident",
    "Consider what went wrong, what controls could have prevented it, and how to improve security",
)
LOW_QUALITY_FEEDBACK = (
    "Your response does not contain enough detail to evaluate. Please provide a thoughtful "
    "analysis of the security scenario, including what went wrong and how it could have been prevented."
)

DETAILED_STRENGTH = "You provided a detailed and thoughtful analysis"
PREVENTION_STRENGTH = "You focused on prevention strategies, which is excellent"
GENERIC_STRENGTH = "You provided a response and attempted to analyze the security incident"
NO_GAPS = "Consider exploring implementation challenges and organizational aspects"

FRAMEWORK_SUGGESTIONS = (
    "Review security frameworks like NIST Cybersecurity Framework for comprehensive coverage",
    "Consider both technical controls and human factors in your analysis",
)

TIER_FEEDBACK = {
    FeedbackTier.EXCELLENT: (
        "Excellent analysis! You identified most of the key security concepts and "
        "demonstrated strong understanding of the incident."
    ),
    FeedbackTier.GOOD: (
        "Good analysis with solid understanding. Focus on covering more specific technical "
        "controls and organizational processes to strengthen your response."
    ),
    FeedbackTier.DEVELOPING: (
        "Your analysis shows security awareness, but consider exploring the technical and "
        "procedural controls in more depth for a more comprehensive evaluation."
    ),
}


def _format_low_quality(category: ScenarioCategory) -> AnalysisResult:
    concepts = get_concepts(category).concepts
    return AnalysisResult(
        strengths=(LOW_QUALITY_STRENGTH,),
        gaps=concepts,
        suggestions=LOW_QUALITY_SUGGESTIONS + (f"Focus on key areas like: {', '.join(concepts[:2])}",),
        score=0,
        overall_feedback=LOW_QUALITY_FEEDBACK,
    )


def _strengths(user_response: str, metrics: RawMetrics) -> tuple[str, ...]:
    strengths: list[str] = []
    if metrics.covered_concepts:
        strengths.append(f"You identified key concepts: {', '.join(metrics.covered_concepts[:2])}")
    if len(user_response) > DETAILED_RESPONSE_CHARS:
        strengths.append(DETAILED_STRENGTH)
    if "prevent" in user_response.lower():
        strengths.append(PREVENTION_STRENGTH)
    if not strengths:
        strengths.append(GENERIC_STRENGTH)
    return tuple(strengths)


def _format_scored(user_response: str, metrics: RawMetrics, outcome: Scored) -> AnalysisResult:
    gaps = metrics.missed_concepts[:MAX_GAPS] or (NO_GAPS,)

    suggestions = FRAMEWORK_SUGGESTIONS
    if outcome.raw_score < SUGGEST_FOCUS_BELOW:
        suggestions += (f"Focus on these key areas: {', '.join(metrics.missed_concepts[:2])}",)

    return AnalysisResult(
        strengths=_strengths(user_response, metrics),
        gaps=gaps,
        suggestions=suggestions,
        score=outcome.score,
        overall_feedback=TIER_FEEDBACK[outcome.tier],
        tier=outcome.tier,
    )


def format_result(
    category: ScenarioCategory | str,
    user_response: str,
    metrics: RawMetrics,
) -> AnalysisResult:
    """
    Build the AnalysisResult for evaluated metrics.

    Args:
        category: Category the metrics were computed against.
        user_response: The same raw text passed to evaluate().
        metrics: Output of evaluate().

    Returns:
        AnalysisResult with strengths, gaps (at most 3 when scored),
        suggestions, score and overall feedback.
    """
    outcome = metrics.outcome
    if isinstance(outcome, LowQuality):
        return _format_low_quality(ScenarioCategory(category))
    return _format_scored(user_response, metrics, outcome)
