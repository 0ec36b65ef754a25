"""
Tests for result formatting: low-quality texts, strengths, gaps, suggestions, feedback tiers.
"""

from __future__ import annotations

from infosec_quiz.analysis_engine.evaluator import RawMetrics, Scored, evaluate
from infosec_quiz.analysis_engine.formatter import (
    DETAILED_STRENGTH,
    FRAMEWORK_SUGGESTIONS,
    GENERIC_STRENGTH,
    LOW_QUALITY_FEEDBACK,
    LOW_QUALITY_STRENGTH,
    NO_GAPS,
    PREVENTION_STRENGTH,
    TIER_FEEDBACK,
    format_result,
)
from infosec_quiz.analysis_engine.models import FeedbackTier
from infosec_quiz.analysis_engine.taxonomy import SECURITY_CONCEPTS, ScenarioCategory

from tests.conftest import RANSOMWARE_ANSWER


def _scored_metrics(
    covered: tuple[str, ...] = (),
    missed: tuple[str, ...] = (),
    raw_score: int = 0,
) -> RawMetrics:
    tier = FeedbackTier.EXCELLENT if raw_score >= 8 else FeedbackTier.GOOD if raw_score >= 6 else FeedbackTier.DEVELOPING
    return RawMetrics(
        word_count=40,
        is_low_quality=False,
        matched_keywords=(),
        covered_concepts=covered,
        missed_concepts=missed,
        outcome=Scored(score=max(1, min(10, raw_score)), raw_score=raw_score, tier=tier),
        keyword_total=8,
    )


def test_low_quality_result():
    category = ScenarioCategory.PASSWORD
    result = format_result(category, "ok", evaluate(category, "ok"))
    assert result.score == 0
    assert result.strengths == (LOW_QUALITY_STRENGTH,)
    assert result.gaps == SECURITY_CONCEPTS[category].concepts
    assert len(result.suggestions) == 3
    assert result.suggestions[2] == (
        "Focus on key areas like: Multi-factor authentication (MFA), Unique passwords for each account"
    )
    assert result.overall_feedback == LOW_QUALITY_FEEDBACK
    assert result.tier is None


def test_ransomware_answer_result():
    category = ScenarioCategory.RANSOMWARE
    result = format_result(category, RANSOMWARE_ANSWER, evaluate(category, RANSOMWARE_ANSWER))
    assert result.strengths == (
        "You identified key concepts: Regular security patches and updates, Air-gapped or offline backup systems",
        PREVENTION_STRENGTH,
    )
    assert result.gaps == ("Network segmentation",)
    assert result.suggestions == FRAMEWORK_SUGGESTIONS + ("Focus on these key areas: Network segmentation",)
    assert result.score == 6
    assert result.overall_feedback == TIER_FEEDBACK[FeedbackTier.GOOD]


def test_generic_strength_when_nothing_else_applies():
    category = ScenarioCategory.PHISHING
    response = "a b c d e f g h i jk"
    result = format_result(category, response, evaluate(category, response))
    assert result.strengths == (GENERIC_STRENGTH,)
    assert result.gaps == SECURITY_CONCEPTS[category].concepts[:3]
    assert result.suggestions[-1] == (
        "Focus on these key areas: Email verification and authentication, Security awareness training"
    )
    assert result.score == 1
    assert result.overall_feedback == TIER_FEEDBACK[FeedbackTier.DEVELOPING]


def test_detailed_strength_uses_raw_length():
    metrics = _scored_metrics(missed=("Network segmentation",), raw_score=3)
    assert format_result("ransomware", "x" * 201, metrics).strengths == (DETAILED_STRENGTH,)
    assert format_result("ransomware", "x" * 200, metrics).strengths == (GENERIC_STRENGTH,)


def test_prevention_strength_is_case_insensitive():
    metrics = _scored_metrics(missed=("Network segmentation",), raw_score=3)
    result = format_result("ransomware", "PREVENTION matters most here", metrics)
    assert result.strengths == (PREVENTION_STRENGTH,)


def test_gaps_capped_at_three():
    concepts = SECURITY_CONCEPTS[ScenarioCategory.MOBILE].concepts
    metrics = _scored_metrics(missed=concepts, raw_score=2)
    assert format_result("mobile", "some answer text here", metrics).gaps == concepts[:3]


def test_no_missed_concepts_gives_generic_gap_and_no_focus():
    concepts = SECURITY_CONCEPTS[ScenarioCategory.DATABASE].concepts
    metrics = _scored_metrics(covered=concepts, raw_score=9)
    result = format_result("database", "some answer text here", metrics)
    assert result.gaps == (NO_GAPS,)
    assert result.suggestions == FRAMEWORK_SUGGESTIONS
    assert result.score == 9
    assert result.overall_feedback == TIER_FEEDBACK[FeedbackTier.EXCELLENT]
    assert result.strengths[0] == (
        "You identified key concepts: Proper access controls and authentication, Regular security audits"
    )


def test_focus_suggestion_added_below_seven_even_without_misses():
    concepts = SECURITY_CONCEPTS[ScenarioCategory.DATABASE].concepts
    metrics = _scored_metrics(covered=concepts, raw_score=6)
    result = format_result("database", "some answer text here", metrics)
    assert result.suggestions[-1] == "Focus on these key areas: "


def test_seven_skips_focus_suggestion():
    metrics = _scored_metrics(missed=("Network segmentation",), raw_score=7)
    assert format_result("ransomware", "some answer text here", metrics).suggestions == FRAMEWORK_SUGGESTIONS


def test_formatting_is_deterministic():
    category = ScenarioCategory.RANSOMWARE
    metrics = evaluate(category, RANSOMWARE_ANSWER)
    assert format_result(category, RANSOMWARE_ANSWER, metrics) == format_result(
        category, RANSOMWARE_ANSWER, metrics
    )


def test_wire_format_keys():
    category = ScenarioCategory.RANSOMWARE
    data = format_result(category, RANSOMWARE_ANSWER, evaluate(category, RANSOMWARE_ANSWER)).to_dict()
    assert set(data) == {"strengths", "gaps", "suggestions", "score", "overallFeedback"}
    assert isinstance(data["strengths"], list)
