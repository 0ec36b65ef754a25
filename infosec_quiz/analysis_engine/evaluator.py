"""
Response evaluator — keyword and concept coverage for one free-text answer.

Rule-based and explainable: no ML, only case-insensitive substring matching.
A response that is too short, or short with no category vocabulary at all,
is short-circuited as low quality with a score of 0. Everything else gets a
score in [1, 10] weighted 0.4 keyword coverage / 0.6 concept coverage.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from infosec_quiz.analysis_engine.models import FeedbackTier
from infosec_quiz.analysis_engine.taxonomy import ConceptEntry, ScenarioCategory, get_concepts

MIN_RESPONSE_CHARS = 20
MIN_WORDS_WITHOUT_KEYWORDS = 10

KEYWORD_WEIGHT = 0.4
CONCEPT_WEIGHT = 0.6
MIN_SCORE = 1
MAX_SCORE = 10

EXCELLENT_THRESHOLD = 8
GOOD_THRESHOLD = 6


@dataclass(frozen=True)
class LowQuality:
    """Answer failed the length/signal gate; nothing was scored."""

    score: int = 0


@dataclass(frozen=True)
class Scored:
    """
    Answer passed the gate.

    raw_score is the rounded weighted coverage before clamping; it selects the
    feedback tier. score is raw_score clamped to [MIN_SCORE, MAX_SCORE].
    """

    score: int
    raw_score: int
    tier: FeedbackTier


Outcome = Union[LowQuality, Scored]


@dataclass(frozen=True)
class RawMetrics:
    """Coverage metrics for one (category, response) pair."""

    word_count: int
    is_low_quality: bool
    matched_keywords: tuple[str, ...]
    covered_concepts: tuple[str, ...]
    missed_concepts: tuple[str, ...]
    outcome: Outcome
    keyword_total: int = 0

    @property
    def score(self) -> int:
        return self.outcome.score

    @property
    def keyword_coverage(self) -> float:
        return len(self.matched_keywords) / self.keyword_total if self.keyword_total else 0.0

    @property
    def concept_coverage(self) -> float:
        total = len(self.covered_concepts) + len(self.missed_concepts)
        return len(self.covered_concepts) / total if total else 0.0


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for non-negative input."""
    return int(math.floor(value + 0.5))


def feedback_tier(raw_score: int) -> FeedbackTier:
    if raw_score >= EXCELLENT_THRESHOLD:
        return FeedbackTier.EXCELLENT
    if raw_score >= GOOD_THRESHOLD:
        return FeedbackTier.GOOD
    return FeedbackTier.DEVELOPING


def match_keywords(entry: ConceptEntry, response_lower: str) -> tuple[str, ...]:
    """Keywords of entry occurring anywhere in the response, in taxonomy order."""
    return tuple(keyword for keyword in entry.keywords if keyword in response_lower)


def is_concept_covered(concept: str, response_lower: str) -> bool:
    """
    A concept counts as covered when ANY of its space-separated words occurs
    in the response. Loose on purpose: "data" alone covers
    "Data Loss Prevention (DLP) tools".
    """
    return any(word in response_lower for word in concept.lower().split(" "))


def partition_concepts(
    entry: ConceptEntry,
    response_lower: str,
) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Split the entry's concepts into (covered, missed), preserving order."""
    covered: list[str] = []
    missed: list[str] = []
    for concept in entry.concepts:
        if is_concept_covered(concept, response_lower):
            covered.append(concept)
        else:
            missed.append(concept)
    return tuple(covered), tuple(missed)


def weighted_score(keyword_coverage: float, concept_coverage: float) -> int:
    """Rounded 0–10 score before clamping."""
    return round_half_up((keyword_coverage * KEYWORD_WEIGHT + concept_coverage * CONCEPT_WEIGHT) * 10)


def evaluate(category: ScenarioCategory | str, user_response: str) -> RawMetrics:
    """
    Compute coverage metrics for a response against a category.

    Args:
        category: Taxonomy category (enum member or its string value).
        user_response: Raw answer text; length limits are applied by the caller.

    Returns:
        RawMetrics whose outcome is LowQuality (score 0, every concept missed)
        or Scored (score in [1, 10]).
    """
    entry = get_concepts(category)
    response_lower = user_response.lower()
    trimmed = user_response.strip()

    word_count = len(trimmed.split())
    # counts code points, so a non-BMP character (emoji) is one character
    has_minimum_length = len(trimmed) >= MIN_RESPONSE_CHARS
    matched_keywords = match_keywords(entry, response_lower)
    is_low_quality = not has_minimum_length or (
        word_count < MIN_WORDS_WITHOUT_KEYWORDS and not matched_keywords
    )

    if is_low_quality:
        return RawMetrics(
            word_count=word_count,
            is_low_quality=True,
            matched_keywords=matched_keywords,
            covered_concepts=(),
            missed_concepts=entry.concepts,
            outcome=LowQuality(),
            keyword_total=len(entry.keywords),
        )

    covered, missed = partition_concepts(entry, response_lower)
    keyword_coverage = len(matched_keywords) / len(entry.keywords)
    concept_coverage = len(covered) / len(entry.concepts)
    raw_score = weighted_score(keyword_coverage, concept_coverage)
    score = max(MIN_SCORE, min(MAX_SCORE, raw_score))

    return RawMetrics(
        word_count=word_count,
        is_low_quality=False,
        matched_keywords=matched_keywords,
        covered_concepts=covered,
        missed_concepts=missed,
        outcome=Scored(score=score, raw_score=raw_score, tier=feedback_tier(raw_score)),
        keyword_total=len(entry.keywords),
    )
