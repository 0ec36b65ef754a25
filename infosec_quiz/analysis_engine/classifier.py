"""
Scenario classifier — map a scenario to one taxonomy category.

Ordered substring rules over the lower-cased title (and, for phishing, the
description). The first matching rule wins, so a title naming two attack
types resolves to whichever rule comes first in CLASSIFICATION_RULES.
"""

from __future__ import annotations

from dataclasses import dataclass

from infosec_quiz.analysis_engine.models import Scenario
from infosec_quiz.analysis_engine.taxonomy import ScenarioCategory
from infosec_quiz.quiz_logging import get_logger

logger = get_logger(__name__)

# Returned when no rule matches. Kept for parity with the deployed quiz even
# though phishing is not a meaningful "unknown" bucket.
FALLBACK_CATEGORY = ScenarioCategory.PHISHING


@dataclass(frozen=True)
class ClassificationRule:
    """One priority rule: any title term, or any description term, selects category."""

    category: ScenarioCategory
    title_terms: tuple[str, ...]
    description_terms: tuple[str, ...] = ()

    def matches(self, title: str, description: str) -> bool:
        return any(term in title for term in self.title_terms) or any(
            term in description for term in self.description_terms
        )


CLASSIFICATION_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule(ScenarioCategory.PHISHING, ("phishing",), ("phishing email",)),
    ClassificationRule(ScenarioCategory.RANSOMWARE, ("ransomware",)),
    ClassificationRule(ScenarioCategory.PASSWORD, ("password",)),
    ClassificationRule(ScenarioCategory.DATABASE, ("database",)),
    ClassificationRule(ScenarioCategory.SUPPLY_CHAIN, ("supply chain",)),
    ClassificationRule(ScenarioCategory.NETWORK, ("wi-fi", "wifi")),
    ClassificationRule(ScenarioCategory.INSIDER, ("insider",)),
    ClassificationRule(ScenarioCategory.VULNERABILITY, ("vulnerability", "unpatched")),
    ClassificationRule(ScenarioCategory.PHYSICAL, ("physical",)),
    ClassificationRule(ScenarioCategory.MOBILE, ("mobile",)),
)


def classify(scenario: Scenario) -> ScenarioCategory:
    """
    Return the category for a scenario. Never fails.

    Args:
        scenario: Scenario whose title and description are inspected.

    Returns:
        Category of the first matching rule, or FALLBACK_CATEGORY.
    """
    title = scenario.title.lower()
    description = scenario.description.lower()
    for rule in CLASSIFICATION_RULES:
        if rule.matches(title, description):
            return rule.category
    logger.debug("scenario_category_fallback", title=scenario.title, category=FALLBACK_CATEGORY.value)
    return FALLBACK_CATEGORY
