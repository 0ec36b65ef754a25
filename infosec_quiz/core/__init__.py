"""
Core utilities — shared exceptions and cross-cutting concerns.
"""

from infosec_quiz.core.exceptions import (
    InvalidSubmission,
    QuizError,
    ScenarioNotFound,
    TaxonomyError,
)

__all__ = ["QuizError", "InvalidSubmission", "ScenarioNotFound", "TaxonomyError"]
