"""
Application-level exceptions.

Domain errors raised by the catalogue, taxonomy and submission parsing.
The scoring entry point never lets these reach a caller; routers map
ScenarioNotFound to 404.
"""

from __future__ import annotations


class QuizError(Exception):
    """Base class for InfoSec Quiz errors."""


class InvalidSubmission(QuizError):
    """Submitted answer or scenario payload is missing or has the wrong type."""


class ScenarioNotFound(QuizError):
    """No scenario with the requested id exists in the catalogue."""

    def __init__(self, scenario_id: int):
        super().__init__(f"No scenario with id {scenario_id}")
        self.scenario_id = scenario_id


class TaxonomyError(QuizError):
    """Concept taxonomy violates its invariants (empty or duplicate entries)."""
