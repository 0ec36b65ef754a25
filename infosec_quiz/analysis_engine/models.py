"""
Data models for analysis engine input and output.

Responsibilities:
- Scenario: read-only incident description supplied by the caller or catalogue.
- AnalysisResult: structured evaluation returned to the presentation layer.
- FeedbackTier: threshold band that selects the overall feedback text.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from infosec_quiz.core.exceptions import InvalidSubmission


class FeedbackTier(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    DEVELOPING = "developing"


@dataclass(frozen=True)
class Scenario:
    """
    Security incident shown to the user.

    Only title and description feed classification; the other fields are
    carried through for display.
    """

    title: str
    description: str
    organization: str = ""
    date: str = ""
    impact: str = ""
    id: int | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Scenario:
        """
        Build a Scenario from a JSON-like mapping.

        Raises:
            InvalidSubmission: if data is not a mapping or title/description
                are missing or not strings.
        """
        if not isinstance(data, dict):
            raise InvalidSubmission("scenario must be an object")
        title = data.get("title")
        description = data.get("description")
        if not isinstance(title, str) or not isinstance(description, str):
            raise InvalidSubmission("scenario title and description must be strings")
        raw_id = data.get("id")
        return cls(
            title=title,
            description=description,
            organization=str(data.get("organization") or ""),
            date=str(data.get("date") or ""),
            impact=str(data.get("impact") or ""),
            id=raw_id if isinstance(raw_id, int) and not isinstance(raw_id, bool) else None,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "organization": self.organization,
            "date": self.date,
            "description": self.description,
            "impact": self.impact,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Evaluation of one free-text answer; built fresh per call."""

    strengths: tuple[str, ...]
    gaps: tuple[str, ...]
    suggestions: tuple[str, ...]
    score: int
    overall_feedback: str
    tier: FeedbackTier | None = None
    """Feedback band for scored answers; None for low-quality and fallback results."""

    def to_dict(self) -> dict[str, Any]:
        """Wire format (camelCase keys) expected by the quiz front end."""
        return {
            "strengths": list(self.strengths),
            "gaps": list(self.gaps),
            "suggestions": list(self.suggestions),
            "score": self.score,
            "overallFeedback": self.overall_feedback,
        }
