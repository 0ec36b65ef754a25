"""
InfoSec Quiz API Python client example.

Uses the requests library. Mirrors the FastAPI OpenAPI schema.
Run: pip install requests

Usage:
    from docs.python_sdk_example import QuizClient
    client = QuizClient("http://localhost:8000")
    result = client.analyze_scenario(2, "Keep offline backups and patch promptly.")
"""

from __future__ import annotations

from typing import Any

import requests


class QuizClientError(Exception):
    """Raised when the API returns an error response."""

    def __init__(self, message: str, status_code: int | None = None, response: requests.Response | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class QuizClient:
    """Client for the InfoSec Quiz API."""

    def __init__(self, base_url: str = "http://localhost:8000", timeout: float = 30.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = requests.Session()

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> requests.Response:
        url = f"{self.base_url}{path}"
        resp = self._session.request(method, url, params=params, json=json, timeout=self.timeout)
        if not resp.ok:
            detail = resp.json().get("detail", resp.text) if resp.headers.get("content-type", "").startswith("application/json") else resp.text
            raise QuizClientError(
                f"API error: {detail}",
                status_code=resp.status_code,
                response=resp,
            )
        return resp

    def health(self) -> dict[str, str]:
        """Liveness probe."""
        r = self._request("GET", "/health")
        return r.json()

    def list_scenarios(self) -> list[dict[str, Any]]:
        """All catalogue scenarios."""
        r = self._request("GET", "/api/scenarios")
        return r.json()

    def get_scenario(self, scenario_id: int) -> dict[str, Any]:
        r = self._request("GET", f"/api/scenarios/{scenario_id}")
        return r.json()

    def random_scenario(self, exclude: int | None = None) -> dict[str, Any]:
        """Next scenario to play, avoiding `exclude` when possible."""
        params = {"exclude": exclude} if exclude is not None else None
        r = self._request("GET", "/api/scenarios/random", params=params)
        return r.json()

    def list_categories(self) -> list[dict[str, Any]]:
        r = self._request("GET", "/api/categories")
        return r.json()

    def analyze(self, user_response: str, scenario: dict[str, Any]) -> dict[str, Any]:
        """Score an answer against an arbitrary scenario (title + description required)."""
        r = self._request("POST", "/api/analyze", json={"userResponse": user_response, "scenario": scenario})
        return r.json()

    def analyze_scenario(self, scenario_id: int, user_response: str) -> dict[str, Any]:
        """Score an answer against a catalogue scenario."""
        r = self._request("POST", f"/api/scenarios/{scenario_id}/analyze", json={"userResponse": user_response})
        return r.json()


# -----------------------------------------------------------------------------
# Example usage
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    client = QuizClient("http://localhost:8000")

    print("Health:", client.health())

    scenario = client.random_scenario()
    print("Scenario:", scenario["title"])

    result = client.analyze(
        "We should have had air-gapped backups and applied patches immediately to prevent this ransomware incident",
        scenario,
    )
    print("Score:", result["score"], "-", result["overallFeedback"])

    try:
        client.get_scenario(9999)
    except QuizClientError as e:
        if e.status_code == 404:
            print("Scenario not found")
        else:
            raise
