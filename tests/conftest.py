"""
Pytest fixtures for InfoSec Quiz tests. Resets cached settings and the
scenario catalogue so env overrides take effect per test.
"""

from __future__ import annotations

import pytest

RANSOMWARE_ANSWER = (
    "We should have had air-gapped backups and applied patches immediately "
    "to prevent this ransomware incident"
)


@pytest.fixture(autouse=True)
def fresh_state():
    """Clear settings cache and catalogue before and after each test."""
    from infosec_quiz.config import get_settings
    from infosec_quiz.scenarios import reset_catalog_for_test

    get_settings.cache_clear()
    reset_catalog_for_test()
    yield
    get_settings.cache_clear()
    reset_catalog_for_test()


@pytest.fixture
def ransomware_scenario():
    from infosec_quiz.analysis_engine.models import Scenario

    return Scenario(
        id=2,
        title="Ransomware Attack",
        organization="City of Riverside",
        date="November 2022",
        description="A city employee opened an attachment that contained ransomware.",
        impact="City services were disrupted for 2 weeks.",
    )


@pytest.fixture
def client():
    """FastAPI TestClient; entering the context runs the app lifespan."""
    from fastapi.testclient import TestClient

    from infosec_quiz.api_server.server import app

    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
