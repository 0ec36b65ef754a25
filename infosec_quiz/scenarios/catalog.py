"""
Scenario catalogue loaded from JSON.

The catalogue is read once, on first use, from config SCENARIOS_PATH (default:
scenarios.json next to this module) and cached as an immutable tuple.
"""

from __future__ import annotations

import json
import random
import threading
from pathlib import Path

from infosec_quiz.analysis_engine.models import Scenario
from infosec_quiz.config import get_settings
from infosec_quiz.core.exceptions import InvalidSubmission, ScenarioNotFound
from infosec_quiz.quiz_logging import get_logger

logger = get_logger(__name__)

_lock = threading.Lock()
_catalog: tuple[Scenario, ...] | None = None


def load_scenarios(path: Path) -> tuple[Scenario, ...]:
    """
    Read and validate a scenario catalogue file.

    Args:
        path: JSON file holding an array of scenario objects with unique integer ids.

    Raises:
        FileNotFoundError: path does not exist.
        InvalidSubmission: a record is malformed, lacks an id, or repeats an id.
    """
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        raise InvalidSubmission(f"Scenario catalogue {path} must be a JSON array")
    scenarios: list[Scenario] = []
    seen: set[int] = set()
    for record in raw:
        scenario = Scenario.from_dict(record)
        if scenario.id is None:
            raise InvalidSubmission(f"Scenario {scenario.title!r} has no integer id")
        if scenario.id in seen:
            raise InvalidSubmission(f"Duplicate scenario id {scenario.id}")
        seen.add(scenario.id)
        scenarios.append(scenario)
    logger.info("scenarios_loaded", path=str(path), count=len(scenarios))
    return tuple(scenarios)


def list_scenarios() -> tuple[Scenario, ...]:
    """Return all scenarios, loading the catalogue on first call."""
    global _catalog
    if _catalog is None:
        with _lock:
            if _catalog is None:
                _catalog = load_scenarios(get_settings().scenarios_path)
    return _catalog


def get_scenario(scenario_id: int) -> Scenario:
    """Return the scenario with scenario_id; raise ScenarioNotFound otherwise."""
    for scenario in list_scenarios():
        if scenario.id == scenario_id:
            return scenario
    raise ScenarioNotFound(scenario_id)


def random_scenario(exclude_id: int | None = None, rng: random.Random | None = None) -> Scenario:
    """
    Pick a scenario at random, avoiding exclude_id when another one exists.

    Raises:
        ScenarioNotFound: the catalogue is empty.
    """
    rng = rng or random
    scenarios = list_scenarios()
    if not scenarios:
        raise ScenarioNotFound(exclude_id if exclude_id is not None else 0)
    candidates = [s for s in scenarios if s.id != exclude_id] or list(scenarios)
    return rng.choice(candidates)


def reset_catalog_for_test() -> None:
    """Drop the cached catalogue so the next call reloads from SCENARIOS_PATH."""
    global _catalog
    with _lock:
        _catalog = None
