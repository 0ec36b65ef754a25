"""
Tests for the scenario catalogue (loading, lookup, random selection, overrides).
"""

from __future__ import annotations

import json
import random

import pytest

from infosec_quiz.core.exceptions import InvalidSubmission, ScenarioNotFound
from infosec_quiz.scenarios import get_scenario, list_scenarios, load_scenarios, random_scenario


def _write_catalog(path, records):
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


def test_default_catalogue_has_ten_scenarios():
    scenarios = list_scenarios()
    assert [s.id for s in scenarios] == list(range(1, 11))
    assert all(s.title and s.description and s.impact for s in scenarios)


def test_catalogue_is_cached():
    assert list_scenarios() is list_scenarios()


def test_get_scenario():
    scenario = get_scenario(3)
    assert scenario.title == "Password Reuse Breach"
    assert scenario.organization == "TechStart Inc."


def test_get_scenario_unknown():
    with pytest.raises(ScenarioNotFound) as exc_info:
        get_scenario(99)
    assert exc_info.value.scenario_id == 99


def test_random_scenario_avoids_excluded():
    rng = random.Random(7)
    for _ in range(50):
        assert random_scenario(exclude_id=4, rng=rng).id != 4


def test_random_scenario_single_entry_catalogue(tmp_path, monkeypatch):
    path = _write_catalog(
        tmp_path / "one.json",
        [{"id": 1, "title": "Only One", "description": "d"}],
    )
    monkeypatch.setenv("SCENARIOS_PATH", str(path))
    assert random_scenario(exclude_id=1).title == "Only One"


def test_scenarios_path_override(tmp_path, monkeypatch):
    path = _write_catalog(
        tmp_path / "custom.json",
        [
            {"id": 10, "title": "Lost Mobile Phone", "description": "A phone was left in a taxi."},
            {"id": 11, "title": "Badge Cloning", "description": "Physical badge cloned."},
        ],
    )
    monkeypatch.setenv("SCENARIOS_PATH", str(path))
    assert [s.id for s in list_scenarios()] == [10, 11]


def test_empty_catalogue_random_raises(tmp_path, monkeypatch):
    monkeypatch.setenv("SCENARIOS_PATH", str(_write_catalog(tmp_path / "empty.json", [])))
    with pytest.raises(ScenarioNotFound):
        random_scenario()


def test_load_rejects_duplicate_ids(tmp_path):
    path = _write_catalog(
        tmp_path / "dup.json",
        [
            {"id": 1, "title": "A", "description": "a"},
            {"id": 1, "title": "B", "description": "b"},
        ],
    )
    with pytest.raises(InvalidSubmission, match="Duplicate"):
        load_scenarios(path)


def test_load_rejects_missing_id(tmp_path):
    path = _write_catalog(tmp_path / "noid.json", [{"title": "A", "description": "a"}])
    with pytest.raises(InvalidSubmission, match="no integer id"):
        load_scenarios(path)


def test_load_rejects_non_array(tmp_path):
    path = _write_catalog(tmp_path / "obj.json", {"id": 1})
    with pytest.raises(InvalidSubmission, match="JSON array"):
        load_scenarios(path)
