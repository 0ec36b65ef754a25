"""
Scenario catalogue — the incident scenarios offered by the quiz.
"""

from infosec_quiz.scenarios.catalog import (
    get_scenario,
    list_scenarios,
    load_scenarios,
    random_scenario,
    reset_catalog_for_test,
)

__all__ = [
    "get_scenario",
    "list_scenarios",
    "load_scenarios",
    "random_scenario",
    "reset_catalog_for_test",
]
