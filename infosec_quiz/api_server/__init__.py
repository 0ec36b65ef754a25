"""
API server package — HTTP interface for the quiz.

Serves the scenario catalogue and scores submitted analyses; delegates all
scoring to the analysis engine.
"""
