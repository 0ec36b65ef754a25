"""
InfoSec Quiz — scoring service for cybersecurity incident scenarios.

Presents real-world style incident scenarios and scores free-text analyses
by keyword and concept coverage. Modular layout: analysis engine (taxonomy,
classifier, evaluator, formatter), scenario catalogue, and API server.
"""

__version__ = "0.1.0"
