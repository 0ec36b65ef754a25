"""
Structured logging for InfoSec Quiz.

JSON logs with timestamp, event_type, level and logger name.
Use get_logger() in all modules for aggregation-friendly output.
"""

from infosec_quiz.quiz_logging.logger import get_logger

__all__ = ["get_logger"]
