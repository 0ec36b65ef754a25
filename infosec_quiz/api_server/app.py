"""
FastAPI/ASGI application entrypoint.

Run with: uvicorn infosec_quiz.api_server.app:app --host 0.0.0.0 --port 8000
"""

from infosec_quiz.api_server.server import app

__all__ = ["app"]
