"""
Main entrypoint: run the InfoSec Quiz API with uvicorn.

Env: API_HOST, API_PORT, MAX_RESPONSE_CHARS, SCENARIOS_PATH, LOG_LEVEL, LOG_FORMAT.

Equivalent: uvicorn infosec_quiz.api_server.app:app --host 0.0.0.0 --port 8000
"""

# Configure structured JSON logging before other imports that may log
from infosec_quiz.quiz_logging import get_logger

logger = get_logger("main")


def main() -> None:
    """Resolve settings and serve the API in the main thread."""
    import uvicorn

    from infosec_quiz.config import get_settings

    settings = get_settings()
    logger.info(
        "main_starting",
        api_host=settings.api_host,
        api_port=settings.api_port,
        max_response_chars=settings.max_response_chars,
        scenarios_path=str(settings.scenarios_path),
    )
    uvicorn.run(
        "infosec_quiz.api_server.app:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level="info",
    )


if __name__ == "__main__":
    main()
