"""Main entry point for the support relay bot."""

import sys
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from relay.api import create_fastapi_app
from relay.app import Application
from relay.config import load_settings
from relay.errors import ConfigError
from relay.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def main():
    """Run the application."""
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env")

    try:
        settings = load_settings()
    except ConfigError as e:
        setup_logging()
        logger.error("Invalid configuration: %s", e)
        sys.exit(1)

    setup_logging(log_level=settings.log_level, log_file=settings.log_file)

    app = create_fastapi_app(Application(settings))

    # Run with uvicorn; shuts the bot down on SIGINT/SIGTERM via lifespan
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
