#!/usr/bin/env python3
"""Main entry point for the todo API."""

import argparse
import logging
import sys
from pathlib import Path
import uvicorn

# Add src to path
sys.path.insert(0, str(Path(__file__).parent))

from config import Settings
from errors import StartupError

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings):
    handlers = [logging.StreamHandler()]
    if settings.log_file:
        Path(settings.log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(settings.log_file))

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def build_app(settings: Settings):
    """Connect to the database and return the app and its database manager."""
    from api import create_app
    from database import DatabaseManager, TaskStore

    if not settings.database_url:
        raise StartupError("DATABASE_URL is not set")

    db_manager = DatabaseManager(settings.database_url, echo=settings.database_echo)
    db_manager.initialize()
    logger.info("Connected to database")

    app = create_app(TaskStore(db_manager), cors_origins=settings.cors_origins)
    return app, db_manager


def run_http_server(settings: Settings):
    """Run the HTTP API server until it is stopped."""
    app, db_manager = build_app(settings)

    logger.info(f"Server listening on {settings.host}:{settings.port}")
    try:
        uvicorn.run(
            app,
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower()
        )
    finally:
        db_manager.close()


def main(argv=None):
    """Main entry point."""
    settings = Settings()

    parser = argparse.ArgumentParser(description="Todo API server")
    parser.add_argument(
        "--host",
        default=settings.host,
        help=f"HTTP server host (default: {settings.host})"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"HTTP server port (default: {settings.port})"
    )

    args = parser.parse_args(argv)
    settings.host = args.host
    settings.port = args.port

    configure_logging(settings)

    try:
        run_http_server(settings)
    except KeyboardInterrupt:
        logger.info("Shutting down todo API...")
    except StartupError as e:
        logger.error(f"Startup failed: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
