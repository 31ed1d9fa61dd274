"""Standalone runner for the NC FTTX Portal.

Usage:
    python -m fttx_portal
    nc-fttx-portal

Environment variables:
    PORT: Port to bind to (default: 8080, also when empty)
    HOST: Interface to bind to (default: 0.0.0.0)
    TEMPLATES_DIR / STATIC_DIR: override the packaged web assets
"""

import logging
import sys

import uvicorn
from pydantic import ValidationError

from fttx_portal.config import get_settings
from fttx_portal.core.errors import PortalError
from fttx_portal.infrastructure.observability import setup_logging
from fttx_portal.main import create_app

logger = logging.getLogger(__name__)


def main():
    """Main entry point for the portal."""
    setup_logging()
    try:
        settings = get_settings()
    except ValidationError as e:
        logger.critical(f"Invalid configuration: {e}")
        sys.exit(1)
    setup_logging(settings.log_level, settings.log_format)

    # Startup-fatal: broken templates or dataset never reach the listener
    try:
        app = create_app(settings)
    except PortalError as e:
        logger.critical(
            f"Error loading portal: {e.message}", extra={"error_code": e.code},
        )
        sys.exit(1)

    logger.info(f"NC FTTX Portal starting on port {settings.port}", extra={"port": settings.port})
    logger.info(f"Access at: http://localhost:{settings.port}")
    # uvicorn logs and exits non-zero itself when the port can't be bound
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
