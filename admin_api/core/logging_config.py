# admin_api/core/logging_config.py
"""
Centralized logging configuration for the application.

Configures the root logger once at startup and quiets the database and
server libraries so request handling errors stay visible.
"""

import logging
from typing import Optional


def configure_logging(log_level: Optional[str] = None):
    """
    Configure logging for the application.

    Sets appropriate log levels for different modules:
    - App code: INFO (or whatever LOG_LEVEL says)
    - Database (sqlalchemy, asyncpg): WARNING only
    - uvicorn access log: WARNING only
    """
    if log_level is None:
        from admin_api.core.config import get_settings
        log_level = get_settings().LOG_LEVEL

    log_level = log_level.upper()
    level = getattr(logging, log_level, logging.INFO)

    # Configure root logger
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]
    )

    # Quiet database loggers
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)
    logging.getLogger("asyncpg").setLevel(logging.WARNING)

    # Request lines are noise next to the handler logs
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    # Keep app loggers at configured level
    logging.getLogger("admin_api").setLevel(level)
    logging.getLogger("__main__").setLevel(level)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging configured at level: {log_level}")
