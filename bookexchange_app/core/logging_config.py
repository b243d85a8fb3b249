"""
Centralized Logging Configuration for Book Exchange

Provides consistent logging setup across the application with:
- Human-readable console format
- Optional file rotation when a log directory is configured
"""

import os
import logging
import logging.handlers
from typing import Optional

LOGGER_NAME = 'bookexchange_app'  # same name as the Flask app logger
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(module)s: %(message)s'


def setup_logging(
    app=None,
    log_level: str = 'INFO',
    log_dir: Optional[str] = None,
) -> logging.Logger:
    """
    Configure application logging.

    Args:
        app: Flask application instance (optional)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directory for log files; console only when omitted

    Returns:
        Configured logger instance
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Clear existing handlers
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            os.path.join(log_dir, 'bookexchange.log'),
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if app:
        logging.getLogger('werkzeug').setLevel(logging.WARNING)

    logger.info("Logging initialized: level=%s, dir=%s", log_level, log_dir or '-')

    return logger
