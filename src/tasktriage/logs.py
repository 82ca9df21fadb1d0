import logging
import sys
from typing import Optional

from .config import Settings


def setup_logging(settings: Optional[Settings] = None):
    """Set up logging configuration for tasktriage package with environment-based levels."""
    settings = settings or Settings.from_env()

    # Default: production mode (warnings and errors only)
    if settings.debug:
        level = logging.DEBUG
    elif settings.log_level:
        level = getattr(logging, settings.log_level, logging.WARNING)
    else:
        level = logging.WARNING

    log_format = '[%(asctime)s] %(levelname)-8s [%(name)s:%(funcName)s:%(lineno)d] %(message)s'
    date_format = '%Y-%m-%d %H:%M:%S'

    detailed_formatter = logging.Formatter(log_format, date_format)
    console_formatter = logging.Formatter(
        '%(levelname)-8s [%(name)s] %(message)s' if settings.debug
        else '%(levelname)s: %(message)s'
    )

    # Console goes to stderr so command output on stdout stays machine readable
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(level)

    logger = logging.getLogger('tasktriage')
    logger.setLevel(logging.DEBUG)  # Logger accepts all, handlers filter
    logger.handlers.clear()
    logger.addHandler(console_handler)
    logger.propagate = False

    if settings.log_to_file:
        try:
            settings.log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(settings.log_dir / "tasktriage.log", encoding="utf-8")
        except OSError as e:
            logger.warning(f"File logging disabled, cannot use {settings.log_dir}: {e}")
        else:
            file_handler.setFormatter(detailed_formatter)
            file_handler.setLevel(logging.DEBUG)  # File gets all messages
            logger.addHandler(file_handler)

    return logger

# Initialize logging when package is imported
setup_logging()

def get_logger(name: str = None):
    """Get a logger instance for a specific module."""
    if name:
        return logging.getLogger(f'tasktriage.{name}')
    return logging.getLogger('tasktriage')
