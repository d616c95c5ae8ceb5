"""
Centralized logging configuration.

Entry points call bootstrap_logging() to configure logging consistently from
a logging.ini file in Python's native INI format.
"""

import logging
import logging.config
import os
import sys
from pathlib import Path
from typing import Optional

VALID_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def _find_logging_config() -> Optional[Path]:
    """
    Find the logging configuration file.

    Looks for the path in LOGGING_CONFIG, then logging.ini in the current
    working directory.

    Returns:
        Path to logging configuration file, or None if not found.
    """
    env_config = os.environ.get('LOGGING_CONFIG')
    if env_config and Path(env_config).exists():
        return Path(env_config)

    current_dir_config = Path('logging.ini')
    if current_dir_config.exists():
        return current_dir_config

    return None


def _get_log_level() -> str:
    """Return the LOG_LEVEL environment variable, defaulting to INFO."""
    log_level = os.environ.get('LOG_LEVEL', 'INFO').strip().upper()
    if log_level not in VALID_LEVELS:
        print(f"Warning: Invalid LOG_LEVEL '{log_level}', using INFO", file=sys.stderr)
        log_level = 'INFO'
    return log_level


def bootstrap_logging(name: Optional[str] = None) -> None:
    """
    Bootstrap logging configuration using Python's native INI format.

    Loads logging.ini with logging.config.fileConfig() and applies the
    LOG_LEVEL environment variable on top. Falls back to basicConfig when
    no INI file is found or it cannot be loaded.

    Args:
        name: Optional name for the logger that reports the configuration
    """
    log_level = _get_log_level()
    config_path = _find_logging_config()

    if config_path is None:
        logging.basicConfig(
            level=getattr(logging, log_level),
            format='%(levelname)s: %(name)s: %(message)s',
            stream=sys.stderr
        )
        return

    try:
        logging.config.fileConfig(
            str(config_path),
            disable_existing_loggers=False
        )
    except Exception as e:
        print(f"Warning: Failed to load logging config from {config_path}: {e}", file=sys.stderr)
        print("Using basic logging configuration", file=sys.stderr)
        logging.basicConfig(
            level=getattr(logging, log_level),
            format='%(levelname)s: %(name)s: %(message)s',
            stream=sys.stderr
        )
        return

    if 'LOG_LEVEL' in os.environ:
        root_logger = logging.getLogger()
        root_logger.setLevel(getattr(logging, log_level))
        for handler in root_logger.handlers:
            if isinstance(handler, logging.StreamHandler):
                handler.setLevel(getattr(logging, log_level))
        logging.getLogger('firebase_authentication').setLevel(getattr(logging, log_level))

    logging.getLogger(name).debug(f"Logging configured from {config_path}")

