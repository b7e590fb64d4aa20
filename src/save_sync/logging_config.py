"""Logging configuration for Save Sync.

Provides centralized logging setup with file and console handlers.
Log files are stored in the application's config directory.
"""

import logging
import sys


def setup_logging(debug: bool = False) -> logging.Logger:
    """Configure application-wide logging.

    Handlers on the "save_sync" logger:
        - file (save_sync.log in SyncPaths.CONFIG_DIR): DEBUG and above
        - console (stderr): WARNING and above, or DEBUG and above in debug mode

    Calling it again replaces the handlers rather than adding more.

    Args:
        debug: If True, the console handler logs at DEBUG level

    Returns:
        The root logger for the application
    """
    from .config.paths import SyncPaths

    SyncPaths.ensure_config_dir()

    logger = logging.getLogger("save_sync")
    logger.setLevel(logging.DEBUG)

    # Clear any existing handlers
    logger.handlers.clear()

    # File handler - always logs DEBUG and above
    file_handler = logging.FileHandler(SyncPaths.LOG_FILE, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    logger.addHandler(file_handler)

    # Console handler - warnings always, everything in debug mode
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if debug else logging.WARNING)
    console_handler.setFormatter(logging.Formatter(
        "%(levelname)s - %(name)s - %(message)s"
    ))
    logger.addHandler(console_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a child logger for a specific module.

    Args:
        name: Module name (e.g., 'reconciler', 'storage')

    Returns:
        A logger instance for the module
    """
    return logging.getLogger(f"save_sync.{name}")
