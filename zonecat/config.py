"""
Centralized Configuration Module

Rendering defaults, logging configuration, and application settings.
Import from here instead of hardcoding values.
"""

import os
import logging
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# ============================================================================
# Load default .env at module import time
# ============================================================================
load_dotenv()

# ============================================================================
# Environment Loading
# ============================================================================

def load_environment(env_file: Optional[str] = None):
    """
    Load environment variables from .env file.

    Class-level settings below are read once at import; callers that load
    a different file should call reload_settings() afterwards.

    Args:
        env_file: Optional path to .env file. If None, uses default .env
    """
    if env_file:
        env_path = Path(env_file)
        if env_path.exists():
            load_dotenv(env_path, override=True)
            logging.getLogger(__name__).info(f"Loaded environment from: {env_file}")
        else:
            logging.getLogger(__name__).warning(f"Environment file not found: {env_file}")
    else:
        load_dotenv(override=True)


def env_int(name: str, default: int) -> int:
    """
    Read an integer setting from the environment.

    Raises:
        ValueError: If the variable is set but is not an integer
    """
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


# ============================================================================
# Application Constants
# ============================================================================

class AppConfig:
    """Application-wide configuration constants"""

    APP_NAME = "zonecat"
    APP_VERSION = "1.0.0"
    APP_DESCRIPTION = "Render zone configuration replica constraints as a tree"

    OUTPUT_FORMATS = ("tree", "json")
    DEFAULT_OUTPUT_FORMAT = os.getenv("ZONECAT_OUTPUT_FORMAT", "tree").lower()


class TreeConfig:
    """Tree rendering configuration"""

    STYLES = ("indent", "box")
    STYLE = os.getenv("ZONECAT_TREE_STYLE", "indent").lower()
    INDENT = env_int("ZONECAT_TREE_INDENT", 2)


# ============================================================================
# Logging Configuration
# ============================================================================

class LogConfig:
    """Logging configuration"""

    LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()

    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

    # Detailed format with file/line
    DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"

    # File Logging
    LOG_FILE = os.getenv("LOG_FILE")  # Optional
    LOG_FILE_MAX_BYTES = env_int("LOG_FILE_MAX_BYTES", 10485760)  # 10MB
    LOG_FILE_BACKUP_COUNT = env_int("LOG_FILE_BACKUP_COUNT", 5)


def reload_settings():
    """Re-read class-level settings from the current environment"""
    AppConfig.DEFAULT_OUTPUT_FORMAT = os.getenv("ZONECAT_OUTPUT_FORMAT", "tree").lower()
    TreeConfig.STYLE = os.getenv("ZONECAT_TREE_STYLE", "indent").lower()
    TreeConfig.INDENT = env_int("ZONECAT_TREE_INDENT", 2)
    LogConfig.LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
    LogConfig.LOG_FILE = os.getenv("LOG_FILE")
    LogConfig.LOG_FILE_MAX_BYTES = env_int("LOG_FILE_MAX_BYTES", 10485760)
    LogConfig.LOG_FILE_BACKUP_COUNT = env_int("LOG_FILE_BACKUP_COUNT", 5)


def setup_logging(verbose: bool = False, log_file: Optional[str] = None):
    """
    Configure application logging.

    Args:
        verbose: Enable verbose (DEBUG) logging
        log_file: Optional log file path
    """
    if verbose:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, LogConfig.LOG_LEVEL, logging.WARNING)

    log_format = LogConfig.DETAILED_FORMAT if verbose else LogConfig.LOG_FORMAT

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=LogConfig.LOG_DATE_FORMAT
    )
    logging.getLogger().setLevel(log_level)

    if log_file or LogConfig.LOG_FILE:
        from logging.handlers import RotatingFileHandler

        file_path = log_file or LogConfig.LOG_FILE
        file_handler = RotatingFileHandler(
            file_path,
            maxBytes=LogConfig.LOG_FILE_MAX_BYTES,
            backupCount=LogConfig.LOG_FILE_BACKUP_COUNT
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(log_format, LogConfig.LOG_DATE_FORMAT))
        logging.getLogger().addHandler(file_handler)
        logger.info(f"Logging to file: {file_path}")

    logger.info(f"Logging configured: level={logging.getLevelName(log_level)}")


# Initialize logger for this module
logger = logging.getLogger(__name__)


# ============================================================================
# Validation
# ============================================================================

def validate_config():
    """
    Validate configuration on startup.
    Raises ValueError if any setting is invalid.
    """
    errors = []

    if AppConfig.DEFAULT_OUTPUT_FORMAT not in AppConfig.OUTPUT_FORMATS:
        errors.append(
            f"ZONECAT_OUTPUT_FORMAT must be one of {', '.join(AppConfig.OUTPUT_FORMATS)}, "
            f"got {AppConfig.DEFAULT_OUTPUT_FORMAT!r}"
        )

    if TreeConfig.STYLE not in TreeConfig.STYLES:
        errors.append(
            f"ZONECAT_TREE_STYLE must be one of {', '.join(TreeConfig.STYLES)}, "
            f"got {TreeConfig.STYLE!r}"
        )

    if TreeConfig.INDENT < 1:
        errors.append(f"ZONECAT_TREE_INDENT must be at least 1, got {TreeConfig.INDENT}")

    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ValueError(error_msg)

    logger.debug("Configuration validated")


__all__ = [
    'AppConfig',
    'TreeConfig',
    'LogConfig',
    'env_int',
    'load_environment',
    'reload_settings',
    'setup_logging',
    'validate_config',
]
