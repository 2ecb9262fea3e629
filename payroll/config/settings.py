"""Central configuration and environment bootstrap for the application.

Responsibilities:
- bootstrap environment from payroll/.env (python-dotenv)
- expose the runtime settings read from the environment
- provide small logging configuration helper
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv

_logger = logging.getLogger(__name__)

DEFAULT_APPLICATION_NAME = "PayrollApp"
DEFAULT_APP_ENV = "production"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_EXPORT_DIR = "exports"

# Public settings (read at import, refreshed by get_runtime_config())
APPLICATION_NAME = os.getenv("APPLICATION_NAME", DEFAULT_APPLICATION_NAME)
APP_ENV = os.getenv("APP_ENV", DEFAULT_APP_ENV)


def bootstrap_env(app_root: Optional[str] = None) -> None:
    """Load .env file located in payroll/ if present and configure basic logging.

    This function is safe to call multiple times.
    """
    if app_root is None:
        # package path (this file lives in payroll/config)
        app_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

    env_path = os.path.join(app_root, ".env")
    if os.path.exists(env_path):
        load_dotenv(env_path, override=False)

    configure_logging(get_log_level())

    if os.path.exists(env_path):
        _logger.info(f"Loaded .env from: {env_path}")
    else:
        _logger.debug(f"No .env file found in {app_root} (fine in production)")


def get_log_level() -> int:
    """Return the logging level named by PAYROLL_LOG_LEVEL (INFO when unknown)."""
    name = os.getenv("PAYROLL_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        _logger.warning(f"Unknown PAYROLL_LOG_LEVEL {name!r}, using INFO")
        return logging.INFO
    return level


def get_export_dir() -> str:
    return os.getenv("PAYROLL_EXPORT_DIR", DEFAULT_EXPORT_DIR)


def get_runtime_config() -> dict:
    """Return a runtime configuration dictionary.

    Keys:
      - application_name: str
      - app_env: str
      - log_level: int
      - export_dir: str
    """
    return {
        "application_name": os.getenv("APPLICATION_NAME", DEFAULT_APPLICATION_NAME),
        "app_env": os.getenv("APP_ENV", DEFAULT_APP_ENV),
        "log_level": get_log_level(),
        "export_dir": get_export_dir(),
    }


def configure_logging(level: int = logging.INFO) -> None:
    """Basic logging configuration used by the application.

    Sets a short timestamped format if no handlers are configured yet.
    """
    if logging.getLogger().handlers:
        # Assume logging already configured
        return
    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    logging.basicConfig(level=level, format=fmt, datefmt="%Y-%m-%d %H:%M:%S")
    _logger.debug("Logging initialised")


__all__ = [
    "bootstrap_env",
    "configure_logging",
    "get_export_dir",
    "get_log_level",
    "get_runtime_config",
    "APPLICATION_NAME",
    "APP_ENV",
]
