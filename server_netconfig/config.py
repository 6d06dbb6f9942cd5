"""
Centralized Configuration Module

All application constants, logging configuration, and settings.
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
# EndpointConfig and AppConfig read env vars as class attributes
load_dotenv()

# ============================================================================
# Environment Loading
# ============================================================================

def load_environment(env_file: Optional[str] = None):
    """
    Load environment variables from .env file.

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

    AppConfig.reload()
    EndpointConfig.reload()
    LogConfig.reload()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


# ============================================================================
# Application Constants
# ============================================================================

class AppConfig:
    """Application-wide configuration constants"""

    # Application Info
    APP_NAME = "Server Network Configuration"
    APP_VERSION = "1.0.0"
    APP_DESCRIPTION = "Normalize server network configuration and map it to discovered NICs"

    # Seconds to wait before asking the endpoint for NICs a second time
    NIC_RETRY_DELAY_SECONDS = int(os.getenv("NIC_RETRY_DELAY_SECONDS", "60"))

    # Timeouts
    API_TIMEOUT = int(os.getenv("API_TIMEOUT", "30"))

    # iDRACs usually present self-signed certificates
    VERIFY_SSL = _env_flag("VERIFY_SSL", "false")

    # Default Values
    DEFAULT_OUTPUT_FORMAT = "list"

    @classmethod
    def reload(cls):
        """Re-read env-driven settings after an env file was loaded"""
        cls.NIC_RETRY_DELAY_SECONDS = int(os.getenv("NIC_RETRY_DELAY_SECONDS", "60"))
        cls.API_TIMEOUT = int(os.getenv("API_TIMEOUT", "30"))
        cls.VERIFY_SSL = _env_flag("VERIFY_SSL", "false")


class EndpointConfig:
    """Hardware management endpoint (iDRAC) configuration"""

    IDRAC_HOST = os.getenv("IDRAC_HOST")
    IDRAC_USERNAME = os.getenv("IDRAC_USERNAME", "root")
    IDRAC_PASSWORD = os.getenv("IDRAC_PASSWORD")

    @classmethod
    def reload(cls):
        """Re-read endpoint settings after an env file was loaded"""
        cls.IDRAC_HOST = os.getenv("IDRAC_HOST")
        cls.IDRAC_USERNAME = os.getenv("IDRAC_USERNAME", "root")
        cls.IDRAC_PASSWORD = os.getenv("IDRAC_PASSWORD")

    @classmethod
    def get_credentials(cls, host: Optional[str] = None) -> dict:
        """Get credentials for the endpoint, optionally overriding the host"""
        return {
            "host": host or cls.IDRAC_HOST,
            "username": cls.IDRAC_USERNAME,
            "password": cls.IDRAC_PASSWORD,
        }

    @classmethod
    def is_configured(cls) -> bool:
        """Check if the endpoint is properly configured"""
        return all([cls.IDRAC_HOST, cls.IDRAC_USERNAME, cls.IDRAC_PASSWORD])


# ============================================================================
# Logging Configuration
# ============================================================================

class LogConfig:
    """Logging configuration"""

    # Log Level
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Log Format
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

    # Detailed format with file/line
    DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"

    # File Logging
    LOG_FILE = os.getenv("LOG_FILE")  # Optional
    LOG_FILE_MAX_BYTES = int(os.getenv("LOG_FILE_MAX_BYTES", "10485760"))  # 10MB
    LOG_FILE_BACKUP_COUNT = int(os.getenv("LOG_FILE_BACKUP_COUNT", "5"))

    @classmethod
    def reload(cls):
        cls.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        cls.LOG_FILE = os.getenv("LOG_FILE")
        cls.LOG_FILE_MAX_BYTES = int(os.getenv("LOG_FILE_MAX_BYTES", "10485760"))
        cls.LOG_FILE_BACKUP_COUNT = int(os.getenv("LOG_FILE_BACKUP_COUNT", "5"))


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
        log_level = getattr(logging, LogConfig.LOG_LEVEL, logging.INFO)

    log_format = LogConfig.DETAILED_FORMAT if verbose else LogConfig.LOG_FORMAT

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=LogConfig.LOG_DATE_FORMAT
    )

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

    # Suppress noisy loggers
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    logger.info(f"Logging configured: level={logging.getLevelName(log_level)}")


logger = logging.getLogger(__name__)


# ============================================================================
# Validation
# ============================================================================

def validate_config(require_endpoint: bool = False):
    """
    Validate configuration on startup.
    Raises ValueError if critical configuration is missing.

    Args:
        require_endpoint: Whether iDRAC credentials are mandatory for this run
    """
    errors = []

    if AppConfig.NIC_RETRY_DELAY_SECONDS < 0:
        errors.append(f"NIC_RETRY_DELAY_SECONDS must not be negative ({AppConfig.NIC_RETRY_DELAY_SECONDS})")

    if AppConfig.API_TIMEOUT <= 0:
        errors.append(f"API_TIMEOUT must be positive ({AppConfig.API_TIMEOUT})")

    if require_endpoint:
        if not EndpointConfig.IDRAC_HOST:
            errors.append("IDRAC_HOST is not configured")
        elif not EndpointConfig.is_configured():
            errors.append("iDRAC host configured but missing username/password")

    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ValueError(error_msg)

    logger.debug("Configuration validated")


__all__ = [
    'AppConfig',
    'EndpointConfig',
    'LogConfig',
    'load_environment',
    'setup_logging',
    'validate_config',
]
