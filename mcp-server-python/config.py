"""
Configuration module for JobJourney MCP Server.

Provides centralized configuration management with support for:
- Environment variables
- Default values
- Transport selection (stdio / streamable HTTP)
- Logging configuration
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file at project root
# config.py is in mcp-server-python/, so .env is in parent directory
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=_env_path)

DEFAULT_API_BASE_URL = "http://localhost:5014"
DEFAULT_SERVER_NAME = "jobjourney-claude-plugin"
DEFAULT_PORT = 8080
DEFAULT_REQUEST_TIMEOUT = 30.0

TRANSPORT_STDIO = "stdio"
TRANSPORT_HTTP = "httpStream"

# Accepted spellings for the network transport
_HTTP_TRANSPORT_ALIASES = {"httpstream", "http", "streamable-http", "streamable_http"}


def _parse_int(env_var: str, default: int) -> int:
    """Parse an integer from an environment variable, falling back on bad input."""
    value = os.getenv(env_var)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _parse_float(env_var: str, default: float) -> float:
    """Parse a float from an environment variable, falling back on bad input."""
    value = os.getenv(env_var)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError:
        return default


def normalize_transport(value: Optional[str]) -> str:
    """
    Map a TRANSPORT value to one of the supported transport names.

    Unknown values are returned unchanged so that validate() can report them.
    """
    if value is None or not value.strip():
        return TRANSPORT_STDIO
    cleaned = value.strip()
    if cleaned.lower() == TRANSPORT_STDIO:
        return TRANSPORT_STDIO
    if cleaned.lower() in _HTTP_TRANSPORT_ALIASES:
        return TRANSPORT_HTTP
    return cleaned


class Config:
    """
    Configuration class for MCP server settings.

    Supports configuration via environment variables (and .env file) with sensible defaults.
    Values are read once at construction and treated as read-only afterwards.
    """

    def __init__(self):
        """Initialize configuration from environment variables and defaults."""
        self._repo_root = self._find_repo_root()

        # Backend configuration
        self.api_base_url = os.getenv("JOBJOURNEY_API_URL", DEFAULT_API_BASE_URL).rstrip("/")
        self.api_key = os.getenv("JOBJOURNEY_API_KEY", "")
        self.request_timeout = _parse_float("JOBJOURNEY_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT)
        # Kept only to report it from validate()
        self._rejected_timeout: Optional[float] = None
        if self.request_timeout <= 0:
            self._rejected_timeout = self.request_timeout
            self.request_timeout = DEFAULT_REQUEST_TIMEOUT

        # Transport configuration
        self.transport = normalize_transport(os.getenv("TRANSPORT"))
        self.host = os.getenv("HOST", "0.0.0.0")
        self.port = _parse_int("PORT", DEFAULT_PORT)

        # Logging configuration
        self.log_level = os.getenv("JOBJOURNEY_LOG_LEVEL", "INFO").upper()
        self.log_file = self._resolve_log_path()

        # Server configuration
        self.server_name = os.getenv("JOBJOURNEY_SERVER_NAME", DEFAULT_SERVER_NAME)

    def _find_repo_root(self) -> Path:
        """
        Find the repository root directory.

        Returns:
            Path to repository root
        """
        current_file = Path(__file__).resolve()
        # config.py is in mcp-server-python/, so parent is repo root
        return current_file.parent.parent

    def _resolve_log_path(self) -> Optional[Path]:
        """
        Resolve the log file path from environment.

        If JOBJOURNEY_LOG_FILE is set, logs will be written to that file.
        Otherwise, logs go to stderr only.

        Returns:
            Path to log file, or None for stderr-only logging
        """
        log_env = os.getenv("JOBJOURNEY_LOG_FILE")
        if not log_env:
            return None

        log_path = Path(log_env)
        if log_path.is_absolute():
            return log_path
        return self._repo_root / log_path

    @property
    def is_http_transport(self) -> bool:
        return self.transport == TRANSPORT_HTTP

    def setup_logging(self):
        """
        Configure logging based on configuration settings.

        Logs always go to stderr; stdout carries the MCP stdio stream.
        Log level is controlled by JOBJOURNEY_LOG_LEVEL.
        """
        numeric_level = getattr(logging, self.log_level, logging.INFO)

        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )

        root_logger = logging.getLogger()
        root_logger.setLevel(numeric_level)

        # Remove existing handlers to avoid duplicates
        root_logger.handlers.clear()

        stderr_handler = logging.StreamHandler()
        stderr_handler.setLevel(numeric_level)
        stderr_handler.setFormatter(formatter)
        root_logger.addHandler(stderr_handler)

        if self.log_file:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(self.log_file)
            file_handler.setLevel(numeric_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

            logging.info(f"Logging to file: {self.log_file}")

        logging.info(f"Log level set to: {self.log_level}")
        logging.info(f"API base URL: {self.api_base_url}")

    def validate(self) -> list[str]:
        """
        Validate configuration and return any warnings.

        Returns:
            List of warning messages (empty if all valid)
        """
        warnings = []

        if not self.api_key:
            warnings.append(
                "JOBJOURNEY_API_KEY is not set. Requests will be sent without an X-API-Key header."
            )

        if not self.api_base_url.startswith(("http://", "https://")):
            warnings.append(f"JOBJOURNEY_API_URL does not look like an HTTP URL: {self.api_base_url}")

        if self.transport not in (TRANSPORT_STDIO, TRANSPORT_HTTP):
            warnings.append(
                f"Unknown TRANSPORT '{self.transport}'. Falling back to {TRANSPORT_STDIO}."
            )

        if self._rejected_timeout is not None:
            warnings.append(
                f"JOBJOURNEY_REQUEST_TIMEOUT must be positive, got {self._rejected_timeout}. "
                f"Using {DEFAULT_REQUEST_TIMEOUT} seconds."
            )

        if self.log_file:
            log_dir = self.log_file.parent
            if not log_dir.exists():
                try:
                    log_dir.mkdir(parents=True, exist_ok=True)
                except Exception as e:
                    warnings.append(f"Cannot create log directory {log_dir}: {e}")
            elif not os.access(log_dir, os.W_OK):
                warnings.append(f"Log directory not writable: {log_dir}")

        return warnings


# Global configuration instance
config = Config()


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Global Config instance
    """
    return config
