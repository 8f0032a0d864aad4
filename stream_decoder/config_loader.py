# Path: stream_decoder/config_loader.py
"""
Configuration Loader for stream_decoder

Loads configuration from a .env file and STREAM_DECODER_* environment
variables. Singleton pattern ensures consistent configuration across the
CLI and its helpers.

The decoding engine never reads configuration itself; callers build
DecoderSettings from this loader when they want environment-driven
behaviour.
"""

import os
from typing import Optional, Any
from pathlib import Path
from dotenv import load_dotenv

from stream_decoder.constants import (
    ENV_PREFIX,
    ENV_FILE_NAME,
    DEFAULT_READ_CHUNK_SIZE,
)


# ==============================================================================
# DEFAULT CONFIGURATION VALUES
# ==============================================================================

# Logging Defaults
DEFAULT_LOG_LEVEL: str = 'INFO'
DEFAULT_ENVIRONMENT: str = 'development'

# Decoder Defaults
DEFAULT_AUTO_RESTART: bool = True


class ConfigLoader:
    """
    Singleton configuration loader for stream_decoder.

    Loads configuration from environment variables with type conversion
    and sensible defaults. Nothing is required: an empty environment
    yields a console-only, auto-restarting setup.

    Example:
        config = ConfigLoader()
        chunk_size = config.get('read_chunk_size')  # Returns int
        log_dir = config.get('log_dir')  # Returns Path or None
    """

    _instance: Optional['ConfigLoader'] = None
    _initialized: bool = False

    def __new__(cls) -> 'ConfigLoader':
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """
        Initialize configuration loader.

        Only runs once due to singleton pattern. Loads the .env file
        next to this module (if present) on first instantiation.
        """
        if ConfigLoader._initialized:
            return

        env_path = Path(__file__).resolve().parent / ENV_FILE_NAME

        if env_path.exists():
            load_dotenv(dotenv_path=env_path, interpolate=True)

        self._config = self._load_configuration()
        ConfigLoader._initialized = True

    def _load_configuration(self) -> dict[str, Any]:
        """
        Load all configuration from environment.

        Returns:
            Dictionary of configuration values with proper types
        """
        config = {
            # ================================================================
            # ENVIRONMENT & DEBUG
            # ================================================================
            'environment': self._get_env('ENVIRONMENT', DEFAULT_ENVIRONMENT),
            'debug': self._get_bool('DEBUG', False),

            # ================================================================
            # LOGGING CONFIGURATION
            # ================================================================
            'log_dir': self._get_path('LOG_DIR'),
            'log_level': self._get_env('LOG_LEVEL', DEFAULT_LOG_LEVEL),
            'log_console': self._get_bool('LOG_CONSOLE', True),

            # ================================================================
            # DECODER CONFIGURATION
            # ================================================================
            'auto_restart': self._get_bool('AUTO_RESTART', DEFAULT_AUTO_RESTART),
            'buffer_warning_bytes': self._get_optional_int('BUFFER_WARNING_BYTES'),

            # ================================================================
            # INPUT CONFIGURATION
            # ================================================================
            'read_chunk_size': self._get_int(
                'READ_CHUNK_SIZE', DEFAULT_READ_CHUNK_SIZE
            ),
        }

        return config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        return self._config.get(key, default)

    def _get_path(self, key: str, required: bool = False) -> Optional[Path]:
        """
        Get path from environment variable.

        Args:
            key: Environment variable name, without prefix
            required: If True, raise error when missing

        Returns:
            Path object or None

        Raises:
            ValueError: If required and missing
        """
        value = os.getenv(ENV_PREFIX + key)

        if not value:
            if required:
                raise ValueError(f"Required path not configured: {ENV_PREFIX + key}")
            return None

        if '${' in value:
            value = os.path.expandvars(value)

        return Path(value)

    def _get_env(self, key: str, default: str = '') -> str:
        """Get string environment variable."""
        return os.getenv(ENV_PREFIX + key, default).strip()

    def _get_int(self, key: str, default: int) -> int:
        """Get integer environment variable."""
        value = os.getenv(ENV_PREFIX + key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            return default

    def _get_optional_int(self, key: str) -> Optional[int]:
        """Get integer environment variable, None when unset or invalid."""
        value = os.getenv(ENV_PREFIX + key)
        if not value:
            return None
        try:
            return int(value)
        except ValueError:
            return None

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable."""
        value = os.getenv(ENV_PREFIX + key)
        if value is None:
            return default
        return value.strip().lower() in ('true', '1', 'yes', 'on')

    def __repr__(self) -> str:
        """String representation showing key settings."""
        return (
            f"ConfigLoader("
            f"environment={self._config.get('environment')}, "
            f"auto_restart={self._config.get('auto_restart')})"
        )


__all__ = ['ConfigLoader']
