# Path: rosetta_verify/config_loader.py
"""
Configuration Loader for rosetta_verify

Loads configuration from .env file and ROSETTA_VERIFY_* environment
variables. Singleton pattern ensures consistent configuration across
all components.

Nothing here is required: the verification core runs on defaults, and
configuration only tunes logging, the default status table of the
operation asserter, the directory of YAML descriptions, and the
related-operations policy of the grouper.
"""

import os
from typing import Optional, Any
from pathlib import Path
from dotenv import load_dotenv

from .constants import DEFAULT_SUCCESSFUL_STATUSES, DEFAULT_FAILED_STATUSES


# ==============================================================================
# DEFAULT CONFIGURATION VALUES
# ==============================================================================

DEFAULT_ENVIRONMENT: str = 'development'
DEFAULT_LOG_LEVEL: str = 'INFO'

ENV_PREFIX: str = 'ROSETTA_VERIFY_'


class ConfigLoader:
    """
    Singleton configuration loader for rosetta_verify.

    Loads configuration from environment variables with type
    conversion and defaults.

    Example:
        config = ConfigLoader()
        statuses = config.get('successful_statuses')  # ['SUCCESS']
        strict = config.get('strict_related_operations')  # False
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
        next to this module when it exists.
        """
        if ConfigLoader._initialized:
            return

        env_path = Path(__file__).resolve().parent / '.env'
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
            # OPERATION ASSERTER
            # ================================================================
            'successful_statuses': self._get_list(
                'SUCCESSFUL_STATUSES', list(DEFAULT_SUCCESSFUL_STATUSES)
            ),
            'failed_statuses': self._get_list(
                'FAILED_STATUSES', list(DEFAULT_FAILED_STATUSES)
            ),

            # ================================================================
            # MATCHING
            # ================================================================
            'descriptions_dir': self._get_path('DESCRIPTIONS_DIR'),

            # ================================================================
            # GROUPING POLICY
            # ================================================================
            'strict_related_operations': self._get_bool(
                'STRICT_RELATED_OPERATIONS', False
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

        Raises:
            ValueError: If required and missing
        """
        value = os.getenv(ENV_PREFIX + key)

        if value is None:
            if required:
                raise ValueError(f"Required path not configured: {ENV_PREFIX + key}")
            return None

        if '${' in value:
            value = os.path.expandvars(value)

        return Path(value)

    def _get_env(self, key: str, default: str = '') -> str:
        """Get string environment variable."""
        return os.getenv(ENV_PREFIX + key, default)

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable."""
        value = os.getenv(ENV_PREFIX + key)
        if value is None:
            return default
        return value.lower() in ('true', '1', 'yes', 'on')

    def _get_list(self, key: str, default: list[str]) -> list[str]:
        """Get comma-separated list environment variable."""
        value = os.getenv(ENV_PREFIX + key)
        if value is None:
            return default
        return [item.strip() for item in value.split(',') if item.strip()]

    def __repr__(self) -> str:
        """String representation showing environment."""
        return (
            f"ConfigLoader("
            f"environment={self._config.get('environment')}, "
            f"log_level={self._config.get('log_level')})"
        )


__all__ = ['ConfigLoader']
