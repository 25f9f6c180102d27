"""Configuration management for the E*TRADE CLI.

Configuration is loaded from a YAML file and overridden by environment
variables. Precedence (highest to lowest):

1. Environment variables
2. Config file values
3. Default values

Example config file (~/.etrade/config.yaml)::

    api:
      production: false
      timeout: 30
    oauth:
      consumer_key: abc123
      consumer_secret: def456
      token_file: ~/.etrade/tokens.json
"""

import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".etrade" / "config.yaml"
DEFAULT_TOKEN_FILE = str(Path.home() / ".etrade" / "tokens.json")

_TRUE_VALUES = ("1", "true", "yes", "on")


class ConfigurationError(Exception):
    """Exception raised for configuration errors."""

    pass


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


class ETradeConfig:
    """Configuration for the E*TRADE CLI.

    Attributes:
        consumer_key: OAuth consumer key from the E*TRADE developer portal
        consumer_secret: OAuth consumer secret
        production: Use the live API (True) or the sandbox (False)
        token_file: Path of the access token file
        timeout: Request timeout in seconds
    """

    def __init__(
        self,
        consumer_key: str = "",
        consumer_secret: str = "",
        production: bool = False,
        token_file: str = DEFAULT_TOKEN_FILE,
        timeout: int = 30,
    ):
        """Initialize configuration.

        Args:
            consumer_key: OAuth consumer key
            consumer_secret: OAuth consumer secret
            production: Use the live API instead of the sandbox
            token_file: Path of the access token file (``~`` is expanded)
            timeout: Request timeout in seconds

        Raises:
            ConfigurationError: If a value is invalid
        """
        self.consumer_key = consumer_key
        self.consumer_secret = consumer_secret
        self.production = production
        self.token_file = str(Path(token_file).expanduser())
        self.timeout = timeout

        self._validate()

    def _validate(self) -> None:
        """Validate configuration values.

        Credentials are not checked here; commands that talk to the API call
        require_credentials() first.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if not isinstance(self.timeout, int) or self.timeout <= 0:
            raise ConfigurationError(f"timeout must be a positive integer, got {self.timeout!r}")

        if not self.token_file:
            raise ConfigurationError("token_file cannot be empty")

    def require_credentials(self) -> None:
        """Raise ConfigurationError unless both consumer credentials are set."""
        if not self.consumer_key or not self.consumer_secret:
            raise ConfigurationError(
                "Missing E*TRADE consumer credentials. Set environment variables:\n"
                "  ETRADE_CONSUMER_KEY=your_consumer_key\n"
                "  ETRADE_CONSUMER_SECRET=your_consumer_secret\n"
                f"or add them under 'oauth:' in {DEFAULT_CONFIG_PATH}"
            )

    @property
    def environment_name(self) -> str:
        return "production" if self.production else "sandbox"

    @classmethod
    def load_from_file(cls, path: Optional[Path] = None) -> "ETradeConfig":
        """Load configuration from YAML file.

        If the file doesn't exist, defaults are used. Environment variables
        are applied on top in either case.

        Args:
            path: Optional path to config file (default: ~/.etrade/config.yaml)

        Returns:
            Configuration instance

        Raises:
            ConfigurationError: If configuration file is invalid
        """
        config_path = path or DEFAULT_CONFIG_PATH

        config_dict: dict[str, Any] = {}

        if config_path.exists():
            try:
                with open(config_path) as f:
                    file_config = yaml.safe_load(f)
                if file_config:
                    if not isinstance(file_config, dict):
                        raise ConfigurationError(
                            f"Configuration file {config_path} must contain a mapping"
                        )
                    config_dict = file_config
                logger.debug(f"Loaded configuration from {config_path}")
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in configuration file: {e}") from e
            except OSError as e:
                raise ConfigurationError(f"Failed to load configuration file: {e}") from e
        else:
            logger.debug(f"Configuration file not found at {config_path}, using defaults")

        return cls.merge_with_defaults(config_dict)

    @classmethod
    def merge_with_defaults(cls, config_dict: dict[str, Any]) -> "ETradeConfig":
        """Merge configuration dictionary with defaults and environment variables.

        Args:
            config_dict: Configuration dictionary from file

        Returns:
            Configuration instance

        Raises:
            ConfigurationError: If configuration is invalid
        """
        api_config = config_dict.get("api") or {}
        oauth_config = config_dict.get("oauth") or {}

        consumer_key = os.getenv("ETRADE_CONSUMER_KEY", oauth_config.get("consumer_key", ""))
        consumer_secret = os.getenv(
            "ETRADE_CONSUMER_SECRET", oauth_config.get("consumer_secret", "")
        )
        token_file = os.getenv(
            "ETRADE_TOKEN_FILE", oauth_config.get("token_file", DEFAULT_TOKEN_FILE)
        )
        production = _env_flag("ETRADE_PRODUCTION", bool(api_config.get("production", False)))

        try:
            timeout = int(os.getenv("ETRADE_TIMEOUT", api_config.get("timeout", 30)))
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid timeout: {e}") from e

        return cls(
            consumer_key=consumer_key or "",
            consumer_secret=consumer_secret or "",
            production=production,
            token_file=token_file,
            timeout=timeout,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary (secrets masked)."""
        return {
            "api": {
                "production": self.production,
                "timeout": self.timeout,
            },
            "oauth": {
                "consumer_key": self.consumer_key,
                "consumer_secret": "***" if self.consumer_secret else "",
                "token_file": self.token_file,
            },
        }

    def __repr__(self) -> str:
        return (
            f"ETradeConfig("
            f"consumer_key={self.consumer_key!r}, "
            f"production={self.production}, "
            f"token_file={self.token_file!r}, "
            f"timeout={self.timeout}"
            ")"
        )


def load_config(config_path: Optional[Path] = None) -> ETradeConfig:
    """Load configuration from file or defaults.

    Example:
        >>> from src.config import load_config
        >>> config = load_config()
        >>> print(config.environment_name)
    """
    return ETradeConfig.load_from_file(config_path)
