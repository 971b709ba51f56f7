"""
Reachability Configuration Handler

Manages the optional YAML configuration file for reachability settings.
Provides defaults (from config.settings) and validation.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from config.settings import (
    IGNORED_INTERFACE_PREFIXES,
    IPV6_ROUTE_TABLE_PATH,
    NETWORK_CHANNEL_NAME,
    NMCLI_ENABLED,
    NMCLI_TIMEOUT,
    REACHABILITY_PROVIDER,
    REACHABILITY_SERVICE_MODE,
    ROUTE_TABLE_PATH,
)
from reachability.constants import PROVIDER_CHOICES, SERVICE_MODES


class ReachabilityConfig:
    """
    Reachability configuration with YAML file support.

    Reads from config/reachability.yaml if it exists,
    otherwise uses defaults from config/settings.py.
    The file is only written when save() is called.

    Usage:
        config = ReachabilityConfig()
        mode = config.service_mode
        provider = config.provider
    """

    # Default config file location
    DEFAULT_CONFIG_PATH = Path("config/reachability.yaml")

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration.

        Args:
            config_path: Path to YAML config file (None = use default)
        """
        self.logger = logging.getLogger(__name__)
        self.config_path = Path(config_path or self.DEFAULT_CONFIG_PATH)

        # Load configuration (defaults + file overrides)
        self._config = self._load_config()

    def _get_defaults(self) -> Dict[str, Any]:
        """Get default configuration values from settings"""
        return {
            # Implementation selection
            "service_mode": REACHABILITY_SERVICE_MODE,
            "provider": REACHABILITY_PROVIDER,

            # OS state sources
            "route_table_path": ROUTE_TABLE_PATH,
            "ipv6_route_table_path": IPV6_ROUTE_TABLE_PATH,
            "use_network_manager": NMCLI_ENABLED,
            "nmcli_timeout": NMCLI_TIMEOUT,
            "ignored_interface_prefixes": list(IGNORED_INTERFACE_PREFIXES),

            # Bridge
            "channel_name": NETWORK_CHANNEL_NAME,
        }

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file or use defaults"""
        # Start with defaults
        config = self._get_defaults()

        if self.config_path.exists():
            try:
                with open(self.config_path, "r") as f:
                    file_config = yaml.safe_load(f) or {}

                if not isinstance(file_config, dict):
                    raise ValueError("top level must be a mapping")

                # Merge file config with defaults (file overrides defaults)
                config.update(file_config)

                self.logger.info(f"Loaded config from {self.config_path}")

            except (OSError, yaml.YAMLError, ValueError) as e:
                self.logger.warning(
                    f"Failed to load config from {self.config_path}: {e}. "
                    f"Using defaults."
                )
                config = self._get_defaults()
        else:
            self.logger.debug(
                f"Config file not found at {self.config_path}. Using defaults."
            )

        # Validate configuration
        self._validate_config(config)

        return config

    def _validate_config(self, config: Dict[str, Any]) -> None:
        """Validate configuration values"""
        if config["service_mode"] not in SERVICE_MODES:
            raise ValueError(
                f"service_mode must be one of {SERVICE_MODES}: "
                f"{config['service_mode']!r}"
            )

        if config["provider"] not in PROVIDER_CHOICES:
            raise ValueError(
                f"provider must be one of {PROVIDER_CHOICES}: "
                f"{config['provider']!r}"
            )

        timeout = config["nmcli_timeout"]
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
            raise ValueError(f"nmcli_timeout must be a number: {timeout!r}")
        if timeout <= 0:
            raise ValueError("nmcli_timeout must be positive")

        if not isinstance(config["use_network_manager"], bool):
            raise ValueError(
                f"use_network_manager must be true or false: "
                f"{config['use_network_manager']!r}"
            )

        if not isinstance(config["ignored_interface_prefixes"], list):
            raise ValueError("ignored_interface_prefixes must be a list")

    def save(self) -> None:
        """Save configuration to YAML file"""
        try:
            # Create config directory if it doesn't exist
            self.config_path.parent.mkdir(parents=True, exist_ok=True)

            with open(self.config_path, "w") as f:
                yaml.dump(
                    self._config,
                    f,
                    default_flow_style=False,
                    sort_keys=False,
                    indent=2,
                )

            self.logger.info(f"Config saved to {self.config_path}")

        except OSError as e:
            self.logger.error(f"Failed to save config: {e}")

    # =========================================================================
    # PROPERTY ACCESSORS
    # =========================================================================

    @property
    def service_mode(self) -> str:
        """Connectivity service mode: auto, real or mock"""
        return self._config["service_mode"]

    @property
    def provider(self) -> str:
        """Provider selection: auto, capability or legacy"""
        return self._config["provider"]

    @property
    def route_table_path(self) -> str:
        return self._config["route_table_path"]

    @property
    def ipv6_route_table_path(self) -> str:
        return self._config["ipv6_route_table_path"]

    @property
    def use_network_manager(self) -> bool:
        """Whether to read NetworkManager's cached connectivity state"""
        return self._config["use_network_manager"]

    @property
    def nmcli_timeout(self) -> float:
        return float(self._config["nmcli_timeout"])

    @property
    def ignored_interface_prefixes(self) -> List[str]:
        return list(self._config["ignored_interface_prefixes"])

    @property
    def channel_name(self) -> str:
        return self._config["channel_name"]

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key"""
        return self._config.get(key, default)

    def set(self, key: str, value: Any, save: bool = False) -> None:
        """
        Set configuration value.

        Args:
            key: Configuration key
            value: New value
            save: If True, save to file immediately

        Raises:
            ValueError: If the new value fails validation
        """
        candidate = self._config.copy()
        candidate[key] = value
        self._validate_config(candidate)
        self._config = candidate

        if save:
            self.save()

    def reload(self) -> None:
        """Reload configuration from file"""
        self._config = self._load_config()
        self.logger.info("Configuration reloaded")

    def to_dict(self) -> Dict[str, Any]:
        """Get configuration as dictionary"""
        return self._config.copy()

    def __repr__(self) -> str:
        return f"ReachabilityConfig(path={self.config_path})"
