"""Configuration management for rolegate.

Handles loading and validation of YAML configuration files. Configuration
covers runtime behaviour only (logging and access-control options); roles
and resources are always built in code by the host application.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml


@dataclass
class LoggingConfig:
    """Configuration for the rolegate logger hierarchy."""

    level: str = "INFO"
    log_dir: str = "/var/log/rolegate"
    file_logging: bool = False
    console_logging: bool = True


@dataclass
class AccessControlConfig:
    """Configuration for AccessControl behaviour."""

    # Raise RoleNotFoundError instead of denying checks against unknown roles
    strict_roles: bool = False


@dataclass
class RoleGateConfig:
    """Top-level configuration for rolegate."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    access_control: AccessControlConfig = field(default_factory=AccessControlConfig)


def parse_logging_config(logging_dict: Dict[str, Any]) -> LoggingConfig:
    """Parse a logging configuration dictionary.

    Args:
        logging_dict: Logging configuration dictionary

    Returns:
        LoggingConfig instance
    """
    return LoggingConfig(
        level=logging_dict.get("level", "INFO"),
        log_dir=logging_dict.get("log_dir", "/var/log/rolegate"),
        file_logging=logging_dict.get("file_logging", False),
        console_logging=logging_dict.get("console_logging", True),
    )


def parse_access_control_config(access_dict: Dict[str, Any]) -> AccessControlConfig:
    """Parse an access control configuration dictionary.

    Args:
        access_dict: Access control configuration dictionary

    Returns:
        AccessControlConfig instance
    """
    return AccessControlConfig(
        strict_roles=access_dict.get("strict_roles", False),
    )


def parse_config(config_dict: Dict[str, Any]) -> RoleGateConfig:
    """Parse the full configuration dictionary.

    Args:
        config_dict: Full configuration dictionary

    Returns:
        RoleGateConfig instance
    """
    logging_config = LoggingConfig()
    if "logging" in config_dict:
        logging_config = parse_logging_config(config_dict["logging"] or {})

    access_config = AccessControlConfig()
    if "access_control" in config_dict:
        access_config = parse_access_control_config(config_dict["access_control"] or {})

    return RoleGateConfig(logging=logging_config, access_control=access_config)


def load_config(config_path: str = "/etc/rolegate/config.yaml") -> Dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        config_path: Path to configuration file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid YAML
    """
    config_file = Path(config_path)

    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with config_file.open("r") as f:
        config = yaml.safe_load(f)

    if config is None:
        config = {}

    if not isinstance(config, dict):
        raise TypeError(
            f"Configuration root must be a mapping, got {type(config).__name__}"
        )

    return _expand_env_vars(config)


def _expand_env_vars(obj: Any) -> Any:
    """Recursively expand environment variables in configuration.

    Args:
        obj: Configuration object (dict, list, str, etc.)

    Returns:
        Configuration with expanded environment variables
    """
    if isinstance(obj, dict):
        return {key: _expand_env_vars(value) for key, value in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    elif isinstance(obj, str):
        return os.path.expandvars(obj)
    else:
        return obj


def load_typed_config(
    config_path: str = "/etc/rolegate/config.yaml",
) -> RoleGateConfig:
    """Load and parse configuration into typed dataclass.

    Args:
        config_path: Path to configuration file

    Returns:
        RoleGateConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid YAML
    """
    config_dict = load_config(config_path)
    return parse_config(config_dict)
