"""Configuration loading and management for Eventfold.

Functions:
    load_config: Load configuration from YAML plus environment overrides
    create_default_config: Write a default configuration file
"""

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import ValidationError as PydanticValidationError
import yaml

from eventfold.config.models import (
    DEFAULT_CONFIG_FILENAME,
    EventfoldConfig,
    get_default_config,
)
from eventfold.core.errors import ConfigError

# Environment variable -> (section, key)
ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "EVENTFOLD_EVENTS_DIR": ("persistence", "events_dir"),
    "EVENTFOLD_LOG_LEVEL": ("logging", "level"),
    "ADMIN_EMAIL": ("seed", "admin_email"),
}


def _read_yaml(config_path: Path) -> dict[str, Any]:
    """Parse a YAML config file into a dict."""
    try:
        with config_path.open() as f:
            config_dict = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(
            f"Failed to parse configuration file: {e}",
            config_file=str(config_path),
            details={"yaml_error": str(e)},
        ) from e

    if config_dict is None:
        return {}
    if not isinstance(config_dict, dict):
        raise ConfigError(
            "Configuration file must contain a mapping at the top level",
            config_file=str(config_path),
        )
    return config_dict


def _apply_env_overrides(config_dict: dict[str, Any]) -> dict[str, Any]:
    """Overlay environment variables onto the parsed file contents."""
    for env_name, (section, key) in ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if not value:
            continue
        section_dict = config_dict.get(section) or {}
        if not isinstance(section_dict, dict):
            raise ConfigError(
                f"Configuration section '{section}' must be a mapping",
                config_key=section,
            )
        if section == "logging" and key == "level":
            value = value.lower()
        config_dict[section] = {**section_dict, key: value}
    return config_dict


def load_config(config_path: Path | None = None) -> EventfoldConfig:
    """Load configuration from YAML file and environment.

    Resolution order: defaults, then the YAML file, then environment
    variables (EVENTFOLD_EVENTS_DIR, EVENTFOLD_LOG_LEVEL, ADMIN_EMAIL).
    A ``.env`` file in the working directory is loaded first.

    Args:
        config_path: Path to config file. When None, ./eventfold.yaml is used
            if it exists; otherwise only defaults and environment apply.

    Returns:
        Validated EventfoldConfig instance.

    Raises:
        ConfigError: If an explicit file doesn't exist, is malformed, or
            fails validation.
    """
    load_dotenv(Path.cwd() / ".env")

    config_dict: dict[str, Any] = {}
    if config_path is not None:
        if not config_path.exists():
            raise ConfigError(
                f"Configuration file not found: {config_path}. "
                "Run `eventfold config init` to create default configuration.",
                config_file=str(config_path),
            )
        config_dict = _read_yaml(config_path)
    else:
        default_path = Path.cwd() / DEFAULT_CONFIG_FILENAME
        if default_path.exists():
            config_path = default_path
            config_dict = _read_yaml(default_path)

    config_dict = _apply_env_overrides(config_dict)

    try:
        return EventfoldConfig.model_validate(config_dict)
    except PydanticValidationError as e:
        error_messages = []
        for error in e.errors():
            loc = ".".join(str(x) for x in error["loc"])
            error_messages.append(f"  - {loc}: {error['msg']}")

        raise ConfigError(
            "Configuration validation failed:\n" + "\n".join(error_messages),
            config_file=str(config_path) if config_path else None,
        ) from e


def create_default_config(
    config_path: Path | None = None,
    *,
    overwrite: bool = False,
) -> Path:
    """Write the default configuration as YAML.

    Args:
        config_path: Destination file. Defaults to ./eventfold.yaml.
        overwrite: If True, replace an existing file.

    Returns:
        Path of the written file.

    Raises:
        ConfigError: If the file exists and overwrite is False.
    """
    if config_path is None:
        config_path = Path.cwd() / DEFAULT_CONFIG_FILENAME

    if config_path.exists() and not overwrite:
        raise ConfigError(
            f"Configuration file already exists: {config_path}",
            config_file=str(config_path),
        )

    config_path.parent.mkdir(parents=True, exist_ok=True)
    with config_path.open("w") as f:
        yaml.dump(
            get_default_config().model_dump(mode="json"),
            f,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
    return config_path
