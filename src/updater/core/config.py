"""Configuration loading and validation."""

import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from updater.core.credentials import DEFAULT_PASSWORD_ENV, DEFAULT_USER_ENV
from updater.core.errors import ConfigError
from updater.utils.progress import IndicatorColor

CONFIG_DIR = Path("~/.config/updater").expanduser()
CONFIG_FILE = CONFIG_DIR / "config.toml"
CONFIG_ENV_VAR = "UPDATER_CONFIG"


class CredentialsConfig(BaseModel):
    user_env: str = DEFAULT_USER_ENV
    password_env: str = DEFAULT_PASSWORD_ENV


class IndicatorConfig(BaseModel):
    color: IndicatorColor = IndicatorColor.YELLOW


class StepDelays(BaseModel):
    """Simulated duration of each pipeline step, in milliseconds."""

    read_input: int = Field(default=1000, ge=0)
    connect: int = Field(default=1500, ge=0)
    transfer: int = Field(default=5000, ge=0)
    write_output: int = Field(default=3200, ge=0)


class AppConfig(BaseModel):
    credentials: CredentialsConfig = Field(default_factory=CredentialsConfig)
    indicator: IndicatorConfig = Field(default_factory=IndicatorConfig)
    steps: StepDelays = Field(default_factory=StepDelays)


def get_config_path(path: Path | str | None = None) -> Path:
    """Return the config file location.

    Explicit path first, then $UPDATER_CONFIG, then ~/.config/updater.
    """
    if path is not None:
        return Path(path).expanduser()

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()

    return CONFIG_FILE


def get_config(path: Path | str | None = None) -> AppConfig:
    """Load configuration from config file.

    Returns default config if file doesn't exist.

    Raises:
        ConfigError: If the file is not valid TOML or holds invalid values.
    """
    config_file = get_config_path(path)
    if not config_file.exists():
        return AppConfig()

    try:
        with open(config_file, "rb") as f:
            data: dict[str, Any] = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Could not read {config_file}: {e}") from e

    try:
        return AppConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"{config_file}: {e}") from e
