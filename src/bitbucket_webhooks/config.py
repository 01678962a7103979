"""Client settings loaded from an optional YAML file and BITBUCKET_* env vars.

Environment variables override values from the file.
"""

from pathlib import Path

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigError
from .transport import DEFAULT_BASE_URL


class Settings(BaseSettings):
    """Connection and default-context settings.

    Environment prefix: BITBUCKET_
    Example: BITBUCKET_TOKEN, BITBUCKET_OWNER, BITBUCKET_TIMEOUT
    """

    base_url: str = DEFAULT_BASE_URL
    token: str | None = None
    username: str | None = None
    app_password: str | None = None
    timeout: float = 30.0
    owner: str | None = None
    repo: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="BITBUCKET_",
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # File values arrive as init kwargs; the environment wins over them.
        return env_settings, init_settings, dotenv_settings, file_secret_settings


def load_settings(path: Path | None = None) -> Settings:
    """Read settings from path (if given) and overlay environment variables."""
    data = _read_file(path) if path else {}
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings: {e}") from e


def _read_file(path: Path) -> dict:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read settings from {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {path} must contain a mapping")
    return data
