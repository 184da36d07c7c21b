"""Application configuration loaded from config.yaml + environment variables.

Precedence, highest first: constructor kwargs, environment, ``.env``,
``config.yaml``, field defaults.
"""

from __future__ import annotations

import yaml
from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings, InitSettingsSource

_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.yaml"


def _load_yaml() -> dict:
    if _CONFIG_PATH.exists():
        with open(_CONFIG_PATH) as f:
            return yaml.safe_load(f) or {}
    return {}


_yaml = _load_yaml()

_ENV_CONFIG = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

_YAML_KEYS = {
    "database_url": ("database", "url"),
    "log_level": ("logging", "level"),
    "session_max_age_days": ("auth", "session_max_age_days"),
}


def _yaml_settings() -> dict:
    """Flatten the config.yaml sections onto Settings field names."""
    values = {}
    for field, (section, key) in _YAML_KEYS.items():
        if key in (_yaml.get(section) or {}):
            values[field] = _yaml[section][key]
    return values


class PaginationConfig(BaseSettings):
    default_limit: int = 9
    owner_default_limit: int = 6
    max_limit: int = 100

    model_config = dict(_ENV_CONFIG)

    @classmethod
    def settings_customise_sources(
        cls, settings_cls, init_settings, env_settings, dotenv_settings, file_secret_settings,
    ):
        yaml_settings = InitSettingsSource(settings_cls, _yaml.get("pagination") or {})
        return init_settings, env_settings, dotenv_settings, file_secret_settings, yaml_settings


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///data/suddenlyspaces.db"
    log_level: str = "INFO"
    session_max_age_days: int = 7
    pagination: PaginationConfig = Field(default_factory=PaginationConfig)

    model_config = dict(_ENV_CONFIG)

    @classmethod
    def settings_customise_sources(
        cls, settings_cls, init_settings, env_settings, dotenv_settings, file_secret_settings,
    ):
        yaml_settings = InitSettingsSource(settings_cls, _yaml_settings())
        return init_settings, env_settings, dotenv_settings, file_secret_settings, yaml_settings


def get_settings() -> Settings:
    return Settings()
