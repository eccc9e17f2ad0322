"""Settings for the search front ends.

Sources, first match wins: keyword arguments, ``DOCSEARCH__*`` environment
variables (``DOCSEARCH__INDEX__SOURCE=https://example.com/search-index.json``),
then ``docsearch.yaml``. Without any of them the defaults search
``./search-index.json``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

CONFIG_FILENAME = "docsearch.yaml"


def config_file_candidates() -> list[Path]:
    return [Path(CONFIG_FILENAME), Path.home() / ".config" / "docsearch" / CONFIG_FILENAME]


def find_config_file() -> Path | None:
    return next((path for path in config_file_candidates() if path.is_file()), None)


class IndexSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # http(s) URL or a local path to search-index.json
    source: str = "search-index.json"
    timeout_seconds: float = Field(default=10.0, gt=0)


class SearchSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    max_results: int = Field(default=20, ge=1)


class LoggingSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    format: Literal["json", "text"] = "text"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DOCSEARCH__",
        env_nested_delimiter="__",
    )

    index: IndexSettings = IndexSettings()
    search: SearchSettings = SearchSettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
        **kwargs: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # The YAML file is looked up per load so a changed cwd is honoured.
        yaml_settings = YamlConfigSettingsSource(
            settings_cls, yaml_file=find_config_file(), yaml_file_encoding="utf-8"
        )
        return (init_settings, env_settings, yaml_settings)
