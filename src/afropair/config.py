"""Configuration for AfroPair.

Settings are grouped in sections (``config.paths.dictionary``,
``config.scoring.unknown_penalty`` ...). ``Config.load`` layers, lowest
first: the defaults below, an optional TOML file, a ``.env`` file, then the
environment. Environment variables use the ``AFROPAIR_`` prefix with ``__``
between section and key (``AFROPAIR_SCORING__LENGTH_PENALTY=0.7``); the
common paths also have short names such as ``AFROPAIR_DICT_PATH``.
"""

import os
import tomllib
from logging import getLevelNamesMapping
from pathlib import Path
from typing import Any, Literal, Mapping

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from pydantic.fields import FieldInfo
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from afropair.exceptions import ConfigurationError

DEFAULT_CONFIG_FILE = "afropair.toml"

ENV_PREFIX = "AFROPAIR_"

# Short environment names, checked before the nested ``AFROPAIR_SECTION__KEY`` form.
ENV_SHORTCUTS = {
    "AFROPAIR_DICT_PATH": ("paths", "dictionary"),
    "AFROPAIR_CORPUS_PATH": ("paths", "corpus"),
    "AFROPAIR_OUTPUT_PATH": ("paths", "output"),
    "AFROPAIR_OUTPUT_BACKEND": ("output", "backend"),
    "AFROPAIR_LOG_LEVEL": ("logging", "level"),
}


class Section(BaseModel):
    model_config = ConfigDict(extra="forbid", validate_assignment=True)


class PathsConfig(Section):
    """Locations of the backing tables and the record output."""

    dictionary: str = "./data/fr_mos_dict.tsv"
    corpus: str = "./data/fr_mos_corpus.jsonl"
    output: str = "./output/translations.jsonl"


class LexiconConfig(Section):
    unknown_score: float = Field(0.1, ge=0.0, le=1.0)
    default_score: float = Field(0.5, ge=0.0, le=1.0)
    default_pos: str = "UNK"


class RetrievalConfig(Section):
    similarity_threshold: float = Field(0.6, ge=0.0, le=1.0)
    max_matches: int = Field(5, ge=1)


class ScoringConfig(Section):
    """Heuristic constants of the composite confidence.

    These are tuning parameters, not invariants.
    """

    unknown_penalty: float = Field(0.7, ge=0.0, le=1.0)
    length_ratio_threshold: float = Field(0.3, ge=0.0, le=1.0)
    length_penalty: float = Field(0.8, ge=0.0, le=1.0)
    multi_candidate_bonus: float = Field(1.1, ge=1.0)


class StatusConfig(Section):
    auto_accept: float = Field(0.8, ge=0.0, le=1.0)
    review: float = Field(0.5, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def _ordered(self) -> "StatusConfig":
        if self.review > self.auto_accept:
            raise ValueError("review must not exceed auto_accept")
        return self


class OutputConfig(Section):
    backend: Literal["jsonl", "sqlite"] = "jsonl"
    src_lang: str = "fr"
    tgt_lang: str = "mos"
    pipeline_version: str = "afropair_v1"


class PipelineConfig(Section):
    max_workers: int = Field(1, ge=1)


class LoggingConfig(Section):
    level: str = "INFO"
    json_logging: bool = False
    log_file: str | None = None

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in getLevelNamesMapping():
            raise ValueError(f"unknown logging level {value!r}")
        return level


class ShortcutEnvSource(PydanticBaseSettingsSource):
    """Maps the ``ENV_SHORTCUTS`` variables onto their nested fields."""

    def get_field_value(self, field: FieldInfo, field_name: str) -> tuple[Any, str, bool]:
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        data: dict[str, dict[str, str]] = {}
        for env_name, (section, key) in ENV_SHORTCUTS.items():
            value = os.environ.get(env_name)
            if value:
                data.setdefault(section, {})[key] = value
        return data


class Config(BaseSettings):
    """Top-level AfroPair configuration."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        extra="forbid",
        validate_assignment=True,
    )

    paths: PathsConfig = Field(default_factory=PathsConfig)
    lexicon: LexiconConfig = Field(default_factory=LexiconConfig)
    retrieval: RetrievalConfig = Field(default_factory=RetrievalConfig)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    status: StatusConfig = Field(default_factory=StatusConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    pipeline: PipelineConfig = Field(default_factory=PipelineConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Earlier sources win; init values carry the TOML file.
        return ShortcutEnvSource(settings_cls), env_settings, init_settings

    @classmethod
    def load(
        cls,
        path: Path | None = None,
        overrides: Mapping[str, Mapping[str, Any]] | None = None,
    ) -> "Config":
        """Load configuration from TOML, ``.env`` and the environment.

        An explicit ``path`` must exist; otherwise ``./afropair.toml`` is read
        when present. ``overrides`` (e.g. command-line flags) win over
        every other source.
        """
        data = _read_toml(path)
        load_dotenv(find_dotenv(usecwd=True), override=False)

        try:
            config = cls(**data)
        except ValidationError as e:
            raise ConfigurationError("Invalid configuration", details=_describe(e)) from e

        if overrides:
            config = config.with_overrides(overrides)
        return config

    def with_overrides(self, data: Mapping[str, Mapping[str, Any]]) -> "Config":
        """Return a validated copy with ``{section: {key: value}}`` applied."""
        merged = self.model_dump()
        for section, values in data.items():
            if not isinstance(values, Mapping):
                raise ConfigurationError(f"Invalid config section: {section}")
            merged.setdefault(section, {}).update(values)

        try:
            return type(self).model_validate(merged)
        except ValidationError as e:
            raise ConfigurationError("Invalid configuration", details=_describe(e)) from e


def _read_toml(path: Path | None) -> dict[str, Any]:
    if path is not None:
        config_path = Path(path)
        if not config_path.is_file():
            raise ConfigurationError(f"Config file not found: {config_path}")
    else:
        config_path = Path(DEFAULT_CONFIG_FILE)
        if not config_path.is_file():
            return {}

    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML in {config_path}", details=str(e)) from e


def _describe(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in error.errors()
    )
