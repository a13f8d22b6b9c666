"""Unit tests for configuration loading."""

from pathlib import Path

import pytest

from afropair.cli.main import main
from afropair.config import Config, StatusConfig
from afropair.exceptions import ConfigurationError


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "afropair.toml"
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults() -> None:
    """Test default configuration values."""
    config = Config()

    assert config.paths.dictionary.endswith("fr_mos_dict.tsv")
    assert config.retrieval.similarity_threshold == 0.6
    assert config.retrieval.max_matches == 5
    assert config.scoring.unknown_penalty == 0.7
    assert config.lexicon.unknown_score == 0.1
    assert config.output.backend == "jsonl"
    assert config.logging.log_file is None


def test_load_toml_and_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that environment overrides are applied on top of the TOML file."""
    path = _write(
        tmp_path,
        '[paths]\ndictionary = "d.tsv"\ncorpus = "c.jsonl"\n\n'
        "[scoring]\nlength_penalty = 0.5\n\n[pipeline]\nmax_workers = 4\n",
    )
    monkeypatch.setenv("AFROPAIR_DICT_PATH", "env.tsv")
    monkeypatch.setenv("AFROPAIR_LOG_LEVEL", "debug")
    monkeypatch.setenv("AFROPAIR_RETRIEVAL__MAX_MATCHES", "3")

    config = Config.load(path)

    assert config.paths.dictionary == "env.tsv"
    assert config.paths.corpus == "c.jsonl"
    assert config.scoring.length_penalty == 0.5
    assert config.pipeline.max_workers == 4
    assert config.retrieval.max_matches == 3
    assert config.logging.level == "DEBUG"


def test_short_name_beats_nested_name(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that the short environment name wins over the nested one."""
    monkeypatch.setenv("AFROPAIR_PATHS__CORPUS", "nested.jsonl")
    monkeypatch.setenv("AFROPAIR_CORPUS_PATH", "short.jsonl")

    assert Config.load().paths.corpus == "short.jsonl"


def test_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that explicit overrides beat the environment."""
    monkeypatch.setenv("AFROPAIR_LOG_LEVEL", "debug")

    config = Config.load(overrides={"logging": {"level": "warning", "json_logging": True}})

    assert config.logging.level == "WARNING"
    assert config.logging.json_logging is True


def test_missing_explicit_file(tmp_path: Path) -> None:
    """Test that an explicit but missing config file is an error."""
    with pytest.raises(ConfigurationError):
        Config.load(tmp_path / "nope.toml")


def test_invalid_toml(tmp_path: Path) -> None:
    """Test that a malformed TOML file is a configuration error."""
    with pytest.raises(ConfigurationError):
        Config.load(_write(tmp_path, "[paths\n"))


@pytest.mark.parametrize(
    "text",
    [
        "[scoring]\nmagic = 1\n",
        "[nonsense]\nvalue = 1\n",
        "[logging]\nlevel = 5\n",
        "[paths]\ndictionary = 3\n",
        "[retrieval]\nmax_matches = 0\n",
        "[retrieval]\nsimilarity_threshold = 1.5\n",
        "[status]\nauto_accept = 0.4\nreview = 0.6\n",
        '[logging]\nlevel = "chatty"\n',
    ],
)
def test_invalid_values_rejected(tmp_path: Path, text: str) -> None:
    """Test that unknown keys and ill-typed values are rejected."""
    with pytest.raises(ConfigurationError):
        Config.load(_write(tmp_path, text))


def test_invalid_backend(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test validation of the output backend."""
    monkeypatch.setenv("AFROPAIR_OUTPUT_BACKEND", "parquet")

    with pytest.raises(ConfigurationError):
        Config.load()


def test_invalid_override() -> None:
    """Test that ill-typed overrides surface as configuration errors."""
    with pytest.raises(ConfigurationError):
        Config().with_overrides({"retrieval": {"max_matches": "many"}})


def test_assignment_is_validated() -> None:
    """Test that section fields are validated on assignment."""
    status = StatusConfig()

    with pytest.raises(ValueError):
        status.review = 0.9


def test_cli_reports_bad_config(tmp_path: Path) -> None:
    """Test that the CLI turns an ill-typed config file into an error exit."""
    path = _write(tmp_path, '[logging]\nlevel = 5\n\n[paths]\ndictionary = 3\n')

    assert main(["--config", str(path), "check"]) == 1
