"""Pytest configuration and fixtures."""

import json
import os
from pathlib import Path
from typing import Callable, Generator

import pytest

from afropair.config import Config
from afropair.engines import ExampleStore, Lexicon
from afropair.models import Segment
from afropair.pipeline import TranslationPipeline
from afropair.utils.text_processor import tokenize


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep AFROPAIR_* variables from the calling shell out of every test."""
    for name in list(os.environ):
        if name.startswith("AFROPAIR_"):
            monkeypatch.delenv(name)


@pytest.fixture
def make_segment() -> Callable[..., Segment]:
    """Build segments the way the splitter would."""

    def _make(text: str, seg_id: str = "s1") -> Segment:
        return Segment(seg_id=seg_id, text=text, tokens=tokenize(text), start=0, end=len(text))

    return _make


@pytest.fixture
def dictionary_file(tmp_path: Path) -> Path:
    """A small French -> Mooré dictionary with a header row."""
    path = tmp_path / "fr_mos_dict.tsv"
    path.write_text(
        "fr_word\tmos_word\tpos\tscore\n"
        "je\tànɛ\tPRON\t0.95\n"
        "aller\tzɩ̀\tVERB\t0.98\n"
        "bonjour\tnɛ bɛɛ̀dã\tINTJ\t0.95\n"
        "marché\tzaabā\tNOUN\t0.97\n"
        "au\tnà\tPREP\t0.85\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def corpus_file(tmp_path: Path) -> Path:
    """A corpus with one exact sentence pair and one unrelated pair."""
    path = tmp_path / "fr_mos_corpus.jsonl"
    records = [
        {"source": "Je vais au marché.", "target": "N zɩ̀ nà zaabā.", "provenance": "manual_v1"},
        {"source": "Merci beaucoup.", "target": "Bɛɛlg kɩ̀tā sɩ́ndã.", "provenance": "manual_v1"},
    ]
    path.write_text(
        "\n".join(json.dumps(r, ensure_ascii=False) for r in records) + "\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def config(tmp_path: Path, dictionary_file: Path, corpus_file: Path) -> Config:
    """Create a test configuration pointing at temporary tables."""
    config = Config()
    config.paths.dictionary = str(dictionary_file)
    config.paths.corpus = str(corpus_file)
    config.paths.output = str(tmp_path / "output" / "translations.jsonl")
    return config


@pytest.fixture
def lexicon(dictionary_file: Path) -> Lexicon:
    lexicon = Lexicon(dictionary_file)
    lexicon.load()
    return lexicon


@pytest.fixture
def example_store(corpus_file: Path) -> ExampleStore:
    store = ExampleStore(corpus_file)
    store.load()
    return store


@pytest.fixture
def pipeline(config: Config) -> Generator[TranslationPipeline, None, None]:
    pipeline = TranslationPipeline(config)
    yield pipeline
    pipeline.close()
