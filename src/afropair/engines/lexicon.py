"""Lexicon: the bilingual word table and its token lookup."""

import math
from pathlib import Path
from typing import Iterable, Iterator

from afropair.config import LexiconConfig
from afropair.engines.base import BaseEngine, LoadReport, TableStore
from afropair.logging_config import get_logger
from afropair.models import LexiconEntry, Segment, TokenLookup, unknown_placeholder

logger = get_logger(__name__)

# First-record values that mark a header line rather than a word pair.
HEADER_SOURCES = {"source", "src", "fr_word"}
HEADER_TARGETS = {"target", "tgt", "mos_word"}
HEADER_SCORES = {"score"}


class Lexicon(TableStore, BaseEngine):
    """Maps source tokens to ranked target-language candidates.

    The backing file is tab-separated: ``source, target, pos?, score?``.
    Keys are case-folded; several rows for the same key accumulate and are
    ranked by descending score, file order breaking ties.
    """

    table_name = "dictionary"

    def __init__(
        self, path: str | Path | None = None, config: LexiconConfig | None = None
    ) -> None:
        super().__init__(path)
        self.config = config or LexiconConfig()
        self._table: dict[str, tuple[LexiconEntry, ...]] = {}

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and token.casefold() in self._table

    def _parse(
        self, lines: Iterator[tuple[int, str]], report: LoadReport
    ) -> Iterator[tuple[str, LexiconEntry]]:
        first = True
        for number, line in lines:
            columns = [column.strip() for column in line.split("\t")]
            if first:
                first = False
                if _is_header(columns):
                    continue

            source = columns[0]
            target = columns[1] if len(columns) > 1 else ""
            if not source or not target:
                report.skipped += 1
                logger.warning("Skipping malformed dictionary line", line=number)
                continue

            pos = columns[2] if len(columns) > 2 and columns[2] else self.config.default_pos
            score = _parse_score(
                columns[3] if len(columns) > 3 else None, self.config.default_score
            )
            yield source.casefold(), LexiconEntry(target, pos, score)

    def _install(
        self, records: list[tuple[str, LexiconEntry]], report: LoadReport
    ) -> None:
        grouped: dict[str, list[LexiconEntry]] = {}
        for key, entry in records:
            grouped.setdefault(key, []).append(entry)

        # sorted() is stable, so equal scores keep file order.
        self._table = {
            key: tuple(sorted(entries, key=lambda e: -e.score))
            for key, entries in grouped.items()
        }
        report.entries = len(records)
        self.report = report

    def lookup(self, token: str) -> list[LexiconEntry]:
        """Return ranked entries for ``token``, or a single unknown placeholder."""
        self.load()
        entries = self._table.get(token.casefold())
        if entries:
            return list(entries)
        return [
            LexiconEntry(
                target=unknown_placeholder(token),
                part_of_speech="UNK",
                score=self.config.unknown_score,
            )
        ]

    def lookup_tokens(self, tokens: Iterable[str]) -> TokenLookup:
        """Look up every token of a segment, keyed by surface form in token order."""
        result: TokenLookup = {}
        for token in tokens:
            if token not in result:
                result[token] = self.lookup(token)
        return result

    def process(self, segment: Segment) -> TokenLookup:
        return self.lookup_tokens(segment.tokens)

    def coverage(self, lookups: Iterable[TokenLookup]) -> float:
        """Share of looked-up tokens whose best entry beats the unknown score."""
        total = 0
        covered = 0
        for lookup in lookups:
            for entries in lookup.values():
                total += 1
                if entries and entries[0].score > self.config.unknown_score:
                    covered += 1
        return covered / total if total > 0 else 0.0


def _is_header(columns: list[str]) -> bool:
    if len(columns) > 1 and columns[0].casefold() in HEADER_SOURCES:
        return columns[1].casefold() in HEADER_TARGETS
    return len(columns) > 3 and columns[3].casefold() in HEADER_SCORES


def _parse_score(raw: str | None, default: float) -> float:
    if raw is None or not raw:
        return default
    try:
        score = float(raw)
    except ValueError:
        return default
    if not math.isfinite(score):
        return default
    return score
