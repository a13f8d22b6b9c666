"""ExampleStore: the sentence-pair corpus and its lexical-overlap search."""

import json
from pathlib import Path
from typing import Iterator, NamedTuple

from afropair.config import RetrievalConfig
from afropair.engines.base import BaseEngine, LoadReport, TableStore
from afropair.logging_config import get_logger
from afropair.models import ExampleMatch, Segment

logger = get_logger(__name__)

DEFAULT_PROVENANCE = "unknown"


class CorpusEntry(NamedTuple):
    source: str
    target: str
    provenance: str
    tokens: frozenset[str]


def token_set(text: str) -> frozenset[str]:
    """Case-folded whitespace tokens of ``text``."""
    return frozenset(text.casefold().split())


def jaccard_similarity(a: frozenset[str] | set[str], b: frozenset[str] | set[str]) -> float:
    """|a & b| / |a | b|, defined as 0.0 when both sets are empty."""
    union = len(a | b)
    if union == 0:
        return 0.0
    return len(a & b) / union


class ExampleStore(TableStore, BaseEngine):
    """Retrieves whole-sentence translation examples by word overlap.

    This is a cheap lexical heuristic: any corpus sentence sharing enough
    whole words with the query qualifies, regardless of word order.
    """

    table_name = "corpus"

    def __init__(
        self, path: str | Path | None = None, config: RetrievalConfig | None = None
    ) -> None:
        super().__init__(path)
        self.config = config or RetrievalConfig()
        self._entries: tuple[CorpusEntry, ...] = ()

    def __len__(self) -> int:
        return len(self._entries)

    def _parse(
        self, lines: Iterator[tuple[int, str]], report: LoadReport
    ) -> Iterator[CorpusEntry]:
        for number, line in lines:
            try:
                record = json.loads(line)
            except json.JSONDecodeError as e:
                report.skipped += 1
                logger.warning("Invalid JSON line in corpus", line=number, error=str(e))
                continue

            if not isinstance(record, dict):
                report.skipped += 1
                logger.warning("Corpus line is not a JSON object", line=number)
                continue

            source = record.get("source")
            target = record.get("target")
            if not isinstance(source, str) or not isinstance(target, str) or not source or not target:
                report.skipped += 1
                logger.warning("Corpus line lacks source or target", line=number)
                continue

            provenance = record.get("provenance")
            if not isinstance(provenance, str) or not provenance:
                provenance = DEFAULT_PROVENANCE

            yield CorpusEntry(source, target, provenance, token_set(source))

    def _install(self, records: list[CorpusEntry], report: LoadReport) -> None:
        self._entries = tuple(records)
        report.entries = len(records)
        self.report = report

    def query(self, text: str) -> list[ExampleMatch]:
        """Return up to ``max_matches`` examples above the similarity threshold.

        Results are ordered by similarity, highest first; corpus order breaks ties.
        """
        self.load()
        query_tokens = token_set(text)
        matches: list[ExampleMatch] = []
        for entry in self._entries:
            similarity = jaccard_similarity(query_tokens, entry.tokens)
            if similarity > self.config.similarity_threshold:
                matches.append(
                    ExampleMatch(
                        source_example=entry.source,
                        target_example=entry.target,
                        similarity=similarity,
                        provenance=entry.provenance,
                    )
                )

        matches.sort(key=lambda m: m.similarity, reverse=True)
        return matches[: self.config.max_matches]

    def process(self, segment: Segment) -> list[ExampleMatch]:
        return self.query(segment.text)
