"""Pipeline orchestrator: segments in, scored translation records out."""

import threading
import time
import uuid
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from afropair.config import Config
from afropair.engines import Arbiter, ConfidenceScorer, ExampleStore, Lexicon
from afropair.exceptions import ArbitrationError, PersistenceError
from afropair.logging_config import bound_run, get_logger
from afropair.models import ScoredDecision, Segment, TokenLookup
from afropair.records import RecordWriter, TranslationRecord, build_records, create_writer
from afropair.utils.text_processor import normalize_text, split_segments

logger = get_logger(__name__)


@dataclass
class TranslationResult:
    """Outcome of translating one source sentence."""

    id: str
    success: bool
    translation: str = ""
    confidence: float = 0.0
    coverage: float = 0.0
    duration_ms: int = 0
    scored: list[ScoredDecision] = field(default_factory=list)
    records: list[TranslationRecord] = field(default_factory=list)
    error: str | None = None


@dataclass
class BatchResult:
    total: int
    successful: int
    results: list[TranslationResult]

    @property
    def success_rate(self) -> float:
        return self.successful / self.total if self.total else 0.0


class TranslationPipeline:
    """Runs Lexicon/ExampleStore lookup, arbitration and scoring per segment.

    The two tables are loaded once and then shared read-only, so sentences
    of a batch can be translated in parallel.
    """

    def __init__(
        self,
        config: Config | None = None,
        *,
        lexicon: Lexicon | None = None,
        example_store: ExampleStore | None = None,
        writer: RecordWriter | None = None,
    ) -> None:
        # The tables define __len__, so an unloaded one is falsy; test for None.
        self.config = config if config is not None else Config()
        self.lexicon = (
            lexicon
            if lexicon is not None
            else Lexicon(self.config.paths.dictionary, self.config.lexicon)
        )
        self.example_store = (
            example_store
            if example_store is not None
            else ExampleStore(self.config.paths.corpus, self.config.retrieval)
        )
        self.arbiter = Arbiter()
        self.scorer = ConfidenceScorer(self.config.scoring)
        self._writer = writer
        self._writer_lock = threading.Lock()

    @property
    def writer(self) -> RecordWriter:
        with self._writer_lock:
            if self._writer is None:
                self._writer = create_writer(self.config)
        return self._writer

    def load(self) -> None:
        """Load both tables; later calls are no-ops."""
        self.lexicon.load()
        self.example_store.load()

    def translate_segment(self, segment: Segment) -> tuple[ScoredDecision, TokenLookup]:
        token_lookup = self.lexicon.lookup_tokens(segment.tokens)
        matches = self.example_store.query(segment.text)
        decision = self.arbiter.decide(segment, token_lookup, matches)
        return self.scorer.score(decision), token_lookup

    def translate_segments(self, segments: list[Segment]) -> list[ScoredDecision]:
        """Return one ScoredDecision per segment, in input order."""
        self.load()
        return [self.translate_segment(segment)[0] for segment in segments]

    def translate_sentence(self, text: str, persist: bool = True) -> TranslationResult:
        """Split, translate, score and (optionally) persist one source sentence."""
        run_id = str(uuid.uuid4())
        with bound_run(run_id=run_id):
            return self._translate_sentence(text, run_id, persist)

    def _translate_sentence(self, text: str, run_id: str, persist: bool) -> TranslationResult:
        started = time.perf_counter()
        logger.info("Translation pipeline started", source=text)

        try:
            self.load()
            segments = split_segments(normalize_text(text))

            scored: list[ScoredDecision] = []
            lookups: list[TokenLookup] = []
            for segment in segments:
                result, lookup = self.translate_segment(segment)
                scored.append(result)
                lookups.append(lookup)

            records = build_records(scored, run_id, self.config)
            if persist:
                self.writer.write(records)
        except (ArbitrationError, PersistenceError) as e:
            logger.error("Translation pipeline failed", error=e.message, details=e.details)
            return TranslationResult(
                id=run_id,
                success=False,
                duration_ms=_elapsed_ms(started),
                error=e.message,
            )

        confidence = (
            sum(s.composite_confidence for s in scored) / len(scored) if scored else 0.0
        )
        result = TranslationResult(
            id=run_id,
            success=True,
            translation=" ".join(s.chosen_target for s in scored),
            confidence=confidence,
            coverage=self.lexicon.coverage(lookups),
            duration_ms=_elapsed_ms(started),
            scored=scored,
            records=records,
        )
        logger.info(
            "Translation pipeline complete",
            segments=len(scored),
            confidence=round(confidence, 4),
            coverage=round(result.coverage, 4),
            duration_ms=result.duration_ms,
        )
        return result

    def batch_translate(self, sentences: list[str], persist: bool = True) -> BatchResult:
        """Translate independent sentences, fanning out over ``pipeline.max_workers``."""
        self.load()
        logger.info("Batch translation started", sentences=len(sentences))

        workers = self.config.pipeline.max_workers
        if workers > 1:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                results = list(
                    pool.map(lambda s: self.translate_sentence(s, persist=persist), sentences)
                )
        else:
            results = [self.translate_sentence(s, persist=persist) for s in sentences]

        batch = BatchResult(
            total=len(sentences),
            successful=sum(1 for r in results if r.success),
            results=results,
        )
        logger.info(
            "Batch translation complete",
            successful=batch.successful,
            total=batch.total,
        )
        return batch

    def close(self) -> None:
        if self._writer is not None:
            self._writer.close()


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)
