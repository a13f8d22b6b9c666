"""Translation records and the writers that persist them."""

import json
import threading
import time
import uuid
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Iterable

from peewee import PeeweeException

from afropair.config import Config, OutputConfig, StatusConfig
from afropair.database import DatabaseManager, TranslationRecordModel
from afropair.exceptions import PersistenceError
from afropair.logging_config import get_logger
from afropair.models import ScoredDecision

logger = get_logger(__name__)

AUTO_ACCEPTED = "auto_accepted"
REVIEW_RECOMMENDED = "review_recommended"
MANUAL_REVIEW_REQUIRED = "manual_review_required"


def determine_status(confidence: float, thresholds: StatusConfig | None = None) -> str:
    """Grade a composite confidence into a review status."""
    thresholds = thresholds or StatusConfig()
    if confidence >= thresholds.auto_accept:
        return AUTO_ACCEPTED
    if confidence >= thresholds.review:
        return REVIEW_RECOMMENDED
    return MANUAL_REVIEW_REQUIRED


@dataclass
class TranslationRecord:
    """One training pair as it is persisted."""

    parent_id: str
    src: str
    tgt: str
    confidence: float
    features: dict[str, Any]
    candidates: list[dict[str, Any]]
    explanation: str
    status: str
    src_lang: str = "fr"
    tgt_lang: str = "mos"
    pipeline_version: str = "afropair_v1"
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: int = field(default_factory=lambda: int(time.time() * 1000))

    @classmethod
    def from_scored(
        cls,
        scored: ScoredDecision,
        parent_id: str,
        output: OutputConfig | None = None,
        thresholds: StatusConfig | None = None,
    ) -> "TranslationRecord":
        output = output or OutputConfig()
        return cls(
            parent_id=parent_id,
            src=scored.source_text,
            tgt=scored.chosen_target,
            confidence=scored.composite_confidence,
            features=scored.features.to_dict(),
            candidates=[c.to_dict() for c in scored.candidates],
            explanation=scored.explanation,
            status=determine_status(scored.composite_confidence, thresholds),
            src_lang=output.src_lang,
            tgt_lang=output.tgt_lang,
            pipeline_version=output.pipeline_version,
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def build_records(
    scored: Iterable[ScoredDecision], parent_id: str, config: Config
) -> list[TranslationRecord]:
    return [
        TranslationRecord.from_scored(s, parent_id, config.output, config.status)
        for s in scored
    ]


class RecordWriter(ABC):
    """Destination for translation records."""

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def write(self, records: list[TranslationRecord]) -> int:
        """Persist ``records`` and return how many were written."""
        if not records:
            return 0
        with self._lock:
            self._write(records)
        logger.info("Logged translation records", count=len(records), destination=self.destination)
        return len(records)

    @property
    @abstractmethod
    def destination(self) -> str:
        pass

    @abstractmethod
    def _write(self, records: list[TranslationRecord]) -> None:
        pass

    def close(self) -> None:
        pass


class JsonlRecordWriter(RecordWriter):
    """Appends records as JSON lines."""

    def __init__(self, path: str | Path) -> None:
        super().__init__()
        self.path = Path(path)

    @property
    def destination(self) -> str:
        return str(self.path)

    def _write(self, records: list[TranslationRecord]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "a", encoding="utf-8") as f:
                for record in records:
                    f.write(json.dumps(record.to_dict(), ensure_ascii=False) + "\n")
        except OSError as e:
            raise PersistenceError(f"Failed to write records to {self.path}", details=str(e)) from e


class SqliteRecordWriter(RecordWriter):
    """Stores records in the ``translation_records`` table."""

    def __init__(self, path: str | Path) -> None:
        super().__init__()
        self.path = Path(path)
        self._manager = DatabaseManager(self.path)
        self._manager.open()

    @property
    def destination(self) -> str:
        return str(self.path)

    def _write(self, records: list[TranslationRecord]) -> None:
        rows = [
            {
                "id": r.id,
                "parent_id": r.parent_id,
                "src_lang": r.src_lang,
                "tgt_lang": r.tgt_lang,
                "src": r.src,
                "tgt": r.tgt,
                "confidence": r.confidence,
                "status": r.status,
                "explanation": r.explanation,
                "features_json": json.dumps(r.features, ensure_ascii=False),
                "candidates_json": json.dumps(r.candidates, ensure_ascii=False),
                "pipeline_version": r.pipeline_version,
            }
            for r in records
        ]
        try:
            with self._manager.bound() as db, db.atomic():
                TranslationRecordModel.insert_many(rows).execute()
        except PeeweeException as e:
            raise PersistenceError(f"Failed to write records to {self.path}", details=str(e)) from e

    @property
    def manager(self) -> DatabaseManager:
        return self._manager

    def close(self) -> None:
        self._manager.close()


def create_writer(config: Config) -> RecordWriter:
    """Build the record writer selected by ``output.backend``."""
    if config.output.backend == "sqlite":
        return SqliteRecordWriter(Path(config.paths.output).with_suffix(".db"))
    return JsonlRecordWriter(config.paths.output)
