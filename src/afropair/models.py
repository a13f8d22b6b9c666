"""Data types flowing through the translation pipeline."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple

UNKNOWN_MARKER = "<UNK:"
UNTRANSLATED_MARKER = "<UNTRANSLATED:"


def unknown_placeholder(token: str) -> str:
    """Return the placeholder target for a token missing from the lexicon."""
    return f"{UNKNOWN_MARKER}{token}>"


def untranslated_placeholder(text: str) -> str:
    """Return the placeholder target for a segment with no evidence at all."""
    return f"{UNTRANSLATED_MARKER}{text}>"


@dataclass(frozen=True)
class Segment:
    """One sentence-like unit of the source text."""

    seg_id: str
    text: str
    tokens: tuple[str, ...]
    start: int = 0
    end: int = 0


class LexiconEntry(NamedTuple):
    """A target-language candidate for one source token."""

    target: str
    part_of_speech: str
    score: float


# Per-segment lookup result: surface token -> ranked entries, in token order.
TokenLookup = dict[str, list[LexiconEntry]]


class ExampleMatch(NamedTuple):
    """A corpus sentence pair matched against a query."""

    source_example: str
    target_example: str
    similarity: float
    provenance: str


class DictionaryComposition(NamedTuple):
    """A sentence assembled word by word from lexicon winners."""

    target: str
    confidence: float
    covered_token_count: int


class CandidateOrigin(str, Enum):
    """Which evidence source produced a candidate."""

    CORPUS = "corpus"
    DICTIONARY = "dictionary"
    NONE = "none"


@dataclass(frozen=True)
class Candidate:
    """One proposed whole-segment translation."""

    target: str
    origin: CandidateOrigin
    confidence: float
    detail: ExampleMatch | DictionaryComposition | None = None

    @classmethod
    def from_match(cls, match: ExampleMatch) -> "Candidate":
        return cls(
            target=match.target_example,
            origin=CandidateOrigin.CORPUS,
            confidence=match.similarity,
            detail=match,
        )

    @classmethod
    def from_composition(cls, composition: DictionaryComposition) -> "Candidate":
        return cls(
            target=composition.target,
            origin=CandidateOrigin.DICTIONARY,
            confidence=composition.confidence,
            detail=composition,
        )

    @classmethod
    def sentinel(cls, source_text: str) -> "Candidate":
        """Zero-evidence placeholder used when nothing else was proposed."""
        return cls(
            target=untranslated_placeholder(source_text),
            origin=CandidateOrigin.NONE,
            confidence=0.0,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "target": self.target,
            "origin": self.origin.value,
            "confidence": self.confidence,
            "detail": self.detail._asdict() if self.detail is not None else None,
        }


@dataclass(frozen=True)
class Decision:
    """The Arbiter's verdict for one segment."""

    seg_id: str
    source_text: str
    chosen_target: str
    chosen: Candidate
    candidates: tuple[Candidate, ...]
    explanation: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "seg_id": self.seg_id,
            "source_text": self.source_text,
            "chosen_target": self.chosen_target,
            "origin": self.chosen.origin.value,
            "candidates": [c.to_dict() for c in self.candidates],
            "explanation": self.explanation,
        }


@dataclass(frozen=True)
class QualityFeatures:
    source_confidence: float
    candidate_count: int
    length_ratio: float
    unknown_token_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "source_confidence": self.source_confidence,
            "candidate_count": self.candidate_count,
            "length_ratio": self.length_ratio,
            "unknown_token_count": self.unknown_token_count,
        }


@dataclass(frozen=True)
class ScoredDecision:
    """A Decision together with its composite confidence and features."""

    decision: Decision
    composite_confidence: float
    features: QualityFeatures

    @property
    def seg_id(self) -> str:
        return self.decision.seg_id

    @property
    def source_text(self) -> str:
        return self.decision.source_text

    @property
    def chosen_target(self) -> str:
        return self.decision.chosen_target

    @property
    def candidates(self) -> tuple[Candidate, ...]:
        return self.decision.candidates

    @property
    def explanation(self) -> str:
        return self.decision.explanation

    def to_dict(self) -> dict[str, Any]:
        data = self.decision.to_dict()
        data["composite_confidence"] = self.composite_confidence
        data["features"] = self.features.to_dict()
        return data
