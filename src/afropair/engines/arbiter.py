"""Arbiter (referee): merges corpus and dictionary evidence and picks a winner."""

from afropair.engines.base import BaseEngine
from afropair.engines.composer import CandidateComposer
from afropair.exceptions import ArbitrationError
from afropair.logging_config import get_logger
from afropair.models import (
    Candidate,
    CandidateOrigin,
    Decision,
    ExampleMatch,
    Segment,
    TokenLookup,
)

logger = get_logger(__name__)

NO_CANDIDATES_MESSAGE = "No translation candidates found"


class Arbiter(BaseEngine):
    """Ranks candidates from every evidence source and selects one per segment."""

    def __init__(self, composer: CandidateComposer | None = None) -> None:
        self.composer = composer or CandidateComposer()

    def build_candidates(
        self, token_lookup: TokenLookup, example_matches: list[ExampleMatch]
    ) -> list[Candidate]:
        """Assemble candidates in priority order: corpus matches, then dictionary."""
        candidates = [Candidate.from_match(match) for match in example_matches]

        composition = self.composer.compose(token_lookup)
        if composition.target.strip():
            candidates.append(Candidate.from_composition(composition))

        return candidates

    def decide(
        self,
        segment: Segment,
        token_lookup: TokenLookup,
        example_matches: list[ExampleMatch],
    ) -> Decision:
        """Return the decision for ``segment``.

        The winner has the strictly greatest confidence; on ties the earliest
        candidate wins, so corpus matches beat an equally confident
        dictionary composition. With no evidence at all the sentinel
        candidate is both the only candidate and the winner.
        """
        candidates = self.build_candidates(token_lookup, example_matches)
        if not candidates:
            candidates = [Candidate.sentinel(segment.text)]

        winner = select_winner(candidates)

        logger.debug(
            "Arbiter decided",
            seg_id=segment.seg_id,
            origin=winner.origin.value,
            confidence=winner.confidence,
            candidates=len(candidates),
        )

        return Decision(
            seg_id=segment.seg_id,
            source_text=segment.text,
            chosen_target=winner.target,
            chosen=winner,
            candidates=tuple(candidates),
            explanation=explain(winner),
        )

    def process(
        self,
        segment: Segment,
        token_lookup: TokenLookup,
        example_matches: list[ExampleMatch],
    ) -> Decision:
        return self.decide(segment, token_lookup, example_matches)


def select_winner(candidates: list[Candidate]) -> Candidate:
    """Fold to the first candidate holding the maximum confidence."""
    best: Candidate | None = None
    for candidate in candidates:
        if best is None or candidate.confidence > best.confidence:
            best = candidate

    if best is None:
        raise ArbitrationError(
            "No winner selected",
            details=f"{len(candidates)} candidate(s) supplied",
        )
    return best


def explain(winner: Candidate) -> str:
    """Deterministic explanation keyed by the winner's origin."""
    if winner.origin is CandidateOrigin.CORPUS:
        return f"Corpus match selected with {winner.confidence * 100:.1f}% similarity"
    if winner.origin is CandidateOrigin.DICTIONARY:
        return (
            f"Dictionary composition with {winner.confidence * 100:.1f}% "
            "average word confidence"
        )
    if winner.origin is CandidateOrigin.NONE:
        return NO_CANDIDATES_MESSAGE
    raise ArbitrationError(f"Unknown candidate origin: {winner.origin!r}")
