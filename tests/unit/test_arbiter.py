"""Unit tests for the Arbiter."""

from typing import Callable

import pytest

from afropair.engines import Arbiter
from afropair.engines.arbiter import explain, select_winner
from afropair.exceptions import ArbitrationError
from afropair.models import (
    Candidate,
    CandidateOrigin,
    ExampleMatch,
    LexiconEntry,
    Segment,
)


def _match(target: str, similarity: float) -> ExampleMatch:
    return ExampleMatch("src", target, similarity, "manual_v1")


def test_corpus_candidates_precede_dictionary(make_segment: Callable[..., Segment]) -> None:
    """Test candidate order and that the best corpus match wins."""
    segment = make_segment("Je vais au marché.")
    lookup = {"Je": [LexiconEntry("ànɛ", "PRON", 0.95)]}
    matches = [_match("N zɩ̀ nà zaabā.", 0.9), _match("N zɩ̀.", 0.7)]

    decision = Arbiter().decide(segment, lookup, matches)

    assert [c.origin for c in decision.candidates] == [
        CandidateOrigin.CORPUS,
        CandidateOrigin.CORPUS,
        CandidateOrigin.DICTIONARY,
    ]
    assert decision.chosen.origin is CandidateOrigin.DICTIONARY
    assert decision.chosen_target == "ànɛ"
    assert decision.explanation == "Dictionary composition with 95.0% average word confidence"


def test_tie_goes_to_corpus(make_segment: Callable[..., Segment]) -> None:
    """Test that an equal-confidence corpus match beats the dictionary."""
    segment = make_segment("Bonjour")
    lookup = {"Bonjour": [LexiconEntry("nɛ bɛɛ̀dã", "INTJ", 0.8)]}

    decision = Arbiter().decide(segment, lookup, [_match("Nɛ yibeoogo", 0.8)])

    assert decision.chosen.origin is CandidateOrigin.CORPUS
    assert decision.explanation == "Corpus match selected with 80.0% similarity"


def test_winner_has_maximum_confidence(make_segment: Callable[..., Segment]) -> None:
    """Test that the winner carries the maximum confidence and is the first such candidate."""
    segment = make_segment("a b")
    matches = [_match("x", 0.65), _match("y", 0.9), _match("z", 0.9)]

    decision = Arbiter().decide(segment, {}, matches)

    assert decision.chosen.confidence == max(c.confidence for c in decision.candidates)
    assert decision.chosen_target == "y"


def test_no_evidence_yields_sentinel(make_segment: Callable[..., Segment]) -> None:
    """Test the sentinel candidate when there is no evidence at all."""
    segment = make_segment("Wẽnd na kõ-y laafi")

    decision = Arbiter().decide(segment, {}, [])

    assert len(decision.candidates) == 1
    assert decision.chosen.origin is CandidateOrigin.NONE
    assert decision.chosen.confidence == 0.0
    assert decision.chosen_target == "<UNTRANSLATED:Wẽnd na kõ-y laafi>"
    assert decision.explanation == "No translation candidates found"


def test_blank_composition_is_dropped(make_segment: Callable[..., Segment]) -> None:
    """Test that a whitespace-only dictionary composition is not a candidate."""
    segment = make_segment("x")
    lookup = {"x": [LexiconEntry("  ", "UNK", 0.9)]}

    decision = Arbiter().decide(segment, lookup, [])

    assert decision.chosen.origin is CandidateOrigin.NONE


def test_select_winner_on_empty_list_is_inconsistent() -> None:
    """Test that winner selection over nothing is a hard failure."""
    with pytest.raises(ArbitrationError):
        select_winner([])


def test_explanations_cover_every_origin() -> None:
    """Test that every origin has an explanation."""
    for origin in CandidateOrigin:
        assert explain(Candidate("t", origin, 0.5))
