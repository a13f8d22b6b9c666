"""Unit tests for the CandidateComposer."""

import pytest

from afropair.engines import CandidateComposer, Lexicon
from afropair.models import LexiconEntry


def test_empty_lookup() -> None:
    """Test that an empty lookup composes to nothing with zero confidence."""
    composition = CandidateComposer().compose({})

    assert composition.target == ""
    assert composition.confidence == 0.0
    assert composition.covered_token_count == 0


def test_first_entry_wins_and_scores_average() -> None:
    """Test that each token's top entry is used and scores are averaged."""
    lookup = {
        "je": [LexiconEntry("ànɛ", "PRON", 0.9), LexiconEntry("mam", "PRON", 0.4)],
        "marché": [LexiconEntry("zaabā", "NOUN", 0.7)],
    }

    composition = CandidateComposer().compose(lookup)

    assert composition.target == "ànɛ zaabā"
    assert composition.confidence == pytest.approx(0.8)
    assert composition.covered_token_count == 2


def test_unknown_placeholders_count_toward_mean(lexicon: Lexicon) -> None:
    """Test that unknown placeholders contribute their 0.1 score."""
    lookup = lexicon.lookup_tokens(["Je", "vais"])

    composition = CandidateComposer().compose(lookup)

    assert composition.target == "ànɛ <UNK:vais>"
    assert composition.confidence == pytest.approx((0.95 + 0.1) / 2)


def test_tokens_without_entries_are_ignored() -> None:
    """Test that a token with an empty entry list does not count."""
    lookup = {"a": [], "b": [LexiconEntry("bee", "NOUN", 0.6)]}

    composition = CandidateComposer().compose(lookup)

    assert composition.target == "bee"
    assert composition.confidence == pytest.approx(0.6)
    assert composition.covered_token_count == 1
