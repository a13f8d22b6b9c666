"""Unit tests for the ConfidenceScorer."""

import pytest

from afropair.config import ScoringConfig
from afropair.engines import ConfidenceScorer
from afropair.engines.scorer import length_ratio
from afropair.models import Candidate, CandidateOrigin, Decision


def _decision(target: str, confidence: float, source: str = "Je vais au marché.", extra: int = 0) -> Decision:
    chosen = Candidate(target, CandidateOrigin.DICTIONARY, confidence)
    others = tuple(Candidate("alt", CandidateOrigin.CORPUS, 0.0) for _ in range(extra))
    return Decision(
        seg_id="s1",
        source_text=source,
        chosen_target=target,
        chosen=chosen,
        candidates=(chosen,) + others,
        explanation="",
    )


def test_no_adjustments() -> None:
    """Test that a clean single candidate keeps its confidence."""
    scored = ConfidenceScorer().score(_decision("N zɩ̀ nà zaabā.", 0.9))

    assert scored.composite_confidence == pytest.approx(0.9)
    assert scored.features.candidate_count == 1
    assert scored.features.unknown_token_count == 0


def test_unknown_penalty_is_exponential() -> None:
    """Test the 0.7 ** n unknown-token decay."""
    target = "ànɛ <UNK:vais> <UNK:au> zaabā"
    scored = ConfidenceScorer().score(_decision(target, 0.8))

    assert scored.features.unknown_token_count == 2
    assert scored.composite_confidence == pytest.approx(0.8 * 0.7**2)


def test_length_penalty() -> None:
    """Test the penalty for a very short or very long target."""
    scored = ConfidenceScorer().score(_decision("à", 0.9))

    assert scored.features.length_ratio < 0.3
    assert scored.composite_confidence == pytest.approx(0.9 * 0.8)


def test_penalties_apply_before_bonus() -> None:
    """Test the adjustment order: penalties compound, then the bonus."""
    scored = ConfidenceScorer().score(_decision("<UNK:x>", 0.9, source="a" * 40, extra=1))

    assert scored.composite_confidence == pytest.approx(0.9 * 0.7 * 0.8 * 1.1)


def test_bonus_is_capped() -> None:
    """Test that the multi-candidate bonus cannot exceed 1.0."""
    scored = ConfidenceScorer().score(_decision("N zɩ̀ nà zaabā.", 0.95, extra=2))

    assert scored.composite_confidence == 1.0


@pytest.mark.parametrize("confidence", [1.7, 42.0, -0.5])
def test_output_is_clamped(confidence: float) -> None:
    """Test clamping with corrupted source confidences."""
    scored = ConfidenceScorer().score(_decision("N zɩ̀ nà zaabā.", confidence))

    assert 0.0 <= scored.composite_confidence <= 1.0


def test_sentinel_scores_zero() -> None:
    """Test that the sentinel yields zero confidence."""
    sentinel = Candidate.sentinel("Je vais au marché.")
    decision = Decision("s1", "Je vais au marché.", sentinel.target, sentinel, (sentinel,), "")

    scored = ConfidenceScorer().score(decision)

    assert scored.features.source_confidence == 0.0
    assert scored.composite_confidence == 0.0


def test_length_ratio() -> None:
    """Test the symmetric length ratio."""
    assert length_ratio("abcd", "ab") == 0.5
    assert length_ratio("ab", "abcd") == 0.5
    assert length_ratio("", "abc") == 0.0
    assert length_ratio("abc", "") == 0.0


def test_constants_are_configurable() -> None:
    """Test that the heuristic constants come from configuration."""
    scorer = ConfidenceScorer(ScoringConfig(unknown_penalty=0.5))

    scored = scorer.score(_decision("ànɛ <UNK:vais> zaabā ...", 0.8))

    assert scored.composite_confidence == pytest.approx(0.4)
