"""Composite confidence scoring of arbiter decisions."""

from afropair.config import ScoringConfig
from afropair.engines.base import BaseEngine
from afropair.models import (
    UNKNOWN_MARKER,
    CandidateOrigin,
    Decision,
    QualityFeatures,
    ScoredDecision,
)


def length_ratio(source: str, target: str) -> float:
    """Symmetric character-length ratio in [0, 1]; 0 when either side is empty."""
    if not source or not target:
        return 0.0
    return min(len(target) / len(source), len(source) / len(target))


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


class ConfidenceScorer(BaseEngine):
    """Turns a Decision into a ScoredDecision.

    The composite starts from the winner's confidence and is adjusted in a
    fixed order: ``unknown_penalty ** unknown_tokens``, then the length
    penalty below ``length_ratio_threshold``, then the multi-candidate bonus
    (capped at 1.0). The result is clamped to [0, 1].
    """

    def __init__(self, config: ScoringConfig | None = None) -> None:
        self.config = config or ScoringConfig()

    def extract_features(self, decision: Decision) -> QualityFeatures:
        winner = decision.chosen
        source_confidence = (
            0.0 if winner.origin is CandidateOrigin.NONE else winner.confidence
        )
        return QualityFeatures(
            source_confidence=source_confidence,
            candidate_count=len(decision.candidates),
            length_ratio=length_ratio(decision.source_text, decision.chosen_target),
            unknown_token_count=decision.chosen_target.count(UNKNOWN_MARKER),
        )

    def composite(self, features: QualityFeatures) -> float:
        confidence = features.source_confidence

        if features.unknown_token_count > 0:
            confidence *= self.config.unknown_penalty ** features.unknown_token_count

        if features.length_ratio < self.config.length_ratio_threshold:
            confidence *= self.config.length_penalty

        if features.candidate_count > 1:
            confidence = min(1.0, confidence * self.config.multi_candidate_bonus)

        return clamp(confidence)

    def score(self, decision: Decision) -> ScoredDecision:
        features = self.extract_features(decision)
        return ScoredDecision(
            decision=decision,
            composite_confidence=self.composite(features),
            features=features,
        )

    def process(self, decision: Decision) -> ScoredDecision:
        return self.score(decision)
