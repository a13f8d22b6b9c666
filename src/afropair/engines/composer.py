"""Composes a sentence-level dictionary candidate from per-token lookups."""

from afropair.engines.base import BaseEngine
from afropair.models import DictionaryComposition, TokenLookup


class CandidateComposer(BaseEngine):
    """Word-by-word composition: the top entry of every token, in token order."""

    def compose(self, token_lookup: TokenLookup) -> DictionaryComposition:
        """Join each token's best target and average their scores.

        Unknown-token placeholders are included and count toward the mean.
        """
        targets: list[str] = []
        total_score = 0.0
        for entries in token_lookup.values():
            if not entries:
                continue
            best = entries[0]
            targets.append(best.target)
            total_score += best.score

        count = len(targets)
        return DictionaryComposition(
            target=" ".join(targets),
            confidence=total_score / count if count > 0 else 0.0,
            covered_token_count=count,
        )

    def process(self, token_lookup: TokenLookup) -> DictionaryComposition:
        return self.compose(token_lookup)
