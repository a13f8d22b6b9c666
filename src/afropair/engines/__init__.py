"""Core engines: evidence lookup, arbitration and scoring."""

from afropair.engines.arbiter import Arbiter
from afropair.engines.base import LoadReport
from afropair.engines.composer import CandidateComposer
from afropair.engines.example_store import ExampleStore, jaccard_similarity
from afropair.engines.lexicon import Lexicon
from afropair.engines.scorer import ConfidenceScorer

__all__ = [
    "Arbiter",
    "CandidateComposer",
    "ConfidenceScorer",
    "ExampleStore",
    "Lexicon",
    "LoadReport",
    "jaccard_similarity",
]
