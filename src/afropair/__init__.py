"""AfroPair: dictionary and corpus arbitration for translation pair generation."""

from afropair.config import Config
from afropair.engines import (
    Arbiter,
    CandidateComposer,
    ConfidenceScorer,
    ExampleStore,
    Lexicon,
)
from afropair.models import (
    Candidate,
    CandidateOrigin,
    Decision,
    DictionaryComposition,
    ExampleMatch,
    LexiconEntry,
    QualityFeatures,
    ScoredDecision,
    Segment,
)
from afropair.pipeline import TranslationPipeline

__version__ = "0.1.0"

__all__ = [
    "Arbiter",
    "Candidate",
    "CandidateComposer",
    "CandidateOrigin",
    "ConfidenceScorer",
    "Config",
    "Decision",
    "DictionaryComposition",
    "ExampleMatch",
    "ExampleStore",
    "Lexicon",
    "LexiconEntry",
    "QualityFeatures",
    "ScoredDecision",
    "Segment",
    "TranslationPipeline",
]
