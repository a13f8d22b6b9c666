"""Text processing utilities for sentence segmentation and tokenization."""

import re

from afropair.models import Segment

# Words may carry combining diacritics (U+0300..U+036F), common in Mooré
# orthography; everything else that is not a word character separates tokens.
_TOKEN_PATTERN = re.compile(r"[\w\u0300-\u036f]+")

# A sentence is a run of non-terminators plus its terminal punctuation.
_SENTENCE_PATTERN = re.compile(r"[^.!?]+[.!?]*")


def normalize_text(text: str) -> str:
    """Normalize text for processing."""
    # Remove excessive whitespace
    text = re.sub(r"[ \t]+", " ", text)
    # Normalize line breaks
    text = re.sub(r"\r\n?", "\n", text)
    return text.strip()


def tokenize(text: str) -> tuple[str, ...]:
    """Split text into word tokens on whitespace and punctuation."""
    return tuple(_TOKEN_PATTERN.findall(text))


def split_segments(text: str) -> list[Segment]:
    """Split text into sentence segments with stable ids ``s1``, ``s2``...

    Terminal punctuation stays attached to the sentence text so that corpus
    entries stored with punctuation still match token for token. Sentences
    without any word token are dropped.
    """
    segments: list[Segment] = []
    for match in _SENTENCE_PATTERN.finditer(text):
        raw = match.group()
        sentence = raw.strip()
        tokens = tokenize(sentence)
        if not tokens:
            continue

        start = match.start() + (len(raw) - len(raw.lstrip()))
        segments.append(
            Segment(
                seg_id=f"s{len(segments) + 1}",
                text=sentence,
                tokens=tokens,
                start=start,
                end=start + len(sentence),
            )
        )

    return segments
