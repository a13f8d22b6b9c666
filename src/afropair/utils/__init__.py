"""Utility functions for text processing, validation and table loading."""

from afropair.utils.once import LoadOnce
from afropair.utils.text_processor import normalize_text, split_segments, tokenize
from afropair.utils.validators import validate_encoding, validate_table_file

__all__ = [
    "LoadOnce",
    "normalize_text",
    "split_segments",
    "tokenize",
    "validate_encoding",
    "validate_table_file",
]
