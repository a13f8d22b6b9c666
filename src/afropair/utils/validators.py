"""Input validation utilities for dictionary and corpus table files."""

from pathlib import Path

import chardet

from afropair.exceptions import ValidationError

# Encodings that can carry the full target-language character inventory.
UNICODE_ENCODINGS = {"utf-8", "utf-8-sig", "ascii", "utf-16", "utf-32"}


def validate_encoding(file_path: Path, encoding: str = "utf-8") -> str:
    """Detect the encoding of a table file.

    Low-confidence detections fall back to ``encoding`` when the file decodes
    cleanly with it.
    """
    try:
        with open(file_path, "rb") as f:
            raw_data = f.read(10000)  # Sample first 10KB
    except OSError as e:
        raise ValidationError(f"Failed to read {file_path}: {e}") from e

    result = chardet.detect(raw_data)
    detected_encoding = (result.get("encoding") or encoding).lower()
    confidence = result.get("confidence") or 0.0

    if confidence < 0.7 or detected_encoding not in UNICODE_ENCODINGS:
        try:
            raw_data.decode(encoding)
        except UnicodeDecodeError:
            raise ValidationError(
                f"Cannot decode {file_path} as {encoding}. "
                f"Detected: {detected_encoding} (confidence: {confidence:.2f})"
            )
        return encoding

    return detected_encoding


def validate_table_file(file_path: Path) -> tuple[Path, str]:
    """Validate a table file and return path and encoding."""
    if not file_path.exists():
        raise ValidationError(f"File does not exist: {file_path}")

    if not file_path.is_file():
        raise ValidationError(f"Path is not a file: {file_path}")

    file_size = file_path.stat().st_size
    if file_size == 0:
        raise ValidationError(f"File is empty: {file_path}")

    if file_size > 500 * 1024 * 1024:  # 500MB
        raise ValidationError(
            f"File is too large ({file_size / 1024 / 1024:.1f}MB). "
            "Maximum size is 500MB."
        )

    encoding = validate_encoding(file_path)

    return file_path, encoding
