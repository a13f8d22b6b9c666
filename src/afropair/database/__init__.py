"""Database models and management for AfroPair."""

from afropair.database.manager import DatabaseManager
from afropair.database.models import TranslationRecordModel

__all__ = [
    "DatabaseManager",
    "TranslationRecordModel",
]
