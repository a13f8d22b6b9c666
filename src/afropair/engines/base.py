"""Base classes for AfroPair engines and their backing tables."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator

from afropair.logging_config import get_logger
from afropair.utils.once import LoadOnce

logger = get_logger(__name__)


class BaseEngine(ABC):
    """Base class for all pipeline stages."""

    @abstractmethod
    def process(self, *args: Any, **kwargs: Any) -> Any:
        """Process input and return results."""
        pass


@dataclass
class LoadReport:
    """Diagnostics of a table load."""

    path: str | None = None
    entries: int = 0
    skipped: int = 0
    missing: bool = False
    error: str | None = None


class TableStore(ABC):
    """A read-only table loaded lazily, at most once, from a text file.

    A missing or unreadable file leaves the store usable but empty; the
    problem is logged as a warning and recorded on ``report``.
    """

    #: Human-readable table name used in log events.
    table_name = "table"

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else None
        self.report = LoadReport()
        self._once = LoadOnce()

    @property
    def is_loaded(self) -> bool:
        return self._once.done

    def load(self, path: str | Path | None = None) -> None:
        """Load the backing table unless a previous call already did."""
        target = Path(path) if path is not None else self.path
        self._once.run(lambda: self._load_from(target))

    def _load_from(self, path: Path | None) -> None:
        report = LoadReport(path=str(path) if path is not None else None)
        if path is None:
            report.missing = True
            logger.warning(f"No {self.table_name} path configured, using empty {self.table_name}")
            self._install([], report)
            return

        try:
            with open(path, "r", encoding="utf-8-sig") as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            report.missing = True
            report.error = str(e)
            logger.warning(
                f"{self.table_name.capitalize()} not found or unreadable, using empty {self.table_name}",
                path=str(path),
                error=str(e),
            )
            self._install([], report)
            return

        records = list(self._parse(_numbered_non_blank(lines), report))
        self._install(records, report)
        logger.info(
            f"{self.table_name.capitalize()} loaded",
            path=str(path),
            entries=report.entries,
            skipped=report.skipped,
        )

    @abstractmethod
    def _parse(self, lines: Iterator[tuple[int, str]], report: LoadReport) -> Iterator[Any]:
        """Yield parsed records, counting malformed lines on ``report``."""

    @abstractmethod
    def _install(self, records: list[Any], report: LoadReport) -> None:
        """Publish parsed records as the store's read-only state."""


def _numbered_non_blank(lines: list[str]) -> Iterator[tuple[int, str]]:
    for number, line in enumerate(lines, start=1):
        if line.strip():
            yield number, line
