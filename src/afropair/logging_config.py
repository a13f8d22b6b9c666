"""Logging configuration for AfroPair.

Records from the ``afropair`` logger tree go to stderr so that command
output on stdout stays clean. An optional log file receives the same events
rendered by structlog (JSON when ``logging.json_logging`` is set).
"""

import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

import structlog
from structlog.stdlib import LoggerFactory, ProcessorFormatter

from afropair.config import Config

ROOT_LOGGER = "afropair"

# Libraries whose debug output drowns the pipeline events.
QUIET_LOGGERS = ("peewee", "chardet")

SHARED_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
]


def configure_logging(config: Config) -> None:
    """Configure structured logging; calling it again replaces the handlers."""
    log_level = getattr(logging, config.logging.level.upper(), logging.INFO)

    renderer = (
        structlog.processors.JSONRenderer(ensure_ascii=False)
        if config.logging.json_logging
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *SHARED_PROCESSORS,
            ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=SHARED_PROCESSORS,
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.logging.log_file:
        log_file_path = Path(config.logging.log_file)
        log_file_path.parent.mkdir(parents=True, exist_ok=True)
        # File output never carries ANSI colour codes.
        file_formatter = ProcessorFormatter(
            processor=(
                renderer
                if config.logging.json_logging
                else structlog.dev.ConsoleRenderer(colors=False)
            ),
            foreign_pre_chain=SHARED_PROCESSORS,
        )
        file_handler = logging.FileHandler(log_file_path, encoding="utf-8")
        file_handler.setFormatter(file_formatter)
        handlers.append(file_handler)

    package_logger = logging.getLogger(ROOT_LOGGER)
    for old in list(package_logger.handlers):
        package_logger.removeHandler(old)
        old.close()
    for handler in handlers:
        if handler.formatter is None:
            handler.setFormatter(formatter)
        handler.setLevel(log_level)
        package_logger.addHandler(handler)
    package_logger.setLevel(log_level)
    package_logger.propagate = False

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))


@contextmanager
def bound_run(**context: object) -> Iterator[None]:
    """Attach ``context`` (e.g. ``run_id``) to every event logged inside the block."""
    with structlog.contextvars.bound_contextvars(**context):
        yield


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
