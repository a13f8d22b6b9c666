"""Command-line entry point for AfroPair."""

import argparse
import sys
from pathlib import Path

from afropair.cli.formatters import (
    console,
    format_batch_summary,
    format_candidates_table,
    format_decisions_table,
    format_load_reports,
)
from afropair.config import Config
from afropair.exceptions import AfropairError, ValidationError
from afropair.logging_config import configure_logging
from afropair.pipeline import TranslationPipeline
from afropair.sample_data import write_sample_data
from afropair.utils.validators import validate_table_file


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="afropair",
        description="Generate scored translation pairs from dictionary and corpus evidence.",
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to a TOML config file")
    parser.add_argument("--log-level", default=None, help="Override logging level")
    parser.add_argument("--json-logs", action="store_true", help="Emit JSON log lines")

    sub = parser.add_subparsers(dest="command", required=True)

    init = sub.add_parser("init", help="Write the sample dictionary and corpus")
    init.add_argument("--force", action="store_true", help="Overwrite existing files")

    translate = sub.add_parser("translate", help="Translate one sentence")
    translate.add_argument("text")
    translate.add_argument("--no-persist", action="store_true", help="Do not write records")
    translate.add_argument("--candidates", action="store_true", help="Show every candidate")

    batch = sub.add_parser("batch", help="Translate a file with one sentence per line")
    batch.add_argument("file", type=Path)
    batch.add_argument("--no-persist", action="store_true", help="Do not write records")

    sub.add_parser("check", help="Validate the configured dictionary and corpus")

    return parser


def cmd_init(config: Config, args: argparse.Namespace) -> int:
    written = write_sample_data(
        Path(config.paths.dictionary), Path(config.paths.corpus), overwrite=args.force
    )
    Path(config.paths.output).parent.mkdir(parents=True, exist_ok=True)
    if not written:
        console.print("[yellow]Sample files already exist; use --force to overwrite.[/yellow]")
    for path in written:
        console.print(f"Created [green]{path}[/green]")
    return 0


def cmd_translate(config: Config, args: argparse.Namespace) -> int:
    pipeline = TranslationPipeline(config)
    try:
        result = pipeline.translate_sentence(args.text, persist=not args.no_persist)
    finally:
        pipeline.close()

    if not result.success:
        console.print(f"[red]Error:[/red] {result.error}")
        return 1

    console.print(format_decisions_table(result.scored, config.status))
    if args.candidates:
        for scored in result.scored:
            console.print(format_candidates_table(scored))
    console.print(
        f"Coverage: {result.coverage * 100:.1f}%  "
        f"Confidence: {result.confidence * 100:.1f}%  "
        f"({result.duration_ms} ms)"
    )
    return 0


def cmd_batch(config: Config, args: argparse.Namespace) -> int:
    try:
        _, encoding = validate_table_file(args.file)
    except ValidationError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        return 1

    sentences = [
        line.strip()
        for line in args.file.read_text(encoding=encoding).splitlines()
        if line.strip()
    ]

    pipeline = TranslationPipeline(config)
    try:
        batch = pipeline.batch_translate(sentences, persist=not args.no_persist)
    finally:
        pipeline.close()

    console.print(format_batch_summary(batch))
    return 0 if batch.successful == batch.total else 1


def cmd_check(config: Config, args: argparse.Namespace) -> int:
    problems = 0
    for label, path in (
        ("dictionary", config.paths.dictionary),
        ("corpus", config.paths.corpus),
    ):
        try:
            _, encoding = validate_table_file(Path(path))
            console.print(f"{label}: [green]{path}[/green] ({encoding})")
        except ValidationError as e:
            problems += 1
            console.print(f"{label}: [red]{e.message}[/red]")

    pipeline = TranslationPipeline(config)
    pipeline.load()
    console.print(
        format_load_reports(
            {
                "dictionary": pipeline.lexicon.report,
                "corpus": pipeline.example_store.report,
            }
        )
    )
    return 1 if problems else 0


COMMANDS = {
    "init": cmd_init,
    "translate": cmd_translate,
    "batch": cmd_batch,
    "check": cmd_check,
}


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        overrides: dict[str, dict[str, object]] = {}
        if args.log_level:
            overrides.setdefault("logging", {})["level"] = args.log_level
        if args.json_logs:
            overrides.setdefault("logging", {})["json_logging"] = True
        config = Config.load(args.config, overrides)
        configure_logging(config)
        return COMMANDS[args.command](config, args)
    except AfropairError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        if e.details:
            console.print(f"[dim]{e.details}[/dim]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
