from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from load_velocity.adapters.input_source import FileInputSource
from load_velocity.adapters.log_sinks import build_log_sink
from load_velocity.adapters.output_sink import FileOutputSink
from load_velocity.config.loader import ConfigError, load_config
from load_velocity.config.models import AppConfig
from load_velocity.domain.errors import LoadError
from load_velocity.kernel.pipeline import run_pipeline
from load_velocity.observability import logging as log
from load_velocity.ports.log_sink import LogSink
from load_velocity.usecases.wiring import build_validator

# Thin shell around the validator: argument parsing, file I/O and error reporting only.


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="load-velocity",
        description="Accept or reject fund loads under per-customer velocity limits",
    )
    parser.add_argument("-i", "--input-file", required=True, help="Path to input NDJSON file")
    parser.add_argument("-o", "--output-file", required=True, help="Path to write decisions to")
    parser.add_argument("-c", "--config", help="Path to YAML config (defaults apply when omitted)")
    parser.add_argument("--log-path", help="Write structured logs to this JSONL file instead of stdout")
    return parser


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    # Missing required flags exit with status 2 and usage text before any processing.
    return build_parser().parse_args(argv)


def resolve_config(args: argparse.Namespace) -> AppConfig:
    config = load_config(Path(args.config)) if args.config else AppConfig()
    apply_logging_override(config, args)
    return config


def apply_logging_override(config: AppConfig, args: argparse.Namespace) -> None:
    # CLI overrides take precedence over config.
    if args.log_path is not None:
        config.logging.sink = "jsonl"
        config.logging.path = args.log_path


def report_errors(sink: LogSink, errors: Sequence[LoadError]) -> None:
    for error_no, exc in enumerate(errors):
        sink.emit(
            log.error(
                "load record skipped",
                error_no=error_no,
                line_no=exc.line_no,
                reason=exc.reason.value,
                kind=type(exc).__name__,
                detail=exc.detail,
            )
        )


def run(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        config = resolve_config(args)
    except ConfigError as exc:
        build_log_sink("stdout").emit(log.error("invalid configuration", detail=str(exc)))
        return 1

    sink = build_log_sink(config.logging.sink, config.logging.path)
    try:
        return _run(args, config, sink)
    finally:
        sink.close()


def _run(args: argparse.Namespace, config: AppConfig, sink: LogSink) -> int:
    validator = build_validator(config)
    try:
        result = run_pipeline(
            FileInputSource(Path(args.input_file)),
            validator,
            max_size=config.channel.max_size,
        )
    except (OSError, UnicodeDecodeError) as exc:
        sink.emit(log.error("cannot read input", path=args.input_file, detail=str(exc)))
        return 1

    report_errors(sink, result.errors)

    # Nothing is written when no decision was produced; an existing output file is left alone.
    if result.outputs:
        output = FileOutputSink(Path(args.output_file), atomic_replace=config.output.atomic_replace)
        try:
            output.write_lines(result.lines)
        except OSError as exc:
            sink.emit(log.error("cannot write output", path=args.output_file, detail=str(exc)))
            return 1

    accepted = sum(1 for item in result.outputs if item.decision.accepted)
    sink.emit(
        log.info(
            "run complete",
            decisions=len(result.outputs),
            accepted=accepted,
            rejected=len(result.outputs) - accepted,
            errors=len(result.errors),
            treated=len(validator.gate),
            customers=validator.history.customer_count(),
        )
    )
    return 0
