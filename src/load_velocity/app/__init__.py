from .cli import apply_logging_override, build_parser, parse_args, report_errors, run

# app package exports CLI helpers for reuse in tests and entrypoints.
__all__ = ["apply_logging_override", "build_parser", "parse_args", "report_errors", "run"]
