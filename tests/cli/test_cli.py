from __future__ import annotations

import json
from pathlib import Path

import pytest

from load_velocity.app.cli import parse_args, resolve_config, run

ACCEPTED_LINE = '{"id":"1234","customer_id":"2345","load_amount":"$123.45","time":"2018-01-01T00:00:00Z"}'
MALFORMED_LINE = '{"id":"1234","customer_id":"2345","load_amount":"AAAAAAAAAA","time":"2018-01-01T00:00:00Z"}'


def _log_records(text: str) -> list[dict[str, object]]:
    return [json.loads(line) for line in text.splitlines() if line]


def test_parse_args_reads_short_and_long_flags() -> None:
    args = parse_args(["-i", "in.txt", "--output-file", "out.txt", "-c", "cfg.yml", "--log-path", "run.jsonl"])
    assert args.input_file == "in.txt"
    assert args.output_file == "out.txt"
    assert args.config == "cfg.yml"
    assert args.log_path == "run.jsonl"


@pytest.mark.parametrize("argv", [[], ["-i", "in.txt"], ["-o", "out.txt"]])
def test_missing_required_flag_is_usage_error(
    argv: list[str], capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        run(argv)
    assert excinfo.value.code == 2
    assert "usage:" in capsys.readouterr().err


def test_log_path_switches_to_jsonl_sink() -> None:
    config = resolve_config(parse_args(["-i", "a", "-o", "b", "--log-path", "run.jsonl"]))
    assert config.logging.sink == "jsonl"
    assert config.logging.path == "run.jsonl"


def test_run_writes_decisions_and_logs_summary(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    input_path = tmp_path / "input.txt"
    output_path = tmp_path / "output.txt"
    input_path.write_text(ACCEPTED_LINE + "\n", encoding="utf-8")

    exit_code = run(["-i", str(input_path), "-o", str(output_path)])

    assert exit_code == 0
    assert output_path.read_text(encoding="utf-8") == '{"id":"1234","customer_id":"2345","accepted":true}\n'
    records = _log_records(capsys.readouterr().out)
    assert records[-1]["message"] == "run complete"
    assert records[-1]["fields"] == {
        "decisions": 1,
        "accepted": 1,
        "rejected": 0,
        "errors": 0,
        "treated": 1,
        "customers": 1,
    }


def test_run_logs_each_error_and_leaves_output_untouched(tmp_path: Path) -> None:
    input_path = tmp_path / "input.txt"
    output_path = tmp_path / "output.txt"
    log_path = tmp_path / "run.jsonl"
    input_path.write_text(MALFORMED_LINE + "\n", encoding="utf-8")
    output_path.write_text("previous\n", encoding="utf-8")

    exit_code = run(["-i", str(input_path), "-o", str(output_path), "--log-path", str(log_path)])

    assert exit_code == 0
    # No decisions means the output file is not rewritten.
    assert output_path.read_text(encoding="utf-8") == "previous\n"
    records = _log_records(log_path.read_text(encoding="utf-8"))
    errors = [record for record in records if record["level"] == "error"]
    assert len(errors) == 1
    fields = errors[0]["fields"]
    assert isinstance(fields, dict)
    assert fields["error_no"] == 0
    assert fields["line_no"] == 1
    assert fields["reason"] == "INVALID_AMOUNT_FORMAT"
    assert fields["kind"] == "AmountFormatError"


def test_run_applies_config_limits(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yml"
    config_path.write_text("limits:\n  daily_amount: 100.00\n", encoding="utf-8")
    input_path = tmp_path / "input.txt"
    output_path = tmp_path / "output.txt"
    input_path.write_text(ACCEPTED_LINE + "\n", encoding="utf-8")

    exit_code = run(["-i", str(input_path), "-o", str(output_path), "-c", str(config_path)])

    assert exit_code == 0
    assert output_path.read_text(encoding="utf-8") == '{"id":"1234","customer_id":"2345","accepted":false}\n'


def test_run_reports_invalid_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = tmp_path / "config.yml"
    config_path.write_text("unknown_section: {}\n", encoding="utf-8")

    exit_code = run(["-i", "in.txt", "-o", "out.txt", "-c", str(config_path)])

    assert exit_code == 1
    records = _log_records(capsys.readouterr().out)
    assert records[0]["message"] == "invalid configuration"


def test_run_reports_missing_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    output_path = tmp_path / "output.txt"

    exit_code = run(["-i", str(tmp_path / "missing.txt"), "-o", str(output_path)])

    assert exit_code == 1
    assert not output_path.exists()
    records = _log_records(capsys.readouterr().out)
    assert records[0]["message"] == "cannot read input"


def test_run_reports_unwritable_output_without_leftovers(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    input_path = tmp_path / "input.txt"
    input_path.write_text(ACCEPTED_LINE + "\n", encoding="utf-8")
    # A directory in place of the output file makes the final rename fail.
    output_path = tmp_path / "output.txt"
    output_path.mkdir()

    exit_code = run(["-i", str(input_path), "-o", str(output_path)])

    assert exit_code == 1
    assert output_path.is_dir()
    assert not (tmp_path / "output.txt.tmp").exists()
    records = _log_records(capsys.readouterr().out)
    assert records[-1]["message"] == "cannot write output"
