from __future__ import annotations

import runpy

import pytest

import load_velocity.main as main_module


def test_main_delegates_to_cli_run(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: dict[str, object] = {}

    def _fake_run(argv: list[str] | None) -> int:
        seen["argv"] = argv
        return 7

    monkeypatch.setattr(main_module, "run", _fake_run)

    exit_code = main_module.main(["-i", "in.txt", "-o", "out.txt"])

    assert exit_code == 7
    assert seen["argv"] == ["-i", "in.txt", "-o", "out.txt"]


def test_module_main_exits_with_code(monkeypatch: pytest.MonkeyPatch) -> None:
    # python -m load_velocity turns the return code into SystemExit.
    monkeypatch.setattr(main_module, "main", lambda _argv=None: 3)

    with pytest.raises(SystemExit) as excinfo:
        runpy.run_module("load_velocity", run_name="__main__")

    assert excinfo.value.code == 3
