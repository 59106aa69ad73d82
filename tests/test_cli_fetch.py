from __future__ import annotations

import json
import sys
from typing import List, Optional

import pytest

from models.candidate_record import CandidateRecord
from services.errors import ApplicationError


def _run_cli_with_args(args_list: List[str]) -> None:
    """Run cli.py main() with provided argv in-process (no subprocess)."""
    argv_backup = sys.argv[:]
    try:
        sys.argv = ["cli.py"] + args_list
        # Import fresh to ensure clean parser each time
        if "cli" in sys.modules:
            del sys.modules["cli"]
        import cli  # type: ignore
        cli.main()  # type: ignore[attr-defined]
    finally:
        sys.argv = argv_backup


class _StubSource:
    source_name = "heroku_datasource"
    entity_type = "person"

    def __init__(self, records=None, error=None):
        self.records = records or []
        self.error = error
        self.calls = []

    def run(self, mode: str, size: Optional[str]) -> List[CandidateRecord]:
        self.calls.append((mode, size))
        if self.error is not None:
            raise self.error
        return self.records


def _error_json(err: str):
    # stderr may carry log lines ahead of the indented JSON error
    lines = err.splitlines()
    return json.loads("\n".join(lines[lines.index("{"):]))


def _install(monkeypatch, stub):
    import sources  # noqa: F401
    import sources.registry as reg
    monkeypatch.setattr(reg, "_REGISTRY", {"heroku_datasource": lambda: stub})


def test_cli_fetch_writes_output_file(tmp_path, monkeypatch, capsys):
    stub = _StubSource(records=[CandidateRecord(name="Ada", external_id="1", position="Eng", company="Acme")])
    _install(monkeypatch, stub)
    out_file = tmp_path / "out" / "candidates.json"

    _run_cli_with_args(["fetch", "--mode", "random", "--size", "large", "--output", str(out_file)])

    assert stub.calls == [("random", "large")]
    data = json.loads(out_file.read_text(encoding="utf-8"))
    assert data == [{"name": "Ada", "external_id": "1", "position": "Eng", "company": "Acme"}]
    captured = capsys.readouterr().out
    assert "Total Candidates: 1" in captured
    assert "Selection: random/large" in captured


def test_cli_fetch_prints_records_without_output(monkeypatch, capsys):
    stub = _StubSource(records=[CandidateRecord(name="Grace", external_id="2")])
    _install(monkeypatch, stub)

    _run_cli_with_args(["fetch", "--mode", "partial"])

    assert stub.calls == [("partial", "")]
    captured = capsys.readouterr().out
    assert "Selection: partial/small" in captured
    assert '"name": "Grace"' in captured


def test_cli_fetch_error_exits_nonzero(monkeypatch, capsys):
    _install(monkeypatch, _StubSource(error=ApplicationError("quota exceeded")))

    with pytest.raises(SystemExit) as excinfo:
        _run_cli_with_args(["fetch", "--mode", "complete"])
    assert excinfo.value.code == 1
    err = _error_json(capsys.readouterr().err)
    assert err == {"kind": "ApplicationError", "message": "quota exceeded", "remote_error": "quota exceeded"}


def test_cli_invalid_mode_reported_as_structured_error(monkeypatch, capsys):
    monkeypatch.setenv("NAMED_ENDPOINT_HEROKU_DATASOURCE", "http://localhost:5000/")
    import sources  # noqa: F401
    with pytest.raises(SystemExit) as excinfo:
        _run_cli_with_args(["fetch", "--mode", "everything"])
    assert excinfo.value.code == 1
    err = _error_json(capsys.readouterr().err)
    assert err["kind"] == "InvalidParameter"
    assert err["parameter"] == "mode"


def test_cli_lists_sources(capsys):
    _run_cli_with_args(["sources"])
    assert "heroku_datasource" in capsys.readouterr().out.split()


def test_cli_unknown_source_exits_nonzero(capsys):
    with pytest.raises(SystemExit) as excinfo:
        _run_cli_with_args(["fetch", "--mode", "partial", "--source", "no_such_source"])
    assert excinfo.value.code == 1
    err = _error_json(capsys.readouterr().err)
    assert err["kind"] == "UnknownSource"
    assert "no_such_source" in err["message"]
    assert "heroku_datasource" in err["available"]


def test_cli_fetch_keeps_stdout_free_of_log_lines(tmp_path, monkeypatch, capsys):
    stub = _StubSource(records=[CandidateRecord(name="Ada", external_id="1")])
    _install(monkeypatch, stub)
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    import logging
    _run_cli_with_args(["fetch", "--mode", "partial", "--output", str(tmp_path / "c.json")])
    logging.getLogger("services.callout").info("after fetch", extra={"step": "callout"})

    captured = capsys.readouterr()
    assert "after fetch" in captured.err
    assert "after fetch" not in captured.out
