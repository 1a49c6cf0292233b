from __future__ import annotations

import json
from pathlib import Path

import pytest

from service_decommissioner import cli
from service_decommissioner.core.types import Inventory, RemovalOutcome, RunResult, RunStatus, Target, TargetKind
from service_decommissioner.workflow.audit import AuditLogger, run_record


@pytest.fixture
def env(tmp_path: Path, monkeypatch):
    root = tmp_path / "projects"
    (root / "silverstream").mkdir(parents=True)
    (root / "silverstream" / "server.js").write_text("", encoding="utf-8")

    monkeypatch.setenv("DECOMMISSION_SEARCH_ROOTS", str(root))
    monkeypatch.setenv("DECOMMISSION_DESKTOP_DIR", str(tmp_path / "Desktop"))
    monkeypatch.setenv("DECOMMISSION_REGISTRY_PATH", str(tmp_path / "SERVICE-REGISTRY.md"))
    monkeypatch.setenv("DECOMMISSION_ORCHESTRATOR_CONFIG", str(tmp_path / "orchestrator-config.json"))
    monkeypatch.setenv("DECOMMISSION_SERVICE_COMMAND", "no-such-service-manager-binary")
    monkeypatch.setenv("DECOMMISSION_AUDIT_PATH", str(tmp_path / "audit" / "runs.jsonl"))
    return tmp_path


def feed_input(monkeypatch, answers: list[str]) -> None:
    it = iter(answers)
    monkeypatch.setattr("builtins.input", lambda: next(it))


def test_cli_removes_confirmed_project(env: Path, monkeypatch, capsys):
    feed_input(monkeypatch, ["silverstream"])

    assert cli.main(["silverstream"]) == 0

    assert not (env / "projects" / "silverstream").exists()
    out = capsys.readouterr().out
    assert "HIVE SERVICE REMOVAL TOOL" in out
    assert "Removed directory:" in out

    [line] = (env / "audit" / "runs.jsonl").read_text(encoding="utf-8").splitlines()
    record = json.loads(line)
    assert record["status"] == "completed"
    assert record["identifier"] == "silverstream"
    assert record["exit_code"] == 0
    assert [t["kind"] for t in record["targets"]] == ["directory"]


def test_cli_without_identifier_exits_one(env: Path, monkeypatch, capsys):
    feed_input(monkeypatch, [""])

    assert cli.main([]) == 1
    assert "Project name is required" in capsys.readouterr().err
    assert (env / "projects" / "silverstream").exists()
    assert not (env / "audit" / "runs.jsonl").exists()


def test_cli_mismatch_exits_zero_and_keeps_everything(env: Path, monkeypatch):
    feed_input(monkeypatch, ["SILVERSTREAM"])

    assert cli.main(["silverstream"]) == 0
    assert (env / "projects" / "silverstream" / "server.js").exists()


def test_audit_logger_appends_json_lines(tmp_path: Path):
    target = Target(kind=TargetKind.service_entry, locator="HiveRelay", display_label="svc")
    result = RunResult(
        status=RunStatus.completed,
        identifier="relay",
        inventory=Inventory(identifier="relay", targets=(target,)),
        outcomes=(RemovalOutcome(target=target, succeeded=False, error_detail="denied"),),
    )
    logger = AuditLogger(path=tmp_path / "a" / "audit.jsonl")

    logger.record(result)
    logger.record(result)

    lines = (tmp_path / "a" / "audit.jsonl").read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    payload = json.loads(lines[0])
    assert payload["outcomes"][0]["succeeded"] is False
    assert payload["outcomes"][0]["error_detail"] == "denied"
    assert "ts_unix" in payload
    record = run_record(result)
    assert record["targets"][0]["locator"] == "HiveRelay"
    assert record["targets"][0]["kind"] == "service_entry"
    assert record["failed"] == 1
    assert record["exit_code"] == 0
