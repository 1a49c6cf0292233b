from __future__ import annotations

import os
from pathlib import Path

from service_decommissioner.core.config import (
    DEFAULT_SEARCH_ROOTS,
    DecommissionConfig,
    config_from_env,
)


def test_defaults_match_the_workstation_layout():
    config = config_from_env({"USERPROFILE": "/home/operator"})

    assert config.search_roots == DEFAULT_SEARCH_ROOTS
    assert len(config.search_roots) == 4
    assert config.desktop_dir == Path("/home/operator") / "Desktop"
    assert config.launcher_path("silverstream") == Path("/home/operator/Desktop/Claude - silverstream.bat")
    assert config.service_prefix == "Hive"
    assert config.audit_path is None
    assert config.log_file is None


def test_environment_overrides_keep_root_order(tmp_path: Path):
    env = {
        "DECOMMISSION_SEARCH_ROOTS": os.pathsep.join([str(tmp_path / "b"), str(tmp_path / "a"), ""]),
        "DECOMMISSION_DESKTOP_DIR": str(tmp_path / "desk"),
        "DECOMMISSION_LAUNCHER_LABEL": "Launch",
        "DECOMMISSION_LAUNCHER_EXT": "cmd",
        "DECOMMISSION_REGISTRY_PATH": str(tmp_path / "reg.md"),
        "DECOMMISSION_ORCHESTRATOR_CONFIG": str(tmp_path / "orch.json"),
        "DECOMMISSION_SERVICE_PREFIX": "Svc",
        "DECOMMISSION_AUDIT_PATH": str(tmp_path / "audit.jsonl"),
        "DECOMMISSION_LOG_LEVEL": "DEBUG",
    }

    config = config_from_env(env)

    assert config.search_roots == (tmp_path / "b", tmp_path / "a")
    assert config.launcher_path("x") == tmp_path / "desk" / "Launch - x.cmd"
    assert config.registry_path == tmp_path / "reg.md"
    assert config.orchestrator_config_path == tmp_path / "orch.json"
    assert config.service_prefix == "Svc"
    assert config.audit_path == tmp_path / "audit.jsonl"
    assert config.log_level == "DEBUG"


def test_config_is_immutable():
    config = DecommissionConfig()
    try:
        config.service_prefix = "Other"  # type: ignore[misc]
    except AttributeError:
        pass
    else:
        raise AssertionError("config should be frozen")
