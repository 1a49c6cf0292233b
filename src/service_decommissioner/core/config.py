"""
Configuration.

DecommissionConfig describes where every store lives. The defaults reproduce
the workstation layout the tool was written for. Each field can be overridden
through a DECOMMISSION_* environment variable, see config_from_env.

search_roots
Ordered candidate parent directories. Order is significant, first match wins.

desktop_dir, launcher_label, launcher_ext
Launcher files live at desktop_dir / "<launcher_label> - <identifier>.<launcher_ext>".

registry_path, header_marker, separator_marker
The markdown service registry and the line prefixes that always survive a rewrite.

orchestrator_config_path
The json document with a top level services list.

service_prefix, absent_sentinel, service_command
Derived service name prefix, the text the service manager prints for unknown
services, and the service manager executable.

audit_path
When set, one json line is appended per completed run.

log_level, log_file
Diagnostics logging, see core.logging_config.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

DEFAULT_SEARCH_ROOTS: tuple[Path, ...] = (
    Path("C:\\LLM-DevOSWE\\Admin"),
    Path("C:\\LLM-DevOSWE"),
    Path("C:\\Projects"),
    Path("C:\\DevClaude"),
)

DEFAULT_REGISTRY_PATH = Path("C:\\LLM-DevOSWE\\SERVICE-REGISTRY.md")
DEFAULT_ORCHESTRATOR_CONFIG_PATH = Path(
    "C:\\LLM-DevOSWE\\Admin\\orchestrator\\orchestrator-config.json"
)


def _default_desktop_dir(environ: Mapping[str, str]) -> Path:
    profile = environ.get("USERPROFILE")
    if profile:
        return Path(profile) / "Desktop"
    return Path.home() / "Desktop"


@dataclass(frozen=True)
class DecommissionConfig:
    search_roots: tuple[Path, ...] = DEFAULT_SEARCH_ROOTS
    desktop_dir: Path = field(default_factory=lambda: _default_desktop_dir(os.environ))
    launcher_label: str = "Claude"
    launcher_ext: str = "bat"
    registry_path: Path = DEFAULT_REGISTRY_PATH
    header_marker: str = "#"
    separator_marker: str = "|--"
    orchestrator_config_path: Path = DEFAULT_ORCHESTRATOR_CONFIG_PATH
    service_prefix: str = "Hive"
    absent_sentinel: str = "does not exist"
    service_command: str = "sc"
    audit_path: Path | None = None
    log_level: str = "WARNING"
    log_file: Path | None = None

    def launcher_path(self, identifier: str) -> Path:
        """Return the launcher file path for an identifier."""
        return self.desktop_dir / f"{self.launcher_label} - {identifier}.{self.launcher_ext}"


def _split_paths(raw: str) -> tuple[Path, ...]:
    return tuple(Path(p) for p in raw.split(os.pathsep) if p.strip())


def config_from_env(environ: Mapping[str, str] | None = None) -> DecommissionConfig:
    """
    Build a config from environment variables.

    Unset variables keep their defaults. DECOMMISSION_SEARCH_ROOTS is a list
    separated by os.pathsep and keeps the order given.
    """
    env = os.environ if environ is None else environ

    roots_raw = env.get("DECOMMISSION_SEARCH_ROOTS", "")
    search_roots = _split_paths(roots_raw) if roots_raw else DEFAULT_SEARCH_ROOTS

    desktop_raw = env.get("DECOMMISSION_DESKTOP_DIR", "")
    desktop_dir = Path(desktop_raw) if desktop_raw else _default_desktop_dir(env)

    audit_raw = env.get("DECOMMISSION_AUDIT_PATH", "")
    log_file_raw = env.get("DECOMMISSION_LOG_FILE", "")

    return DecommissionConfig(
        search_roots=search_roots,
        desktop_dir=desktop_dir,
        launcher_label=env.get("DECOMMISSION_LAUNCHER_LABEL", "Claude"),
        launcher_ext=env.get("DECOMMISSION_LAUNCHER_EXT", "bat"),
        registry_path=Path(env.get("DECOMMISSION_REGISTRY_PATH", str(DEFAULT_REGISTRY_PATH))),
        orchestrator_config_path=Path(
            env.get("DECOMMISSION_ORCHESTRATOR_CONFIG", str(DEFAULT_ORCHESTRATOR_CONFIG_PATH))
        ),
        service_prefix=env.get("DECOMMISSION_SERVICE_PREFIX", "Hive"),
        service_command=env.get("DECOMMISSION_SERVICE_COMMAND", "sc"),
        audit_path=Path(audit_raw) if audit_raw else None,
        log_level=env.get("DECOMMISSION_LOG_LEVEL", "WARNING"),
        log_file=Path(log_file_raw) if log_file_raw else None,
    )
