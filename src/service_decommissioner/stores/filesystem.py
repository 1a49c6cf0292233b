"""
Project directory store.

The resolved project directory is a target when it exists. Removal force
deletes the whole tree: read only entries (common under .git on Windows) get
their write bit set and the failed operation is retried once. A directory
that has already disappeared counts as removed.
"""

from __future__ import annotations

import os
import shutil
import stat
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from service_decommissioner.core.types import Target, TargetKind
from service_decommissioner.stores.base import StoreAdapter


def clear_readonly_and_retry(func: Callable[[str], Any], path: str, exc: object) -> None:
    """rmtree error handler: make path writable, then rerun func on it."""
    os.chmod(path, stat.S_IWRITE | stat.S_IREAD)
    func(path)


def force_rmtree(path: Path) -> None:
    if sys.version_info >= (3, 12):
        shutil.rmtree(path, onexc=clear_readonly_and_retry)
    else:
        shutil.rmtree(path, onerror=clear_readonly_and_retry)


@dataclass(frozen=True)
class DirectoryStore(StoreAdapter):
    kind: TargetKind = TargetKind.directory

    def detect(self, identifier: str, project_dir: Path) -> list[Target]:
        if not project_dir.is_dir():
            return []

        entries = sum(1 for _ in project_dir.iterdir())
        return [
            Target(
                kind=self.kind,
                locator=str(project_dir),
                display_label=f"Project directory: {project_dir}",
                detail=f"{entries} files",
            )
        ]

    def remove(self, target: Target, identifier: str) -> None:
        path = Path(target.locator)
        if not path.exists():
            return
        force_rmtree(path)
