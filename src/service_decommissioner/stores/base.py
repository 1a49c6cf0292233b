"""
Store adapter interface.

Goal
Give every backing store the same two operations so discovery and removal
do not care about the data shape behind them.

detect
Return zero or more Targets for an identifier. Detection never raises for
store level problems such as unreadable files or failing commands; those are
logged and treated as "not present".

remove
Remove one Target previously returned by detect. Any failure is raised and
recorded by the Remover as a failed outcome.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from service_decommissioner.core.types import Target, TargetKind


class StoreAdapter(Protocol):
    """
    Store adapter interface.

    kind is the TargetKind this adapter produces and removes.
    """

    kind: TargetKind

    def detect(self, identifier: str, project_dir: Path) -> list[Target]:
        """Return targets referencing identifier in this store."""

    def remove(self, target: Target, identifier: str) -> None:
        """Remove one target. Raise on failure."""
