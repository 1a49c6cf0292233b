"""
Desktop launcher store.

Launchers follow a fixed naming template under the operator's desktop folder:
"<label> - <identifier>.<ext>"
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from service_decommissioner.core.types import Target, TargetKind
from service_decommissioner.stores.base import StoreAdapter


@dataclass(frozen=True)
class LauncherFileStore(StoreAdapter):
    """
    desktop_dir, label and ext fill the naming template.
    """

    desktop_dir: Path
    label: str = "Claude"
    ext: str = "bat"
    kind: TargetKind = TargetKind.launcher_file

    def path_for(self, identifier: str) -> Path:
        return self.desktop_dir / f"{self.label} - {identifier}.{self.ext}"

    def detect(self, identifier: str, project_dir: Path) -> list[Target]:
        path = self.path_for(identifier)
        if not path.is_file():
            return []
        return [
            Target(
                kind=self.kind,
                locator=str(path),
                display_label=f"Desktop shortcut: {path}",
            )
        ]

    def remove(self, target: Target, identifier: str) -> None:
        Path(target.locator).unlink()
