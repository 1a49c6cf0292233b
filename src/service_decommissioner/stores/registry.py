"""
Service registry document store.

The registry is a markdown document with header lines, one table separator
line and one table row per service.

Example
# Service Registry
| Service | Port | Path |
|---------|------|------|
| silverstream | 8900 | C:\\Projects\\silverstream |

Matching is a plain substring test on the raw text, so an identifier that is
a substring of another service name matches that service's row too. Removal
applies the same test line by line.

Header lines and separator lines always survive a rewrite, even when they
mention the identifier. Everything else that contains the identifier is
dropped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from service_decommissioner.core.types import Target, TargetKind
from service_decommissioner.stores.base import StoreAdapter

logger = logging.getLogger(__name__)


def filter_registry_lines(
    text: str,
    identifier: str,
    header_marker: str = "#",
    separator_marker: str = "|--",
) -> str:
    """
    Return text without the content lines that mention identifier.

    Lines are split and joined on newline only, so untouched lines keep any
    carriage return verbatim.
    """
    kept = [
        line
        for line in text.split("\n")
        if line.startswith(header_marker)
        or line.startswith(separator_marker)
        or identifier not in line
    ]
    return "\n".join(kept)


@dataclass(frozen=True)
class RegistryDocumentStore(StoreAdapter):
    path: Path
    header_marker: str = "#"
    separator_marker: str = "|--"
    kind: TargetKind = TargetKind.registry_entry

    def detect(self, identifier: str, project_dir: Path) -> list[Target]:
        if not self.path.is_file():
            return []

        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("cannot read registry %s, treating as absent: %s", self.path, exc)
            return []

        if identifier not in text:
            return []

        return [
            Target(
                kind=self.kind,
                locator=str(self.path),
                display_label=f"{self.path.name} entry",
            )
        ]

    def remove(self, target: Target, identifier: str) -> None:
        path = Path(target.locator)
        with path.open(encoding="utf-8", newline="") as f:
            text = f.read()
        filtered = filter_registry_lines(
            text,
            identifier,
            header_marker=self.header_marker,
            separator_marker=self.separator_marker,
        )
        path.write_text(filtered, encoding="utf-8", newline="")
