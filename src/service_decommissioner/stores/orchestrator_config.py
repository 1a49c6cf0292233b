"""
Orchestrator config store.

The orchestrator config is a json document with a top level services list.

Schema example
{
  "port": 8500,
  "services": [
    {"name": "silverstream", "port": 8900, "path": "C:\\Projects\\silverstream"},
    {"name": "relay", "port": 8600}
  ]
}

Only services and each entry's name are interpreted. Every other field, at
the top level and inside entries, is carried through a rewrite unchanged and
in its original order.

Matching is exact on name, unlike the registry's substring match.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from service_decommissioner.core.errors import SchemaError
from service_decommissioner.core.types import Target, TargetKind
from service_decommissioner.stores.base import StoreAdapter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServiceEntrySpec:
    """
    One entry of the services list.

    fields holds the full original mapping, name included.
    """

    name: str
    fields: dict[str, Any]


@dataclass(frozen=True)
class OrchestratorDocument:
    """
    Parsed orchestrator config.

    raw is the full top level mapping as loaded. services mirrors raw["services"].
    """

    raw: dict[str, Any]
    services: tuple[ServiceEntrySpec, ...]

    def names(self) -> list[str]:
        return [s.name for s in self.services]

    def has_service(self, name: str) -> bool:
        return name in self.names()

    def without(self, name: str) -> OrchestratorDocument:
        """Return a document with every entry named exactly name removed."""
        kept = tuple(s for s in self.services if s.name != name)
        raw = dict(self.raw)
        raw["services"] = [dict(s.fields) for s in kept]
        return OrchestratorDocument(raw=raw, services=kept)

    def to_json(self) -> str:
        """Render with 2 space indentation, keeping key order."""
        return json.dumps(self.raw, indent=2, ensure_ascii=False)


def _entry_from_dict(obj: Any, index: int) -> ServiceEntrySpec:
    if not isinstance(obj, dict):
        raise SchemaError(f"services[{index}] is not an object")
    name = obj.get("name")
    if not isinstance(name, str):
        raise SchemaError(f"services[{index}] has no string name field")
    return ServiceEntrySpec(name=name, fields=dict(obj))


def parse_orchestrator_document(data: Any) -> OrchestratorDocument:
    """
    Validate loaded json against the expected shape.

    Raises SchemaError when the top level is not an object, services is
    missing or not a list, or an entry lacks a string name.
    """
    if not isinstance(data, dict):
        raise SchemaError("orchestrator config top level is not an object")
    if "services" not in data:
        raise SchemaError("orchestrator config has no services field")

    raw_services = data["services"]
    if not isinstance(raw_services, list):
        raise SchemaError("orchestrator config services field is not a list")

    services = tuple(_entry_from_dict(obj, i) for i, obj in enumerate(raw_services))
    return OrchestratorDocument(raw=dict(data), services=services)


def load_orchestrator_document(path: Path) -> OrchestratorDocument:
    data = json.loads(path.read_text(encoding="utf-8"))
    return parse_orchestrator_document(data)


@dataclass(frozen=True)
class OrchestratorConfigStore(StoreAdapter):
    path: Path
    kind: TargetKind = TargetKind.orchestrator_entry

    def detect(self, identifier: str, project_dir: Path) -> list[Target]:
        if not self.path.is_file():
            return []

        try:
            doc = load_orchestrator_document(self.path)
        except (OSError, ValueError, SchemaError) as exc:
            logger.warning(
                "cannot use orchestrator config %s, treating as absent: %s", self.path, exc
            )
            return []

        if not doc.has_service(identifier):
            return []

        return [
            Target(
                kind=self.kind,
                locator=str(self.path),
                display_label="Orchestrator config entry",
            )
        ]

    def remove(self, target: Target, identifier: str) -> None:
        path = Path(target.locator)
        doc = load_orchestrator_document(path)
        path.write_text(doc.without(identifier).to_json(), encoding="utf-8")
