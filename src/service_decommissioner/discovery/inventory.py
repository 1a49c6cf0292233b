"""
Inventory builder.

Run every store adapter's detection for one identifier and collect the
targets in adapter order. Detection only reads, so building twice with no
mutation in between yields equal inventories.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from service_decommissioner.core.types import Inventory, Target
from service_decommissioner.stores.base import StoreAdapter


class InventoryBuilder:
    """
    adapters
    Store adapters in the order their targets should appear and be removed.
    """

    def __init__(self, adapters: Sequence[StoreAdapter]) -> None:
        self._adapters = tuple(adapters)

    @property
    def adapters(self) -> tuple[StoreAdapter, ...]:
        return self._adapters

    def build(self, identifier: str, project_dir: Path) -> Inventory:
        targets: list[Target] = []
        for adapter in self._adapters:
            targets.extend(adapter.detect(identifier, project_dir))
        return Inventory(identifier=identifier, targets=tuple(targets))
