"""
Remover.

Apply each target's removal through the store adapter that owns its kind.

Policy
Targets are processed strictly in inventory order, one at a time.
A failure in one target is recorded and never stops the next one.
Nothing already removed is rolled back.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from service_decommissioner.core.types import Inventory, RemovalOutcome, Target, TargetKind
from service_decommissioner.stores.base import StoreAdapter

logger = logging.getLogger(__name__)

OutcomeListener = Callable[[RemovalOutcome], None]


class Remover:
    """
    adapters
    Store adapters, looked up by kind.

    on_outcome
    Optional listener called with each outcome as soon as it is produced.
    """

    def __init__(
        self,
        adapters: Sequence[StoreAdapter],
        on_outcome: OutcomeListener | None = None,
    ) -> None:
        self._by_kind: dict[TargetKind, StoreAdapter] = {a.kind: a for a in adapters}
        self._on_outcome = on_outcome

    def remove_one(self, target: Target, identifier: str) -> RemovalOutcome:
        adapter = self._by_kind.get(target.kind)
        if adapter is None:
            return RemovalOutcome(
                target=target,
                succeeded=False,
                error_detail=f"no store adapter for {target.kind.value}",
            )

        try:
            adapter.remove(target, identifier)
        except Exception as exc:  # noqa: BLE001
            logger.warning("removing %s %s failed: %s", target.kind.value, target.locator, exc)
            return RemovalOutcome(target=target, succeeded=False, error_detail=str(exc) or type(exc).__name__)

        logger.info("removed %s %s", target.kind.value, target.locator)
        return RemovalOutcome(target=target, succeeded=True)

    def remove_all(self, inventory: Inventory) -> list[RemovalOutcome]:
        """Return one outcome per target, in inventory order."""
        outcomes: list[RemovalOutcome] = []
        for target in inventory:
            outcome = self.remove_one(target, inventory.identifier)
            outcomes.append(outcome)
            if self._on_outcome is not None:
                self._on_outcome(outcome)
        return outcomes
