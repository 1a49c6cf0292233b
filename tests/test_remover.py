from __future__ import annotations

from pathlib import Path

from service_decommissioner.core.types import Inventory, Target, TargetKind
from service_decommissioner.workflow.remover import Remover


class FakeAdapter:
    """
    A fake store adapter used for unit tests.

    Records every removal into a shared event log and raises for locators
    listed in failing.
    """

    def __init__(self, kind: TargetKind, events: list[str], failing: set[str] | None = None) -> None:
        self.kind = kind
        self._events = events
        self._failing = failing or set()

    def detect(self, identifier: str, project_dir: Path) -> list[Target]:
        return []

    def remove(self, target: Target, identifier: str) -> None:
        self._events.append(f"remove:{target.locator}")
        if target.locator in self._failing:
            raise PermissionError(f"locked: {target.locator}")


def make_target(kind: TargetKind, locator: str) -> Target:
    return Target(kind=kind, locator=locator, display_label=locator)


def test_failure_is_isolated_and_outcomes_follow_inventory_order():
    events: list[str] = []
    adapters = [
        FakeAdapter(TargetKind.directory, events),
        FakeAdapter(TargetKind.launcher_file, events, failing={"launcher"}),
        FakeAdapter(TargetKind.service_entry, events),
    ]
    inventory = Inventory(
        identifier="silverstream",
        targets=(
            make_target(TargetKind.directory, "dir"),
            make_target(TargetKind.launcher_file, "launcher"),
            make_target(TargetKind.service_entry, "svc1"),
            make_target(TargetKind.service_entry, "svc2"),
        ),
    )

    outcomes = Remover(adapters).remove_all(inventory)

    assert [o.target for o in outcomes] == list(inventory.targets)
    assert [o.succeeded for o in outcomes] == [True, False, True, True]
    assert outcomes[1].error_detail == "locked: launcher"
    assert events == ["remove:dir", "remove:launcher", "remove:svc1", "remove:svc2"]


def test_outcomes_are_streamed_before_the_next_target_runs():
    events: list[str] = []
    adapters = [FakeAdapter(TargetKind.directory, events, failing={"b"})]
    inventory = Inventory(
        identifier="x",
        targets=(make_target(TargetKind.directory, "a"), make_target(TargetKind.directory, "b")),
    )

    remover = Remover(
        adapters,
        on_outcome=lambda o: events.append(f"outcome:{o.target.locator}:{o.succeeded}"),
    )
    remover.remove_all(inventory)

    assert events == ["remove:a", "outcome:a:True", "remove:b", "outcome:b:False"]


def test_target_without_adapter_is_recorded_as_failed():
    inventory = Inventory(identifier="x", targets=(make_target(TargetKind.registry_entry, "reg"),))

    [outcome] = Remover([]).remove_all(inventory)

    assert not outcome.succeeded
    assert "registry_entry" in (outcome.error_detail or "")
