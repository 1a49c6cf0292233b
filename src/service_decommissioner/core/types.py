"""
Core types.

This file defines the shared data structures used across the tool.

Important design choice
Targets are store neutral. A target only carries a kind, a locator and a label.
The store adapter that owns the kind knows how to interpret the locator.

Lifecycle
An Inventory is built once per run and never changes after the confirmation
gate. Each Target in it produces exactly one RemovalOutcome, in order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Iterator


class TargetKind(StrEnum):
    """
    Kinds of stores that can reference an identifier.

    directory
      The project directory itself.

    launcher_file
      Desktop launcher script for the project.

    registry_entry
      Rows in the human readable service registry document.

    orchestrator_entry
      Entries in the structured orchestrator config.

    service_entry
      A named service registered with the OS service manager.
    """

    directory = "directory"
    launcher_file = "launcher_file"
    registry_entry = "registry_entry"
    orchestrator_entry = "orchestrator_entry"
    service_entry = "service_entry"


class RunStatus(StrEnum):
    """
    Terminal state of one run.

    Only missing_identifier maps to a non zero exit code.
    """

    missing_identifier = "missing_identifier"
    unresolved_location = "unresolved_location"
    nothing_found = "nothing_found"
    confirmation_mismatch = "confirmation_mismatch"
    completed = "completed"


@dataclass(frozen=True)
class Target:
    """
    One discovered reference to the identifier in one store.

    locator is a path string for file based stores and a service name for
    service entries.

    detail is optional extra text for the inventory listing, such as a file count.
    """

    kind: TargetKind
    locator: str
    display_label: str
    detail: str = ""


@dataclass(frozen=True)
class Inventory:
    """Ordered, immutable snapshot of all targets for one run."""

    identifier: str
    targets: tuple[Target, ...] = ()

    def __len__(self) -> int:
        return len(self.targets)

    def __iter__(self) -> Iterator[Target]:
        return iter(self.targets)

    def is_empty(self) -> bool:
        return not self.targets

    def kinds(self) -> list[TargetKind]:
        """Return target kinds in inventory order."""
        return [t.kind for t in self.targets]


@dataclass(frozen=True)
class RemovalOutcome:
    """Result of removing one target."""

    target: Target
    succeeded: bool
    error_detail: str | None = None


@dataclass(frozen=True)
class RunResult:
    """
    Structured result of one run.

    status
    Terminal state reached.

    inventory
    Present once discovery ran.

    outcomes
    One entry per inventory target when status is completed, otherwise empty.
    """

    status: RunStatus
    identifier: str = ""
    inventory: Inventory | None = None
    outcomes: tuple[RemovalOutcome, ...] = field(default_factory=tuple)

    @property
    def exit_code(self) -> int:
        """
        Process exit code.

        Per target failures do not change the exit code. Callers that care
        about partial failure should inspect failed.
        """
        return 1 if self.status == RunStatus.missing_identifier else 0

    @property
    def failed(self) -> list[RemovalOutcome]:
        return [o for o in self.outcomes if not o.succeeded]

    @property
    def all_succeeded(self) -> bool:
        return not self.failed
