"""
Console reporter.

Renders the operator dialogue: opening banner, search progress, the
inventory listing, one status line per target as soon as it is removed, and
a closing summary.

Exit codes are not decided here. See RunResult.exit_code.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

from service_decommissioner.core.types import Inventory, RemovalOutcome, TargetKind

DIVIDER = "─" * 37

OPENING_BANNER = """
╔══════════════════════════════════════════════════════════════╗
║              HIVE SERVICE REMOVAL TOOL                       ║
╠══════════════════════════════════════════════════════════════╣
║  Removes a Hive service and cleans up:                       ║
║  - Project directory                                         ║
║  - Desktop shortcuts                                         ║
║  - SERVICE-REGISTRY.md entry                                 ║
║  - Orchestrator config entry                                 ║
║  - Windows service (if exists)                               ║
╚══════════════════════════════════════════════════════════════╝
"""

COMPLETE_BANNER = """
╔══════════════════════════════════════════════════════════════╗
║                   REMOVAL COMPLETE                           ║
╚══════════════════════════════════════════════════════════════╝
"""

_REMOVED_TEXT = {
    TargetKind.directory: "Removed directory: {locator}",
    TargetKind.launcher_file: "Removed file: {locator}",
    TargetKind.registry_entry: "Removed from {name}",
    TargetKind.orchestrator_entry: "Removed from orchestrator config",
    TargetKind.service_entry: "Removed Windows service: {locator}",
}


def outcome_line(outcome: RemovalOutcome) -> str:
    """Return the one line status for an outcome."""
    target = outcome.target
    if not outcome.succeeded:
        return f"  ⚠ Failed to remove {target.kind.value}: {outcome.error_detail}"

    template = _REMOVED_TEXT.get(target.kind, "Removed {locator}")
    text = template.format(locator=target.locator, name=Path(target.locator).name)
    return f"  ✓ {text}"


class Reporter:
    """
    output receives the dialogue, errors receives terminal error messages.
    Both default to the process streams.
    """

    def __init__(self, output: TextIO | None = None, errors: TextIO | None = None) -> None:
        self._out = output or sys.stdout
        self._err = errors or sys.stderr
        self._outcomes: list[RemovalOutcome] = []

    def _line(self, text: str = "") -> None:
        self._out.write(text + "\n")
        self._out.flush()

    def banner(self) -> None:
        self._line(OPENING_BANNER)

    def missing_identifier(self, message: str = "Project name is required") -> None:
        self._err.write(f"\nError: {message}\n")
        self._err.flush()

    def searching(self, identifier: str) -> None:
        self._line(f"\nSearching for project: {identifier}")

    def located(self, project_dir: Path) -> None:
        self._line(f"  ✓ Found: {project_dir}")

    def unresolved(self) -> None:
        self._line("\nProject not found. Exiting.")

    def inventory(self, inventory: Inventory) -> None:
        self._line(f"\n{DIVIDER}")
        self._line("Items to remove:")
        self._line(DIVIDER)
        for target in inventory:
            detail = f" ({target.detail})" if target.detail else ""
            self._line(f"  ✓ {target.display_label}{detail}")
        self._line(f"{DIVIDER}\n")

    def nothing_found(self) -> None:
        self._line("\n  No items found to remove.")

    def confirmation_failed(self) -> None:
        self._line("\nConfirmation failed. Exiting.")

    def removal_started(self) -> None:
        self._line("\nRemoving...\n")

    def outcome(self, outcome: RemovalOutcome) -> None:
        """Record and print one outcome immediately."""
        self._outcomes.append(outcome)
        self._line(outcome_line(outcome))

    def summary(self, identifier: str) -> None:
        removed = sum(1 for o in self._outcomes if o.succeeded)
        failed = len(self._outcomes) - removed
        self._line(COMPLETE_BANNER)
        if failed:
            self._line(f"{identifier} was partially removed: {removed} removed, {failed} failed.\n")
        else:
            self._line(f"{identifier} has been removed.\n")
