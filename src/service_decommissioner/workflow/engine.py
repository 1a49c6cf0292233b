"""
Decommission engine.

This engine coordinates one run:
identifier, location, inventory, confirmation, removal, summary.

Safety
Every terminal state before the confirmation gate leaves all stores untouched.
After the gate, removal is best effort per target and the caller receives the
full list of outcomes in RunResult.
"""

from __future__ import annotations

import logging

from service_decommissioner.core.errors import (
    ConfirmationMismatch,
    MissingIdentifier,
    UnresolvedLocation,
)
from service_decommissioner.core.types import RunResult, RunStatus
from service_decommissioner.discovery.inventory import InventoryBuilder
from service_decommissioner.discovery.locator import Locator
from service_decommissioner.interaction.prompt import PromptProvider
from service_decommissioner.workflow.audit import AuditLogger
from service_decommissioner.workflow.gate import ConfirmationGate
from service_decommissioner.workflow.remover import Remover
from service_decommissioner.workflow.reporter import Reporter

logger = logging.getLogger(__name__)

IDENTIFIER_QUESTION = "Project name to remove"


class DecommissionEngine:
    """
    prompt
    Used to ask for the identifier when none is given.

    locator, builder, gate, remover
    The run stages, in order.

    reporter
    Receives all operator facing output. The remover should stream outcomes
    into reporter.outcome.

    audit
    Optional. Records completed runs.
    """

    def __init__(
        self,
        prompt: PromptProvider,
        locator: Locator,
        builder: InventoryBuilder,
        gate: ConfirmationGate,
        remover: Remover,
        reporter: Reporter,
        audit: AuditLogger | None = None,
    ) -> None:
        self._prompt = prompt
        self._locator = locator
        self._builder = builder
        self._gate = gate
        self._remover = remover
        self._reporter = reporter
        self._audit = audit

    def run(self, identifier: str | None = None) -> RunResult:
        """
        Execute a single decommissioning run.

        Steps
        1) obtain identifier from the argument or the prompt
        2) locate the project directory
        3) build the inventory
        4) confirmation gate
        5) remove every target
        6) summary
        """
        self._reporter.banner()

        ident = identifier or self._prompt.ask(IDENTIFIER_QUESTION)

        try:
            if not ident:
                raise MissingIdentifier("Project name is required")

            self._reporter.searching(ident)
            location = self._locator.locate(ident)
        except MissingIdentifier as exc:
            self._reporter.missing_identifier(str(exc))
            return RunResult(status=RunStatus.missing_identifier)
        except UnresolvedLocation as exc:
            logger.info("location unresolved for %s: %s", ident, exc)
            self._reporter.unresolved()
            return RunResult(status=RunStatus.unresolved_location, identifier=ident)

        project_dir = location.path
        if location.from_root:
            self._reporter.located(project_dir)

        inventory = self._builder.build(ident, project_dir)
        if inventory.is_empty():
            self._reporter.nothing_found()
            return RunResult(status=RunStatus.nothing_found, identifier=ident, inventory=inventory)

        try:
            self._gate.require(inventory)
        except ConfirmationMismatch:
            self._reporter.confirmation_failed()
            return RunResult(
                status=RunStatus.confirmation_mismatch,
                identifier=ident,
                inventory=inventory,
            )

        self._reporter.removal_started()
        outcomes = self._remover.remove_all(inventory)
        self._reporter.summary(ident)

        result = RunResult(
            status=RunStatus.completed,
            identifier=ident,
            inventory=inventory,
            outcomes=tuple(outcomes),
        )
        if self._audit is not None:
            try:
                self._audit.record(result)
            except OSError as exc:
                logger.warning("could not write audit record to %s: %s", self._audit.path, exc)
        return result
