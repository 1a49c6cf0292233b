"""
Confirmation gate.

Purpose
Nothing is mutated until the operator re-types the identifier.

The full inventory is shown first. The answer must equal the identifier
exactly: case sensitive, with only the surrounding whitespace stripped by the
prompt provider. Anything else, including an empty answer or a differently
cased name, blocks removal.
"""

from __future__ import annotations

from dataclasses import dataclass

from service_decommissioner.core.errors import ConfirmationMismatch
from service_decommissioner.core.types import Inventory
from service_decommissioner.interaction.prompt import PromptProvider
from service_decommissioner.workflow.reporter import Reporter


@dataclass(frozen=True)
class GateDecision:
    """
    allowed
    If False, the engine must not remove anything.

    reason
    Human readable explanation.
    """

    allowed: bool
    reason: str


def confirmation_question(identifier: str) -> str:
    return f"Remove {identifier} and all associated items? (type project name to confirm)"


class ConfirmationGate:
    def __init__(self, prompt: PromptProvider, reporter: Reporter) -> None:
        self._prompt = prompt
        self._reporter = reporter

    def decide(self, inventory: Inventory) -> GateDecision:
        self._reporter.inventory(inventory)

        answer = self._prompt.ask(confirmation_question(inventory.identifier))
        if answer == inventory.identifier:
            return GateDecision(allowed=True, reason="identifier confirmed")

        return GateDecision(allowed=False, reason="confirmation did not match identifier")

    def require(self, inventory: Inventory) -> None:
        """Like decide, but raise ConfirmationMismatch when not allowed."""
        decision = self.decide(inventory)
        if not decision.allowed:
            raise ConfirmationMismatch(decision.reason)
