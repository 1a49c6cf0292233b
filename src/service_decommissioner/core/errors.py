"""
Error taxonomy.

We separate error types so callers can react correctly.
Example:
MissingIdentifier stops the run before anything is touched and exits non zero.
UnresolvedLocation and ConfirmationMismatch also stop before any mutation,
but they are normal outcomes and exit zero.
SchemaError and CommandFailed are raised inside a single target's removal and
are recorded as a failed outcome instead of propagating.
"""

from __future__ import annotations


class DecommissionError(Exception):
    """Base class for all decommissioning exceptions."""


class MissingIdentifier(DecommissionError):
    """Raised when no identifier could be obtained from argv or the prompt."""


class UnresolvedLocation(DecommissionError):
    """Raised when the project directory is not found and no valid path was supplied."""


class ConfirmationMismatch(DecommissionError):
    """Raised when the re-typed confirmation does not equal the identifier."""


class SchemaError(DecommissionError):
    """Raised when the orchestrator config does not match the expected shape."""


class CommandFailed(DecommissionError):
    """
    Raised when a service manager command exits non zero.

    command is the argument list that was run.
    output is the combined stdout and stderr text.
    """

    def __init__(self, command: list[str], returncode: int, output: str) -> None:
        self.command = command
        self.returncode = returncode
        self.output = output
        detail = output.strip().splitlines()[-1] if output.strip() else "no output"
        super().__init__(f"{' '.join(command)} exited with {returncode}: {detail}")
