"""
Service manager interfaces.

Goal
Keep the tool independent of the OS facility that manages background
services, so tests can simulate presence, absence and failure.

Contract
query, stop and delete return a CommandResult. They never raise for a non
zero exit; callers decide what a failure means. A service is present when
its query succeeds and the output does not contain the absent sentinel.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class CommandResult:
    """
    Result of one service manager command.

    command is the argument list that was run.
    output is stdout and stderr combined.
    """

    command: list[str]
    returncode: int
    output: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class ServiceManager(Protocol):
    """
    Minimal service manager capability.

    query
    Return the status report for a service name.

    stop
    Stop the named service.

    delete
    Unregister the named service.
    """

    def query(self, name: str) -> CommandResult:
        """Return the status report for a service name."""

    def stop(self, name: str) -> CommandResult:
        """Stop a service by name."""

    def delete(self, name: str) -> CommandResult:
        """Delete a service by name."""
