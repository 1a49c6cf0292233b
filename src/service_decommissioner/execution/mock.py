"""
In memory service manager.

This service manager is used for tests and local simulations.
It keeps a set of installed service names and answers queries the same way
sc does.

Features
- Records every call in order, so tests can assert zero commands were issued
- Can inject stop or delete failures per service name
- Can make query itself raise, to simulate a missing executable
"""

from __future__ import annotations

from dataclasses import dataclass, field

from service_decommissioner.execution.base import CommandResult, ServiceManager

ABSENT_TEXT = "[SC] EnumQueryServicesStatus:OpenService FAILED 1060:\n\nThe specified service does not exist as an installed service.\n"


@dataclass
class InMemoryServiceManager(ServiceManager):
    """
    In memory service manager.

    services
    Names currently installed.

    fail_stop, fail_delete
    Names whose stop or delete returns a non zero result.

    query_error
    When set, query raises this exception.
    """

    services: set[str] = field(default_factory=set)
    fail_stop: set[str] = field(default_factory=set)
    fail_delete: set[str] = field(default_factory=set)
    query_error: Exception | None = None
    calls: list[tuple[str, str]] = field(default_factory=list)

    def query(self, name: str) -> CommandResult:
        self.calls.append(("query", name))
        if self.query_error is not None:
            raise self.query_error
        if name in self.services:
            return CommandResult(
                ["query", name], 0, f"SERVICE_NAME: {name}\n        STATE              : 4  RUNNING\n"
            )
        return CommandResult(["query", name], 1060, ABSENT_TEXT)

    def stop(self, name: str) -> CommandResult:
        self.calls.append(("stop", name))
        if name in self.fail_stop or name not in self.services:
            return CommandResult(["stop", name], 1062, "The service has not been started.")
        return CommandResult(["stop", name], 0, f"SERVICE_NAME: {name}\n        STATE : 3  STOP_PENDING")

    def delete(self, name: str) -> CommandResult:
        self.calls.append(("delete", name))
        if name in self.fail_delete or name not in self.services:
            return CommandResult(["delete", name], 1060, "[SC] OpenService FAILED 1060")
        self.services.discard(name)
        return CommandResult(["delete", name], 0, "[SC] DeleteService SUCCESS")

    def mutating_calls(self) -> list[tuple[str, str]]:
        """Return only stop and delete calls."""
        return [c for c in self.calls if c[0] != "query"]
