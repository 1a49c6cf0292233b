"""
OS service manager store.

Two names are checked for every identifier:
1) the identifier itself
2) a derived name: prefix + first character upper cased + the rest with
   dashes removed, e.g. "silver-stream" -> "HiveSilverstream"

Each present name becomes its own target, so a run can hold zero, one or two
service targets.

Removal stops the service first and ignores any stop failure, since the
service may already be stopped. The target only counts as removed when the
delete succeeds.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from service_decommissioner.core.errors import CommandFailed
from service_decommissioner.core.types import Target, TargetKind
from service_decommissioner.execution.base import ServiceManager
from service_decommissioner.stores.base import StoreAdapter

logger = logging.getLogger(__name__)


def derive_service_name(identifier: str, prefix: str = "Hive") -> str:
    """Build the prefixed service name for an identifier."""
    if not identifier:
        return prefix
    head = identifier[0].upper()
    tail = identifier[1:].replace("-", "")
    return f"{prefix}{head}{tail}"


@dataclass(frozen=True)
class ServiceManagerStore(StoreAdapter):
    """
    manager is the capability used for query, stop and delete.
    absent_sentinel is the phrase that marks an unknown service in query output.
    """

    manager: ServiceManager
    prefix: str = "Hive"
    absent_sentinel: str = "does not exist"
    kind: TargetKind = TargetKind.service_entry

    def candidate_names(self, identifier: str) -> list[str]:
        names = [identifier]
        derived = derive_service_name(identifier, self.prefix)
        if derived != identifier:
            names.append(derived)
        return names

    def is_present(self, name: str) -> bool:
        """
        A service is present only when its query exits zero and the output
        lacks the absent sentinel. Any query error counts as absent.
        """
        try:
            result = self.manager.query(name)
        except Exception as exc:  # noqa: BLE001
            logger.warning("service query for %s failed, treating as absent: %s", name, exc)
            return False

        if not result.ok:
            logger.info("service query for %s exited %s, treating as absent", name, result.returncode)
            return False
        return self.absent_sentinel not in result.output

    def detect(self, identifier: str, project_dir: Path) -> list[Target]:
        targets: list[Target] = []
        for name in self.candidate_names(identifier):
            if self.is_present(name):
                targets.append(
                    Target(
                        kind=self.kind,
                        locator=name,
                        display_label=f"Windows service: {name}",
                    )
                )
        return targets

    def remove(self, target: Target, identifier: str) -> None:
        name = target.locator

        try:
            stopped = self.manager.stop(name)
        except OSError as exc:
            logger.info("stop %s could not run, continuing with delete: %s", name, exc)
        else:
            if not stopped.ok:
                logger.info("stop %s returned %s, continuing with delete", name, stopped.returncode)

        deleted = self.manager.delete(name)
        if not deleted.ok:
            raise CommandFailed(deleted.command, deleted.returncode, deleted.output)
