"""
Windows service control executor.

This executor shells out to the sc utility:
sc query <name>
sc stop <name>
sc delete <name>

stderr is merged into stdout. A non zero exit is returned as a CommandResult
rather than raised, including the "does not exist" answer for unknown services.

No timeout is applied. A hung sc call blocks the whole run.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass

from service_decommissioner.execution.base import CommandResult, ServiceManager

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScServiceManager(ServiceManager):
    """
    Service manager backed by the sc command line tool.

    executable can point at a different binary with the same contract.
    """

    executable: str = "sc"

    def _run(self, verb: str, name: str) -> CommandResult:
        command = [self.executable, verb, name]
        logger.debug("running %s", command)
        completed = subprocess.run(
            command,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            check=False,
        )
        return CommandResult(
            command=command,
            returncode=completed.returncode,
            output=completed.stdout or "",
        )

    def query(self, name: str) -> CommandResult:
        return self._run("query", name)

    def stop(self, name: str) -> CommandResult:
        return self._run("stop", name)

    def delete(self, name: str) -> CommandResult:
        return self._run("delete", name)
