"""
Audit trail.

One json object per completed run, appended to a jsonl file. A record holds
the identifier, terminal status, exit code, every target in inventory order
and every removal outcome, so partial failures can be reviewed after the
console output is gone.
"""

from __future__ import annotations

import json
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from service_decommissioner.core.types import RemovalOutcome, RunResult, Target


def _target_record(target: Target) -> dict[str, Any]:
    return {
        "kind": target.kind.value,
        "locator": target.locator,
        "display_label": target.display_label,
        "detail": target.detail,
    }


def _outcome_record(outcome: RemovalOutcome) -> dict[str, Any]:
    return {
        "target": _target_record(outcome.target),
        "succeeded": outcome.succeeded,
        "error_detail": outcome.error_detail,
    }


def run_record(result: RunResult) -> dict[str, Any]:
    """Build the json safe record for one run."""
    targets = list(result.inventory) if result.inventory is not None else []
    return {
        "identifier": result.identifier,
        "status": result.status.value,
        "exit_code": result.exit_code,
        "targets": [_target_record(t) for t in targets],
        "outcomes": [_outcome_record(o) for o in result.outcomes],
        "failed": len(result.failed),
    }


@dataclass(frozen=True)
class AuditLogger:
    """
    path is the jsonl file. Parent directories are created on first write.
    record raises OSError when the file cannot be written.
    """

    path: Path

    def record(self, result: RunResult) -> None:
        payload = run_record(result)
        payload["ts_unix"] = int(time.time())
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(payload, sort_keys=True, ensure_ascii=False) + "\n")
