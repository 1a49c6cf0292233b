"""
Command line entry point.

Usage
service-decommission [identifier]

The identifier is prompted for when omitted. Paths and names of the stores
come from DECOMMISSION_* environment variables, see core.config.

Exit codes
1 when no identifier could be obtained, 0 for every other terminal state,
including runs where some targets failed to be removed.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from service_decommissioner.core.config import config_from_env
from service_decommissioner.core.logging_config import setup_logging
from service_decommissioner.interaction.prompt import ConsolePrompt
from service_decommissioner.workflow.runner import run_decommission


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="service-decommission",
        description="Remove a service and every reference to it: project directory, "
        "desktop launcher, service registry row, orchestrator config entry and "
        "OS service.",
    )
    parser.add_argument(
        "identifier",
        nargs="?",
        default=None,
        help="Service or project name to remove. Prompted for when omitted.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    config = config_from_env()
    setup_logging(config.log_level, config.log_file)

    result = run_decommission(args.identifier, config, ConsolePrompt())
    return result.exit_code
