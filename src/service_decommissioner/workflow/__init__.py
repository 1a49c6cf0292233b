"""
Workflow package.

This makes the workflow folder an explicit package so both Python and mypy
resolve modules consistently.
"""

from service_decommissioner.workflow.engine import DecommissionEngine
from service_decommissioner.workflow.runner import build_engine, run_decommission

__all__ = ["DecommissionEngine", "build_engine", "run_decommission"]
