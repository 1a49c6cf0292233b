"""
Runner.

This is the composition layer. It turns a DecommissionConfig into store
adapters and an engine, and owns the interaction session for one run.

Core engine remains free of environment details.
"""

from __future__ import annotations

from typing import TextIO

from service_decommissioner.core.config import DecommissionConfig
from service_decommissioner.core.types import RunResult
from service_decommissioner.discovery.inventory import InventoryBuilder
from service_decommissioner.discovery.locator import Locator
from service_decommissioner.execution.base import ServiceManager
from service_decommissioner.execution.sc import ScServiceManager
from service_decommissioner.interaction.prompt import PromptProvider, interaction_session
from service_decommissioner.stores.base import StoreAdapter
from service_decommissioner.stores.filesystem import DirectoryStore
from service_decommissioner.stores.launcher import LauncherFileStore
from service_decommissioner.stores.orchestrator_config import OrchestratorConfigStore
from service_decommissioner.stores.registry import RegistryDocumentStore
from service_decommissioner.stores.service_manager import ServiceManagerStore
from service_decommissioner.workflow.audit import AuditLogger
from service_decommissioner.workflow.engine import DecommissionEngine
from service_decommissioner.workflow.gate import ConfirmationGate
from service_decommissioner.workflow.remover import Remover
from service_decommissioner.workflow.reporter import Reporter


def build_adapters(config: DecommissionConfig, manager: ServiceManager) -> list[StoreAdapter]:
    """
    Store adapters in detection and removal order.
    """
    return [
        DirectoryStore(),
        LauncherFileStore(
            desktop_dir=config.desktop_dir,
            label=config.launcher_label,
            ext=config.launcher_ext,
        ),
        RegistryDocumentStore(
            path=config.registry_path,
            header_marker=config.header_marker,
            separator_marker=config.separator_marker,
        ),
        OrchestratorConfigStore(path=config.orchestrator_config_path),
        ServiceManagerStore(
            manager=manager,
            prefix=config.service_prefix,
            absent_sentinel=config.absent_sentinel,
        ),
    ]


def build_engine(
    config: DecommissionConfig,
    prompt: PromptProvider,
    manager: ServiceManager | None = None,
    reporter: Reporter | None = None,
) -> DecommissionEngine:
    manager = manager or ScServiceManager(executable=config.service_command)
    reporter = reporter or Reporter()
    adapters = build_adapters(config, manager)

    audit = AuditLogger(path=config.audit_path) if config.audit_path else None

    return DecommissionEngine(
        prompt=prompt,
        locator=Locator(config.search_roots, prompt),
        builder=InventoryBuilder(adapters),
        gate=ConfirmationGate(prompt, reporter),
        remover=Remover(adapters, on_outcome=reporter.outcome),
        reporter=reporter,
        audit=audit,
    )


def run_decommission(
    identifier: str | None,
    config: DecommissionConfig,
    prompt: PromptProvider,
    manager: ServiceManager | None = None,
    output: TextIO | None = None,
    errors: TextIO | None = None,
) -> RunResult:
    """
    Execute one run inside an interaction session.

    The prompt provider is closed on every exit path.
    """
    with interaction_session(prompt) as session:
        engine = build_engine(
            config,
            session,
            manager=manager,
            reporter=Reporter(output=output, errors=errors),
        )
        return engine.run(identifier)
