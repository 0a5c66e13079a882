"""
Process Flow Service — looks up a record's step definitions and resolves them.

This is the caller the resolver reports to: it owns definition lookup, the
definition cap, and logging of the advisory warnings the resolver returns.
"""

import logging
from typing import Any, Callable, List, Optional

from process_flow.conditions.evaluator import ConditionEvaluator
from process_flow.definitions.store import StepDefinitionStore
from process_flow.flow.resolver import FlowStepResolver
from process_flow.models.config import ResolverConfig
from process_flow.models.flow import FlowResolution
from process_flow.models.record import Record

_log = logging.getLogger("process_flow.service")


class ProcessFlowService:
    """Resolves process flow steps for records using a definition store."""

    def __init__(
        self,
        definition_store: StepDefinitionStore,
        evaluator: Optional[Callable[[Record, Any], bool]] = None,
        resolver: Optional[FlowStepResolver] = None,
        config: Optional[ResolverConfig] = None,
    ):
        self.definition_store = definition_store
        self.evaluator = evaluator or ConditionEvaluator()
        self.resolver = resolver or FlowStepResolver()
        self.config = config or ResolverConfig()

    def get_process_flow_steps(
        self, record: Optional[Record]
    ) -> Optional[FlowResolution]:
        """Resolve the flow for a record. None if there is nothing to show."""
        if record is None or not record.is_valid_record():
            _log.info("Found no flow steps: record missing or invalid")
            return None

        definitions = self.definition_store.get_active_for_table(record.table)
        if self.config.max_definitions is not None:
            definitions = definitions[: self.config.max_definitions]

        resolution = self.resolver.resolve(record, definitions, self.evaluator)
        if resolution is None:
            _log.info("Found no flow steps for table %s", record.table)
            return None

        for warning in resolution.warnings:
            _log.warning("%s (table=%s, record=%s)", warning, record.table, record.sys_id)

        current = resolution.current_step
        _log.debug(
            "Flow step fetching, found %d steps for %s/%s (current=%s)",
            len(resolution.steps),
            record.table,
            record.sys_id,
            current.name if current else None,
        )
        return resolution

    def get_choices(self, record: Optional[Record]) -> Optional[List[dict]]:
        """Resolve and serialize to the choice-list shape."""
        resolution = self.get_process_flow_steps(record)
        if resolution is None:
            return None
        return resolution.to_choices(self.config.rgb_separator)
