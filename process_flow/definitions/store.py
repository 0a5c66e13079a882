"""
Step Definition Store — the configured process flow steps, per table.

Queried by: ProcessFlowService (active definitions for a record's table)
Updated by: the API
"""

from typing import Dict, List, Optional, Tuple

from process_flow.models.flow import StepDefinition


class StepDefinitionStore:
    """
    In-memory step definition store.
    Definitions are keyed by (table, name).
    """

    def __init__(self):
        self._definitions: Dict[Tuple[str, str], StepDefinition] = {}

    def upsert(self, definition: StepDefinition) -> None:
        """Insert or replace a definition."""
        self._definitions[(definition.table, definition.name)] = definition

    def get(self, table: str, name: str) -> Optional[StepDefinition]:
        return self._definitions.get((table, name))

    def remove(self, table: str, name: str) -> bool:
        """Remove a definition. Returns False if it did not exist."""
        return self._definitions.pop((table, name), None) is not None

    def list_for_table(self, table: str) -> List[StepDefinition]:
        """All definitions for a table, active or not, in ``order``."""
        return sorted(
            (d for d in self._definitions.values() if d.table == table),
            key=lambda d: d.order,
        )

    def get_active_for_table(self, table: str) -> List[StepDefinition]:
        """Active definitions for a table, sorted by ``order`` (stable on ties)."""
        return [d for d in self.list_for_table(table) if d.active]

    def count(self) -> int:
        return len(self._definitions)
