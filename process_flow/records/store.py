"""Record Store — in-memory lookup of the records flows are resolved for."""

from typing import Dict, List, Optional, Tuple

from process_flow.models.record import Record


class RecordStore:
    """In-memory record store keyed by (table, sys_id)."""

    def __init__(self):
        self._records: Dict[Tuple[str, str], Record] = {}

    def upsert(self, record: Record) -> None:
        self._records[(record.table, record.sys_id)] = record

    def get(self, table: str, sys_id: str) -> Optional[Record]:
        return self._records.get((table, sys_id))

    def remove(self, table: str, sys_id: str) -> bool:
        return self._records.pop((table, sys_id), None) is not None

    def list_for_table(self, table: str) -> List[Record]:
        return [r for r in self._records.values() if r.table == table]
