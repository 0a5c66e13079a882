"""Record — the subject entity a process flow is derived for."""

from pydantic import BaseModel, ConfigDict


class Record(BaseModel):
    """A business record, read-only to the resolver."""

    model_config = ConfigDict(frozen=True)

    table: str                              # e.g., "incident", "change_request"
    sys_id: str                             # Unique identifier within the table
    fields: dict = {}                       # Evaluable field set
    valid: bool = True                      # False for stale or half-loaded references

    def is_valid_record(self) -> bool:
        return self.valid and bool(self.sys_id)
