"""
Process Flow API — FastAPI endpoints.

Exposes the kernel's functionality via a REST API for:
- Step definition management
- Record ingestion and lookup
- Process flow resolution
- Color parsing
"""

from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from process_flow.color.parser import ColorParser, format_triplet
from process_flow.conditions.evaluator import ConditionEvaluator
from process_flow.definitions.store import StepDefinitionStore
from process_flow.flow.resolver import FlowStepResolver
from process_flow.flow.service import ProcessFlowService
from process_flow.models.config import ResolverConfig
from process_flow.models.flow import FlowResolution, StepDefinition
from process_flow.models.record import Record
from process_flow.records.store import RecordStore
from process_flow.utils.logging import setup_logging


# --- Request/Response Models ---

class DefinitionCreateRequest(BaseModel):
    table: str
    name: str
    label: str
    condition: Optional[str] = None
    color: Optional[str] = None
    is_terminal: bool = False
    order: int = 100
    active: bool = True


class RecordIngestRequest(BaseModel):
    table: str
    sys_id: str
    fields: dict = {}
    valid: bool = True


class InlineResolveRequest(BaseModel):
    record: RecordIngestRequest
    definitions: List[DefinitionCreateRequest]


class ColorParseRequest(BaseModel):
    value: str


class FlowResponse(BaseModel):
    steps: Optional[List[dict]] = None
    warnings: List[str] = []


def _definition_from_request(req: DefinitionCreateRequest) -> StepDefinition:
    return StepDefinition(**req.model_dump())


def _record_from_request(req: RecordIngestRequest) -> Record:
    return Record(**req.model_dump())


# --- Application Factory ---

def create_app(
    definition_store: Optional[StepDefinitionStore] = None,
    record_store: Optional[RecordStore] = None,
    evaluator: Optional[ConditionEvaluator] = None,
    config: Optional[ResolverConfig] = None,
    configure_logging: bool = False,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Root logging is only set up when ``configure_logging`` is true, so that
    building an app (or importing this module) leaves logging to the host.
    """

    app = FastAPI(
        title="Process Flow API",
        description="Past/current/future process flow steps for records",
        version="0.1.0",
    )

    # Initialize components
    cfg = config or ResolverConfig()
    if configure_logging:
        setup_logging(cfg.log_level)
    ds = definition_store or StepDefinitionStore()
    rs = record_store or RecordStore()
    ev = evaluator or ConditionEvaluator()
    parser = ColorParser()
    service = ProcessFlowService(
        definition_store=ds,
        evaluator=ev,
        resolver=FlowStepResolver(color_parser=parser),
        config=cfg,
    )

    def _flow_response(resolution: Optional[FlowResolution]) -> FlowResponse:
        if resolution is None:
            return FlowResponse()
        return FlowResponse(
            steps=resolution.to_choices(cfg.rgb_separator),
            warnings=resolution.warnings,
        )

    # === STEP DEFINITIONS ===

    @app.post("/definitions")
    def create_definition(req: DefinitionCreateRequest):
        """Create or replace a step definition."""
        definition = _definition_from_request(req)
        ds.upsert(definition)
        return definition.model_dump(mode="json")

    @app.get("/definitions/{table}")
    def list_definitions(table: str):
        """All step definitions for a table, in order."""
        return [d.model_dump(mode="json") for d in ds.list_for_table(table)]

    @app.delete("/definitions/{table}/{name}")
    def delete_definition(table: str, name: str):
        """Remove a step definition."""
        if not ds.remove(table, name):
            raise HTTPException(404, "Step definition not found")
        return {"status": "deleted", "table": table, "name": name}

    # === RECORDS ===

    @app.post("/records")
    def ingest_record(req: RecordIngestRequest):
        """Create or replace a record."""
        rs.upsert(_record_from_request(req))
        return {"status": "ingested", "table": req.table, "sys_id": req.sys_id}

    @app.get("/records/{table}/{sys_id}")
    def get_record(table: str, sys_id: str):
        record = rs.get(table, sys_id)
        if not record:
            raise HTTPException(404, "Record not found")
        return record.model_dump(mode="json")

    # === PROCESS FLOW ===

    @app.get("/records/{table}/{sys_id}/flow", response_model=FlowResponse)
    def get_record_flow(table: str, sys_id: str):
        """Resolved process flow steps for a stored record."""
        record = rs.get(table, sys_id)
        if not record:
            raise HTTPException(404, "Record not found")
        return _flow_response(service.get_process_flow_steps(record))

    @app.post("/flow/resolve", response_model=FlowResponse)
    def resolve_inline(req: InlineResolveRequest):
        """Resolve a flow for an inline record and definitions, in the given order."""
        record = _record_from_request(req.record)
        definitions = [_definition_from_request(d) for d in req.definitions]
        return _flow_response(service.resolver.resolve(record, definitions, ev))

    # === COLORS ===

    @app.post("/colors/parse")
    def parse_color(req: ColorParseRequest):
        triplet = parser.parse(req.value)
        if triplet is None:
            return {"value": req.value, "rgb_triplet": None, "formatted": None}
        return {
            "value": req.value,
            "rgb_triplet": list(triplet),
            "formatted": format_triplet(triplet, cfg.rgb_separator),
        }

    # === CONFIG ===

    @app.get("/config")
    def get_config():
        """Current resolver configuration."""
        return cfg.model_dump()

    return app


# Default application instance
app = create_app()
