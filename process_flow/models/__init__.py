"""Process flow data models."""

from process_flow.models.config import ResolverConfig
from process_flow.models.flow import (
    FlowResolution,
    ResolvedStep,
    RGBTriplet,
    StepDefinition,
    StepState,
)
from process_flow.models.record import Record

__all__ = [
    "FlowResolution",
    "Record",
    "ResolvedStep",
    "ResolverConfig",
    "RGBTriplet",
    "StepDefinition",
    "StepState",
]
