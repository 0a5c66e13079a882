"""
Flow Step Resolver — derives the past/current/future view of a process flow.

Behavioral Contract:
- Accepts a record, its ordered step definitions and a condition evaluator
- Trusts the supplied order; never sorts or filters definitions
- The first definition whose condition matches is the current step; earlier
  steps are past, later steps are future and are not evaluated
- Stops after a matched terminal step; nothing after it is emitted
- Returns None when there is nothing to show (no record, no definitions)
- Never raises for an unparseable color; it is reported as a warning
"""

from typing import Any, Callable, Iterable, Optional

from process_flow.color.parser import ColorParser
from process_flow.models.flow import (
    FlowResolution,
    RGBTriplet,
    ResolvedStep,
    StepDefinition,
    StepState,
)
from process_flow.models.record import Record

ConditionCheck = Callable[[Record, Any], bool]


class FlowStepResolver:
    """Single forward pass over step definitions."""

    def __init__(self, color_parser: Optional[ColorParser] = None):
        self.color_parser = color_parser or ColorParser()

    def resolve(
        self,
        record: Optional[Record],
        definitions: Iterable[StepDefinition],
        evaluator: ConditionCheck,
    ) -> Optional[FlowResolution]:
        """Build the resolved steps for a record, or None if not applicable."""
        if record is None or not record.is_valid_record():
            return None

        definitions = list(definitions)
        if not definitions:
            return None

        resolution = FlowResolution(steps=[])
        found_current = False
        reached_end = False

        for definition in definitions:
            if reached_end:
                break

            step = ResolvedStep(name=definition.name, label=definition.label)

            if found_current:
                step.state = StepState.FUTURE
            elif evaluator(record, definition.condition):
                step.state = StepState.CURRENT
                found_current = True
                if definition.color:
                    step.rgb_triplet = self._parse_color(definition.color, resolution)
                reached_end = definition.is_terminal

            resolution.steps.append(step)

        return resolution

    def _parse_color(
        self, color: str, resolution: FlowResolution
    ) -> Optional[RGBTriplet]:
        triplet = self.color_parser.parse(color)
        if triplet is None:
            resolution.warnings.append(
                f"Could not parse provided custom color: {color}"
            )
        return triplet
