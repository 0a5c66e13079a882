"""Step definitions and the resolved process flow built from them."""

from enum import Enum
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

RGBTriplet = Tuple[int, int, int]


class StepState(str, Enum):
    PAST = "past"
    CURRENT = "current"
    FUTURE = "future"


class StepDefinition(BaseModel):
    """
    One configured stage of a multi-stage process flow.

    Definitions are supplied to the resolver already filtered to active
    entries and sorted by ``order``; the resolver trusts that order.
    """

    model_config = ConfigDict(frozen=True)

    name: str                               # Backend identifier of the step
    label: str                              # User-facing text
    condition: Any = None                   # Opaque match expression
    color: Optional[str] = None             # Raw, human-authored color string
    is_terminal: bool = False               # Matching this step ends the flow
    table: str = ""
    order: int = 100
    active: bool = True


class ResolvedStep(BaseModel):
    """A step definition annotated for a specific record."""

    name: str
    label: str
    state: StepState = StepState.PAST
    rgb_triplet: Optional[RGBTriplet] = None

    def to_choice(self, separator: str = ", ") -> dict:
        """Serialize to the label/state/parameter choice shape."""
        choice = {
            "value": self.name,
            "label": self.label,
            "state": self.state.value,
        }
        if self.rgb_triplet is not None:
            choice["rgb_triplet"] = separator.join(str(c) for c in self.rgb_triplet)
        return choice


class FlowResolution(BaseModel):
    """Ordered resolved steps plus the advisory warnings raised while building them."""

    steps: List[ResolvedStep]
    warnings: List[str] = []

    @property
    def current_step(self) -> Optional[ResolvedStep]:
        return next((s for s in self.steps if s.state == StepState.CURRENT), None)

    def to_choices(self, separator: str = ", ") -> List[dict]:
        return [s.to_choice(separator) for s in self.steps]
