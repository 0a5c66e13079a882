"""
Condition Evaluator — decides whether a record satisfies a step's condition.

The resolver treats conditions as opaque and only calls
``evaluator(record, condition)``. This module is the reference evaluator used
by the service and API. It understands:

  - callables: ``condition(record)``
  - registered names: predicates added with ``register()``
  - encoded queries: ``state=2^priority!=1`` (terms joined by ``^``,
    each term ``field=value`` or ``field!=value``)

An empty condition matches every record. A malformed encoded query never
raises; it does not match and a warning is logged.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from process_flow.models.record import Record

_log = logging.getLogger("process_flow.conditions")

Predicate = Callable[[Record], bool]


class MalformedConditionError(ValueError):
    """Raised internally when an encoded query term cannot be parsed."""
    pass


def _parse_term(term: str) -> Tuple[str, str, str]:
    """Split ``field<op>value`` at the first operator; the value may contain either."""
    eq = term.find("=")
    if eq == -1:
        raise MalformedConditionError(f"no operator in {term!r}")
    if eq > 0 and term[eq - 1] == "!":
        field, op = term[: eq - 1], "!="
    else:
        field, op = term[:eq], "="
    field = field.strip()
    if not field:
        raise MalformedConditionError(f"missing field name in {term!r}")
    return field, op, term[eq + 1:]


def parse_encoded_query(query: str) -> List[Tuple[str, str, str]]:
    """Parse an encoded query into (field, operator, value) terms."""
    return [_parse_term(term) for term in query.split("^") if term.strip()]


class ConditionEvaluator:
    """Reference condition evaluator. Instances are plain callables."""

    def __init__(self, predicates: Optional[Dict[str, Predicate]] = None):
        self._predicates: Dict[str, Predicate] = dict(predicates or {})

    def register(self, name: str, predicate: Predicate) -> None:
        """Register a named predicate usable as a step condition."""
        self._predicates[name] = predicate

    def __call__(self, record: Record, condition: Any) -> bool:
        if condition is None or condition == "":
            return True
        if callable(condition):
            return bool(condition(record))
        if not isinstance(condition, str):
            _log.warning("Unsupported condition type %s", type(condition).__name__)
            return False

        predicate = self._predicates.get(condition)
        if predicate:
            return bool(predicate(record))

        return self._check_encoded_query(record, condition)

    def _check_encoded_query(self, record: Record, query: str) -> bool:
        try:
            terms = parse_encoded_query(query)
        except MalformedConditionError as exc:
            # Fail-safe: a condition we cannot read never selects a step
            _log.warning("Malformed condition %r: %s", query, exc)
            return False

        for field, op, expected in terms:
            actual = record.fields.get(field)
            actual = "" if actual is None else str(actual)
            if op == "=" and actual != expected:
                return False
            if op == "!=" and actual == expected:
                return False
        return True
