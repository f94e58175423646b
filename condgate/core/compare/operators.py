"""Per-operator comparison semantics.

Responsibilities:
  - Map every OperatorKind except CROSSES to a (resolved, target) -> bool comparator.
  - Provide the crossing test used by the stateful CROSSES operator.

Invariants:
  - COMPARATORS covers the whole OperatorKind enum apart from CROSSES (checked at import).
  - Comparators never raise on data; mismatched kinds yield False.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from ..domain.enums import OperatorKind, ValueKind
from .coercion import (
    as_list,
    is_truthy,
    loose_equals,
    ordered_pair,
    same_value_zero,
    strict_equals,
    to_text,
    value_kind,
)

Comparator = Callable[[Any, Any], bool]


def _boolean_alternate(resolved: Any, target: Any) -> Optional[bool]:
    if value_kind(resolved) != ValueKind.BOOLEAN or not isinstance(target, str):
        return None
    lowered = target.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return None


def _eq(resolved: Any, target: Any) -> bool:
    if loose_equals(resolved, target):
        return True
    alternate = _boolean_alternate(resolved, target)
    return alternate is not None and loose_equals(resolved, alternate)


def _ne(resolved: Any, target: Any) -> bool:
    if not loose_equals(resolved, target):
        return True
    alternate = _boolean_alternate(resolved, target)
    return alternate is not None and not loose_equals(resolved, alternate)


def _ordered(check: Callable[[Any, Any], bool]) -> Comparator:
    def compare(resolved: Any, target: Any) -> bool:
        pair = ordered_pair(resolved, target)
        if pair is None:
            return False
        return check(*pair)

    return compare


def _text(check: Callable[[str, str], bool]) -> Comparator:
    def compare(resolved: Any, target: Any) -> bool:
        if value_kind(target) == ValueKind.ABSENT:
            return False
        return check(to_text(resolved), to_text(target))

    return compare


def _all(resolved: Any, target: Any) -> bool:
    if value_kind(resolved) != ValueKind.SEQUENCE:
        return False
    return all(strict_equals(item, target) for item in as_list(resolved))


def _some(resolved: Any, target: Any) -> bool:
    if value_kind(resolved) != ValueKind.SEQUENCE:
        return False
    return any(same_value_zero(item, target) for item in as_list(resolved))


def _none(resolved: Any, target: Any) -> bool:
    if value_kind(resolved) != ValueKind.SEQUENCE:
        return False
    return not any(same_value_zero(item, target) for item in as_list(resolved))


COMPARATORS: dict[OperatorKind, Comparator] = {
    OperatorKind.EQ: _eq,
    OperatorKind.NE: _ne,
    OperatorKind.NEQ: _ne,
    OperatorKind.GT: _ordered(lambda a, b: a > b),
    OperatorKind.GTE: _ordered(lambda a, b: a >= b),
    OperatorKind.LT: _ordered(lambda a, b: a < b),
    OperatorKind.LTE: _ordered(lambda a, b: a <= b),
    OperatorKind.STARTS_WITH: _text(str.startswith),
    OperatorKind.ENDS_WITH: _text(str.endswith),
    OperatorKind.CONTAINS: _text(lambda text, part: part in text),
    OperatorKind.PRESENT: lambda resolved, _target: is_truthy(resolved),
    OperatorKind.EMPTY: lambda resolved, _target: not is_truthy(resolved),
    OperatorKind.ABSENT: lambda resolved, _target: not is_truthy(resolved),
    OperatorKind.ALL: _all,
    OperatorKind.SOME: _some,
    OperatorKind.NONE: _none,
}


def crossed(previous: Any, current: Any, threshold: Any) -> bool:
    """Upward crossing: previous < threshold <= current."""
    above_previous = ordered_pair(threshold, previous)
    at_or_below_current = ordered_pair(threshold, current)
    if above_previous is None or at_or_below_current is None:
        return False
    return above_previous[0] > above_previous[1] and at_or_below_current[0] <= at_or_below_current[1]


def compare(op: OperatorKind, resolved: Any, target: Any) -> bool:
    comparator = COMPARATORS.get(op)
    if comparator is None:
        raise KeyError(f"No comparator for {op}; {OperatorKind.CROSSES.value} is evaluated by the engine")
    return comparator(resolved, target)


_uncovered = [op for op in OperatorKind if op not in COMPARATORS and op != OperatorKind.CROSSES]
if _uncovered:
    raise RuntimeError(f"Missing comparators for: {[op.value for op in _uncovered]}")
