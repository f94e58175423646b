"""Explicit coercion rules over a closed set of runtime value kinds.

Responsibilities:
  - Classify values into ValueKind (numpy scalars and arrays included).
  - Provide loose equality, strict equality, ordering, text form and truthiness.

Invariants:
  - No implicit cross-kind comparison; every cross-kind case is spelled out here.
  - Functions are total: data problems produce False/None, never exceptions.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping, Sequence
from typing import Any, Optional

import numpy as np

from ..domain.enums import ValueKind
from ..domain.models import MISSING


def _unwrap(value: Any) -> Any:
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, np.ndarray) and value.ndim == 0:
        return value.item()
    return value


def value_kind(value: Any) -> ValueKind:
    value = _unwrap(value)
    if value is None or value is MISSING:
        return ValueKind.ABSENT
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, numbers.Real):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, np.ndarray):
        return ValueKind.SEQUENCE
    if isinstance(value, (bytes, bytearray)):
        return ValueKind.OTHER
    if isinstance(value, (Sequence, set, frozenset)):
        return ValueKind.SEQUENCE
    return ValueKind.OTHER


def as_list(value: Any) -> list[Any]:
    if isinstance(value, np.ndarray):
        return value.tolist()
    return list(value)


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def to_number(value: Any) -> Optional[numbers.Real]:
    """Numeric form used for ordering; None when the value has no numeric reading."""
    value = _unwrap(value)
    kind = value_kind(value)
    if kind == ValueKind.BOOLEAN:
        return 1 if value else 0
    if kind == ValueKind.NUMBER:
        return value
    if kind != ValueKind.STRING:
        return None
    text = value.strip()
    if not text:
        return 0
    if "_" in text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return None


def _format_number(value: Any) -> str:
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)


def to_text(value: Any) -> str:
    value = _unwrap(value)
    kind = value_kind(value)
    if kind == ValueKind.ABSENT:
        return ""
    if kind == ValueKind.BOOLEAN:
        return "true" if value else "false"
    if kind == ValueKind.NUMBER:
        return _format_number(value)
    if kind == ValueKind.STRING:
        return value
    if kind == ValueKind.SEQUENCE:
        return ",".join(to_text(item) for item in as_list(value))
    return str(value)


def display_value(value: Any) -> str:
    if value is MISSING:
        return "undefined"
    if value is None:
        return "null"
    return to_text(value)


def is_truthy(value: Any) -> bool:
    value = _unwrap(value)
    kind = value_kind(value)
    if kind == ValueKind.ABSENT:
        return False
    if kind == ValueKind.NUMBER:
        return value != 0 and not _is_nan(value)
    if kind == ValueKind.SEQUENCE:
        return len(as_list(value)) > 0
    if kind == ValueKind.MAPPING:
        return len(value) > 0
    return bool(value)


def loose_equals(left: Any, right: Any) -> bool:
    left, right = _unwrap(left), _unwrap(right)
    lkind, rkind = value_kind(left), value_kind(right)

    if lkind == ValueKind.ABSENT or rkind == ValueKind.ABSENT:
        return lkind == rkind

    if lkind == rkind:
        if lkind == ValueKind.SEQUENCE:
            litems, ritems = as_list(left), as_list(right)
            return len(litems) == len(ritems) and all(
                loose_equals(a, b) for a, b in zip(litems, ritems)
            )
        if lkind == ValueKind.MAPPING:
            return left.keys() == right.keys() and all(
                loose_equals(left[key], right[key]) for key in left
            )
        return bool(left == right)

    # Booleans compare as 1/0 against every other kind.
    if lkind == ValueKind.BOOLEAN:
        return loose_equals(1 if left else 0, right)
    if rkind == ValueKind.BOOLEAN:
        return loose_equals(left, 1 if right else 0)

    if {lkind, rkind} == {ValueKind.NUMBER, ValueKind.STRING}:
        number, text = (left, right) if lkind == ValueKind.NUMBER else (right, left)
        parsed = to_number(text)
        return parsed is not None and parsed == number

    scalar_kinds = (ValueKind.NUMBER, ValueKind.STRING)
    if lkind == ValueKind.SEQUENCE and rkind in scalar_kinds:
        return loose_equals(to_text(left), right)
    if rkind == ValueKind.SEQUENCE and lkind in scalar_kinds:
        return loose_equals(left, to_text(right))

    return False


def strict_equals(left: Any, right: Any) -> bool:
    left, right = _unwrap(left), _unwrap(right)
    lkind, rkind = value_kind(left), value_kind(right)
    if lkind != rkind:
        return False
    if lkind == ValueKind.ABSENT:
        return left is right
    if lkind == ValueKind.SEQUENCE:
        litems, ritems = as_list(left), as_list(right)
        return len(litems) == len(ritems) and all(
            strict_equals(a, b) for a, b in zip(litems, ritems)
        )
    if lkind == ValueKind.MAPPING:
        return left.keys() == right.keys() and all(
            strict_equals(left[key], right[key]) for key in left
        )
    return left is right or bool(left == right)


def same_value_zero(left: Any, right: Any) -> bool:
    """Membership equality: strict, except NaN matches NaN."""
    left, right = _unwrap(left), _unwrap(right)
    if _is_nan(left) and _is_nan(right):
        return True
    return strict_equals(left, right)


def ordered_pair(left: Any, right: Any) -> Optional[tuple[Any, Any]]:
    """Operands ready for native ordering, or None when they are not orderable."""
    left, right = _unwrap(left), _unwrap(right)
    if value_kind(left) == ValueKind.STRING and value_kind(right) == ValueKind.STRING:
        return left, right
    lnum, rnum = to_number(left), to_number(right)
    if lnum is None or rnum is None:
        return None
    return lnum, rnum
