"""Ready-made collaborators for the evaluator's injectable ports.

Responsibilities:
  - Build a previous-value lookup backed by an earlier snapshot of the reference.
  - Build a value transform that treats prefixed strings as references to other fields.
"""

from __future__ import annotations

from typing import Any

from condgate.core.domain.errors import InvalidPropertyPathError
from condgate.core.ports import PreviousValueFn, TransformValueFn
from condgate.core.resolve.property_path import parse_property_path, resolve_property


def previous_from_snapshot(snapshot: Any) -> PreviousValueFn:
    """Resolve the rule's property in `snapshot`, the reference as it was before."""

    def previous_value(reference: Any, property: str) -> Any:
        return resolve_property(snapshot, parse_property_path(property))

    return previous_value


def field_reference_transform(prefix: str = "$") -> TransformValueFn:
    """Replace string values starting with `prefix` by the field they name.

    With an empty prefix every string value is treated as a field path.
    Values that do not parse as a path are returned unchanged.
    """

    def transform(raw_value: Any, reference: Any, property: str) -> Any:
        if not isinstance(raw_value, str) or not raw_value.startswith(prefix):
            return raw_value
        path = raw_value[len(prefix) :]
        if not path:
            return raw_value
        try:
            parsed = parse_property_path(path)
        except InvalidPropertyPathError:
            return raw_value
        return resolve_property(reference, parsed)

    return transform
