"""Property path parsing and resolution against a reference object.

Responsibilities:
  - Parse dotted paths with optional [n] indices and a single [] expansion marker.
  - Resolve a parsed path against mappings, sequences and plain objects.

Inputs/Outputs:
  - Inputs: reference object and a path string such as "lunches[].serve".
  - Outputs: resolved value, a list of values for expansion paths, or MISSING.

Invariants:
  - Resolution never raises for data problems; misses yield MISSING.
  - The reference is only read.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping, Union

from ..compare.coercion import as_list, value_kind
from ..domain.enums import ValueKind
from ..domain.errors import InvalidPropertyPathError
from ..domain.models import MISSING


class _Expand:
    def __repr__(self) -> str:
        return "[]"


EXPAND = _Expand()

Segment = Union[str, int]

_TOKEN = re.compile(r"\[(\d*)\]|([^.\[\]]+)|(\.)")


@dataclass(frozen=True)
class PropertyPath:
    raw: str
    top: tuple[Segment, ...]
    nested: tuple[Segment, ...] = ()
    expand: bool = False


def parse_property_path(raw: str) -> PropertyPath:
    segments: list[Segment | _Expand] = []
    expect_segment = True
    pos = 0
    while pos < len(raw):
        match = _TOKEN.match(raw, pos)
        if match is None:
            raise InvalidPropertyPathError(f"Unparsable property path {raw!r} at offset {pos}")
        index, key, dot = match.groups()
        if dot is not None:
            if expect_segment:
                raise InvalidPropertyPathError(f"Empty segment in property path {raw!r}")
            expect_segment = True
        elif key is not None:
            if not expect_segment:
                raise InvalidPropertyPathError(f"Missing '.' before {key!r} in property path {raw!r}")
            segments.append(key)
            expect_segment = False
        else:
            if expect_segment and pos > 0:
                raise InvalidPropertyPathError(f"Empty segment in property path {raw!r}")
            segments.append(EXPAND if index == "" else int(index))
            expect_segment = False
        pos = match.end()
    if expect_segment:
        raise InvalidPropertyPathError(f"Property path {raw!r} ends with an empty segment")

    markers = [i for i, segment in enumerate(segments) if segment is EXPAND]
    if len(markers) > 1:
        raise InvalidPropertyPathError(
            f"Property path {raw!r} has {len(markers)} '[]' markers; only one is supported"
        )
    if not markers:
        return PropertyPath(raw=raw, top=tuple(segments))
    split = markers[0]
    return PropertyPath(
        raw=raw,
        top=tuple(segments[:split]),
        nested=tuple(segments[split + 1 :]),
        expand=True,
    )


def _step(current: Any, segment: Segment) -> Any:
    kind = value_kind(current)
    if kind == ValueKind.MAPPING:
        mapping: Mapping[Any, Any] = current
        if segment in mapping:
            return mapping[segment]
        # "items.0" on an int-keyed dict, "[0]" on a str-keyed one
        alternate: Any = None
        if isinstance(segment, int):
            alternate = str(segment)
        elif segment.isdecimal():
            alternate = int(segment)
        if alternate is not None and alternate in mapping:
            return mapping[alternate]
        return MISSING
    if segment == "length" and kind in (ValueKind.SEQUENCE, ValueKind.STRING):
        return len(as_list(current)) if kind == ValueKind.SEQUENCE else len(current)
    if kind == ValueKind.SEQUENCE:
        if isinstance(segment, str):
            if not segment.isdecimal():
                return MISSING
            segment = int(segment)
        items = as_list(current)
        if segment < len(items):
            return items[segment]
        return MISSING
    if kind == ValueKind.OTHER and isinstance(segment, str) and not segment.startswith("_"):
        return getattr(current, segment, MISSING)
    return MISSING


def _walk(current: Any, segments: tuple[Segment, ...]) -> Any:
    for segment in segments:
        current = _step(current, segment)
        if current is MISSING:
            return MISSING
    return current


def resolve_property(reference: Any, path: PropertyPath) -> Any:
    if not path.expand:
        return _walk(reference, path.top)
    top = _walk(reference, path.top)
    if value_kind(top) != ValueKind.SEQUENCE:
        return MISSING
    if not path.nested:
        return as_list(top)
    return [_walk(item, path.nested) for item in as_list(top)]
