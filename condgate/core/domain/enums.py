"""Domain enums for rule evaluation.

Responsibilities:
  - Define the closed set of comparison operators and satisfaction modes.
  - Define the runtime value kinds that coercion rules operate on.

Invariants:
  - Enum values must remain stable; they are the identifiers used in rule files.
"""

from __future__ import annotations

from enum import Enum


class OperatorKind(Enum):
    EQ = "eq"
    NE = "ne"
    NEQ = "neq"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    STARTS_WITH = "startsWith"
    ENDS_WITH = "endsWith"
    CONTAINS = "contains"
    PRESENT = "present"
    EMPTY = "empty"
    ABSENT = "absent"
    ALL = "all"
    SOME = "some"
    NONE = "none"
    CROSSES = "crosses"

    @classmethod
    def parse(cls, raw: object) -> OperatorKind | None:
        if isinstance(raw, OperatorKind):
            return raw
        if not isinstance(raw, str):
            return None
        try:
            return cls(raw)
        except ValueError:
            return None


# Operators that ignore the rule value; the trace reads "is <op>" for these.
UNARY_OPERATORS = frozenset({OperatorKind.PRESENT, OperatorKind.EMPTY, OperatorKind.ABSENT})


class SatisfyMode(Enum):
    ALL = "ALL"
    ANY = "ANY"

    @classmethod
    def parse(cls, raw: object) -> SatisfyMode:
        if isinstance(raw, SatisfyMode):
            return raw
        if isinstance(raw, str) and raw.upper() == "ALL":
            return cls.ALL
        return cls.ANY


class ValueKind(Enum):
    ABSENT = "ABSENT"
    BOOLEAN = "BOOLEAN"
    NUMBER = "NUMBER"
    STRING = "STRING"
    SEQUENCE = "SEQUENCE"
    MAPPING = "MAPPING"
    OTHER = "OTHER"
