"""Domain models for rule sets and per-rule outcomes.

Responsibilities:
  - Define data carriers for rules, rule-set configuration and rule outcomes.
  - Define the MISSING sentinel for values that could not be resolved.

Invariants:
  - Models are containers with no evaluation behavior.
  - The evaluator never mutates a Rule or RuleSetConfig.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from ..ports import LogFn, PreviousValueFn, TransformValueFn
from .enums import OperatorKind, SatisfyMode


class _Missing:
    """Marker for a path that does not resolve, distinct from an explicit None."""

    _instance: Optional[_Missing] = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


@dataclass(frozen=True)
class Rule:
    property: str
    op: OperatorKind | str
    value: Any = MISSING
    required: bool = False


@dataclass(frozen=True)
class RuleSetConfig:
    rules: Optional[Sequence[Rule | dict[str, Any]]]
    satisfy: SatisfyMode | str = SatisfyMode.ANY
    previous_value_fn: Optional[PreviousValueFn] = None
    transform_value_fn: Optional[TransformValueFn] = None
    log: Optional[LogFn] = None


@dataclass(frozen=True)
class RuleOutcome:
    index: int
    rule: Rule
    resolved: Any
    target: Any
    passed: bool
    previous: Any = field(default=MISSING)
