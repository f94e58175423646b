"""Evaluation report for a single rule-set evaluation.

Responsibilities:
  - Capture the outcome, per-rule results, bucket counts and trace for audit.

Inputs/Outputs:
  - Inputs: produced by evaluator.evaluate_report.
  - Outputs: immutable dataclass consumed by callers and the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..domain.enums import SatisfyMode
from ..domain.models import RuleOutcome


@dataclass(frozen=True)
class EvaluationReport:
    outcome: bool
    satisfy: SatisfyMode
    rule_outcomes: list[RuleOutcome]
    normal_passed: int
    normal_total: int
    required_passed: int
    required_total: int
    normal_satisfied: bool
    required_satisfied: bool
    trace: str
