"""Rule-set evaluation against a single reference object.

Responsibilities:
  - Validate rule shapes before any collaborator is invoked.
  - Resolve, transform and compare each rule; aggregate required/normal buckets.
  - Build the diagnostic trace and hand it to the log collaborator once per call.

Inputs/Outputs:
  - Inputs: RuleSetConfig (or an equivalent mapping) and a reference object.
  - Outputs: bool outcome, EvaluationReport, or None when no rule sequence is configured.

Invariants:
  - Pure apart from collaborator calls; nothing is retained between calls.
  - Rule order shows in the trace only; aggregation is a count per bucket.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import replace
from typing import Any, Optional

from ..compare.operators import compare, crossed
from ..domain.enums import OperatorKind, SatisfyMode
from ..domain.errors import (
    InvalidPropertyPathError,
    MissingCrossesCollaboratorError,
    MissingPropertyError,
    UnknownOperatorError,
)
from ..domain.models import MISSING, Rule, RuleOutcome, RuleSetConfig
from ..resolve.property_path import PropertyPath, parse_property_path, resolve_property
from .result import EvaluationReport
from .trace import format_trace

_CONFIG_ALIASES = {
    "previousValueFn": "previous_value_fn",
    "transformValueFn": "transform_value_fn",
}


def coerce_config(config: RuleSetConfig | Mapping[str, Any] | None) -> Optional[RuleSetConfig]:
    if config is None or isinstance(config, RuleSetConfig):
        return config
    if not isinstance(config, Mapping):
        return None
    fields: dict[str, Any] = {}
    for key, value in config.items():
        name = _CONFIG_ALIASES.get(key, key)
        if name in {"rules", "satisfy", "previous_value_fn", "transform_value_fn", "log"}:
            fields[name] = value
    if "satisfy" in fields and fields["satisfy"] is None:
        del fields["satisfy"]
    return RuleSetConfig(rules=fields.pop("rules", None), **fields)


def _has_rule_sequence(config: Optional[RuleSetConfig]) -> bool:
    if config is None:
        return False
    return isinstance(config.rules, Sequence) and not isinstance(config.rules, (str, bytes))


def coerce_rule(raw: Any, index: int, config: RuleSetConfig) -> tuple[Rule, PropertyPath]:
    if isinstance(raw, Rule):
        prop, raw_op, value, required = raw.property, raw.op, raw.value, raw.required
    elif isinstance(raw, Mapping):
        prop = raw.get("property")
        raw_op = raw.get("op")
        value = raw.get("value", MISSING)
        required = raw.get("required", False)
    else:
        prop, raw_op, value, required = None, None, MISSING, False

    if not isinstance(prop, str) or not prop:
        raise MissingPropertyError(f"Property not specified for rule {index}", rule=raw, index=index)

    op = OperatorKind.parse(raw_op)
    if op is None:
        raise UnknownOperatorError(f"Unknown comparison for rule {index} ({raw_op})", rule=raw, index=index)

    if op == OperatorKind.CROSSES and config.previous_value_fn is None:
        raise MissingCrossesCollaboratorError(
            f'Comparison "crosses" selected for rule {index}, '
            "but no function supplied to return previous value",
            rule=raw,
            index=index,
        )

    try:
        path = parse_property_path(prop)
    except InvalidPropertyPathError as exc:
        raise InvalidPropertyPathError(str(exc), rule=raw, index=index) from exc

    return Rule(property=prop, op=op, value=value, required=required is True), path


class ConditionEvaluator:
    """Validated rule set that can be evaluated against any number of references."""

    def __init__(self, config: RuleSetConfig | Mapping[str, Any] | None) -> None:
        self._config = coerce_config(config)
        self._rules: Optional[list[tuple[Rule, PropertyPath]]] = None
        if _has_rule_sequence(self._config):
            self._rules = [
                coerce_rule(raw, index, self._config) for index, raw in enumerate(self._config.rules)
            ]

    @property
    def configured(self) -> bool:
        return self._rules is not None

    def _evaluate_rule(self, index: int, rule: Rule, path: PropertyPath, reference: Any) -> RuleOutcome:
        config = self._config
        resolved = resolve_property(reference, path)
        target = rule.value
        if config.transform_value_fn is not None:
            target = config.transform_value_fn(rule.value, reference, rule.property)

        previous = MISSING
        if rule.op == OperatorKind.CROSSES:
            previous = config.previous_value_fn(reference, rule.property)
            passed = crossed(previous, resolved, target)
        else:
            passed = compare(rule.op, resolved, target)

        return RuleOutcome(
            index=index,
            rule=rule,
            resolved=resolved,
            target=target,
            passed=passed,
            previous=previous,
        )

    def report(self, reference: Any) -> Optional[EvaluationReport]:
        if self._rules is None:
            return None
        satisfy = SatisfyMode.parse(self._config.satisfy)

        outcomes = [
            self._evaluate_rule(index, rule, path, reference)
            for index, (rule, path) in enumerate(self._rules)
        ]

        required_total = sum(1 for o in outcomes if o.rule.required)
        required_passed = sum(1 for o in outcomes if o.rule.required and o.passed)
        normal_total = len(outcomes) - required_total
        normal_passed = sum(1 for o in outcomes if not o.rule.required and o.passed)

        required_satisfied = required_total == 0 or required_passed == required_total
        if normal_total == 0:
            normal_satisfied = True
        elif satisfy == SatisfyMode.ALL:
            normal_satisfied = normal_passed == normal_total
        else:
            normal_satisfied = normal_passed > 0

        report = EvaluationReport(
            outcome=required_satisfied and normal_satisfied,
            satisfy=satisfy,
            rule_outcomes=outcomes,
            normal_passed=normal_passed,
            normal_total=normal_total,
            required_passed=required_passed,
            required_total=required_total,
            normal_satisfied=normal_satisfied,
            required_satisfied=required_satisfied,
            trace="",
        )
        report = replace(report, trace=format_trace(report))
        if self._config.log is not None:
            self._config.log(report.trace)
        return report

    def evaluate(self, reference: Any) -> Optional[bool]:
        report = self.report(reference)
        if report is None:
            return None
        return report.outcome


def evaluate_report(
    config: RuleSetConfig | Mapping[str, Any] | None, reference: Any
) -> Optional[EvaluationReport]:
    return ConditionEvaluator(config).report(reference)


def evaluate(config: RuleSetConfig | Mapping[str, Any] | None, reference: Any) -> Optional[bool]:
    return ConditionEvaluator(config).evaluate(reference)
