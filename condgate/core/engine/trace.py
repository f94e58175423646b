from __future__ import annotations

from ..compare.coercion import display_value
from ..domain.enums import UNARY_OPERATORS, OperatorKind
from ..domain.models import RuleOutcome
from .result import EvaluationReport


def _verdict(flag: bool) -> str:
    return "true" if flag else "false"


def format_rule_line(outcome: RuleOutcome) -> str:
    rule = outcome.rule
    op = OperatorKind.parse(rule.op)
    resolved = display_value(outcome.resolved)
    if op == OperatorKind.CROSSES:
        return (
            f"({outcome.index}) {rule.property} was {display_value(outcome.previous)} "
            f"and became {resolved}. crossed {display_value(outcome.target)}? {_verdict(outcome.passed)}"
        )
    if op in UNARY_OPERATORS:
        return f"({outcome.index}) {rule.property} ({resolved}) is {op.value}? {_verdict(outcome.passed)}"
    return (
        f"({outcome.index}) {rule.property} ({resolved}) {op.value} "
        f"{display_value(outcome.target)}? {_verdict(outcome.passed)}"
    )


def format_summary(report: EvaluationReport) -> str:
    parts: list[str] = []
    if report.normal_total > 0:
        parts.append(
            f"Passed {report.normal_passed} / {report.normal_total} "
            f"(need {report.satisfy.value}, {'pass' if report.normal_satisfied else 'fail'})"
        )
    if report.required_total > 0:
        parts.append(
            f"{report.required_passed} / {report.required_total} required conditions "
            f"({'pass' if report.required_satisfied else 'fail'})"
        )
    if not parts:
        parts.append("No conditions")
    return ", and ".join(parts) + f" ({'PASS' if report.outcome else 'FAIL'})"


def format_trace(report: EvaluationReport) -> str:
    lines = [format_rule_line(outcome) for outcome in report.rule_outcomes]
    lines.append(format_summary(report))
    return "\n".join(lines)
