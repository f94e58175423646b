"""Declarative condition evaluation over a single reference object."""

from .core.domain.enums import OperatorKind, SatisfyMode
from .core.domain.errors import (
    ConfigurationError,
    InvalidPropertyPathError,
    MissingCrossesCollaboratorError,
    MissingPropertyError,
    UnknownOperatorError,
)
from .core.domain.models import MISSING, Rule, RuleOutcome, RuleSetConfig
from .core.engine.evaluator import ConditionEvaluator, evaluate, evaluate_report
from .core.engine.result import EvaluationReport

__all__ = [
    "OperatorKind",
    "SatisfyMode",
    "ConfigurationError",
    "InvalidPropertyPathError",
    "MissingCrossesCollaboratorError",
    "MissingPropertyError",
    "UnknownOperatorError",
    "MISSING",
    "Rule",
    "RuleOutcome",
    "RuleSetConfig",
    "ConditionEvaluator",
    "evaluate",
    "evaluate_report",
    "EvaluationReport",
]
