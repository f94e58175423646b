"""Configuration errors raised while interpreting a rule set.

Data problems (missing values, wrong shapes) never raise; they make a rule
fail. Only the shape of the configuration itself is strict.
"""

from __future__ import annotations

from typing import Any, Optional


class ConfigurationError(ValueError):
    def __init__(self, message: str, rule: Any = None, index: Optional[int] = None) -> None:
        super().__init__(message)
        self.rule = rule
        self.index = index


class MissingPropertyError(ConfigurationError):
    pass


class UnknownOperatorError(ConfigurationError):
    pass


class MissingCrossesCollaboratorError(ConfigurationError):
    pass


class InvalidPropertyPathError(ConfigurationError):
    pass
