"""Port definitions for collaborators injected by the embedding application.

Responsibilities:
  - Define call contracts for previous-value lookup, value transform and trace logging.
Must not:
  - Implement logic; interfaces only.
"""

from __future__ import annotations

from typing import Any, Protocol


class PreviousValueFn(Protocol):
    def __call__(self, reference: Any, property: str) -> Any:
        ...


class TransformValueFn(Protocol):
    def __call__(self, raw_value: Any, reference: Any, property: str) -> Any:
        ...


class LogFn(Protocol):
    def __call__(self, trace: str) -> None:
        ...
