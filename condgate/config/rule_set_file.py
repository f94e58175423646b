from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

from condgate.core.domain.models import RuleSetConfig
from condgate.core.ports import LogFn, PreviousValueFn, TransformValueFn


def _read_json(path: Path, label: str) -> Any:
    if not path.is_file():
        raise ValueError(f"{label} file not found: {path}")
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"{label} file {path} is not valid JSON: {exc.msg} (line {exc.lineno})") from exc


def load_reference(path: str | Path) -> Any:
    return _read_json(Path(path), "Reference")


def load_rule_set(
    path: str | Path,
    previous_value_fn: Optional[PreviousValueFn] = None,
    transform_value_fn: Optional[TransformValueFn] = None,
    log: Optional[LogFn] = None,
    satisfy: Optional[str] = None,
) -> RuleSetConfig:
    """Load {"rules": [...], "satisfy": "ALL"|"ANY"} from JSON.

    A bare JSON array is read as the rule list. A missing or non-array "rules"
    field is passed through so evaluation reports no configured rules.
    """
    payload = _read_json(Path(path), "Rule set")
    if isinstance(payload, list):
        payload = {"rules": payload}
    if not isinstance(payload, dict):
        raise ValueError("Rule set must be a JSON object or array")

    file_satisfy = payload.get("satisfy")
    if file_satisfy is not None and not isinstance(file_satisfy, str):
        raise ValueError("Field 'satisfy' must be str")

    effective = satisfy if satisfy is not None else file_satisfy
    return RuleSetConfig(
        rules=payload.get("rules"),
        satisfy=effective if effective is not None else "ANY",
        previous_value_fn=previous_value_fn,
        transform_value_fn=transform_value_fn,
        log=log,
    )
