"""Tests for array-expansion operators and the crosses operator."""

from __future__ import annotations

from typing import Any

import numpy as np

from condgate.core.engine.evaluator import evaluate, evaluate_report


def _single(reference: Any, prop: str, op: str, value: Any, **extra: Any) -> Any:
    return evaluate({"rules": [{"property": prop, "op": op, "value": value}], **extra}, reference)


def test_array_of_strings_some(reference) -> None:
    assert _single(reference, "months[]", "some", "January") is True
    assert _single(reference, "months[]", "some", "September") is False


def test_array_of_strings_none(reference) -> None:
    assert _single(reference, "months[]", "none", "December") is True
    assert _single(reference, "months[]", "none", "February") is False


def test_array_of_objects_all(reference) -> None:
    assert _single(reference, "lunches[].serve", "all", "Monday") is True
    assert _single(reference, "lunches[].type", "all", "veg") is False


def test_array_of_objects_some_and_none(reference) -> None:
    assert _single(reference, "lunches[].type", "some", "veg") is True
    assert _single(reference, "lunches[].type", "some", "pescatarian") is False
    assert _single(reference, "lunches[].type", "none", "pescatarian") is True
    assert _single(reference, "lunches[].type", "none", "veg") is False


def test_nested_path_missing_on_every_element(reference) -> None:
    assert _single(reference, "lunches[].nothing", "none", "pescatarian") is True
    report = evaluate_report(
        {"rules": [{"property": "lunches[].nothing", "op": "none", "value": "x"}]}, reference
    )
    assert len(report.rule_outcomes[0].resolved) == 3


def test_non_sequence_top_path_never_matches(reference) -> None:
    for op in ("all", "some", "none"):
        assert _single(reference, "text[]", op, "Monday") is False
        assert _single(reference, "missing[].x", op, "Monday") is False
        assert _single(reference, "nested[].val", op, 6) is False


def test_empty_sequence_all_is_vacuous() -> None:
    assert _single({"items": []}, "items[]", "all", "x") is True
    assert _single({"items": []}, "items[]", "some", "x") is False
    assert _single({"items": []}, "items[]", "none", "x") is True


def test_all_uses_strict_equality() -> None:
    assert _single({"items": [1, 1]}, "items[]", "all", 1) is True
    assert _single({"items": [1, 1]}, "items[]", "all", "1") is False
    assert _single({"items": [True, True]}, "items[]", "all", 1) is False


def test_some_matches_nan() -> None:
    assert _single({"items": [1.0, float("nan")]}, "items[]", "some", float("nan")) is True


def test_numpy_arrays_expand() -> None:
    reference = {"scores": np.array([3, 3, 3]), "rows": [{"v": np.float64(2.5)}, {"v": np.float64(7.0)}]}
    assert _single(reference, "scores[]", "all", 3) is True
    assert _single(reference, "rows[].v", "some", 7) is True
    assert _single(reference, "rows[].v", "none", 2.5) is False


def test_numpy_scalars_compare() -> None:
    reference = {"level": np.int64(6), "flag": np.bool_(True), "ratio": np.float32(0.5)}
    assert _single(reference, "level", "eq", "6") is True
    assert _single(reference, "flag", "eq", "true") is True
    assert _single(reference, "ratio", "lt", 1) is True


def test_crosses_upward_including_current(reference) -> None:
    result = _single(reference, "numeric", "crosses", 5, previousValueFn=lambda ref, prop: ref["oldNumeric"])
    assert result is True


def test_crosses_previous_equal_threshold(reference) -> None:
    result = _single(
        reference,
        "numeric",
        "crosses",
        5,
        previousValueFn=lambda ref, prop: ref[f"prevN{prop[1:]}"],
    )
    assert result is False


def test_crosses_downward_is_not_a_crossing() -> None:
    reference = {"temp": 3}
    result = _single(reference, "temp", "crosses", 4, previous_value_fn=lambda ref, prop: 6)
    assert result is False


def test_crosses_without_previous_value_is_false() -> None:
    result = _single({"temp": 5}, "temp", "crosses", 4, previous_value_fn=lambda ref, prop: None)
    assert result is False


def test_crosses_previous_value_called_once_per_rule(reference) -> None:
    calls: list[str] = []

    def previous(ref: Any, prop: str) -> Any:
        calls.append(prop)
        return 0

    rules = [
        {"property": "numeric", "op": "crosses", "value": 5},
        {"property": "nested.val", "op": "crosses", "value": 6},
        {"property": "text", "op": "present"},
    ]
    report = evaluate_report({"rules": rules, "previousValueFn": previous, "satisfy": "ALL"}, reference)
    assert calls == ["numeric", "nested.val"]
    assert report.outcome is True
    assert report.rule_outcomes[0].previous == 0
