"""Tests for ready-made previous-value and transform collaborators."""

from __future__ import annotations

from condgate.app_api.collaborators import field_reference_transform, previous_from_snapshot
from condgate.core.domain.models import MISSING
from condgate.core.engine.evaluator import evaluate


def test_previous_from_snapshot_resolves_same_property() -> None:
    previous = previous_from_snapshot({"sensor": {"temp": 18}})
    assert previous({"sensor": {"temp": 22}}, "sensor.temp") == 18
    assert previous({}, "sensor.humidity") is MISSING


def test_crossing_with_snapshot() -> None:
    config = {
        "rules": [{"property": "sensor.temp", "op": "crosses", "value": 20}],
        "previous_value_fn": previous_from_snapshot({"sensor": {"temp": 18}}),
    }
    assert evaluate(config, {"sensor": {"temp": 22}}) is True
    assert evaluate(config, {"sensor": {"temp": 19}}) is False


def test_field_reference_transform_with_prefix(reference) -> None:
    transform = field_reference_transform("$")
    assert transform("$numeric", reference, "nested.val") == 5
    assert transform("$nested.val", reference, "numeric") == 6
    assert transform("numeric", reference, "nested.val") == "numeric"
    assert transform("$", reference, "nested.val") == "$"
    assert transform(7, reference, "nested.val") == 7


def test_field_reference_transform_without_prefix(reference) -> None:
    transform = field_reference_transform("")
    assert transform("numeric", reference, "nested.val") == 5
    assert transform("unknown", reference, "nested.val") is MISSING


def test_field_reference_in_rule(reference) -> None:
    config = {
        "rules": [{"property": "nested.val", "op": "gt", "value": "$numeric"}],
        "transformValueFn": field_reference_transform("$"),
    }
    assert evaluate(config, reference) is True


def test_field_reference_transform_keeps_unparsable_values(reference) -> None:
    transform = field_reference_transform("$")
    assert transform("$.50", reference, "price") == "$.50"
    assert transform("$a..b", reference, "price") == "$a..b"


def test_unparsable_field_reference_is_compared_as_data() -> None:
    config = {
        "rules": [{"property": "price", "op": "eq", "value": "$.50"}],
        "transformValueFn": field_reference_transform("$"),
    }
    assert evaluate(config, {"price": "$.50"}) is True
    assert evaluate(config, {"price": 0.5}) is False
