from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def reference() -> dict[str, Any]:
    return {
        "text": "Monday",
        "nested": {"val": 6},
        "bool": True,
        "negative": False,
        "blank": "",
        "months": ["January", "February"],
        "lunches": [
            {"type": "veg", "qty": 1, "serve": "Monday"},
            {"type": "any", "qty": 2, "serve": "Monday"},
            {"type": "any", "qty": 3, "serve": "Monday"},
        ],
        "oldNumeric": 4,
        "prevNumeric": 5,
        "numeric": 5,
    }
