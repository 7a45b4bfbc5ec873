from __future__ import annotations

import pytest

from utils import is_valid_budget, round_half_up, walk_minutes


def test_round_half_up_on_exact_ties() -> None:
    assert round_half_up(0.125) == 0.13
    assert round_half_up(0.375) == 0.38
    assert round_half_up(2.5, 0) == 3.0


def test_round_half_up_uses_binary_value() -> None:
    # 1.005 and 2.675 are stored slightly below the written value
    assert round_half_up(1.005) == 1.0
    assert round_half_up(2.675) == 2.67


@pytest.mark.parametrize(
    "budget, ok",
    [
        (10, True),
        (0.01, True),
        (0, False),
        (-5, False),
        (float("nan"), False),
        (float("inf"), False),
        (None, False),
        ("12", False),
        (True, False),
    ],
)
def test_is_valid_budget(budget, ok) -> None:
    assert is_valid_budget(budget) is ok


def test_walk_minutes() -> None:
    assert walk_minutes(1.0) == 20
    assert walk_minutes(0.5) == 10
    assert walk_minutes(1.0, speed_mph=4.0) == 15
    assert walk_minutes(0.0) == 1
