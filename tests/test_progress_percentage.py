import pytest

from apps.goals.domain.services import calculate_progress


def test_target_reached_is_full():
    assert calculate_progress(100, 100) == 100


def test_nothing_logged_is_zero():
    assert calculate_progress(0, 100) == 0


def test_overshoot_is_clamped():
    assert calculate_progress(150, 100) == 100


@pytest.mark.parametrize('current', [0, 5, 42.5, 1000])
def test_degenerate_target_gives_zero(current):
    assert calculate_progress(current, 0) == 0
    assert calculate_progress(current, -10) == 0


def test_negative_current_is_clamped_to_zero():
    assert calculate_progress(-5, 100) == 0


def test_rounds_half_up():
    # 1/8 = 12.5% -> 13 (round() dałby 12)
    assert calculate_progress(1, 8) == 13
    assert calculate_progress(1, 3) == 33
    assert calculate_progress(2, 3) == 67


def test_result_always_within_bounds():
    for target in (0.5, 1, 7, 100, 9999):
        for current in (0, 0.1, 1, 3.3, 50, 100, 10000):
            assert 0 <= calculate_progress(current, target) <= 100
