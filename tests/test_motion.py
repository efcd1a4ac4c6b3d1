"""Motion update: speed formula, clamping and ordering by size."""
import pytest

from electrophoresis.model.fragment import Fragment
from electrophoresis.model.motion import advance_fragments, fragment_speed, mobility, voltage_factor

TRAVEL_LIMIT = 390.0


def _fragment(size, position=15.0, fragment_id=1):
    return Fragment(fragment_id=fragment_id, lane_index=1, size_bp=size, position=position)


def test_mobility_of_300bp_is_one():
    assert mobility(300) == pytest.approx(1.0)


def test_voltage_factor_is_linear():
    assert voltage_factor(100) == pytest.approx(1.0)
    assert voltage_factor(200) == pytest.approx(2.0)
    assert voltage_factor(50) == pytest.approx(0.5)


def test_speed_at_100v_for_300bp():
    assert fragment_speed(300, 100) == pytest.approx(30.0)


def test_one_second_at_100v_moves_30_units():
    fragment = _fragment(300, position=15.0)
    advance_fragments([fragment], dt_seconds=1.0, voltage=100, travel_limit=TRAVEL_LIMIT)
    assert fragment.position == pytest.approx(45.0)
    assert not fragment.finished


def test_one_second_at_200v_moves_60_units():
    fragment = _fragment(300, position=15.0)
    advance_fragments([fragment], dt_seconds=1.0, voltage=200, travel_limit=TRAVEL_LIMIT)
    assert fragment.position == pytest.approx(75.0)


def test_reaching_limit_clamps_and_finishes():
    fragment = _fragment(300, position=380.0)
    moved = advance_fragments([fragment], dt_seconds=1.0, voltage=100, travel_limit=TRAVEL_LIMIT)
    assert moved == [fragment]
    assert fragment.position == TRAVEL_LIMIT
    assert fragment.finished


def test_finished_fragment_is_frozen():
    fragment = _fragment(300, position=TRAVEL_LIMIT)
    fragment.finished = True
    moved = advance_fragments([fragment], dt_seconds=5.0, voltage=200, travel_limit=TRAVEL_LIMIT)
    assert moved == []
    assert fragment.position == TRAVEL_LIMIT


def test_zero_and_negative_dt_do_not_move():
    fragment = _fragment(300)
    advance_fragments([fragment], dt_seconds=0.0, voltage=100, travel_limit=TRAVEL_LIMIT)
    advance_fragments([fragment], dt_seconds=-0.5, voltage=100, travel_limit=TRAVEL_LIMIT)
    assert fragment.position == pytest.approx(15.0)


def test_position_never_decreases_over_many_frames():
    fragment = _fragment(1000)
    previous = fragment.position
    for _ in range(2000):
        advance_fragments([fragment], dt_seconds=1 / 60, voltage=150, travel_limit=TRAVEL_LIMIT)
        assert fragment.position >= previous
        previous = fragment.position
    assert fragment.finished
    assert fragment.position == TRAVEL_LIMIT


@pytest.mark.parametrize("voltage", [50, 100, 200])
def test_smaller_fragments_travel_at_least_as_far(voltage):
    sizes = [100, 150, 300, 500, 1000, 2000]
    fragments = [_fragment(s, fragment_id=i) for i, s in enumerate(sizes)]
    for _ in range(30):
        advance_fragments(fragments, dt_seconds=0.1, voltage=voltage, travel_limit=TRAVEL_LIMIT)
    positions = [f.position for f in fragments]
    assert positions == sorted(positions, reverse=True)


def test_default_base_speed_comes_from_config():
    from electrophoresis.config import DEFAULT_CONFIG

    assert fragment_speed(300, 100) == pytest.approx(fragment_speed(300, 100, DEFAULT_CONFIG.base_speed))
    assert fragment_speed(300, 100, base_speed=1.0) == pytest.approx(60.0)
