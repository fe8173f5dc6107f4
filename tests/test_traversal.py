from tracksched.core.models import Train, RailwayConfig
from tracksched.core.traversal import compute_duration, prepare_trains


def test_compute_duration_minutes():
    assert compute_duration(5.0, 60) == 5.0
    assert compute_duration(5.0, 30) == 10.0
    assert compute_duration(10.0, 120) == 5.0


def test_compute_duration_invalid_speed_is_none():
    assert compute_duration(5.0, 0) is None
    assert compute_duration(5.0, -40) is None
    assert compute_duration(5.0, None) is None


def test_prepare_trains_returns_copies_in_order():
    config = RailwayConfig(section_length=5.0, time_horizon=180, tracks=2)
    trains = [
        Train(id="A", scheduled_arrival=0, speed=60, priority="low"),
        Train(id="B", scheduled_arrival=3, speed=0, priority="high"),
        Train(id="C", scheduled_arrival=1, speed=30, priority="medium"),
    ]
    prepared = prepare_trains(trains, config)

    assert [t.id for t in prepared] == ["A", "B", "C"]
    assert [t.duration for t in prepared] == [5.0, None, 10.0]
    # inputs untouched
    assert all(t.duration is None for t in trains)
    assert prepared[0] is not trains[0]


def test_compute_duration_multiplies_before_dividing():
    # (0.3 / 3) * 60 would give 5.999999999999999
    assert compute_duration(0.3, 3) == 6.0
