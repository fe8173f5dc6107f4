import pytest

from tracksched.core.models import Train, RailwayConfig, Disruption
from tracksched.core.traversal import prepare_trains
from tracksched.core.local_search import schedule_optimized
from tracksched.sim.disruption import apply_disruption, apply_disruption_to_config, reschedule_with_disruption
from tracksched.sim.scenario import load_scenario


def test_delay_shifts_only_named_train():
    trains, _, _ = load_scenario()
    delayed = apply_disruption(trains, Disruption(kind="delay", train_id="T3", delay_minutes=12))

    by_id = {t.id: t for t in delayed}
    assert by_id["T3"].scheduled_arrival == 22
    for before, after in zip(trains, delayed):
        if before.id != "T3":
            assert after == before
    # original list untouched
    assert {t.id: t for t in trains}["T3"].scheduled_arrival == 10


def test_delay_for_unknown_train_is_noop():
    trains, _, _ = load_scenario()
    assert apply_disruption(trains, Disruption(kind="delay", train_id="NOPE", delay_minutes=5)) == trains


def test_disruption_rejects_negative_delay_and_unknown_kind():
    with pytest.raises(ValueError):
        Disruption(kind="delay", train_id="T1", delay_minutes=-1)
    with pytest.raises(ValueError):
        Disruption(kind="derail")


def test_block_track_reduces_count_regardless_of_id():
    trains, config, _ = load_scenario()
    assert config.tracks == 3

    block_0 = Disruption(kind="block_track", track_id=0)
    block_2 = Disruption(kind="block_track", track_id=2)
    assert apply_disruption_to_config(config, block_0).tracks == 2
    assert apply_disruption(trains, block_0) == trains

    after_0 = reschedule_with_disruption(trains, config, block_0).after
    after_2 = reschedule_with_disruption(trains, config, block_2).after
    assert after_0 == after_2
    assert all(a.track_id < 2 for a in after_0.assignments)
    assert config.tracks == 3


def test_block_only_track_raises():
    config = RailwayConfig(section_length=5.0, time_horizon=180, tracks=1)
    with pytest.raises(ValueError):
        apply_disruption_to_config(config, Disruption(kind="block_track", track_id=0))


def test_reschedule_runs_both_scenarios_independently():
    trains, config, disruption = load_scenario()
    result = reschedule_with_disruption(trains, config, disruption)

    assert result.before == schedule_optimized(prepare_trains(trains, config), config)
    assert result.after_config == config
    delayed = result.after.assignment_for("T3")
    assert delayed.actual_arrival >= 22

    cmp = result.comparison
    assert cmp.delay_reduction == result.before.total_delay - result.after.total_delay
    assert cmp.weighted_delay_reduction == result.before.weighted_delay - result.after.weighted_delay
    assert cmp.throughput_improvement == result.after.finished - result.before.finished


def test_delay_does_not_disturb_other_track():
    # Two tracks, one train each; delaying B keeps A where it was
    config = RailwayConfig(section_length=5.0, time_horizon=180, tracks=2, safety_headway=3)
    trains = [
        Train(id="A", scheduled_arrival=0, speed=30, priority="high"),
        Train(id="B", scheduled_arrival=0, speed=30, priority="low"),
    ]
    result = reschedule_with_disruption(trains, config, Disruption(kind="delay", train_id="B", delay_minutes=12))

    assert result.before.assignment_for("A") == result.after.assignment_for("A")
    b = result.after.assignment_for("B")
    assert (b.track_id, b.actual_arrival, b.delay) == (1, 12, 0)


def test_block_without_track_id_keeps_all_tracks():
    trains, config, _ = load_scenario()
    block = Disruption(kind="block_track")

    assert apply_disruption_to_config(config, block) is config
    result = reschedule_with_disruption(trains, config, block)
    assert result.after_config.tracks == 3
    assert result.after == result.before
