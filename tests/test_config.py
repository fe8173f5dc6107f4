import pytest

from tracksched.config import SchedulerSettings
from tracksched.core.models import RailwayConfig, Train
from tracksched.sim.scenario import load_scenario


def test_settings_build_railway_config():
    cfg = SchedulerSettings(section_length_km=2.5, time_horizon=60, tracks=2, max_trains_per_track=4, safety_headway=1).railway_config()
    assert cfg == RailwayConfig(section_length=2.5, time_horizon=60, tracks=2, max_trains_per_track=4, safety_headway=1)


def test_default_settings_are_a_valid_config():
    cfg = SchedulerSettings().railway_config()
    assert cfg.tracks >= 1
    assert cfg.section_length > 0


@pytest.mark.parametrize("kwargs", [
    {"section_length": 0},
    {"time_horizon": -1},
    {"tracks": 0},
    {"max_trains_per_track": 0},
    {"safety_headway": -3},
])
def test_railway_config_validation(kwargs):
    base = dict(section_length=5.0, time_horizon=180, tracks=3, max_trains_per_track=10, safety_headway=3)
    base.update(kwargs)
    with pytest.raises(ValueError):
        RailwayConfig(**base)


def test_train_rejects_unknown_priority():
    with pytest.raises(ValueError):
        Train(id="X", scheduled_arrival=0, speed=50, priority="urgent")


def test_sample_scenario_loads():
    trains, config, disruption = load_scenario()
    assert len(trains) == 10
    assert config == RailwayConfig(section_length=5.0, time_horizon=180, tracks=3, max_trains_per_track=10, safety_headway=3)
    assert (disruption.kind, disruption.train_id, disruption.delay_minutes) == ("delay", "T3", 12)
