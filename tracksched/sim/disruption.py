import logging
from dataclasses import replace
from typing import List

from tracksched.core.models import Train, RailwayConfig, Disruption, RescheduleResult
from tracksched.core.traversal import prepare_trains
from tracksched.core.local_search import schedule_optimized
from tracksched.sim.simulator import compare_schedules

logger = logging.getLogger(__name__)


def apply_disruption(trains: List[Train], disruption: Disruption) -> List[Train]:
    # A delay shifts only the named train's scheduled arrival; an unknown id is a no-op.
    # A track block leaves the trains alone (see apply_disruption_to_config).
    if disruption.kind != "delay" or not disruption.delay_minutes:
        return list(trains)
    return [
        replace(t, scheduled_arrival=t.scheduled_arrival + disruption.delay_minutes)
        if t.id == disruption.train_id else t
        for t in trains
    ]


def apply_disruption_to_config(config: RailwayConfig, disruption: Disruption) -> RailwayConfig:
    # A block removes one track from the pool whichever track id was named;
    # a block without a track id leaves the config as it is.
    # Blocking the only track raises ValueError from RailwayConfig.
    if disruption.kind != "block_track" or disruption.track_id is None:
        return config
    return replace(config, tracks=config.tracks - 1)


def reschedule_with_disruption(trains: List[Train], config: RailwayConfig, disruption: Disruption) -> RescheduleResult:
    before = schedule_optimized(prepare_trains(trains, config), config)

    after_config = apply_disruption_to_config(config, disruption)
    after_trains = prepare_trains(apply_disruption(trains, disruption), after_config)
    after = schedule_optimized(after_trains, after_config)

    comparison = compare_schedules(before, after, config, after_config)
    logger.info(
        "Rescheduled for %s disruption: total delay %.1f -> %.1f, finished %d -> %d",
        disruption.kind, before.total_delay, after.total_delay, before.finished, after.finished,
    )
    return RescheduleResult(before=before, after=after, after_config=after_config, comparison=comparison)
