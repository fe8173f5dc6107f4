import logging
from typing import List

from .models import Train, RailwayConfig, TrainAssignment, Schedule, PRIORITY_WEIGHTS
from .metrics import compute_schedule_metrics

logger = logging.getLogger(__name__)

# Greedy track assignment:
# - Iterate trains by (priority weight desc, scheduled_arrival asc)
# - Put each train on the track giving the earliest start that still ends inside the horizon
# - A train that fits nowhere still gets track 0 (best effort, may run past the horizon)


def schedule_greedy(trains: List[Train], config: RailwayConfig) -> Schedule:
    # next_free[track] = minute the track can take its next train (headway included)
    next_free: List[float] = [0.0] * config.tracks
    assignments: List[TrainAssignment] = []

    trains_sorted = sorted(trains, key=lambda t: (-PRIORITY_WEIGHTS[t.priority], t.scheduled_arrival))

    for t in trains_sorted:
        if t.duration is None:
            continue

        best_track = 0
        best_start = max(t.scheduled_arrival, next_free[0])
        feasible = False
        for track in range(config.tracks):
            start = max(t.scheduled_arrival, next_free[track])
            if start + t.duration <= config.time_horizon:
                # strict '<' keeps the lowest track index on ties
                if not feasible or start < best_start:
                    best_start = start
                    best_track = track
                    feasible = True

        if not feasible:
            logger.warning(
                "Train %s cannot finish within horizon %s on any track; placing on track 0 at %s",
                t.id, config.time_horizon, best_start,
            )

        delay = max(0.0, best_start - t.scheduled_arrival)
        assignments.append(TrainAssignment(train_id=t.id, track_id=best_track, actual_arrival=best_start, delay=delay))
        logger.debug("Train %s -> track %d at %s (delay %s)", t.id, best_track, best_start, delay)

        next_free[best_track] = best_start + t.duration + config.safety_headway

    return compute_schedule_metrics(assignments, trains, config)
