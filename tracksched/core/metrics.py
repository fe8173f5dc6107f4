from typing import Dict, List

from .models import Train, RailwayConfig, TrainAssignment, Schedule, PRIORITY_WEIGHTS

# Aggregates are always rebuilt from the full assignment list so that a
# Schedule can never disagree with its own assignments.


def compute_schedule_metrics(assignments: List[TrainAssignment], trains: List[Train], config: RailwayConfig) -> Schedule:
    by_id: Dict[str, Train] = {t.id: t for t in trains}
    total_delay = 0.0
    weighted_delay = 0.0
    finished = 0
    utilization: Dict[int, float] = {track: 0.0 for track in range(config.tracks)}

    for a in assignments:
        train = by_id.get(a.train_id)
        if train is None or train.duration is None:
            continue
        total_delay += a.delay
        weighted_delay += a.delay * PRIORITY_WEIGHTS[train.priority]
        if a.actual_arrival + train.duration <= config.time_horizon:
            finished += 1
        utilization[a.track_id] = utilization.get(a.track_id, 0.0) + train.duration

    return Schedule(
        assignments=list(assignments),
        total_delay=total_delay,
        weighted_delay=weighted_delay,
        finished=finished,
        utilization=utilization,
    )
