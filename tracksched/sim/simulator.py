from typing import Dict, List

from tracksched.core.models import Train, RailwayConfig, Schedule, ScheduleComparison

# KPI helpers over a finished Schedule; utilization figures are percentages of the horizon


def utilization_percent(schedule: Schedule, config: RailwayConfig) -> Dict[int, float]:
    if config.time_horizon <= 0:
        return {track: 0.0 for track in schedule.utilization}
    return {track: 100.0 * busy / config.time_horizon for track, busy in schedule.utilization.items()}


def average_utilization(schedule: Schedule, config: RailwayConfig) -> float:
    capacity = config.tracks * config.time_horizon
    if capacity <= 0:
        return 0.0
    return 100.0 * sum(schedule.utilization.values()) / capacity


def summarize_schedule(schedule: Schedule, trains: List[Train], config: RailwayConfig) -> Dict[str, float]:
    # returns basic KPIs: trains placed, delays, finished, on-time, makespan, average utilization
    items = schedule.assignments
    if not items:
        return {
            "total_trains": 0,
            "total_delay": 0.0,
            "weighted_delay": 0.0,
            "avg_delay": 0.0,
            "finished": 0,
            "on_time": 0,
            "makespan": 0.0,
            "avg_utilization": 0.0,
        }
    durations = {t.id: t.duration for t in trains if t.duration is not None}
    ends = [a.actual_arrival + durations[a.train_id] for a in items if a.train_id in durations]
    return {
        "total_trains": len(items),
        "total_delay": schedule.total_delay,
        "weighted_delay": schedule.weighted_delay,
        "avg_delay": schedule.total_delay / len(items),
        "finished": schedule.finished,
        "on_time": sum(1 for a in items if a.delay == 0),
        "makespan": max(ends, default=0.0),
        "avg_utilization": average_utilization(schedule, config),
    }


def compare_schedules(
    before: Schedule,
    after: Schedule,
    before_config: RailwayConfig,
    after_config: RailwayConfig,
) -> ScheduleComparison:
    """Positive reductions mean the after schedule is better on that measure."""
    return ScheduleComparison(
        delay_reduction=before.total_delay - after.total_delay,
        weighted_delay_reduction=before.weighted_delay - after.weighted_delay,
        throughput_improvement=after.finished - before.finished,
        utilization_change=average_utilization(after, after_config) - average_utilization(before, before_config),
    )
