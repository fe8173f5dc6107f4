from typing import List

from tracksched.core.models import Train, RailwayConfig, Schedule
from tracksched.core.greedy_scheduler import schedule_greedy
from tracksched.core.local_search import schedule_optimized

SOLVERS = ("greedy", "optimized")


def schedule_trains(trains: List[Train], config: RailwayConfig, solver: str = "greedy") -> Schedule:
    # trains must already carry durations (see traversal.prepare_trains)
    if solver == "optimized":
        return schedule_optimized(trains, config)
    if solver == "greedy":
        return schedule_greedy(trains, config)
    raise ValueError(f"Unknown solver {solver!r}; expected one of {SOLVERS}")
