from dataclasses import dataclass, field
from typing import List, Optional, Dict

Minutes = float

# priority -> weight used for ordering and weighted delay
PRIORITY_WEIGHTS: Dict[str, float] = {
    "high": 3.0,
    "medium": 2.0,
    "low": 1.0,
}

DISRUPTION_KINDS = ("delay", "block_track")


@dataclass(frozen=True)
class Train:
    id: str
    scheduled_arrival: Minutes  # minutes from start of the window
    speed: float  # km/h
    priority: str  # "high" | "medium" | "low"
    length: float = 0.0  # meters, informational only
    # traversal time; None until computed for a scenario (or when speed is invalid)
    duration: Optional[Minutes] = None

    def __post_init__(self) -> None:
        if self.priority not in PRIORITY_WEIGHTS:
            raise ValueError(f"Unknown priority {self.priority!r} for train {self.id}")

    @property
    def weight(self) -> float:
        return PRIORITY_WEIGHTS[self.priority]


@dataclass(frozen=True)
class RailwayConfig:
    section_length: float  # km
    time_horizon: Minutes
    tracks: int
    max_trains_per_track: int = 10  # capacity hint, not enforced
    safety_headway: Minutes = 0

    def __post_init__(self) -> None:
        if self.section_length <= 0:
            raise ValueError(f"section_length must be > 0, got {self.section_length}")
        if self.time_horizon < 0:
            raise ValueError(f"time_horizon must be >= 0, got {self.time_horizon}")
        if self.tracks < 1:
            raise ValueError(f"tracks must be >= 1, got {self.tracks}")
        if self.max_trains_per_track < 1:
            raise ValueError(f"max_trains_per_track must be >= 1, got {self.max_trains_per_track}")
        if self.safety_headway < 0:
            raise ValueError(f"safety_headway must be >= 0, got {self.safety_headway}")


@dataclass(frozen=True)
class TrainAssignment:
    train_id: str
    track_id: int
    actual_arrival: Minutes
    delay: Minutes


@dataclass
class Schedule:
    assignments: List[TrainAssignment]
    total_delay: Minutes = 0
    weighted_delay: float = 0
    finished: int = 0
    # track id -> busy minutes
    utilization: Dict[int, Minutes] = field(default_factory=dict)

    def assignment_for(self, train_id: str) -> TrainAssignment:
        for a in self.assignments:
            if a.train_id == train_id:
                return a
        raise KeyError(f"Train {train_id} not assigned")

    def track_assignments(self, track_id: int) -> List[TrainAssignment]:
        """Assignments on one track, ordered by actual arrival."""
        lane = [a for a in self.assignments if a.track_id == track_id]
        return sorted(lane, key=lambda a: a.actual_arrival)


@dataclass(frozen=True)
class Disruption:
    kind: str  # "delay" | "block_track"
    train_id: Optional[str] = None
    delay_minutes: Minutes = 0
    # named for reporting; a block reduces the track count whichever id is given
    track_id: Optional[int] = None

    def __post_init__(self) -> None:
        if self.kind not in DISRUPTION_KINDS:
            raise ValueError(f"Unknown disruption kind {self.kind!r}; expected one of {DISRUPTION_KINDS}")
        if self.delay_minutes < 0:
            raise ValueError(f"delay_minutes must be >= 0, got {self.delay_minutes}")


@dataclass(frozen=True)
class ScheduleComparison:
    delay_reduction: Minutes
    weighted_delay_reduction: float
    throughput_improvement: int
    utilization_change: float  # percentage points, after - before


@dataclass
class RescheduleResult:
    before: Schedule
    after: Schedule
    after_config: RailwayConfig
    comparison: ScheduleComparison
