from __future__ import annotations
import os
from dataclasses import dataclass
from dotenv import load_dotenv

from tracksched.core.models import RailwayConfig

# Load .env early (no error if missing)
load_dotenv()


@dataclass(frozen=True)
class SchedulerSettings:
    section_length_km: float = float(os.getenv("TRACKSCHED_SECTION_LENGTH_KM", "5.0"))
    time_horizon: float = float(os.getenv("TRACKSCHED_TIME_HORIZON", "180"))
    tracks: int = int(os.getenv("TRACKSCHED_TRACKS", "3"))
    max_trains_per_track: int = int(os.getenv("TRACKSCHED_MAX_TRAINS_PER_TRACK", "10"))
    safety_headway: float = float(os.getenv("TRACKSCHED_SAFETY_HEADWAY", "3"))
    log_level: str = os.getenv("TRACKSCHED_LOG_LEVEL", "INFO").upper()

    def railway_config(self) -> RailwayConfig:
        """Default configuration, also the fallback when a caller sends none."""
        return RailwayConfig(
            section_length=self.section_length_km,
            time_horizon=self.time_horizon,
            tracks=self.tracks,
            max_trains_per_track=self.max_trains_per_track,
            safety_headway=self.safety_headway,
        )
